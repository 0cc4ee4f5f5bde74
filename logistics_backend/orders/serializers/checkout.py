# orders/serializers/checkout.py

from rest_framework import serializers


class CartItemSerializer(serializers.Serializer):
    """
    One client cart line.

    Prices arrive from the client catalog view; the server recomputes every
    total from quantity * price.
    """

    product_id = serializers.CharField(max_length=64, required=False, allow_blank=True, default="")
    product_type = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    client_product_type = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    room_type_id = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    booth_sub_type_id = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)


class CouponRefSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    code = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class CheckoutInputSerializer(serializers.Serializer):
    """
    Command serializer for both checkout endpoints.

    company_id and cart_items are checked for presence by the view so a
    missing/empty value yields {"detail": "Missing required fields"}.
    """

    company_id = serializers.UUIDField(required=False, allow_null=True)
    cart_items = CartItemSerializer(many=True, required=False, allow_empty=True)
    coupon = CouponRefSerializer(required=False, allow_null=True)


class ApplyCouponSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)


class MarkPaidCommandSerializer(serializers.Serializer):
    offline_payment = serializers.BooleanField(required=False, default=True)
