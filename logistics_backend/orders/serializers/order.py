# orders/serializers/order.py

from rest_framework import serializers

from orders.models import OrderItem, PurchaseOrder


class OrderItemSerializer(serializers.ModelSerializer):
    """
    Order line (read-only). Lines never change after checkout.
    """

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_type",
            "product_id",
            "name",
            "quantity",
            "price",
            "total_price",
            "room_type_id",
            "booth_sub_type_id",
        ]
        read_only_fields = fields


class PurchaseOrderSerializer(serializers.ModelSerializer):
    """
    CANONICAL ORDER SERIALIZER

    Used for checkout responses, company order history and admin detail.
    """

    items = OrderItemSerializer(many=True, read_only=True)
    company_name = serializers.CharField(source="company.name", read_only=True)
    event_name = serializers.CharField(source="event.name", read_only=True, default=None)
    coupon_code = serializers.CharField(source="coupon.code", read_only=True, default=None)

    class Meta:
        model = PurchaseOrder
        fields = [
            "id",
            "order_no",
            "status",
            "company",
            "company_name",
            "event",
            "event_name",
            "coupon",
            "coupon_code",
            "subtotal_amount",
            "discount_amount",
            "total_amount",
            "offline_payment",
            "created_at",
            "completed_at",
            "items",
        ]
        read_only_fields = fields
