# orders/serializers/coupon.py

from decimal import Decimal

from rest_framework import serializers

from orders.models import Coupon


class CouponSerializer(serializers.ModelSerializer):
    """
    Admin CRUD serializer.
    """

    class Meta:
        model = Coupon
        fields = [
            "id",
            "code",
            "description",
            "discount_type",
            "discount_value",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_code(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("code is required")

        qs = Coupon.objects.filter(code__iexact=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("A coupon with this code already exists.")
        return value

    def validate(self, attrs):
        discount_type = attrs.get("discount_type", getattr(self.instance, "discount_type", Coupon.DiscountType.PERCENT))
        value = attrs.get("discount_value", getattr(self.instance, "discount_value", Decimal("0.00")))

        if value is None or value < Decimal("0.00"):
            raise serializers.ValidationError({"discount_value": "discount_value cannot be negative"})
        if discount_type == Coupon.DiscountType.PERCENT and value > Decimal("100"):
            raise serializers.ValidationError({"discount_value": "percent discount cannot exceed 100"})
        return attrs


class CouponPublicSerializer(serializers.ModelSerializer):
    class Meta:
        model = Coupon
        fields = ["id", "code", "discount_type", "discount_value"]
        read_only_fields = fields
