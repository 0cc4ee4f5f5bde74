# orders/models/coupon.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class Coupon(models.Model):
    """
    Discount rule applied at most once per order.

    Validation is existence-only: there is no expiry or usage limit.
    """

    class DiscountType(models.TextChoices):
        FIXED = "FIXED", "Fixed Amount"
        PERCENT = "PERCENT", "Percent"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    code = models.CharField(max_length=64, unique=True, db_index=True)
    description = models.CharField(max_length=255, blank=True, default="")

    discount_type = models.CharField(
        max_length=16,
        choices=DiscountType.choices,
        default=DiscountType.PERCENT,
    )
    discount_value = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Percent (e.g. 20.00) if PERCENT; currency amount if FIXED.",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["code"]

    def clean(self):
        self.code = (self.code or "").strip()
        if not self.code:
            raise ValidationError("code is required")

        if self.discount_value is None or Decimal(self.discount_value) < Decimal("0.00"):
            raise ValidationError("discount_value cannot be negative")

        if self.discount_type == self.DiscountType.PERCENT and Decimal(self.discount_value) > Decimal("100"):
            raise ValidationError("percent discount cannot exceed 100")

    def __str__(self):
        return f"{self.code} ({self.discount_type} {self.discount_value})"
