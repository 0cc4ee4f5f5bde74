# companies/models/membership_plan.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models


class MembershipPlan(models.Model):
    """
    Purchasable membership tier.

    One tier (matched by name keyword, settings.LIFETIME_MEMBERSHIP_KEYWORD)
    never expires; every other tier runs for settings.MEMBERSHIP_TERM_DAYS.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=120, unique=True)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    features = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)
    sort_order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["sort_order", "price"]

    def clean(self):
        if self.price is None or Decimal(self.price) < Decimal("0.00"):
            raise ValidationError("price cannot be negative")

    @property
    def is_lifetime(self) -> bool:
        keyword = (getattr(settings, "LIFETIME_MEMBERSHIP_KEYWORD", "") or "").strip().lower()
        if not keyword:
            return False
        return keyword in (self.name or "").lower()

    def __str__(self):
        return f"{self.name} ({self.price})"
