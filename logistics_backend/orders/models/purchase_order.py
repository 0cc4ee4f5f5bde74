# orders/models/purchase_order.py

import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone


class PurchaseOrder(models.Model):
    """
    A company's checkout record.

    Key rule:
    - Created PENDING by checkout (totals are final at creation time)
    - Becomes COMPLETED only through orders.services.finalization.finalize_order(),
      which also decrements event inventory and activates memberships
    - Never deleted by the normal flow (admin deletion is a separate action)
    """

    STATUS_PENDING = "PENDING"
    STATUS_COMPLETED = "COMPLETED"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_COMPLETED, "Completed"),
    ]

    # COMPLETED is terminal.
    ALLOWED_TRANSITIONS = {
        STATUS_PENDING: {STATUS_COMPLETED},
    }

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    order_no = models.CharField(
        max_length=64,
        unique=True,
        blank=True,
        help_text="System-generated order number",
    )

    company = models.ForeignKey(
        "companies.Company",
        on_delete=models.CASCADE,
        related_name="orders",
    )

    event = models.ForeignKey(
        "events.Event",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    coupon = models.ForeignKey(
        "orders.Coupon",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    # Money fields (server authoritative)
    subtotal_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)

    offline_payment = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="po_created_at_idx"),
            models.Index(fields=["status"], name="po_status_idx"),
            models.Index(fields=["company", "created_at"], name="po_company_created_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self.order_no:
            prefix = timezone.now().strftime("PO%Y%m%d")
            self.order_no = f"{prefix}-{uuid.uuid4().hex[:8].upper()}"

        if self.status == self.STATUS_COMPLETED and not self.completed_at:
            self.completed_at = timezone.now()

        super().save(*args, **kwargs)

    @property
    def is_completed(self) -> bool:
        return self.status == self.STATUS_COMPLETED

    def can_transition_to(self, target_status: str) -> bool:
        return target_status in self.ALLOWED_TRANSITIONS.get(self.status, set())

    def __str__(self):
        return f"{self.order_no} | {self.total_amount} | {self.status}"
