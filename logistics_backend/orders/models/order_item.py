# orders/models/order_item.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class OrderItem(models.Model):
    """
    One purchased line within a PurchaseOrder.

    Immutable once created: the order's totals and the inventory it consumed
    are derived from these rows.
    """

    TYPE_TICKET = "TICKET"
    TYPE_SPONSOR = "SPONSOR"
    TYPE_HOTEL = "HOTEL"
    TYPE_BOOTH = "BOOTH"
    TYPE_MEMBERSHIP = "MEMBERSHIP"
    TYPE_PRODUCT = "PRODUCT"

    PRODUCT_TYPE_CHOICES = [
        (TYPE_TICKET, "Ticket"),
        (TYPE_SPONSOR, "Sponsor"),
        (TYPE_HOTEL, "Hotel Room"),
        (TYPE_BOOTH, "Booth"),
        (TYPE_MEMBERSHIP, "Membership"),
        (TYPE_PRODUCT, "Product"),
    ]

    order = models.ForeignKey(
        "orders.PurchaseOrder",
        on_delete=models.CASCADE,
        related_name="items",
    )

    product_type = models.CharField(max_length=16, choices=PRODUCT_TYPE_CHOICES, default=TYPE_PRODUCT)
    product_id = models.CharField(max_length=64, blank=True, default="")
    name = models.CharField(max_length=255)

    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price at checkout time",
    )
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="quantity * price (server computed)",
    )

    room_type_id = models.CharField(max_length=64, null=True, blank=True)
    booth_sub_type_id = models.CharField(max_length=64, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["order"], name="orderitem_order_idx"),
            models.Index(fields=["product_type"], name="orderitem_type_idx"),
        ]

    def clean(self):
        if self.quantity is None or int(self.quantity) <= 0:
            raise ValidationError("quantity must be >= 1")

        if self.price is None or Decimal(self.price) < Decimal("0.00"):
            raise ValidationError("price cannot be negative")

        self.total_price = (Decimal(self.quantity) * Decimal(self.price)).quantize(Decimal("0.01"))

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("OrderItem records are immutable")

        self.full_clean()
        return super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} x{self.quantity}"
