"""
MIGRATION: CREATE Coupon, PurchaseOrder, OrderItem
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("companies", "0001_initial"),
        ("events", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Coupon",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("code", models.CharField(db_index=True, max_length=64, unique=True)),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                (
                    "discount_type",
                    models.CharField(
                        choices=[("FIXED", "Fixed Amount"), ("PERCENT", "Percent")],
                        default="PERCENT",
                        max_length=16,
                    ),
                ),
                (
                    "discount_value",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Percent (e.g. 20.00) if PERCENT; currency amount if FIXED.",
                        max_digits=12,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["code"]},
        ),
        migrations.CreateModel(
            name="PurchaseOrder",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "order_no",
                    models.CharField(
                        blank=True,
                        help_text="System-generated order number",
                        max_length=64,
                        unique=True,
                    ),
                ),
                ("subtotal_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("discount_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("total_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[("PENDING", "Pending"), ("COMPLETED", "Completed")],
                        default="PENDING",
                        max_length=16,
                    ),
                ),
                ("offline_payment", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="orders",
                        to="companies.company",
                    ),
                ),
                (
                    "coupon",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="orders",
                        to="orders.coupon",
                    ),
                ),
                (
                    "event",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="orders",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["created_at"], name="po_created_at_idx"),
                    models.Index(fields=["status"], name="po_status_idx"),
                    models.Index(fields=["company", "created_at"], name="po_company_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "product_type",
                    models.CharField(
                        choices=[
                            ("TICKET", "Ticket"),
                            ("SPONSOR", "Sponsor"),
                            ("HOTEL", "Hotel Room"),
                            ("BOOTH", "Booth"),
                            ("MEMBERSHIP", "Membership"),
                            ("PRODUCT", "Product"),
                        ],
                        default="PRODUCT",
                        max_length=16,
                    ),
                ),
                ("product_id", models.CharField(blank=True, default="", max_length=64)),
                ("name", models.CharField(max_length=255)),
                (
                    "quantity",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Unit price at checkout time",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "total_price",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="quantity * price (server computed)",
                        max_digits=12,
                    ),
                ),
                ("room_type_id", models.CharField(blank=True, max_length=64, null=True)),
                ("booth_sub_type_id", models.CharField(blank=True, max_length=64, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="orders.purchaseorder",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["order"], name="orderitem_order_idx"),
                    models.Index(fields=["product_type"], name="orderitem_type_idx"),
                ],
            },
        ),
    ]
