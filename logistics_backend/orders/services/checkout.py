# orders/services/checkout.py

"""
CHECKOUT ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Turn a client cart into a PENDING PurchaseOrder with server-computed totals.
- Classify every line against a fixed product-type allow-list.
- Apply at most one coupon.

Two entry points:
- checkout_general():   memberships + generic products. Event-scoped types
                        (TICKET/SPONSOR/HOTEL/BOOTH) are rejected ("requires an event").
- checkout_for_event(): same flow scoped to one event. Event-scoped lines are
                        checked against the event's inventory counters.

Hard rules:
- The whole checkout runs in ONE DB transaction: any error rolls back the
  order and every line created so far.
- Inventory counters are NOT decremented here. They are decremented exactly
  once, when the order is finalized (orders.services.finalization).
- Membership activation also happens at finalization, not at checkout.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction

from companies.models import Company, MembershipPlan
from events.models import Event
from events.services.exceptions import InventoryError
from events.services.inventory import ensure_available, is_inventory_type
from orders.models import OrderItem, PurchaseOrder
from orders.services.exceptions import (
    CartValidationError,
    CheckoutInventoryError,
    CheckoutNotFoundError,
    EmptyCartError,
    EventRequiredError,
)
from orders.services.pricing import compute_discount, compute_total, money, resolve_coupon

logger = logging.getLogger(__name__)

ALLOWED_PRODUCT_TYPES = (
    OrderItem.TYPE_TICKET,
    OrderItem.TYPE_SPONSOR,
    OrderItem.TYPE_HOTEL,
    OrderItem.TYPE_BOOTH,
    OrderItem.TYPE_MEMBERSHIP,
    OrderItem.TYPE_PRODUCT,
)

CLIENT_ERROR_MARKERS = (
    "sold out",
    "insufficient quantity",
    "missing",
    "no longer available",
    "Not enough available",
    "not found",
    "requires an event",
)


@dataclass(frozen=True)
class CartLine:
    product_id: str
    product_type: str
    name: str
    quantity: int
    price: Decimal
    room_type_id: str | None = None
    booth_sub_type_id: str | None = None

    @property
    def line_total(self) -> Decimal:
        return money(self.price * Decimal(self.quantity))


def classify_product_type(raw) -> str:
    value = str(raw or OrderItem.TYPE_PRODUCT).strip().upper()
    return value if value in ALLOWED_PRODUCT_TYPES else OrderItem.TYPE_PRODUCT


def is_client_error(message: str) -> bool:
    message = message or ""
    return any(marker in message for marker in CLIENT_ERROR_MARKERS)


def _to_int_qty(value) -> int:
    if isinstance(value, bool):
        raise ValueError("quantity must be a whole integer unit")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError("quantity must be a whole integer unit")


def _optional_str(value) -> str | None:
    value = str(value or "").strip()
    return value or None


def build_cart_lines(cart_items) -> list[CartLine]:
    """
    Normalize raw cart dicts into CartLine rows.

    The declared product_type wins over client_product_type; anything outside
    the allow-list is recorded as a generic PRODUCT.
    """
    if not cart_items:
        raise EmptyCartError("Cart is empty or missing")

    lines = []
    for idx, raw in enumerate(cart_items):
        name = str(raw.get("name") or "").strip() or f"Item {idx + 1}"

        try:
            qty = _to_int_qty(raw.get("quantity"))
        except ValueError as exc:
            raise CartValidationError(f'Quantity is missing or invalid for "{name}".') from exc
        if qty <= 0:
            raise CartValidationError(f'Quantity is missing or invalid for "{name}".')

        try:
            price = money(raw.get("price"))
        except ValueError as exc:
            raise CartValidationError(f'Price is missing or invalid for "{name}".') from exc
        if price < Decimal("0.00"):
            raise CartValidationError(f'Price is missing or invalid for "{name}".')

        incoming_type = raw.get("product_type") or raw.get("client_product_type")
        product_type = classify_product_type(incoming_type)

        logger.info(
            "Processing cart line",
            extra={"item_name": name, "incoming_type": incoming_type, "mapped_type": product_type},
        )

        lines.append(
            CartLine(
                product_id=str(raw.get("product_id") or "").strip(),
                product_type=product_type,
                name=name,
                quantity=qty,
                price=price,
                room_type_id=_optional_str(raw.get("room_type_id")),
                booth_sub_type_id=_optional_str(raw.get("booth_sub_type_id")),
            )
        )

    return lines


def _get_or_not_found(model, pk, message):
    try:
        key = uuid.UUID(str(pk))
    except (ValueError, TypeError, AttributeError):
        raise CheckoutNotFoundError(message)

    obj = model.objects.filter(pk=key).first()
    if obj is None:
        raise CheckoutNotFoundError(message)
    return obj


def _check_line(*, line: CartLine, event: Event | None) -> None:
    if is_inventory_type(line.product_type):
        if event is None:
            raise EventRequiredError(
                f'Product type "{line.product_type}" requires an event. '
                "Use event-specific checkout endpoint."
            )
        try:
            ensure_available(event_id=event.id, item=line)
        except InventoryError as exc:
            raise CheckoutInventoryError(str(exc)) from exc
        return

    if line.product_type == OrderItem.TYPE_MEMBERSHIP:
        _get_or_not_found(MembershipPlan, line.product_id, f'Membership plan "{line.name}" not found.')
        return

    logger.info(
        "Recording item without inventory changes",
        extra={"item_name": line.name, "product_type": line.product_type},
    )


@transaction.atomic
def _place_order(*, company_id, lines: list[CartLine], coupon_input, event: Event | None) -> PurchaseOrder:
    company = _get_or_not_found(Company, company_id, "Company not found.")

    order = PurchaseOrder.objects.create(
        company=company,
        event=event,
        status=PurchaseOrder.STATUS_PENDING,
    )
    logger.info("Created purchase order", extra={"order_id": str(order.id), "company_id": str(company.id)})

    subtotal = Decimal("0.00")

    for line in lines:
        _check_line(line=line, event=event)

        OrderItem.objects.create(
            order=order,
            product_id=line.product_id,
            product_type=line.product_type,
            name=line.name,
            quantity=line.quantity,
            price=line.price,
            room_type_id=line.room_type_id,
            booth_sub_type_id=line.booth_sub_type_id,
        )

        subtotal += line.line_total

    coupon_input = coupon_input or {}
    coupon = resolve_coupon(coupon_id=coupon_input.get("id"), code=coupon_input.get("code"))

    subtotal = money(subtotal)
    discount = compute_discount(coupon=coupon, subtotal=subtotal)
    total = compute_total(subtotal=subtotal, discount=discount)

    order.coupon = coupon
    order.subtotal_amount = subtotal
    order.discount_amount = discount
    order.total_amount = total
    order.save(update_fields=["coupon", "subtotal_amount", "discount_amount", "total_amount"])

    logger.info(
        "Checkout priced order",
        extra={
            "order_id": str(order.id),
            "subtotal": str(subtotal),
            "discount": str(discount),
            "total": str(total),
            "coupon": getattr(coupon, "code", None),
        },
    )
    return order


def checkout_general(*, company_id, cart_items, coupon=None) -> PurchaseOrder:
    lines = build_cart_lines(cart_items)
    return _place_order(company_id=company_id, lines=lines, coupon_input=coupon, event=None)


def checkout_for_event(*, event_id, company_id, cart_items, coupon=None) -> PurchaseOrder:
    lines = build_cart_lines(cart_items)
    event = _get_or_not_found(Event, event_id, "Event not found.")
    return _place_order(company_id=company_id, lines=lines, coupon_input=coupon, event=event)
