# events/services/inventory.py

"""
EVENT INVENTORY ENGINE

Purpose:
- Map an order/cart line to its event-scoped counter via a FIXED dispatch table.
- Check availability at checkout time (read-only).
- Never let a counter go below zero.
- Decrement counters at finalization time (atomic F() update).

Item shape (duck-typed; OrderItem rows and checkout CartLine both fit):
- product_type, product_id, room_type_id, quantity, name

Hard rules:
- HOTEL lines are keyed by room_type_id, not product_id.
- BOOTH lines always consume at least one unit.
- Non-inventory types (MEMBERSHIP, PRODUCT) never touch counters.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from django.db.models import F

from events.models import EventBooth, EventRoomType, EventSponsorType, EventTicket
from events.services.exceptions import (
    InventoryCounterMissingError,
    InventoryReferenceError,
    InventoryUnavailableError,
)


@dataclass(frozen=True)
class CounterSpec:
    model: type
    fk_field: str
    item_attr: str
    label: str
    min_one: bool = False


INVENTORY_COUNTERS: dict[str, CounterSpec] = {
    "TICKET": CounterSpec(EventTicket, "ticket_id", "product_id", "Ticket"),
    "SPONSOR": CounterSpec(EventSponsorType, "sponsor_type_id", "product_id", "Sponsor pack"),
    "HOTEL": CounterSpec(EventRoomType, "room_type_id", "room_type_id", "Room type"),
    "BOOTH": CounterSpec(EventBooth, "booth_id", "product_id", "Booth", min_one=True),
}


def is_inventory_type(product_type: str | None) -> bool:
    return (product_type or "").upper() in INVENTORY_COUNTERS


def required_quantity(*, product_type: str, quantity) -> int:
    qty = int(quantity or 0)
    spec = INVENTORY_COUNTERS.get((product_type or "").upper())
    if spec is not None and spec.min_one:
        return max(1, qty)
    return qty


def _as_uuid(value):
    if value in (None, ""):
        return None
    try:
        return uuid.UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None


def _counter_filter(*, event_id, item) -> tuple[CounterSpec, dict] | None:
    spec = INVENTORY_COUNTERS.get((getattr(item, "product_type", "") or "").upper())
    if spec is None:
        return None

    raw_ref = getattr(item, spec.item_attr, None)
    if spec.item_attr == "room_type_id" and not raw_ref:
        raise InventoryReferenceError("Room Type ID is missing for hotel booking.")

    return spec, {"event_id": event_id, spec.fk_field: _as_uuid(raw_ref)}


def available_quantity(*, event_id, item) -> int | None:
    """
    Remaining counter value, or None when no counter exists for this line.
    Raises InventoryReferenceError for hotel lines without a room type.
    """
    resolved = _counter_filter(event_id=event_id, item=item)
    if resolved is None:
        return None

    spec, lookup = resolved
    if lookup[spec.fk_field] is None:
        return None

    row = spec.model.objects.filter(**lookup).values_list("quantity", flat=True).first()
    return None if row is None else int(row)


def ensure_available(*, event_id, item) -> None:
    spec = INVENTORY_COUNTERS.get((getattr(item, "product_type", "") or "").upper())
    if spec is None:
        return

    needed = required_quantity(product_type=item.product_type, quantity=getattr(item, "quantity", 0))
    available = available_quantity(event_id=event_id, item=item)

    if available is None or available < needed:
        raise InventoryUnavailableError(
            f'{spec.label} "{getattr(item, "name", "")}" is sold out or has insufficient quantity.'
        )


def decrement_inventory(*, event_id, item) -> int:
    """
    Decrement the matching counter. Returns the amount consumed
    (0 for non-inventory product types).

    The update only applies while the counter still covers the line, so
    counters never go negative even when several pending orders were
    checked against the same stock.
    """
    resolved = _counter_filter(event_id=event_id, item=item)
    if resolved is None:
        return 0

    spec, lookup = resolved
    needed = required_quantity(product_type=item.product_type, quantity=getattr(item, "quantity", 0))

    counter = spec.model.objects.none()
    if lookup[spec.fk_field] is not None:
        counter = spec.model.objects.filter(**lookup)

    updated = counter.filter(quantity__gte=needed).update(quantity=F("quantity") - needed)
    if updated:
        return needed

    if counter.exists():
        raise InventoryUnavailableError(
            f'{spec.label} "{getattr(item, "name", "")}" is sold out or has insufficient quantity.'
        )
    raise InventoryCounterMissingError(
        f"No {spec.label.lower()} counter for event {event_id} "
        f"and {spec.fk_field}={getattr(item, spec.item_attr, None)}"
    )
