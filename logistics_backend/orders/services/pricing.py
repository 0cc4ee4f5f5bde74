# orders/services/pricing.py

"""
ORDER PRICING

Hard rules:
- Money is Decimal, 2dp, ROUND_HALF_UP. Frontend never computes totals.
- FIXED coupon:   discount = min(value, subtotal)
- PERCENT coupon: discount = subtotal * value / 100 (rounded to cents)
- total = max(0, subtotal - discount)
- An unknown coupon is ignored, never an error.
"""

from __future__ import annotations

import logging
import uuid
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from orders.models import Coupon

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def money(v) -> Decimal:
    if v is None or v == "":
        return ZERO
    try:
        return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Invalid money value: {v!r}") from exc


def resolve_coupon(*, coupon_id=None, code=None) -> Coupon | None:
    coupon = None

    if coupon_id:
        try:
            coupon = Coupon.objects.filter(id=uuid.UUID(str(coupon_id))).first()
        except (ValueError, TypeError, AttributeError):
            coupon = None

    code = (code or "").strip()
    if coupon is None and code:
        coupon = Coupon.objects.filter(code__iexact=code).first()

    if coupon is None and (coupon_id or code):
        logger.info("Coupon provided but not found; ignoring", extra={"coupon_id": coupon_id, "code": code})

    return coupon


def compute_discount(*, coupon: Coupon | None, subtotal) -> Decimal:
    subtotal = money(subtotal)
    if coupon is None:
        return ZERO

    value = money(coupon.discount_value)

    if coupon.discount_type == Coupon.DiscountType.FIXED:
        discount = min(value, subtotal)
    else:
        discount = subtotal * value / Decimal("100")

    return max(ZERO, money(discount))


def compute_total(*, subtotal, discount) -> Decimal:
    return max(ZERO, money(money(subtotal) - money(discount)))
