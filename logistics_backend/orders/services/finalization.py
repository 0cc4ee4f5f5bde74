# orders/services/finalization.py

"""
ORDER FINALIZATION (MARK AS PAID)

This is the ONLY place where a PurchaseOrder becomes COMPLETED.

Inside one DB transaction (order row locked):
1) PENDING -> COMPLETED (offline_payment flag recorded)
2) Event inventory decremented once per inventory line
3) Membership activated ONCE per order, from its first MEMBERSHIP line

After commit:
4) Confirmation email (best-effort)
5) "order:completed" push to the company socket room (best-effort)

Hard rules:
- Inventory is consumed exactly once: an order that is already COMPLETED is
  not touched again (the confirmation email is re-sent).
- An unknown order id raises PurchaseOrder.DoesNotExist.
- A missing or exhausted inventory counter is logged and skipped. It does not
  undo the payment. Each decrement runs in its own savepoint so a rejected
  update cannot break the surrounding transaction.
- Any other database error rolls back the status change, every decrement and
  the membership activation together.
"""

from __future__ import annotations

import logging
import uuid

from django.db import IntegrityError, transaction

from chat.broadcast import broadcast_to_company
from companies.models import MembershipPlan
from companies.services.membership import activate_membership
from events.services.exceptions import InventoryError
from events.services.inventory import decrement_inventory, is_inventory_type
from orders.models import OrderItem, PurchaseOrder
from orders.services.notifications import send_order_confirmation

logger = logging.getLogger(__name__)


def _resolve_plan(item: OrderItem) -> MembershipPlan | None:
    try:
        plan_id = uuid.UUID(str(item.product_id))
    except (ValueError, TypeError, AttributeError):
        return None
    return MembershipPlan.objects.filter(id=plan_id).first()


def _consume_inventory(order: PurchaseOrder, item: OrderItem) -> None:
    if not order.event_id:
        logger.warning(
            "Inventory line on an order without event; skipping",
            extra={"order_id": str(order.id), "item_id": item.id, "product_type": item.product_type},
        )
        return

    try:
        with transaction.atomic():
            consumed = decrement_inventory(event_id=order.event_id, item=item)
    except (InventoryError, IntegrityError):
        logger.exception(
            "Inventory update failed for order item",
            extra={"order_id": str(order.id), "item_id": item.id, "product_type": item.product_type},
        )
        return

    logger.info(
        "Inventory decremented",
        extra={"order_id": str(order.id), "item_id": item.id, "consumed": consumed},
    )


def _apply_membership(order: PurchaseOrder, item: OrderItem) -> None:
    plan = _resolve_plan(item)
    if plan is None:
        logger.warning(
            "Membership plan not found at finalization; skipping activation",
            extra={"order_id": str(order.id), "product_id": item.product_id, "item_name": item.name},
        )
        return

    activate_membership(company=order.company, plan=plan)


def finalize_order(*, order_id, offline_payment: bool = True) -> PurchaseOrder:
    with transaction.atomic():
        order = PurchaseOrder.objects.select_for_update().get(pk=order_id)
        newly_completed = order.can_transition_to(PurchaseOrder.STATUS_COMPLETED)

        if not newly_completed:
            logger.info("Order already completed; re-sending confirmation", extra={"order_id": str(order.id)})
        else:
            order.status = PurchaseOrder.STATUS_COMPLETED
            order.offline_payment = bool(offline_payment)
            order.save(update_fields=["status", "offline_payment", "completed_at"])

            items = list(order.items.all())
            for item in items:
                if is_inventory_type(item.product_type):
                    _consume_inventory(order, item)

            membership_item = next(
                (item for item in items if item.product_type == OrderItem.TYPE_MEMBERSHIP),
                None,
            )
            if membership_item is not None:
                _apply_membership(order, membership_item)

            logger.info(
                "Order finalized",
                extra={
                    "order_id": str(order.id),
                    "order_no": order.order_no,
                    "offline_payment": order.offline_payment,
                },
            )

    send_order_confirmation(order)

    if newly_completed:
        broadcast_to_company(
            order.company_id,
            {
                "type": "order:completed",
                "orderId": str(order.id),
                "orderNo": order.order_no,
                "status": order.status,
            },
        )

    return order
