# orders/services/notifications.py

"""
ORDER CONFIRMATION EMAIL

Best-effort: a failed send is logged and reported as False, never raised.
The order is already committed by the time this runs.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.utils.html import format_html, format_html_join

from orders.models import PurchaseOrder

logger = logging.getLogger(__name__)


def _membership_summary(order: PurchaseOrder) -> tuple[str, str, str] | None:
    company = order.company
    has_membership_line = any(item.product_type == "MEMBERSHIP" for item in order.items.all())
    if not has_membership_line or not company.purchased_membership:
        return None

    expiry = company.membership_expires_at
    valid_until = expiry.date().isoformat() if expiry else "Lifetime"
    return company.purchased_membership, company.member_id, valid_until


def build_confirmation_text(order: PurchaseOrder) -> str:
    lines = [
        f"Hello {order.company.name},",
        "",
        f"Your order {order.order_no} has been confirmed.",
    ]
    if order.event_id:
        lines.append(f"Event: {order.event.name}")

    lines += ["", "Items:"]
    for item in order.items.all():
        lines.append(f"- {item.name} ({item.product_type}) x{item.quantity} @ {item.price} = {item.total_price}")

    lines += [
        "",
        f"Subtotal: {order.subtotal_amount}",
        f"Discount: {order.discount_amount}",
        f"Total: {order.total_amount}",
    ]

    membership = _membership_summary(order)
    if membership:
        plan, member_id, valid_until = membership
        lines += ["", f"Membership: {plan}", f"Member ID: {member_id}", f"Valid until: {valid_until}"]

    return "\n".join(lines)


def build_confirmation_html(order: PurchaseOrder) -> str:
    rows = format_html_join(
        "",
        "<tr><td>{}</td><td>{}</td><td>{}</td><td>{}</td></tr>",
        ((item.name, item.quantity, item.price, item.total_price) for item in order.items.all()),
    )

    membership = _membership_summary(order)
    membership_html = ""
    if membership:
        membership_html = format_html(
            "<p>Membership: <strong>{}</strong><br>Member ID: {}<br>Valid until: {}</p>",
            *membership,
        )

    return format_html(
        "<p>Hello {},</p>"
        "<p>Your order <strong>{}</strong> has been confirmed.</p>"
        "<table><tr><th>Item</th><th>Qty</th><th>Price</th><th>Total</th></tr>{}</table>"
        "<p>Subtotal: {}<br>Discount: {}<br><strong>Total: {}</strong></p>{}",
        order.company.name,
        order.order_no,
        rows,
        order.subtotal_amount,
        order.discount_amount,
        order.total_amount,
        membership_html,
    )


def send_order_confirmation(order: PurchaseOrder) -> bool:
    recipient = order.company.contact_email
    if not recipient:
        logger.warning("No contact email for order confirmation", extra={"order_id": str(order.id)})
        return False

    try:
        send_mail(
            f"Order confirmation {order.order_no}",
            build_confirmation_text(order),
            settings.DEFAULT_FROM_EMAIL,
            [recipient],
            fail_silently=False,
            html_message=build_confirmation_html(order),
        )
    except Exception:
        logger.exception("Order confirmation email failed", extra={"order_id": str(order.id)})
        return False

    logger.info("Order confirmation email sent", extra={"order_id": str(order.id), "to": recipient})
    return True
