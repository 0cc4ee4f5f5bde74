# companies/services/membership.py

"""
MEMBERSHIP ACTIVATION (DOMAIN SERVICE)

Rules:
- Lifetime plan (name contains settings.LIFETIME_MEMBERSHIP_KEYWORD) -> no expiry.
- Otherwise expiry = base + MEMBERSHIP_TERM_DAYS, where base is the current
  expiry if it is still in the future, else "now" (renewals stack, lapsed
  memberships restart).
- member_since is set once and never moved.

Callers own the transaction: order finalization activates membership inside
the same atomic block that marks the order COMPLETED.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from django.conf import settings
from django.utils import timezone

from companies.models import Company, MembershipPlan

logger = logging.getLogger(__name__)


def membership_term() -> timedelta:
    return timedelta(days=int(getattr(settings, "MEMBERSHIP_TERM_DAYS", 365) or 365))


def compute_membership_expiry(
    *, plan: MembershipPlan, current_expiry: datetime | None, now: datetime
) -> datetime | None:
    if plan.is_lifetime:
        return None

    base = current_expiry if (current_expiry and current_expiry > now) else now
    return base + membership_term()


def activate_membership(*, company: Company, plan: MembershipPlan, now: datetime | None = None) -> Company:
    now = now or timezone.now()

    expires_at = compute_membership_expiry(
        plan=plan,
        current_expiry=company.membership_expires_at,
        now=now,
    )

    company.membership_plan = plan
    company.purchased_membership = plan.name
    company.purchased_at = now
    company.membership_expires_at = expires_at
    company.member_type = Company.MEMBER_PAID
    if company.member_since is None:
        company.member_since = now

    company.save(
        update_fields=[
            "membership_plan",
            "purchased_membership",
            "purchased_at",
            "membership_expires_at",
            "member_type",
            "member_since",
            "updated_at",
        ]
    )

    logger.info(
        "Membership activated",
        extra={
            "company_id": str(company.id),
            "plan": plan.name,
            "expires_at": expires_at.isoformat() if expires_at else None,
        },
    )
    return company
