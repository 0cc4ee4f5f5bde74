# companies/models/__init__.py

from .company import Company
from .membership_plan import MembershipPlan

__all__ = ["Company", "MembershipPlan"]
