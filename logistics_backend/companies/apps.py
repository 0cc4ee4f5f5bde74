# companies/apps.py

"""
COMPANIES APP CONFIG

Member companies and the membership plans they buy:
- Company directory record (one per member account)
- Denormalized membership state (plan, purchased_at, expiry)
"""

from django.apps import AppConfig


class CompaniesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "companies"
    verbose_name = "Companies & Memberships"
