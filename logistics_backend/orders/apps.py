# orders/apps.py

"""
ORDERS APP CONFIG

Checkout, purchase orders and their finalization:
- General checkout (memberships / generic products)
- Event checkout (tickets, sponsor packs, hotel rooms, booths)
- Coupons
- "Mark as paid" finalization (inventory + membership + confirmation email)
"""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "orders"
    verbose_name = "Orders & Checkout"
