# events/apps.py

"""
EVENTS APP CONFIG

Events plus their sellable inventory:
- Catalog masters (tickets, sponsor types, hotels/room types, booths)
- Event-scoped remaining-quantity counters
"""

from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
    verbose_name = "Events & Inventory"
