# events/models/inventory.py

"""
EVENT-SCOPED INVENTORY COUNTERS

One row per (event, product). `quantity` is the remaining sellable amount
and never goes below zero.

Write rule:
- Counters are decremented only by events.services.inventory.decrement_inventory(),
  which is called from order finalization (exactly once per completed order).
"""

import uuid

from django.db import models


class EventInventory(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    quantity = models.PositiveIntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class EventTicket(EventInventory):
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="tickets")
    ticket = models.ForeignKey("events.Ticket", on_delete=models.CASCADE, related_name="event_links")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["event", "ticket"], name="uniq_event_ticket"),
        ]

    def __str__(self):
        return f"{self.event} / {self.ticket.name}: {self.quantity}"


class EventSponsorType(EventInventory):
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="sponsor_types")
    sponsor_type = models.ForeignKey(
        "events.SponsorType", on_delete=models.CASCADE, related_name="event_links"
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["event", "sponsor_type"], name="uniq_event_sponsor_type"),
        ]

    def __str__(self):
        return f"{self.event} / {self.sponsor_type.name}: {self.quantity}"


class EventRoomType(EventInventory):
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="room_types")
    room_type = models.ForeignKey("events.RoomType", on_delete=models.CASCADE, related_name="event_links")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["event", "room_type"], name="uniq_event_room_type"),
        ]

    def __str__(self):
        return f"{self.event} / {self.room_type}: {self.quantity}"


class EventBooth(EventInventory):
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="booths")
    booth = models.ForeignKey("events.Booth", on_delete=models.CASCADE, related_name="event_links")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["event", "booth"], name="uniq_event_booth"),
        ]

    def __str__(self):
        return f"{self.event} / {self.booth.name}: {self.quantity}"
