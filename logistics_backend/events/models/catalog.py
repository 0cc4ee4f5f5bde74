# events/models/catalog.py

"""
CATALOG MASTERS

Reusable product definitions. They carry no stock of their own:
remaining quantities live per event in events.models.inventory.
"""

import uuid
from decimal import Decimal

from django.db import models


class CatalogItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.price})"


class Ticket(CatalogItem):
    pass


class SponsorType(CatalogItem):
    pass


class Hotel(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class RoomType(CatalogItem):
    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="room_types")

    class Meta(CatalogItem.Meta):
        pass

    def __str__(self):
        return f"{self.hotel.name} / {self.name}"


class Booth(CatalogItem):
    pass
