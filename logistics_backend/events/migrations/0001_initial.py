"""
MIGRATION: CREATE Event, catalog masters and event-scoped inventory counters
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


def _catalog_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("name", models.CharField(max_length=255)),
        ("description", models.TextField(blank=True, default="")),
        ("price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def _counter_fields(fk_name, to):
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("quantity", models.PositiveIntegerField(default=0)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        (
            "event",
            models.ForeignKey(
                on_delete=django.db.models.deletion.CASCADE,
                related_name=_EVENT_RELATED[fk_name],
                to="events.event",
            ),
        ),
        (
            fk_name,
            models.ForeignKey(
                on_delete=django.db.models.deletion.CASCADE,
                related_name="event_links",
                to=to,
            ),
        ),
    ]


_EVENT_RELATED = {
    "ticket": "tickets",
    "sponsor_type": "sponsor_types",
    "room_type": "room_types",
    "booth": "booths",
}


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("venue", models.CharField(blank=True, default="", max_length=255)),
                ("start_date", models.DateField(blank=True, null=True)),
                ("end_date", models.DateField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-start_date", "name"],
                "indexes": [models.Index(fields=["is_active", "start_date"], name="event_active_start_idx")],
            },
        ),
        migrations.CreateModel(
            name="Hotel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=_catalog_fields(),
            options={"ordering": ["name"], "abstract": False},
        ),
        migrations.CreateModel(
            name="SponsorType",
            fields=_catalog_fields(),
            options={"ordering": ["name"], "abstract": False},
        ),
        migrations.CreateModel(
            name="Booth",
            fields=_catalog_fields(),
            options={"ordering": ["name"], "abstract": False},
        ),
        migrations.CreateModel(
            name="RoomType",
            fields=_catalog_fields()
            + [
                (
                    "hotel",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="room_types",
                        to="events.hotel",
                    ),
                ),
            ],
            options={"ordering": ["name"], "abstract": False},
        ),
        migrations.CreateModel(
            name="EventTicket",
            fields=_counter_fields("ticket", "events.ticket"),
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("event", "ticket"), name="uniq_event_ticket"),
                ],
            },
        ),
        migrations.CreateModel(
            name="EventSponsorType",
            fields=_counter_fields("sponsor_type", "events.sponsortype"),
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("event", "sponsor_type"), name="uniq_event_sponsor_type"),
                ],
            },
        ),
        migrations.CreateModel(
            name="EventRoomType",
            fields=_counter_fields("room_type", "events.roomtype"),
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("event", "room_type"), name="uniq_event_room_type"),
                ],
            },
        ),
        migrations.CreateModel(
            name="EventBooth",
            fields=_counter_fields("booth", "events.booth"),
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("event", "booth"), name="uniq_event_booth"),
                ],
            },
        ),
    ]
