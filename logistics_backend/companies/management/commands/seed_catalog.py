from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from companies.models import MembershipPlan
from events.models import (
    Booth,
    Event,
    EventBooth,
    EventRoomType,
    EventSponsorType,
    EventTicket,
    Hotel,
    RoomType,
    SponsorType,
    Ticket,
)
from orders.models import Coupon


class Command(BaseCommand):
    help = "Seed membership plans, a demo event with inventory, and sample coupons (idempotent)"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding catalog..."))

        # -------------------------------
        # MEMBERSHIP PLANS
        # -------------------------------
        plans_data = [
            ("Silver", 500, ["Directory listing", "Member badge"]),
            ("Gold", 1500, ["Directory listing", "Member badge", "Event discounts"]),
            ("Diamond", 5000, ["Lifetime membership", "Priority support", "Event discounts"]),
        ]

        for order, (name, price, features) in enumerate(plans_data):
            MembershipPlan.objects.get_or_create(
                name=name,
                defaults={
                    "price": Decimal(price),
                    "features": features,
                    "sort_order": order,
                },
            )

        # -------------------------------
        # DEMO EVENT
        # -------------------------------
        start = date.today() + timedelta(days=90)
        event, _ = Event.objects.get_or_create(
            name="Annual Logistics Summit",
            defaults={
                "venue": "Dubai World Trade Centre",
                "start_date": start,
                "end_date": start + timedelta(days=2),
            },
        )

        # -------------------------------
        # CATALOG + EVENT COUNTERS
        # -------------------------------
        tickets = [("Delegate Pass", 350, 300), ("VIP Pass", 900, 40)]
        for name, price, qty in tickets:
            ticket, _ = Ticket.objects.get_or_create(name=name, defaults={"price": Decimal(price)})
            EventTicket.objects.get_or_create(event=event, ticket=ticket, defaults={"quantity": qty})

        sponsors = [("Gold Sponsor", 10000, 3), ("Silver Sponsor", 5000, 6)]
        for name, price, qty in sponsors:
            sponsor, _ = SponsorType.objects.get_or_create(name=name, defaults={"price": Decimal(price)})
            EventSponsorType.objects.get_or_create(event=event, sponsor_type=sponsor, defaults={"quantity": qty})

        hotel, _ = Hotel.objects.get_or_create(name="Summit Grand Hotel")
        rooms = [("Standard Room", 180, 50), ("Suite", 420, 10)]
        for name, price, qty in rooms:
            room, _ = RoomType.objects.get_or_create(hotel=hotel, name=name, defaults={"price": Decimal(price)})
            EventRoomType.objects.get_or_create(event=event, room_type=room, defaults={"quantity": qty})

        booths = [("Shell Scheme 9sqm", 2500, 20), ("Raw Space 18sqm", 4200, 8)]
        for name, price, qty in booths:
            booth, _ = Booth.objects.get_or_create(name=name, defaults={"price": Decimal(price)})
            EventBooth.objects.get_or_create(event=event, booth=booth, defaults={"quantity": qty})

        # -------------------------------
        # COUPONS
        # -------------------------------
        Coupon.objects.get_or_create(
            code="WELCOME100",
            defaults={"discount_type": Coupon.DiscountType.FIXED, "discount_value": Decimal("100.00")},
        )
        Coupon.objects.get_or_create(
            code="EARLY20",
            defaults={"discount_type": Coupon.DiscountType.PERCENT, "discount_value": Decimal("20.00")},
        )

        self.stdout.write(self.style.SUCCESS("Catalog seeded successfully."))
