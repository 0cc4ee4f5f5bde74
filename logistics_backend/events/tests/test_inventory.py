from decimal import Decimal
from types import SimpleNamespace

from django.test import TestCase
from rest_framework.test import APIClient

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
from events.services.exceptions import (
    InventoryCounterMissingError,
    InventoryReferenceError,
    InventoryUnavailableError,
)
from events.services.inventory import (
    available_quantity,
    decrement_inventory,
    ensure_available,
    is_inventory_type,
    required_quantity,
)
from users.models import User
from users.tokens import issue_tokens_for_user


def _line(product_type, product_id="", quantity=1, name="Item", room_type_id=None):
    return SimpleNamespace(
        product_type=product_type,
        product_id=str(product_id),
        quantity=quantity,
        name=name,
        room_type_id=str(room_type_id) if room_type_id else None,
    )


class InventoryServiceTests(TestCase):
    """
    GUARANTEES:
    - Each inventory product type hits its own counter
    - Hotels are keyed by room type
    - Booths always consume at least one unit
    - Missing counters are reported, never silently ignored
    """

    def setUp(self):
        self.event = Event.objects.create(name="Logistics Summit")

        self.ticket = Ticket.objects.create(name="Delegate Pass", price=Decimal("350.00"))
        EventTicket.objects.create(event=self.event, ticket=self.ticket, quantity=10)

        self.sponsor = SponsorType.objects.create(name="Gold Sponsor", price=Decimal("10000.00"))
        EventSponsorType.objects.create(event=self.event, sponsor_type=self.sponsor, quantity=1)

        hotel = Hotel.objects.create(name="Summit Hotel")
        self.room = RoomType.objects.create(hotel=hotel, name="Suite", price=Decimal("420.00"))
        EventRoomType.objects.create(event=self.event, room_type=self.room, quantity=3)

        self.booth = Booth.objects.create(name="Shell Scheme", price=Decimal("2500.00"))
        EventBooth.objects.create(event=self.event, booth=self.booth, quantity=2)

    def test_inventory_types(self):
        for product_type in ("TICKET", "SPONSOR", "HOTEL", "BOOTH", "ticket"):
            self.assertTrue(is_inventory_type(product_type))
        self.assertFalse(is_inventory_type("MEMBERSHIP"))
        self.assertFalse(is_inventory_type(None))

    def test_booth_requires_at_least_one(self):
        self.assertEqual(required_quantity(product_type="BOOTH", quantity=0), 1)
        self.assertEqual(required_quantity(product_type="TICKET", quantity=0), 0)

    def test_available_quantity(self):
        self.assertEqual(available_quantity(event_id=self.event.id, item=_line("TICKET", self.ticket.id)), 10)
        self.assertEqual(
            available_quantity(event_id=self.event.id, item=_line("HOTEL", room_type_id=self.room.id)), 3
        )
        self.assertIsNone(available_quantity(event_id=self.event.id, item=_line("TICKET", "bogus")))
        self.assertIsNone(available_quantity(event_id=self.event.id, item=_line("MEMBERSHIP")))

    def test_ensure_available_sold_out(self):
        with self.assertRaises(InventoryUnavailableError) as ctx:
            ensure_available(event_id=self.event.id, item=_line("SPONSOR", self.sponsor.id, 2, "Gold Sponsor"))
        self.assertIn('"Gold Sponsor" is sold out', str(ctx.exception))

    def test_hotel_without_room_type(self):
        with self.assertRaises(InventoryReferenceError):
            ensure_available(event_id=self.event.id, item=_line("HOTEL", self.room.id))

    def test_decrement_each_counter(self):
        decrement_inventory(event_id=self.event.id, item=_line("TICKET", self.ticket.id, 4))
        decrement_inventory(event_id=self.event.id, item=_line("HOTEL", room_type_id=self.room.id, quantity=2))
        consumed = decrement_inventory(event_id=self.event.id, item=_line("BOOTH", self.booth.id, 0))

        self.assertEqual(consumed, 1)
        self.assertEqual(EventTicket.objects.get(ticket=self.ticket).quantity, 6)
        self.assertEqual(EventRoomType.objects.get(room_type=self.room).quantity, 1)
        self.assertEqual(EventBooth.objects.get(booth=self.booth).quantity, 1)

    def test_decrement_non_inventory_is_noop(self):
        self.assertEqual(decrement_inventory(event_id=self.event.id, item=_line("MEMBERSHIP")), 0)

    def test_decrement_never_goes_negative(self):
        with self.assertRaises(InventoryUnavailableError):
            decrement_inventory(event_id=self.event.id, item=_line("SPONSOR", self.sponsor.id, 2, "Gold Sponsor"))

        self.assertEqual(EventSponsorType.objects.get(sponsor_type=self.sponsor).quantity, 1)

        decrement_inventory(event_id=self.event.id, item=_line("SPONSOR", self.sponsor.id, 1, "Gold Sponsor"))
        self.assertEqual(EventSponsorType.objects.get(sponsor_type=self.sponsor).quantity, 0)

    def test_decrement_missing_counter(self):
        other = Ticket.objects.create(name="VIP Pass", price=Decimal("900.00"))
        with self.assertRaises(InventoryCounterMissingError):
            decrement_inventory(event_id=self.event.id, item=_line("TICKET", other.id))


class EventApiTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="ops@acme.test", password="pass")
        self.client = APIClient()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens_for_user(self.user)['access']}")

        self.event = Event.objects.create(name="Logistics Summit")
        Event.objects.create(name="Archived Expo", is_active=False)
        ticket = Ticket.objects.create(name="Delegate Pass", price=Decimal("350.00"))
        EventTicket.objects.create(event=self.event, ticket=ticket, quantity=10)

    def test_list_only_active_events(self):
        res = self.client.get("/api/events/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual([e["name"] for e in res.data["results"]], ["Logistics Summit"])

    def test_detail_includes_inventory(self):
        res = self.client.get(f"/api/events/{self.event.id}/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["tickets"][0]["quantity"], 10)
        self.assertEqual(res.data["tickets"][0]["name"], "Delegate Pass")
