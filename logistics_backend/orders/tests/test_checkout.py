from decimal import Decimal
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient

from companies.models import Company, MembershipPlan
from events.models import Event, EventRoomType, EventTicket, Hotel, RoomType, Ticket
from orders.models import Coupon, OrderItem, PurchaseOrder
from orders.services.checkout import (
    checkout_for_event,
    checkout_general,
    classify_product_type,
    is_client_error,
)
from orders.services.exceptions import (
    CheckoutInventoryError,
    CheckoutNotFoundError,
    EmptyCartError,
    EventRequiredError,
)
from users.models import User
from users.tokens import issue_tokens_for_user


class CheckoutFixtureMixin:
    def setUp(self):
        self.user = User.objects.create_user(email="ops@acme.test", password="pass")
        self.company = Company.objects.create(user=self.user, name="Acme Freight", email="ops@acme.test")

        self.plan = MembershipPlan.objects.create(name="Gold", price=Decimal("1500.00"))

        self.event = Event.objects.create(name="Logistics Summit")
        self.ticket = Ticket.objects.create(name="Delegate Pass", price=Decimal("350.00"))
        self.event_ticket = EventTicket.objects.create(event=self.event, ticket=self.ticket, quantity=5)

        hotel = Hotel.objects.create(name="Summit Hotel")
        self.room = RoomType.objects.create(hotel=hotel, name="Suite", price=Decimal("420.00"))
        EventRoomType.objects.create(event=self.event, room_type=self.room, quantity=2)

        self.coupon = Coupon.objects.create(
            code="WELCOME100",
            discount_type=Coupon.DiscountType.FIXED,
            discount_value=Decimal("100.00"),
        )

    def membership_line(self, **overrides):
        line = {
            "product_id": str(self.plan.id),
            "product_type": "MEMBERSHIP",
            "name": "Gold",
            "quantity": 1,
            "price": Decimal("1500.00"),
        }
        line.update(overrides)
        return line

    def ticket_line(self, quantity=1, **overrides):
        line = {
            "product_id": str(self.ticket.id),
            "product_type": "TICKET",
            "name": "Delegate Pass",
            "quantity": quantity,
            "price": Decimal("350.00"),
        }
        line.update(overrides)
        return line


class CheckoutServiceTests(CheckoutFixtureMixin, TestCase):
    """
    GUARANTEES:
    - Orders are created PENDING with server-computed totals
    - Event-scoped products are rejected by the general checkout
    - Event checkout checks inventory but never consumes it
    - Failed checkouts leave no partial order behind
    """

    def test_classify_product_type(self):
        self.assertEqual(classify_product_type("ticket"), "TICKET")
        self.assertEqual(classify_product_type(" Booth "), "BOOTH")
        self.assertEqual(classify_product_type("gift-card"), "PRODUCT")
        self.assertEqual(classify_product_type(None), "PRODUCT")

    def test_is_client_error(self):
        self.assertTrue(is_client_error('Ticket "VIP" is sold out or has insufficient quantity.'))
        self.assertTrue(is_client_error('Product type "TICKET" requires an event.'))
        self.assertTrue(is_client_error("Company not found."))
        self.assertFalse(is_client_error("connection reset"))
        self.assertFalse(is_client_error(""))

    def test_general_checkout_membership_with_coupon(self):
        order = checkout_general(
            company_id=self.company.id,
            cart_items=[self.membership_line()],
            coupon={"code": "welcome100"},
        )

        self.assertEqual(order.status, PurchaseOrder.STATUS_PENDING)
        self.assertEqual(order.subtotal_amount, Decimal("1500.00"))
        self.assertEqual(order.discount_amount, Decimal("100.00"))
        self.assertEqual(order.total_amount, Decimal("1400.00"))
        self.assertEqual(order.coupon, self.coupon)
        self.assertEqual(order.items.count(), 1)
        self.assertEqual(order.items.get().product_type, OrderItem.TYPE_MEMBERSHIP)

    def test_unknown_product_type_is_recorded_as_product(self):
        order = checkout_general(
            company_id=self.company.id,
            cart_items=[{"name": "Directory Ad", "product_type": "AD", "quantity": 2, "price": "25.00"}],
        )
        item = order.items.get()
        self.assertEqual(item.product_type, OrderItem.TYPE_PRODUCT)
        self.assertEqual(item.total_price, Decimal("50.00"))

    def test_general_checkout_rejects_event_products(self):
        with self.assertRaises(EventRequiredError) as ctx:
            checkout_general(
                company_id=self.company.id,
                cart_items=[self.membership_line(), self.ticket_line()],
            )

        self.assertIn("requires an event", str(ctx.exception))
        self.assertFalse(PurchaseOrder.objects.exists())
        self.assertFalse(OrderItem.objects.exists())

    def test_unknown_membership_plan(self):
        with self.assertRaises(CheckoutNotFoundError) as ctx:
            checkout_general(
                company_id=self.company.id,
                cart_items=[self.membership_line(product_id="not-a-plan", name="Platinum")],
            )
        self.assertIn("not found", str(ctx.exception))

    def test_empty_cart(self):
        with self.assertRaises(EmptyCartError):
            checkout_general(company_id=self.company.id, cart_items=[])

    def test_unknown_company(self):
        with self.assertRaises(CheckoutNotFoundError):
            checkout_general(
                company_id="00000000-0000-0000-0000-000000000000",
                cart_items=[self.membership_line()],
            )

    def test_event_checkout_checks_but_does_not_consume_inventory(self):
        order = checkout_for_event(
            event_id=self.event.id,
            company_id=self.company.id,
            cart_items=[self.ticket_line(quantity=2)],
        )

        self.assertEqual(order.event, self.event)
        self.assertEqual(order.total_amount, Decimal("700.00"))

        self.event_ticket.refresh_from_db()
        self.assertEqual(self.event_ticket.quantity, 5)

    def test_event_checkout_sold_out(self):
        with self.assertRaises(CheckoutInventoryError) as ctx:
            checkout_for_event(
                event_id=self.event.id,
                company_id=self.company.id,
                cart_items=[self.ticket_line(quantity=6)],
            )
        self.assertIn("sold out", str(ctx.exception))
        self.assertFalse(PurchaseOrder.objects.exists())

    def test_event_checkout_hotel_needs_room_type(self):
        line = {
            "product_id": str(self.room.id),
            "product_type": "HOTEL",
            "name": "Suite",
            "quantity": 1,
            "price": "420.00",
        }
        with self.assertRaises(CheckoutInventoryError) as ctx:
            checkout_for_event(event_id=self.event.id, company_id=self.company.id, cart_items=[line])
        self.assertIn("Room Type ID is missing", str(ctx.exception))

        line["room_type_id"] = str(self.room.id)
        order = checkout_for_event(event_id=self.event.id, company_id=self.company.id, cart_items=[line])
        self.assertEqual(order.items.get().room_type_id, str(self.room.id))

    def test_event_checkout_unknown_event(self):
        with self.assertRaises(CheckoutNotFoundError):
            checkout_for_event(
                event_id="00000000-0000-0000-0000-000000000000",
                company_id=self.company.id,
                cart_items=[self.ticket_line()],
            )


class CheckoutApiTests(CheckoutFixtureMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.client = APIClient()
        access = issue_tokens_for_user(self.user, company_id=self.company.id)["access"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

    def _line_json(self, line):
        return {k: str(v) if isinstance(v, Decimal) else v for k, v in line.items()}

    def test_general_checkout_created(self):
        res = self.client.post(
            "/api/checkout/",
            {
                "company_id": str(self.company.id),
                "cart_items": [self._line_json(self.membership_line())],
                "coupon": {"code": "WELCOME100"},
            },
            format="json",
        )

        self.assertEqual(res.status_code, 201, res.content)
        self.assertEqual(res.data["status"], "PENDING")
        self.assertEqual(res.data["total_amount"], "1400.00")
        self.assertEqual(len(res.data["items"]), 1)

    def test_general_checkout_event_product_is_client_error(self):
        res = self.client.post(
            "/api/checkout/",
            {"company_id": str(self.company.id), "cart_items": [self._line_json(self.ticket_line())]},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("requires an event", res.data["detail"])

    def test_missing_fields(self):
        res = self.client.post("/api/checkout/", {"company_id": str(self.company.id), "cart_items": []}, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["detail"], "Missing required fields")

    def test_cannot_checkout_for_another_company(self):
        other = Company.objects.create(name="Other Co")
        res = self.client.post(
            "/api/checkout/",
            {"company_id": str(other.id), "cart_items": [self._line_json(self.membership_line())]},
            format="json",
        )
        self.assertEqual(res.status_code, 403)

    def test_event_checkout_sold_out_is_400(self):
        res = self.client.post(
            f"/api/events/{self.event.id}/checkout/",
            {"company_id": str(self.company.id), "cart_items": [self._line_json(self.ticket_line(quantity=9))]},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("sold out", res.data["detail"])

    def test_event_checkout_created(self):
        res = self.client.post(
            f"/api/events/{self.event.id}/checkout/",
            {"company_id": str(self.company.id), "cart_items": [self._line_json(self.ticket_line(quantity=2))]},
            format="json",
        )
        self.assertEqual(res.status_code, 201, res.content)
        self.assertEqual(res.data["event"], self.event.id)

    def test_apply_coupon(self):
        res = self.client.post(
            f"/api/events/{self.event.id}/apply-coupon/",
            {"code": "welcome100", "subtotal": "250.00"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["code"], "WELCOME100")
        self.assertEqual(res.data["discount_amount"], "100.00")
        self.assertEqual(res.data["total_amount"], "150.00")

    def test_apply_unknown_coupon(self):
        res = self.client.post(f"/api/events/{self.event.id}/apply-coupon/", {"code": "NOPE"}, format="json")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["detail"], "Invalid coupon code")

    def test_company_orders_lists_only_own_orders(self):
        checkout_general(company_id=self.company.id, cart_items=[self.membership_line()])
        other = Company.objects.create(name="Other Co")
        checkout_general(company_id=other.id, cart_items=[self.membership_line()])

        res = self.client.get("/api/company/orders/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)

    def test_overlong_line_name_is_400(self):
        line = self._line_json(self.membership_line(name="x" * 300))
        res = self.client.post(
            "/api/checkout/",
            {"company_id": str(self.company.id), "cart_items": [line]},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("cart_items", res.json())
        self.assertFalse(PurchaseOrder.objects.exists())

    def test_unexpected_failure_is_json_500(self):
        with patch("orders.views.checkout.checkout_general", side_effect=DatabaseError("connection lost")):
            with self.assertLogs("orders.views.checkout", level="ERROR"):
                res = self.client.post(
                    "/api/checkout/",
                    {"company_id": str(self.company.id), "cart_items": [self._line_json(self.membership_line())]},
                    format="json",
                )
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"detail": "Checkout failed"})

    def test_checkout_requires_token(self):
        anon = APIClient()
        res = anon.post("/api/checkout/", {}, format="json")
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json(), {"detail": "Authentication required"})
