import re
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from companies.models import Company
from orders.models import OrderItem, PurchaseOrder


class PurchaseOrderModelTests(TestCase):
    """
    GUARANTEES:
    - PENDING -> COMPLETED is the only transition
    - COMPLETED is terminal
    - Order lines are immutable
    """

    def setUp(self):
        self.company = Company.objects.create(name="Acme Freight")
        self.order = PurchaseOrder.objects.create(company=self.company)

    def test_pending_can_complete(self):
        self.assertTrue(self.order.can_transition_to(PurchaseOrder.STATUS_COMPLETED))
        self.assertFalse(self.order.can_transition_to(PurchaseOrder.STATUS_PENDING))

    def test_completed_is_terminal(self):
        self.order.status = PurchaseOrder.STATUS_COMPLETED
        self.assertFalse(self.order.can_transition_to(PurchaseOrder.STATUS_COMPLETED))
        self.assertFalse(self.order.can_transition_to(PurchaseOrder.STATUS_PENDING))

    def test_order_number_format(self):
        self.assertRegex(self.order.order_no, re.compile(r"^PO\d{8}-[0-9A-F]{8}$"))

    def test_completed_at_is_stamped(self):
        self.assertIsNone(self.order.completed_at)
        self.order.status = PurchaseOrder.STATUS_COMPLETED
        self.order.save()
        self.assertIsNotNone(self.order.completed_at)

    def test_order_item_total_and_immutability(self):
        item = OrderItem.objects.create(
            order=self.order,
            product_type=OrderItem.TYPE_PRODUCT,
            name="Directory Ad",
            quantity=3,
            price=Decimal("12.50"),
        )
        self.assertEqual(item.total_price, Decimal("37.50"))

        item.quantity = 10
        with self.assertRaises(ValidationError):
            item.save()

    def test_order_item_rejects_zero_quantity(self):
        with self.assertRaises(ValidationError):
            OrderItem.objects.create(
                order=self.order,
                name="Nothing",
                quantity=0,
                price=Decimal("1.00"),
            )
