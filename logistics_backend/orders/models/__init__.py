# orders/models/__init__.py

"""
ORDERS MODELS PACKAGE EXPORTS
"""

from .coupon import Coupon
from .order_item import OrderItem
from .purchase_order import PurchaseOrder

__all__ = [
    "Coupon",
    "PurchaseOrder",
    "OrderItem",
]
