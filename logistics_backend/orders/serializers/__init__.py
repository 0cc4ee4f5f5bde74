from .checkout import (
    ApplyCouponSerializer,
    CartItemSerializer,
    CheckoutInputSerializer,
    CouponRefSerializer,
    MarkPaidCommandSerializer,
)
from .coupon import CouponPublicSerializer, CouponSerializer
from .order import OrderItemSerializer, PurchaseOrderSerializer

__all__ = [
    "ApplyCouponSerializer",
    "CartItemSerializer",
    "CheckoutInputSerializer",
    "CouponRefSerializer",
    "MarkPaidCommandSerializer",
    "CouponSerializer",
    "CouponPublicSerializer",
    "OrderItemSerializer",
    "PurchaseOrderSerializer",
]
