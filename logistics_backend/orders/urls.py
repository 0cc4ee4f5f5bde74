# orders/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from orders.views import (
    AdminCouponViewSet,
    AdminMarkOrderPaidView,
    AdminOrderDetailView,
    ApplyCouponView,
    CheckoutView,
    CompanyOrdersView,
    EventCheckoutView,
)

app_name = "orders"

router = SimpleRouter()
router.register(r"admin/coupons", AdminCouponViewSet, basename="admin-coupons")

urlpatterns = [
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("events/<uuid:event_id>/checkout/", EventCheckoutView.as_view(), name="event-checkout"),
    path("events/<uuid:event_id>/apply-coupon/", ApplyCouponView.as_view(), name="apply-coupon"),
    path("company/orders/", CompanyOrdersView.as_view(), name="company-orders"),
    path("admin/orders/<uuid:order_id>/", AdminOrderDetailView.as_view(), name="admin-order-detail"),
    path("admin/orders/<uuid:order_id>/mark-paid/", AdminMarkOrderPaidView.as_view(), name="admin-order-mark-paid"),
    path("", include(router.urls)),
]
