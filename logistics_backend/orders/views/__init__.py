from .admin_orders import AdminCouponViewSet, AdminMarkOrderPaidView, AdminOrderDetailView
from .checkout import ApplyCouponView, CheckoutView, EventCheckoutView
from .company_orders import CompanyOrdersView

__all__ = [
    "CheckoutView",
    "EventCheckoutView",
    "ApplyCouponView",
    "CompanyOrdersView",
    "AdminOrderDetailView",
    "AdminMarkOrderPaidView",
    "AdminCouponViewSet",
]
