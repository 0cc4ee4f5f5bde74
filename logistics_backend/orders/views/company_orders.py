# orders/views/company_orders.py

from drf_spectacular.utils import extend_schema
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated

from orders.models import PurchaseOrder
from orders.serializers import PurchaseOrderSerializer


class CompanyOrdersView(generics.ListAPIView):
    """
    Order history of the caller's company (newest first).
    """

    permission_classes = [IsAuthenticated]
    serializer_class = PurchaseOrderSerializer
    filterset_fields = ["status", "event"]

    def get_queryset(self):
        return (
            PurchaseOrder.objects
            .filter(company__user=self.request.user)
            .select_related("company", "event", "coupon")
            .prefetch_related("items")
        )

    @extend_schema(tags=["Orders"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)
