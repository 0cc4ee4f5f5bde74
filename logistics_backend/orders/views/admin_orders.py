# orders/views/admin_orders.py

"""
BACK-OFFICE ORDER + COUPON ENDPOINTS (role: admin)

- GET    /api/admin/orders/<uuid>/
- DELETE /api/admin/orders/<uuid>/
- POST   /api/admin/orders/<uuid>/mark-paid/
- CRUD   /api/admin/coupons/
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.models import Coupon, PurchaseOrder
from orders.serializers import CouponSerializer, MarkPaidCommandSerializer, PurchaseOrderSerializer
from orders.services.finalization import finalize_order
from users.permissions import IsAdmin

logger = logging.getLogger(__name__)


class AdminOrderDetailView(APIView):
    permission_classes = [IsAdmin]

    def _get_order(self, order_id):
        return get_object_or_404(
            PurchaseOrder.objects.select_related("company", "event", "coupon").prefetch_related("items"),
            id=order_id,
        )

    @extend_schema(responses={200: PurchaseOrderSerializer}, tags=["Admin"])
    def get(self, request, order_id):
        return Response(PurchaseOrderSerializer(self._get_order(order_id)).data)

    @extend_schema(responses={204: None}, tags=["Admin"])
    def delete(self, request, order_id):
        order = self._get_order(order_id)
        logger.info(
            "Order deleted by admin",
            extra={"order_id": str(order.id), "order_no": order.order_no, "admin": request.user.email},
        )
        order.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminMarkOrderPaidView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(
        request=MarkPaidCommandSerializer,
        responses={
            200: PurchaseOrderSerializer,
            404: OpenApiResponse(description="Order not found"),
            500: OpenApiResponse(description="Failed to update order"),
        },
        description="Mark an order as paid: completes it, consumes inventory, activates memberships.",
        tags=["Admin"],
    )
    def post(self, request, order_id):
        s = MarkPaidCommandSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            order = finalize_order(order_id=order_id, offline_payment=s.validated_data["offline_payment"])
        except PurchaseOrder.DoesNotExist:
            return Response({"detail": "Order not found"}, status=status.HTTP_404_NOT_FOUND)
        except DatabaseError:
            logger.exception("Failed to finalize order", extra={"order_id": str(order_id)})
            return Response({"detail": "Failed to update order"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        order = PurchaseOrder.objects.select_related("company", "event", "coupon").prefetch_related("items").get(
            id=order.id
        )
        return Response(PurchaseOrderSerializer(order).data)


class AdminCouponViewSet(viewsets.ModelViewSet):
    permission_classes = [IsAdmin]
    serializer_class = CouponSerializer
    queryset = Coupon.objects.all()
    filterset_fields = ["discount_type"]
