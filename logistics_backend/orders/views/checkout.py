# orders/views/checkout.py

"""
CHECKOUT ENDPOINTS

- POST /api/checkout/                         general checkout (memberships, products)
- POST /api/events/<uuid>/checkout/           event checkout (tickets, sponsors, hotels, booths)
- POST /api/events/<uuid>/apply-coupon/       coupon lookup + optional price preview

Error contract:
- Missing company_id / empty cart -> 400 {"detail": "Missing required fields"}
- Checkout failures -> 400 when the message is a known client error, else 500
- Any other failure -> 500 {"detail": "Checkout failed"}
- Members may only check out for their own company (admins for any) -> 403

Security hardening:
- Throttle (checkout) because it's a write endpoint (abuse target)
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import UserRateThrottle
from rest_framework.views import APIView

from companies.models import Company
from events.models import Event
from orders.models import Coupon
from orders.serializers import (
    ApplyCouponSerializer,
    CheckoutInputSerializer,
    CouponPublicSerializer,
    PurchaseOrderSerializer,
)
from orders.services.checkout import checkout_for_event, checkout_general, is_client_error
from orders.services.exceptions import CheckoutError
from orders.services.pricing import compute_discount, compute_total

logger = logging.getLogger(__name__)


class CheckoutThrottle(UserRateThrottle):
    scope = "checkout"


def _may_use_company(user, company_id) -> bool:
    if getattr(user, "is_admin", False):
        return True
    return Company.objects.filter(id=company_id, user=user).exists()


class _BaseCheckoutView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser]
    throttle_classes = [CheckoutThrottle]

    def run_checkout(self, *, company_id, cart_items, coupon, **kwargs):
        raise NotImplementedError

    def handle_checkout(self, request, **kwargs):
        s = CheckoutInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        company_id = data.get("company_id")
        cart_items = data.get("cart_items") or []
        if not company_id or not cart_items:
            return Response({"detail": "Missing required fields"}, status=status.HTTP_400_BAD_REQUEST)

        if not _may_use_company(request.user, company_id):
            return Response(
                {"detail": "You can only check out for your own company."},
                status=status.HTTP_403_FORBIDDEN,
            )

        try:
            order = self.run_checkout(
                company_id=company_id,
                cart_items=cart_items,
                coupon=data.get("coupon"),
                **kwargs,
            )
        except CheckoutError as exc:
            message = str(exc)
            code = status.HTTP_400_BAD_REQUEST if is_client_error(message) else status.HTTP_500_INTERNAL_SERVER_ERROR
            logger.warning(
                "Checkout rejected",
                extra={"company_id": str(company_id), "reason": message, "status": code},
            )
            return Response({"detail": message}, status=code)
        except Exception:
            logger.exception("Checkout failed", extra={"company_id": str(company_id)})
            return Response({"detail": "Checkout failed"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(PurchaseOrderSerializer(order).data, status=status.HTTP_201_CREATED)


class CheckoutView(_BaseCheckoutView):
    @extend_schema(
        request=CheckoutInputSerializer,
        responses={
            201: PurchaseOrderSerializer,
            400: OpenApiResponse(description="Validation error / client checkout error"),
            403: OpenApiResponse(description="Not the caller's company"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="General checkout. Creates a PENDING order with server-computed totals.",
        tags=["Checkout"],
    )
    def post(self, request):
        return self.handle_checkout(request)

    def run_checkout(self, *, company_id, cart_items, coupon, **kwargs):
        return checkout_general(company_id=company_id, cart_items=cart_items, coupon=coupon)


class EventCheckoutView(_BaseCheckoutView):
    @extend_schema(
        request=CheckoutInputSerializer,
        responses={
            201: PurchaseOrderSerializer,
            400: OpenApiResponse(description="Validation error / sold out"),
            403: OpenApiResponse(description="Not the caller's company"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Event checkout. Inventory is checked here and consumed when the order is paid.",
        tags=["Checkout"],
    )
    def post(self, request, event_id):
        return self.handle_checkout(request, event_id=event_id)

    def run_checkout(self, *, company_id, cart_items, coupon, event_id=None, **kwargs):
        return checkout_for_event(
            event_id=event_id,
            company_id=company_id,
            cart_items=cart_items,
            coupon=coupon,
        )


class ApplyCouponView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser]

    @extend_schema(
        request=ApplyCouponSerializer,
        responses={
            200: CouponPublicSerializer,
            404: OpenApiResponse(description="Unknown event or coupon code"),
        },
        tags=["Checkout"],
    )
    def post(self, request, event_id):
        s = ApplyCouponSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        if not Event.objects.filter(id=event_id).exists():
            return Response({"detail": "Event not found"}, status=status.HTTP_404_NOT_FOUND)

        coupon = Coupon.objects.filter(code__iexact=s.validated_data["code"].strip()).first()
        if coupon is None:
            return Response({"detail": "Invalid coupon code"}, status=status.HTTP_404_NOT_FOUND)

        payload = dict(CouponPublicSerializer(coupon).data)

        subtotal = s.validated_data.get("subtotal")
        if subtotal is not None:
            discount = compute_discount(coupon=coupon, subtotal=subtotal)
            payload["discount_amount"] = str(discount)
            payload["total_amount"] = str(compute_total(subtotal=subtotal, discount=discount))

        return Response(payload)
