# companies/views.py

"""
COMPANY + MEMBERSHIP PLAN ENDPOINTS

- GET   /api/membership-plans/   (public)
- GET   /api/company/            (own company profile)
- PATCH /api/company/            (own company profile; membership fields read-only)
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from companies.models import Company, MembershipPlan
from companies.serializers import CompanySerializer, MembershipPlanSerializer


class MembershipPlanListView(generics.ListAPIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = MembershipPlanSerializer
    pagination_class = None

    def get_queryset(self):
        return MembershipPlan.objects.filter(is_active=True)


class MyCompanyView(generics.RetrieveUpdateAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CompanySerializer
    http_method_names = ["get", "patch", "options", "head"]

    def get_object(self):
        return Company.objects.select_related("membership_plan").filter(user=self.request.user).first()

    @extend_schema(
        responses={200: CompanySerializer, 404: OpenApiResponse(description="No company linked")},
        tags=["Companies"],
    )
    def get(self, request, *args, **kwargs):
        company = self.get_object()
        if company is None:
            return Response({"detail": "No company linked to this account."}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(company).data)

    @extend_schema(request=CompanySerializer, responses={200: CompanySerializer}, tags=["Companies"])
    def patch(self, request, *args, **kwargs):
        company = self.get_object()
        if company is None:
            return Response({"detail": "No company linked to this account."}, status=status.HTTP_404_NOT_FOUND)
        serializer = self.get_serializer(company, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
