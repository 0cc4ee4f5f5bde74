# companies/serializers.py

from rest_framework import serializers

from companies.models import Company, MembershipPlan


class MembershipPlanSerializer(serializers.ModelSerializer):
    is_lifetime = serializers.BooleanField(read_only=True)

    class Meta:
        model = MembershipPlan
        fields = [
            "id",
            "name",
            "description",
            "price",
            "features",
            "is_lifetime",
            "sort_order",
        ]
        read_only_fields = fields


class CompanySerializer(serializers.ModelSerializer):
    """
    Member-facing company profile (membership fields are read-only;
    they only change through order finalization).
    """

    has_active_membership = serializers.BooleanField(read_only=True)
    membership_plan_name = serializers.CharField(
        source="membership_plan.name", read_only=True, default=None
    )

    class Meta:
        model = Company
        fields = [
            "id",
            "name",
            "sector",
            "city",
            "country",
            "email",
            "member_id",
            "member_type",
            "member_since",
            "membership_plan",
            "membership_plan_name",
            "purchased_membership",
            "purchased_at",
            "membership_expires_at",
            "has_active_membership",
            "created_at",
        ]
        read_only_fields = [
            "id",
            "member_id",
            "member_type",
            "member_since",
            "membership_plan",
            "membership_plan_name",
            "purchased_membership",
            "purchased_at",
            "membership_expires_at",
            "has_active_membership",
            "created_at",
        ]
