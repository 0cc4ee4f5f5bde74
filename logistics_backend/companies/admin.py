# companies/admin.py

from django.contrib import admin

from companies.models import Company, MembershipPlan


@admin.register(MembershipPlan)
class MembershipPlanAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "is_active", "sort_order")
    list_filter = ("is_active",)
    search_fields = ("name",)
    ordering = ("sort_order", "price")


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "member_id",
        "member_type",
        "purchased_membership",
        "membership_expires_at",
        "is_active",
    )
    list_filter = ("member_type", "is_active", "country")
    search_fields = ("name", "member_id", "email", "user__email")
    raw_id_fields = ("user",)

    # Membership state changes only through order finalization.
    readonly_fields = (
        "member_id",
        "membership_plan",
        "purchased_membership",
        "purchased_at",
        "membership_expires_at",
        "created_at",
        "updated_at",
    )
