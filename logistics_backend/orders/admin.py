# orders/admin.py

from django.contrib import admin, messages

from orders.models import Coupon, OrderItem, PurchaseOrder
from orders.services.finalization import finalize_order


# ======================================================
# ORDER ADMIN
# ======================================================


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    can_delete = False
    readonly_fields = (
        "product_type",
        "product_id",
        "name",
        "quantity",
        "price",
        "total_price",
        "room_type_id",
        "booth_sub_type_id",
    )

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(admin.ModelAdmin):
    list_display = (
        "order_no",
        "company",
        "event",
        "status",
        "total_amount",
        "offline_payment",
        "created_at",
    )
    readonly_fields = (
        "order_no",
        "subtotal_amount",
        "discount_amount",
        "total_amount",
        "status",
        "created_at",
        "completed_at",
    )
    search_fields = ("order_no", "company__name", "company__member_id")
    list_filter = ("status", "offline_payment", "created_at")
    inlines = [OrderItemInline]
    actions = ["mark_as_paid"]

    @admin.action(description="Mark selected orders as paid")
    def mark_as_paid(self, request, queryset):
        done = 0
        for order_id in queryset.values_list("id", flat=True):
            finalize_order(order_id=order_id, offline_payment=True)
            done += 1
        self.message_user(request, f"{done} order(s) marked as paid.", messages.SUCCESS)


# ======================================================
# COUPON ADMIN
# ======================================================


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = ("code", "discount_type", "discount_value", "created_at")
    search_fields = ("code",)
    list_filter = ("discount_type",)
