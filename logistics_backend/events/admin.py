# events/admin.py

"""
EVENTS ADMIN

Inventory counters are edited inline on the event page (initial stock,
manual corrections). Sales decrement them through order finalization.
"""

from django.contrib import admin

from events.models import (
    Booth,
    Event,
    EventBooth,
    EventRoomType,
    EventSponsorType,
    EventTicket,
    Hotel,
    RoomType,
    SponsorType,
    Ticket,
)


class EventTicketInline(admin.TabularInline):
    model = EventTicket
    extra = 0


class EventSponsorTypeInline(admin.TabularInline):
    model = EventSponsorType
    extra = 0


class EventRoomTypeInline(admin.TabularInline):
    model = EventRoomType
    extra = 0


class EventBoothInline(admin.TabularInline):
    model = EventBooth
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("name", "venue", "start_date", "end_date", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name", "venue")
    inlines = [EventTicketInline, EventSponsorTypeInline, EventRoomTypeInline, EventBoothInline]


class RoomTypeInline(admin.TabularInline):
    model = RoomType
    extra = 0


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "address")
    search_fields = ("name",)
    inlines = [RoomTypeInline]


@admin.register(Ticket, SponsorType, Booth)
class CatalogItemAdmin(admin.ModelAdmin):
    list_display = ("name", "price")
    search_fields = ("name",)
