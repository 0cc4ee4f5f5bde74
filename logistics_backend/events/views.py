# events/views.py

"""
EVENT ENDPOINTS (READ-ONLY)

- GET /api/events/          active events
- GET /api/events/<uuid>/   event + remaining inventory
"""

from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from events.models import Event
from events.serializers import EventDetailSerializer, EventSerializer


class EventViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [IsAuthenticated]
    filterset_fields = ["is_active"]

    def get_queryset(self):
        qs = Event.objects.all()
        if self.action == "list":
            return qs.filter(is_active=True)
        return qs.prefetch_related(
            "tickets__ticket",
            "sponsor_types__sponsor_type",
            "room_types__room_type__hotel",
            "booths__booth",
        )

    def get_serializer_class(self):
        if self.action == "retrieve":
            return EventDetailSerializer
        return EventSerializer
