# events/serializers.py

from rest_framework import serializers

from events.models import Event, EventBooth, EventRoomType, EventSponsorType, EventTicket


class EventTicketSerializer(serializers.ModelSerializer):
    ticket_id = serializers.UUIDField(source="ticket.id", read_only=True)
    name = serializers.CharField(source="ticket.name", read_only=True)
    price = serializers.DecimalField(source="ticket.price", max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = EventTicket
        fields = ["ticket_id", "name", "price", "quantity"]
        read_only_fields = fields


class EventSponsorTypeSerializer(serializers.ModelSerializer):
    sponsor_type_id = serializers.UUIDField(source="sponsor_type.id", read_only=True)
    name = serializers.CharField(source="sponsor_type.name", read_only=True)
    price = serializers.DecimalField(
        source="sponsor_type.price", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = EventSponsorType
        fields = ["sponsor_type_id", "name", "price", "quantity"]
        read_only_fields = fields


class EventRoomTypeSerializer(serializers.ModelSerializer):
    room_type_id = serializers.UUIDField(source="room_type.id", read_only=True)
    hotel_id = serializers.UUIDField(source="room_type.hotel_id", read_only=True)
    hotel_name = serializers.CharField(source="room_type.hotel.name", read_only=True)
    name = serializers.CharField(source="room_type.name", read_only=True)
    price = serializers.DecimalField(
        source="room_type.price", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = EventRoomType
        fields = ["room_type_id", "hotel_id", "hotel_name", "name", "price", "quantity"]
        read_only_fields = fields


class EventBoothSerializer(serializers.ModelSerializer):
    booth_id = serializers.UUIDField(source="booth.id", read_only=True)
    name = serializers.CharField(source="booth.name", read_only=True)
    price = serializers.DecimalField(source="booth.price", max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = EventBooth
        fields = ["booth_id", "name", "price", "quantity"]
        read_only_fields = fields


class EventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ["id", "name", "description", "venue", "start_date", "end_date", "is_active"]
        read_only_fields = fields


class EventDetailSerializer(EventSerializer):
    """
    Event + remaining inventory, grouped the way the storefront renders it.
    """

    tickets = EventTicketSerializer(many=True, read_only=True)
    sponsor_types = EventSponsorTypeSerializer(many=True, read_only=True)
    room_types = EventRoomTypeSerializer(many=True, read_only=True)
    booths = EventBoothSerializer(many=True, read_only=True)

    class Meta(EventSerializer.Meta):
        fields = EventSerializer.Meta.fields + ["tickets", "sponsor_types", "room_types", "booths"]
        read_only_fields = fields
