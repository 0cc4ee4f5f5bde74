# events/models/__init__.py

"""
EVENTS MODELS PACKAGE EXPORTS
"""

from .catalog import Booth, Hotel, RoomType, SponsorType, Ticket
from .event import Event
from .inventory import EventBooth, EventRoomType, EventSponsorType, EventTicket

__all__ = [
    "Event",
    "Ticket",
    "SponsorType",
    "Hotel",
    "RoomType",
    "Booth",
    "EventTicket",
    "EventSponsorType",
    "EventRoomType",
    "EventBooth",
]
