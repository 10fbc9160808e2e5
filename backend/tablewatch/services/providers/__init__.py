"""
Reservation providers. Each provider talks to its platform in its own way but
exposes the same ReservationProvider contract to the monitor.
"""
from tablewatch.services.providers.base import ReservationProvider
from tablewatch.services.providers.resy_provider import ResyProvider
from tablewatch.services.providers.types import SlotDetail

__all__ = [
    "ReservationProvider",
    "ResyProvider",
    "SlotDetail",
]
