"""
Typed definitions for Resy API responses.

GET /4/find returns results.venues[0].slots; each slot carries the config token
needed for GET /3/details, which in turn returns the book_token for POST /3/book.
"""

from typing import Any, TypedDict


class ResySlotDate(TypedDict, total=False):
    """Slot date range from slots[].date."""
    start: str  # e.g. "2026-02-18 20:30:00"
    end: str


class ResySlotConfig(TypedDict, total=False):
    """Slot config from slots[].config (used for the details request)."""
    id: int
    token: str  # e.g. "rgs://resy/40703/1571962/2/2026-02-18/..."
    type: str  # e.g. "The Bar Room"


class ResySlotShift(TypedDict, total=False):
    """Shift the slot belongs to; day is the service day (YYYY-MM-DD)."""
    day: str
    service: dict[str, Any]


class ResySlot(TypedDict, total=False):
    """One availability slot from /4/find results.venues[].slots[]."""
    date: ResySlotDate
    config: ResySlotConfig
    shift: ResySlotShift
    size: dict[str, Any]
    payment: dict[str, Any]


class ResyPaymentMethod(TypedDict, total=False):
    id: int
    is_default: bool
    display: str


class ResyUser(TypedDict, total=False):
    """Subset of GET /2/user we rely on."""
    id: int
    em_address: str
    payment_methods: list[ResyPaymentMethod]


class ResyBooking(TypedDict, total=False):
    """POST /3/book response."""
    resy_token: str
    reservation_id: int
