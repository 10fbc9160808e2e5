"""Protocol for reservation providers. The monitor only talks to this interface."""
from typing import Any, Protocol

from tablewatch.services.providers.types import SlotDetail
from tablewatch.services.resy.types import ResySlot


class ReservationProvider(Protocol):
    """
    Session against a booking platform. Assumed authenticated when the monitor
    calls it; every method raises ProviderError on failure.
    """

    async def list_available_slots(self, venue_id: int, day: str, party_size: int) -> list[ResySlot]:
        """Open slots for venue_id on day (YYYY-MM-DD), in provider order."""
        ...

    async def fetch_slot_detail(self, config_id: str, party_size: int, day: str) -> SlotDetail:
        ...

    async def submit_booking(self, book_token: str, payment_method_id: int, source_id: str) -> dict[str, Any]:
        """Commit the reservation; returns the provider's booking payload."""
        ...

    async def fetch_user_details(self) -> dict[str, Any]:
        """Logged-in user; must include payment_methods."""
        ...

    async def login(self) -> None:
        """Refresh the session. Raises AuthenticationError."""
        ...
