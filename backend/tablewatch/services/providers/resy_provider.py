"""Resy reservation provider. Wraps ResyClient and turns error dicts into ProviderError."""
import logging
from typing import Any

from tablewatch.core.errors import AuthenticationError, ProviderError
from tablewatch.services.providers.types import SlotDetail
from tablewatch.services.resy.client import ResyClient
from tablewatch.services.resy.types import ResySlot

logger = logging.getLogger(__name__)


class ResyProvider:
    provider_id = "resy"

    def __init__(self, client: ResyClient, *, email: str = "", password: str = "") -> None:
        self._client = client
        self._email = (email or "").strip()
        self._password = password or ""

    @property
    def has_credentials(self) -> bool:
        return bool(self._email and self._password)

    async def list_available_slots(self, venue_id: int, day: str, party_size: int) -> list[ResySlot]:
        raw = await self._client.find(venue_id, day, party_size)
        if raw.get("error"):
            raise ProviderError.from_response(raw, "Find slots")
        venues = (raw.get("results") or {}).get("venues") or []
        if not venues:
            return []
        slots = venues[0].get("slots") or []
        return [s for s in slots if isinstance(s, dict)]

    async def fetch_slot_detail(self, config_id: str, party_size: int, day: str) -> SlotDetail:
        raw = await self._client.details(config_id, day, party_size, commit=1)
        if raw.get("error"):
            raise ProviderError.from_response(raw, "Slot details")
        book_token = (raw.get("book_token") or {}).get("value")
        if not book_token:
            raise ProviderError(f"Slot details missing book_token for {config_id}")
        return SlotDetail(book_token=book_token, payload=raw)

    async def submit_booking(self, book_token: str, payment_method_id: int, source_id: str) -> dict[str, Any]:
        raw = await self._client.book(book_token, payment_method_id, source_id=source_id)
        if raw.get("error"):
            raise ProviderError.from_response(raw, "Booking")
        if not raw.get("resy_token") and not raw.get("reservation_id"):
            raise ProviderError(f"Booking response missing resy_token: {raw}")
        return raw

    async def fetch_user_details(self) -> dict[str, Any]:
        raw = await self._client.get_user()
        if raw.get("error"):
            raise ProviderError.from_response(raw, "Get user")
        return raw

    async def login(self) -> None:
        """Log in with email/password and swap the new token into the client config."""
        if not self.has_credentials:
            raise AuthenticationError("Resy email or password not configured")
        raw = await self._client.login(self._email, self._password)
        if raw.get("error"):
            raise AuthenticationError(
                f"Resy login failed: {raw.get('error')}",
                status_code=raw.get("status_code"),
                detail=raw.get("detail"),
            )
        token = (raw.get("token") or "").strip()
        if not token:
            raise AuthenticationError("Resy login response missing token")
        self._client.config.auth_token = token
        logger.info("Refreshed Resy auth token for %s", self._email)
