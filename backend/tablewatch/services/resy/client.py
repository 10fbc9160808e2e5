"""Resy API client: lowest level, sends request only. No validation."""
import json
from typing import Any

import httpx

from tablewatch.services.resy.config import ResyConfig


class ResyClient:
    """Resy find, details, book, user and login client (async)."""

    def __init__(self, config: ResyConfig | None = None, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config or ResyConfig()
        self._transport = transport

    @property
    def config(self) -> ResyConfig:
        return self._config

    def _credentials_error(self) -> dict[str, Any]:
        return {"error": "Resy credentials not configured. Add RESY_API_KEY and RESY_AUTH_TOKEN to .env."}

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport)

    @staticmethod
    def _parse(r: httpx.Response) -> dict[str, Any]:
        if not r.is_success:
            return {
                "error": f"Resy API error: {r.status_code}",
                "status_code": r.status_code,
                "detail": (r.text[:500] if r.text else None),
            }
        try:
            return r.json() if r.content else {}
        except ValueError:
            return {"_raw_body": (r.text[:2000] if r.text else "")}

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        if not self._config.is_configured():
            return self._credentials_error()
        url = f"{self._config.base_url}{path}"
        try:
            async with self._http() as c:
                r = await c.get(url, params=params, headers=self._config.headers())
        except httpx.HTTPError as e:
            return {"error": str(e) or type(e).__name__}
        return self._parse(r)

    async def _post_form(self, path: str, data: dict[str, str], *, require_auth: bool = True) -> dict[str, Any]:
        """POST with application/x-www-form-urlencoded body (e.g. for /3/book)."""
        if require_auth and not self._config.is_configured():
            return self._credentials_error()
        url = f"{self._config.base_url}{path}"
        try:
            async with self._http() as c:
                r = await c.post(url, data=data, headers=self._config.headers())
        except httpx.HTTPError as e:
            return {"error": str(e) or type(e).__name__}
        return self._parse(r)

    async def find(self, venue_id: int, day: str, party_size: int) -> dict[str, Any]:
        """Open slots for one venue on one day."""
        params = {
            "lat": "0",
            "long": "0",
            "day": day,
            "party_size": str(party_size),
            "venue_id": str(venue_id),
        }
        return await self._get("/4/find", params)

    async def details(self, config_id: str, day: str, party_size: int, *, commit: int = 1) -> dict[str, Any]:
        """Slot details; with commit=1 the response carries the book_token."""
        params = {
            "commit": str(commit),
            "config_id": config_id,
            "day": day,
            "party_size": str(party_size),
        }
        return await self._get("/3/details", params)

    async def book(
        self,
        book_token: str,
        payment_method_id: int,
        *,
        source_id: str = "resy.com-venue-details",
    ) -> dict[str, Any]:
        """Book a reservation. book_token must come from details()."""
        data: dict[str, str] = {
            "book_token": book_token,
            "struct_payment_method": json.dumps({"id": payment_method_id}, separators=(",", ":")),
            "source_id": source_id,
        }
        return await self._post_form("/3/book", data)

    async def get_user(self) -> dict[str, Any]:
        """Logged-in user, including payment_methods."""
        return await self._get("/2/user", {})

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Exchange email/password for a fresh auth token (response["token"])."""
        if not self._config.api_key:
            return {"error": "Resy API key not configured. Add RESY_API_KEY to .env."}
        return await self._post_form(
            "/3/auth/password",
            {"email": email, "password": password},
            require_auth=False,
        )
