"""
Error types shared by the provider, monitor and scheduler layers.

Per-slot and per-venue failures are ProviderError (recoverable: try the next
slot, or give up on this venue for this cycle). AuthenticationError comes only
from the re-login path and is treated as fatal by the scheduler.
"""
from __future__ import annotations


class TablewatchError(Exception):
    """Base class for errors raised by this package."""


class ProviderError(TablewatchError):
    """A reservation provider call failed or returned an unusable response."""

    def __init__(self, message: str, *, status_code: int | None = None, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)

    @classmethod
    def from_response(cls, raw: dict, action: str) -> "ProviderError":
        """Build from the client's {"error": ..., "status_code": ..., "detail": ...} dict."""
        msg = f"{action} failed: {raw.get('error')}"
        return cls(msg, status_code=raw.get("status_code"), detail=raw.get("detail"))


class AuthenticationError(ProviderError):
    """Logging in to the provider failed; the session can no longer be trusted."""
