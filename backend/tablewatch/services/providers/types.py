"""Normalized types returned by reservation providers."""
from typing import Any


class SlotDetail:
    """Result of a slot-details call: the one-time token that commits a booking."""

    __slots__ = ("book_token", "payload")

    def __init__(self, *, book_token: str, payload: dict[str, Any] | None = None):
        self.book_token = book_token
        self.payload = payload or {}

    def __repr__(self) -> str:
        return f"SlotDetail(book_token={self.book_token[:12]!r}...)"
