"""
Domain types for the watch-list monitor.

Provider slots stay as the raw dicts Resy returns; the filter and ranker wrap
them in SlotCandidate records instead of annotating the dicts in place.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Union

from tablewatch.services.resy.types import ResySlot


@dataclass
class WatchedVenue:
    """One watch-list entry for the duration of a cycle. reservation_details is set at most once."""

    id: int
    venue_id: int
    name: str
    party_size: int
    interval_days: int
    min_time: str
    max_time: str
    cron: str
    preferred_time: str | None = None
    reservation_details: dict[str, Any] | None = None

    @property
    def is_booked(self) -> bool:
        return self.reservation_details is not None


@dataclass(frozen=True)
class SlotCandidate:
    slot: ResySlot
    start: datetime
    diff: timedelta | None = None  # distance from preferred time; None when not ranked

    @property
    def start_str(self) -> str:
        return (self.slot.get("date") or {}).get("start") or ""

    @property
    def config_token(self) -> str:
        return (self.slot.get("config") or {}).get("token") or ""

    @property
    def shift_day(self) -> str:
        return (self.slot.get("shift") or {}).get("day") or ""


@dataclass(frozen=True)
class Booked:
    slot: SlotCandidate
    details: dict[str, Any]
    attempts: int


@dataclass(frozen=True)
class Exhausted:
    attempts: int


BookingOutcome = Union[Booked, Exhausted]


class RefreshStatus(str, Enum):
    ALREADY_BOOKED = "already_booked"
    NO_SLOTS = "no_slots"
    NO_MATCHING_SLOTS = "no_matching_slots"
    BOOKED = "booked"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class VenueRefreshResult:
    watch_id: int
    venue_name: str
    status: RefreshStatus
    date_checked: str | None = None
    slots_found: int = 0
    candidates: int = 0
    outcome: BookingOutcome | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "watch_id": self.watch_id,
            "venue_name": self.venue_name,
            "status": self.status.value,
            "date_checked": self.date_checked,
            "slots_found": self.slots_found,
            "candidates": self.candidates,
        }
        if self.outcome is not None:
            out["attempts"] = self.outcome.attempts
        if isinstance(self.outcome, Booked):
            out["booked_slot"] = self.outcome.slot.start_str
        if self.error:
            out["error"] = self.error
        return out


@dataclass
class CycleReport:
    started_at: datetime
    finished_at: datetime | None = None
    results: list[VenueRefreshResult] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return dict(Counter(r.status.value for r in self.results))

    @property
    def booked(self) -> list[VenueRefreshResult]:
        return [r for r in self.results if r.status == RefreshStatus.BOOKED]

    @property
    def failed(self) -> list[VenueRefreshResult]:
        return [r for r in self.results if r.status == RefreshStatus.FAILED]
