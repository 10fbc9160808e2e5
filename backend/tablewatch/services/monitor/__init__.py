"""
Watch-list monitor: slot filter -> ranker -> booking attempt loop, driven per
venue by refresh_venue and across the whole list by CycleRunner.
"""
from tablewatch.services.monitor.booking import attempt_booking, resolve_day
from tablewatch.services.monitor.context import MonitorContext, WatchListStore
from tablewatch.services.monitor.cycle import CycleRunner
from tablewatch.services.monitor.filters import filter_slots
from tablewatch.services.monitor.ranking import rank_slots
from tablewatch.services.monitor.refresh import refresh_venue
from tablewatch.services.monitor.types import (
    Booked,
    BookingOutcome,
    CycleReport,
    Exhausted,
    RefreshStatus,
    SlotCandidate,
    VenueRefreshResult,
    WatchedVenue,
)

__all__ = [
    "Booked",
    "BookingOutcome",
    "CycleReport",
    "CycleRunner",
    "Exhausted",
    "MonitorContext",
    "RefreshStatus",
    "SlotCandidate",
    "VenueRefreshResult",
    "WatchListStore",
    "WatchedVenue",
    "attempt_booking",
    "filter_slots",
    "rank_slots",
    "refresh_venue",
    "resolve_day",
]
