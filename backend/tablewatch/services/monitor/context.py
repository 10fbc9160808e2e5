"""Collaborators the monitor runs against, constructed once and passed in."""
from dataclasses import dataclass
from typing import Protocol

from tablewatch.services.monitor.types import WatchedVenue
from tablewatch.services.notify.base import TextNotifier
from tablewatch.services.providers.base import ReservationProvider


class WatchListStore(Protocol):
    def load_watched_venues(self) -> list[WatchedVenue]:
        ...

    def save(self, venues: list[WatchedVenue]) -> None:
        ...


@dataclass
class MonitorContext:
    provider: ReservationProvider
    notifier: TextNotifier
    store: WatchListStore
