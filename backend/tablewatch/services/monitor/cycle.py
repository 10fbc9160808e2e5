"""
Watch-list cycle: load every watched venue, refresh them one after another,
save once at the end.

Cycles and single-venue refreshes share one lock so two load/save sequences
never interleave. A cycle that fires while another cycle is still running is
skipped with a warning. Single-venue refreshes wait their turn instead, so no
venue's trigger is ever dropped.
"""
import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Callable

from tablewatch.services.monitor.context import MonitorContext
from tablewatch.services.monitor.refresh import refresh_venue
from tablewatch.services.monitor.types import CycleReport, VenueRefreshResult

logger = logging.getLogger(__name__)


class CycleRunner:
    def __init__(self, ctx: MonitorContext, *, today: Callable[[], date] = date.today) -> None:
        self.ctx = ctx
        self._today = today
        self._lock = asyncio.Lock()
        self._cycle_running = False

    @property
    def running(self) -> bool:
        return self._cycle_running or self._lock.locked()

    async def run(self) -> CycleReport | None:
        """One pass over the whole watch-list. Returns None if another cycle is in progress."""
        if self._cycle_running:
            logger.warning("Watch-list cycle already in progress; skipping this trigger")
            return None
        self._cycle_running = True
        try:
            async with self._lock:
                logger.info("Finding reservations")
                report = CycleReport(started_at=datetime.now(timezone.utc))
                venues = await asyncio.to_thread(self.ctx.store.load_watched_venues)
                for venue in venues:
                    report.results.append(await refresh_venue(venue, self.ctx, today=self._today()))
                await asyncio.to_thread(self.ctx.store.save, venues)
                report.finished_at = datetime.now(timezone.utc)
                logger.info("Finished finding reservations: %s", report.counts() or "no venues")
                return report
        finally:
            self._cycle_running = False

    async def refresh_one(self, watch_id: int) -> VenueRefreshResult | None:
        """
        Refresh a single watched venue (its own cron trigger) and save it.
        Waits for any running cycle or refresh first. None if the watch no longer exists.
        """
        async with self._lock:
            venues = await asyncio.to_thread(self.ctx.store.load_watched_venues)
            venue = next((v for v in venues if v.id == watch_id), None)
            if venue is None:
                logger.warning("Watch %s not found; nothing to refresh", watch_id)
                return None
            result = await refresh_venue(venue, self.ctx, today=self._today())
            await asyncio.to_thread(self.ctx.store.save, [venue])
            return result
