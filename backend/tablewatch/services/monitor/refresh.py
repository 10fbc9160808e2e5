"""Per-venue refresh: list slots, filter, rank, try to book. Never raises."""
import logging
from datetime import date

from tablewatch.services.monitor.booking import attempt_booking
from tablewatch.services.monitor.context import MonitorContext
from tablewatch.services.monitor.filters import filter_slots
from tablewatch.services.monitor.ranking import rank_slots
from tablewatch.services.monitor.timeutil import date_to_check
from tablewatch.services.monitor.types import Booked, RefreshStatus, VenueRefreshResult, WatchedVenue

logger = logging.getLogger(__name__)


async def refresh_venue(venue: WatchedVenue, ctx: MonitorContext, *, today: date | None = None) -> VenueRefreshResult:
    """
    Check one venue for today + (interval_days - 1) and book the best slot in its window.
    Any exception is logged and reported as FAILED so the rest of the cycle keeps going.
    """
    result = VenueRefreshResult(watch_id=venue.id, venue_name=venue.name, status=RefreshStatus.FAILED)
    if venue.is_booked:
        logger.info("%s already booked; skipping", venue.name)
        result.status = RefreshStatus.ALREADY_BOOKED
        return result
    try:
        day = date_to_check(today or date.today(), venue.interval_days).isoformat()
        result.date_checked = day
        logger.info("Checking %s on %s", venue.name, day)
        slots = await ctx.provider.list_available_slots(venue.venue_id, day, venue.party_size)
        result.slots_found = len(slots)
        if not slots:
            logger.info("No slots found for %s", venue.name)
            result.status = RefreshStatus.NO_SLOTS
            return result

        candidates = filter_slots(slots, venue.min_time, venue.max_time)
        result.candidates = len(candidates)
        if not candidates:
            logger.debug("%s has %s slots on %s, none between %s and %s",
                         venue.name, len(slots), day, venue.min_time, venue.max_time)
            result.status = RefreshStatus.NO_MATCHING_SLOTS
            return result

        logger.info("Found %s valid open slots on %s for %s", len(candidates), candidates[0].start_str, venue.name)
        user_details = await ctx.provider.fetch_user_details()
        ranked = rank_slots(candidates, venue.preferred_time)
        outcome = await attempt_booking(
            venue, ranked, user_details, provider=ctx.provider, notifier=ctx.notifier
        )
    except Exception as e:
        logger.exception("Refresh failed for %s", venue.name)
        result.error = str(e) or type(e).__name__
        return result

    result.outcome = outcome
    result.status = RefreshStatus.BOOKED if isinstance(outcome, Booked) else RefreshStatus.EXHAUSTED
    return result
