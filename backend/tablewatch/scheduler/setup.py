"""
Build the AsyncIOScheduler: one hourly re-auth job plus one cron job per watched
venue. Job ids come from core.constants so routes can add/remove venue jobs.
"""
import logging
from typing import Callable

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from tablewatch.core.constants import REAUTH_JOB_ID, venue_job_id
from tablewatch.scheduler.reauth_job import run_reauth_job
from tablewatch.scheduler.venue_refresh_job import run_venue_refresh_job
from tablewatch.services.monitor.cycle import CycleRunner
from tablewatch.services.monitor.types import WatchedVenue
from tablewatch.services.providers.base import ReservationProvider

logger = logging.getLogger(__name__)


def schedule_venue(scheduler: AsyncIOScheduler, runner: CycleRunner, venue: WatchedVenue) -> bool:
    """Add (or replace) the cron job for one venue. Booked venues and bad cron strings are skipped."""
    if venue.is_booked:
        logger.info("%s is already booked; not scheduling", venue.name)
        return False
    try:
        trigger = CronTrigger.from_crontab(venue.cron)
    except ValueError as e:
        logger.error("Invalid cron %r for %s: %s", venue.cron, venue.name, e)
        return False
    logger.info(
        "Setting cron job for %s with interval %s days at times %s",
        venue.name, venue.interval_days, venue.cron,
    )
    scheduler.add_job(
        run_venue_refresh_job,
        trigger,
        args=[runner, venue.id, scheduler],
        id=venue_job_id(venue.id),
        name=f"refresh {venue.name}",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    return True


def unschedule_venue(scheduler: AsyncIOScheduler, watch_id: int) -> bool:
    try:
        scheduler.remove_job(venue_job_id(watch_id))
    except JobLookupError:
        return False
    return True


def build_scheduler(
    runner: CycleRunner,
    provider: ReservationProvider,
    settings,
    on_fatal: Callable[[int], None],
    venues: list[WatchedVenue],
) -> AsyncIOScheduler:
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        run_reauth_job,
        CronTrigger.from_crontab(settings.reauth_cron),
        args=[provider, settings, on_fatal],
        id=REAUTH_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    for venue in venues:
        schedule_venue(scheduler, runner, venue)
    return scheduler
