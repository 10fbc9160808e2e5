"""Per-venue cron job and the full watch-list cycle job."""
import logging

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.base import BaseScheduler

from tablewatch.core.constants import venue_job_id
from tablewatch.services.monitor.cycle import CycleRunner
from tablewatch.services.monitor.types import RefreshStatus, VenueRefreshResult

logger = logging.getLogger(__name__)


def drop_booked_jobs(scheduler: BaseScheduler | None, results: list[VenueRefreshResult]) -> None:
    """A booked venue needs no more checks: remove its cron job."""
    if scheduler is None:
        return
    for result in results:
        if result.status != RefreshStatus.BOOKED:
            continue
        try:
            scheduler.remove_job(venue_job_id(result.watch_id))
        except JobLookupError:
            continue
        logger.info("Watch %s (%s) booked; removed its cron job", result.watch_id, result.venue_name)


async def run_venue_refresh_job(runner: CycleRunner, watch_id: int, scheduler: BaseScheduler | None = None) -> None:
    try:
        result = await runner.refresh_one(watch_id)
    except Exception as e:
        logger.exception("Venue refresh job for watch %s failed: %s", watch_id, e)
        return
    if result is not None:
        logger.info("Watch %s (%s): %s", watch_id, result.venue_name, result.status.value)
        drop_booked_jobs(scheduler, [result])


async def run_cycle_job(runner: CycleRunner, scheduler: BaseScheduler | None = None) -> None:
    try:
        report = await runner.run()
    except Exception as e:
        logger.exception("Watch-list cycle failed: %s", e)
        return
    if report is not None:
        drop_booked_jobs(scheduler, report.booked)
