"""
Centralized constants for the scheduler and booking flow.

Change job IDs or fixed provider values here instead of scattering literals.
"""

# Scheduler job IDs
REAUTH_JOB_ID = "resy_reauth"
VENUE_REFRESH_JOB_PREFIX = "venue_refresh:"

# Resy booking
BOOKING_SOURCE_ID = "resy.com-venue-details"
DEFAULT_PARTY_SIZE = 2


def venue_job_id(watch_id: int) -> str:
    """Scheduler job id for one watched venue (store row id)."""
    return f"{VENUE_REFRESH_JOB_PREFIX}{watch_id}"
