"""Runs every hour at :59: log in again so the Resy token never goes stale mid-cycle."""
import logging
from typing import Callable

from tablewatch.services.providers.base import ReservationProvider

logger = logging.getLogger(__name__)


async def run_reauth_job(provider: ReservationProvider, settings, on_fatal: Callable[[int], None]) -> bool:
    """
    Refresh the provider session. Missing credentials only warn (the static
    RESY_AUTH_TOKEN keeps being used). A failed login calls on_fatal(1): a dead
    session would silently stop every later cycle, so the process should exit
    and be restarted.
    """
    if not settings.resy_email or not settings.resy_password:
        logger.warning("Email or password not set, did you forget to set the environment variables?")
        return False
    try:
        await provider.login()
    except Exception:
        logger.exception("Error regenerating headers and logging in")
        on_fatal(1)
        return False
    return True
