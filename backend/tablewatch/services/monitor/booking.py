"""
Booking attempt loop: walk ranked candidates in order, stop at the first
reservation that goes through. A failed slot is logged and skipped; running out
of slots is a normal outcome, not an error.
"""
import logging
from typing import Any

from tablewatch.core.constants import BOOKING_SOURCE_ID, DEFAULT_PARTY_SIZE
from tablewatch.core.errors import ProviderError
from tablewatch.services.monitor.types import Booked, BookingOutcome, Exhausted, SlotCandidate, WatchedVenue
from tablewatch.services.notify.base import TextNotifier
from tablewatch.services.providers.base import ReservationProvider
from tablewatch.services.resy.types import ResySlot

logger = logging.getLogger(__name__)


def resolve_day(checked_date: str, slot: ResySlot) -> str:
    """Date part of the checked date ("2024-05-01 19:00" -> "2024-05-01"); the slot's shift day if that is empty."""
    parts = (checked_date or "").split()
    if parts:
        return parts[0]
    return (slot.get("shift") or {}).get("day") or ""


def first_payment_method_id(user_details: dict[str, Any]) -> int:
    methods = user_details.get("payment_methods") or []
    if not methods or methods[0].get("id") is None:
        raise ProviderError("No payment method on file. Add a credit card to your Resy account.")
    return methods[0]["id"]


async def attempt_booking(
    venue: WatchedVenue,
    ranked: list[SlotCandidate],
    user_details: dict[str, Any],
    *,
    provider: ReservationProvider,
    notifier: TextNotifier,
) -> BookingOutcome:
    """Try each slot in order. On success venue.reservation_details is set and a text goes out."""
    checked_date = ranked[0].start_str if ranked else ""
    party_size = venue.party_size or DEFAULT_PARTY_SIZE
    attempts = 0
    for candidate in ranked:
        attempts += 1
        logger.info("Found time to book - %s (%s/%s)", candidate.start_str, attempts, len(ranked))
        try:
            detail = await provider.fetch_slot_detail(
                config_id=candidate.config_token,
                party_size=party_size,
                day=resolve_day(checked_date, candidate.slot),
            )
            booking = await provider.submit_booking(
                detail.book_token,
                first_payment_method_id(user_details),
                BOOKING_SOURCE_ID,
            )
        except ProviderError as e:
            logger.error("Could not book %s at %s: %s", venue.name, candidate.start_str, e)
            continue
        except Exception:
            logger.exception("Unexpected error booking %s at %s", venue.name, candidate.start_str)
            continue

        venue.reservation_details = booking
        logger.info("Successfully booked at %s", venue.name)
        try:
            await notifier.send_text(f"Booked {venue.name} at {candidate.start_str}")
        except Exception:
            logger.exception("Booked %s but the notification failed", venue.name)
        return Booked(slot=candidate, details=booking, attempts=attempts)

    logger.info("Tried %s slots for %s; none could be booked", attempts, venue.name)
    return Exhausted(attempts=attempts)
