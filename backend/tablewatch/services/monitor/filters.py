"""Keep slots whose start falls inside a venue's [min_time, max_time] window."""
import logging
from datetime import datetime
from typing import Iterable

from tablewatch.services.monitor.timeutil import parse_clock, parse_slot_start
from tablewatch.services.monitor.types import SlotCandidate
from tablewatch.services.resy.types import ResySlot

logger = logging.getLogger(__name__)


def filter_slots(slots: Iterable[ResySlot], min_time: str, max_time: str) -> list[SlotCandidate]:
    """
    Return candidates for slots starting within the window (both ends inclusive).
    The window is built on each slot's own calendar date. Output keeps provider order.
    """
    lo = parse_clock(min_time)
    hi = parse_clock(max_time)
    out: list[SlotCandidate] = []
    for slot in slots:
        raw_start = (slot.get("date") or {}).get("start") or ""
        try:
            start = parse_slot_start(raw_start)
        except ValueError:
            logger.debug("Skipping slot with unparseable start %r", raw_start)
            continue
        day = start.date()
        if datetime.combine(day, lo) <= start <= datetime.combine(day, hi):
            out.append(SlotCandidate(slot=slot, start=start))
    return out
