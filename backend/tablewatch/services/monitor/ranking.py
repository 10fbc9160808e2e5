"""Order candidates by distance from the venue's preferred time."""
from dataclasses import replace
from datetime import datetime

from tablewatch.services.monitor.timeutil import parse_clock
from tablewatch.services.monitor.types import SlotCandidate


def rank_slots(candidates: list[SlotCandidate], preferred_time: str | None) -> list[SlotCandidate]:
    """
    Closest to preferred_time first. The reference is the first candidate's date
    at preferred_time; sort is stable so equal distances keep provider order.
    Without a preferred time the input order is returned unchanged.
    """
    if not preferred_time or not candidates:
        return list(candidates)
    reference = datetime.combine(candidates[0].start.date(), parse_clock(preferred_time))
    scored = [replace(c, diff=abs(c.start - reference)) for c in candidates]
    return sorted(scored, key=lambda c: c.diff)
