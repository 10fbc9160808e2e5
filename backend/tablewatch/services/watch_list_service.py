"""
Watch list: venues to check on their own cron schedule and book when a slot
opens inside the configured window.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any

from apscheduler.triggers.cron import CronTrigger
from sqlalchemy.orm import Session, sessionmaker

from tablewatch.db.session import SessionLocal
from tablewatch.models.watch_list_entry import WatchListEntry
from tablewatch.services.monitor.timeutil import parse_clock
from tablewatch.services.monitor.types import WatchedVenue

logger = logging.getLogger(__name__)


def _load_details(raw: str | None) -> dict[str, Any] | None:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (TypeError, json.JSONDecodeError):
        return {"raw": raw}


def to_watched_venue(row: WatchListEntry) -> WatchedVenue:
    return WatchedVenue(
        id=row.id,
        venue_id=row.venue_id,
        name=row.venue_name,
        party_size=row.party_size,
        interval_days=row.interval_days,
        min_time=row.min_time,
        max_time=row.max_time,
        preferred_time=row.preferred_time,
        cron=row.cron,
        reservation_details=_load_details(row.reservation_details_json),
    )


class SqlWatchListStore:
    """Watch-list store backed by the watched_venues table. One short session per call."""

    def __init__(self, session_factory: sessionmaker = SessionLocal) -> None:
        self._session_factory = session_factory

    def load_watched_venues(self) -> list[WatchedVenue]:
        db = self._session_factory()
        try:
            rows = db.query(WatchListEntry).order_by(WatchListEntry.id).all()
            return [to_watched_venue(r) for r in rows]
        finally:
            db.close()

    def save(self, venues: list[WatchedVenue]) -> None:
        """Write back reservation results. A stored reservation is never cleared."""
        db = self._session_factory()
        try:
            now = datetime.now(timezone.utc)
            for venue in venues:
                if venue.reservation_details is None:
                    continue
                row = db.get(WatchListEntry, venue.id)
                if row is None:
                    logger.warning("Watch %s (%s) was removed before its booking was saved", venue.id, venue.name)
                    continue
                if row.reservation_details_json is None:
                    row.reservation_details_json = json.dumps(venue.reservation_details)
                    row.booked_at = now
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


def validate_watch(
    *,
    party_size: int,
    interval_days: int,
    min_time: str,
    max_time: str,
    preferred_time: str | None,
    cron: str,
) -> None:
    """Raise ValueError describing the first invalid field."""
    if party_size < 1:
        raise ValueError("party_size must be at least 1.")
    if interval_days < 1:
        raise ValueError("interval_days must be at least 1 (1 = today).")
    lo = parse_clock(min_time)
    hi = parse_clock(max_time)
    if lo > hi:
        raise ValueError(f"min_time {min_time} is after max_time {max_time}.")
    if preferred_time:
        parse_clock(preferred_time)
    try:
        CronTrigger.from_crontab(cron)
    except ValueError as e:
        raise ValueError(f"Invalid cron expression {cron!r}: {e}") from e


def add_to_watch_list(
    db: Session,
    venue_id: int,
    venue_name: str,
    *,
    min_time: str,
    max_time: str,
    cron: str,
    party_size: int = 2,
    interval_days: int = 1,
    preferred_time: str | None = None,
) -> WatchListEntry:
    """Add a venue to the watch list. Raises ValueError on invalid input."""
    venue_name = (venue_name or "").strip()
    if not venue_name:
        raise ValueError("venue_name is required.")
    preferred_time = (preferred_time or "").strip() or None
    validate_watch(
        party_size=party_size,
        interval_days=interval_days,
        min_time=min_time,
        max_time=max_time,
        preferred_time=preferred_time,
        cron=cron,
    )
    row = WatchListEntry(
        venue_id=venue_id,
        venue_name=venue_name,
        party_size=party_size,
        interval_days=interval_days,
        min_time=min_time.strip(),
        max_time=max_time.strip(),
        preferred_time=preferred_time,
        cron=cron.strip(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def watch_to_dict(r: WatchListEntry) -> dict[str, Any]:
    return {
        "id": r.id,
        "venue_id": r.venue_id,
        "venue_name": r.venue_name,
        "party_size": r.party_size,
        "interval_days": r.interval_days,
        "min_time": r.min_time,
        "max_time": r.max_time,
        "preferred_time": r.preferred_time,
        "cron": r.cron,
        "reservation_details": _load_details(r.reservation_details_json),
        "booked_at": r.booked_at.isoformat() if r.booked_at else None,
        "created_at": r.created_at.isoformat() if r.created_at else None,
    }


def get_watch_list(db: Session) -> list[dict[str, Any]]:
    """Return all watch list entries as dicts, oldest first."""
    rows = db.query(WatchListEntry).order_by(WatchListEntry.id).all()
    return [watch_to_dict(r) for r in rows]


def remove_from_watch_list(db: Session, watch_id: int) -> dict:
    """Remove a watch. Returns {ok: true} or {error: ...}."""
    row = db.query(WatchListEntry).filter(WatchListEntry.id == watch_id).first()
    if not row:
        return {"error": "Watch not found."}
    db.delete(row)
    db.commit()
    return {"ok": True}
