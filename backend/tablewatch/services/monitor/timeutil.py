"""Clock and date parsing for venue windows and Resy slot timestamps."""
from datetime import date, datetime, time, timedelta

_CLOCK_FORMATS = ("%H:%M:%S", "%H:%M")


def parse_clock(value: str) -> time:
    """Parse a venue clock string (HH:MM or HH:MM:SS). Raises ValueError."""
    s = (value or "").strip()
    for fmt in _CLOCK_FORMATS:
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time {value!r}. Use HH:MM or HH:MM:SS.")


def parse_slot_start(value: str) -> datetime:
    """Resy slot start, e.g. "2026-02-18 20:30:00". Raises ValueError."""
    return datetime.fromisoformat((value or "").strip())


def date_to_check(today: date, interval_days: int) -> date:
    """interval_days=1 checks today, 2 checks tomorrow, and so on."""
    return today + timedelta(days=interval_days - 1)
