import copy

from tablewatch.core.errors import ProviderError
from tablewatch.services.monitor import WatchedVenue
from tablewatch.services.providers.types import SlotDetail


def make_slot(start: str, token: str | None = None, shift_day: str | None = None) -> dict:
    return {
        "date": {"start": start, "end": start},
        "config": {"id": 1, "token": token or f"rgs://resy/1/{start}", "type": "Dining Room"},
        "shift": {"day": shift_day if shift_day is not None else start.split(" ")[0]},
    }


def make_venue(**overrides) -> WatchedVenue:
    fields = dict(
        id=1,
        venue_id=1505,
        name="Don Angie",
        party_size=2,
        interval_days=1,
        min_time="17:00",
        max_time="20:00",
        preferred_time=None,
        cron="*/5 * * * *",
    )
    fields.update(overrides)
    return WatchedVenue(**fields)


class FakeProvider:
    """In-memory provider. Slots keyed by venue_id; a value that is an exception is raised."""

    def __init__(self, slots=None, *, fail_tokens=(), detail_fail_tokens=(), user=None, login_error=None):
        self.slots = slots or {}
        self.fail_tokens = set(fail_tokens)
        self.detail_fail_tokens = set(detail_fail_tokens)
        self.user = user if user is not None else {"id": 7, "payment_methods": [{"id": 555}, {"id": 556}]}
        self.login_error = login_error
        self.list_calls = []
        self.detail_calls = []
        self.book_calls = []
        self.user_calls = 0
        self.logins = 0

    async def list_available_slots(self, venue_id, day, party_size):
        self.list_calls.append((venue_id, day, party_size))
        found = self.slots.get(venue_id, [])
        if isinstance(found, Exception):
            raise found
        return list(found)

    async def fetch_slot_detail(self, config_id, party_size, day):
        self.detail_calls.append({"config_id": config_id, "party_size": party_size, "day": day})
        if config_id in self.detail_fail_tokens:
            raise ProviderError("details rejected")
        return SlotDetail(book_token=f"book:{config_id}")

    async def submit_booking(self, book_token, payment_method_id, source_id):
        self.book_calls.append((book_token, payment_method_id, source_id))
        config_id = book_token.removeprefix("book:")
        if config_id in self.fail_tokens:
            raise ProviderError("slot no longer available")
        return {"resy_token": f"resy:{config_id}", "reservation_id": 42}

    async def fetch_user_details(self):
        self.user_calls += 1
        return self.user

    async def login(self):
        self.logins += 1
        if self.login_error is not None:
            raise self.login_error


class FakeNotifier:
    def __init__(self):
        self.messages = []

    async def send_text(self, message):
        self.messages.append(message)
        return True


class FakeStore:
    """Hands out copies like a real store would; save() writes reservations back by id."""

    def __init__(self, venues):
        self.venues = {v.id: v for v in venues}
        self.loads = 0
        self.saves = []

    def load_watched_venues(self):
        self.loads += 1
        return [copy.deepcopy(v) for v in self.venues.values()]

    def save(self, venues):
        self.saves.append([v.id for v in venues])
        for v in venues:
            if v.id in self.venues and v.reservation_details is not None:
                self.venues[v.id].reservation_details = v.reservation_details


