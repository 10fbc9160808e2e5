import pytest

from helpers import FakeNotifier, FakeProvider, make_slot, make_venue
from tablewatch.core.constants import BOOKING_SOURCE_ID
from tablewatch.services.monitor import Booked, Exhausted, attempt_booking, filter_slots, rank_slots, resolve_day

DAY = "2024-05-01"


def _ranked(*times, preferred=None):
    slots = [make_slot(f"{DAY} {t}:00") for t in times]
    return rank_slots(filter_slots(slots, "17:00", "20:00"), preferred)


def _token(t):
    return f"rgs://resy/1/{DAY} {t}:00"


@pytest.mark.asyncio
async def test_books_first_ranked_slot_and_stops():
    provider, notifier = FakeProvider(), FakeNotifier()
    venue = make_venue()
    ranked = _ranked("17:10", "18:00", "19:45", preferred="18:30")

    outcome = await attempt_booking(venue, ranked, provider.user, provider=provider, notifier=notifier)

    assert isinstance(outcome, Booked)
    assert outcome.attempts == 1
    assert outcome.slot.start_str == f"{DAY} 18:00:00"
    assert provider.book_calls == [(f"book:{_token('18:00')}", 555, BOOKING_SOURCE_ID)]
    assert venue.reservation_details == {"resy_token": f"resy:{_token('18:00')}", "reservation_id": 42}
    assert notifier.messages == [f"Booked Don Angie at {DAY} 18:00:00"]


@pytest.mark.asyncio
async def test_failed_slot_falls_through_to_next_ranked():
    # preferred 18:30 ranks 18:00, 19:45, 17:10; 18:00 is gone by the time we book
    provider = FakeProvider(fail_tokens=[_token("18:00")])
    notifier = FakeNotifier()
    venue = make_venue(preferred_time="18:30")
    ranked = _ranked("17:10", "18:00", "19:45", preferred="18:30")

    outcome = await attempt_booking(venue, ranked, provider.user, provider=provider, notifier=notifier)

    assert isinstance(outcome, Booked)
    assert outcome.attempts == 2
    assert outcome.slot.start_str == f"{DAY} 19:45:00"
    assert [c["config_id"] for c in provider.detail_calls] == [_token("18:00"), _token("19:45")]
    assert notifier.messages == [f"Booked Don Angie at {DAY} 19:45:00"]


@pytest.mark.asyncio
async def test_detail_failure_also_advances():
    provider = FakeProvider(detail_fail_tokens=[_token("17:10")])
    venue = make_venue()
    ranked = _ranked("17:10", "18:00")

    outcome = await attempt_booking(venue, ranked, provider.user, provider=provider, notifier=FakeNotifier())

    assert isinstance(outcome, Booked)
    assert outcome.attempts == 2
    assert len(provider.book_calls) == 1


@pytest.mark.asyncio
async def test_all_slots_failing_is_exhausted():
    times = ("17:10", "18:00", "19:45")
    provider = FakeProvider(fail_tokens=[_token(t) for t in times])
    notifier = FakeNotifier()
    venue = make_venue()

    outcome = await attempt_booking(venue, _ranked(*times), provider.user, provider=provider, notifier=notifier)

    assert outcome == Exhausted(attempts=3)
    assert venue.reservation_details is None
    assert len(provider.book_calls) == 3
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_empty_ranked_list():
    provider = FakeProvider()
    outcome = await attempt_booking(make_venue(), [], provider.user, provider=provider, notifier=FakeNotifier())
    assert outcome == Exhausted(attempts=0)
    assert provider.detail_calls == []


@pytest.mark.asyncio
async def test_no_payment_method_exhausts_without_booking():
    provider = FakeProvider(user={"id": 7, "payment_methods": []})
    venue = make_venue()

    outcome = await attempt_booking(venue, _ranked("17:10", "18:00"), provider.user, provider=provider, notifier=FakeNotifier())

    assert outcome == Exhausted(attempts=2)
    assert provider.book_calls == []
    assert venue.reservation_details is None


@pytest.mark.asyncio
async def test_notifier_failure_does_not_undo_booking():
    class BrokenNotifier:
        async def send_text(self, message):
            raise RuntimeError("sms down")

    provider = FakeProvider()
    venue = make_venue()
    outcome = await attempt_booking(venue, _ranked("18:00"), provider.user, provider=provider, notifier=BrokenNotifier())
    assert isinstance(outcome, Booked)
    assert venue.is_booked


@pytest.mark.asyncio
async def test_detail_request_uses_party_size_and_checked_day():
    provider = FakeProvider()
    venue = make_venue(party_size=4)
    await attempt_booking(venue, _ranked("18:00"), provider.user, provider=provider, notifier=FakeNotifier())
    assert provider.detail_calls == [{"config_id": _token("18:00"), "party_size": 4, "day": DAY}]


def test_resolve_day_takes_date_part():
    assert resolve_day("2024-05-01 19:00", make_slot("2024-05-01 19:00:00")) == "2024-05-01"


def test_resolve_day_falls_back_to_shift_day():
    slot = make_slot("2024-05-01 19:00:00", shift_day="2024-05-02")
    assert resolve_day("", slot) == "2024-05-02"
    assert resolve_day("", {}) == ""
