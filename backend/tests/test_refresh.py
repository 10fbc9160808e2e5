from datetime import date

import pytest

from helpers import FakeProvider, make_slot, make_venue
from tablewatch.core.errors import ProviderError
from tablewatch.services.monitor import RefreshStatus, refresh_venue

TODAY = date(2024, 5, 1)


@pytest.mark.asyncio
async def test_books_slot_for_today(ctx, provider):
    provider.slots = {1505: [make_slot("2024-05-01 16:00:00"), make_slot("2024-05-01 18:00:00")]}
    venue = make_venue()

    result = await refresh_venue(venue, ctx, today=TODAY)

    assert result.status == RefreshStatus.BOOKED
    assert result.date_checked == "2024-05-01"
    assert (result.slots_found, result.candidates) == (2, 1)
    assert result.outcome.attempts == 1
    assert provider.list_calls == [(1505, "2024-05-01", 2)]
    assert venue.is_booked


@pytest.mark.asyncio
async def test_interval_days_offsets_checked_date(ctx, provider):
    venue = make_venue(interval_days=3)
    result = await refresh_venue(venue, ctx, today=TODAY)
    assert result.date_checked == "2024-05-03"
    assert provider.list_calls == [(1505, "2024-05-03", 2)]


@pytest.mark.asyncio
async def test_no_slots(ctx, provider):
    result = await refresh_venue(make_venue(), ctx, today=TODAY)
    assert result.status == RefreshStatus.NO_SLOTS
    assert provider.user_calls == 0


@pytest.mark.asyncio
async def test_no_slots_in_window(ctx, provider):
    provider.slots = {1505: [make_slot("2024-05-01 12:00:00"), make_slot("2024-05-01 22:30:00")]}
    result = await refresh_venue(make_venue(), ctx, today=TODAY)
    assert result.status == RefreshStatus.NO_MATCHING_SLOTS
    assert result.slots_found == 2
    assert provider.detail_calls == []


@pytest.mark.asyncio
async def test_every_slot_rejected_is_exhausted(ctx, provider):
    slots = [make_slot("2024-05-01 18:00:00"), make_slot("2024-05-01 19:00:00")]
    provider.slots = {1505: slots}
    provider.fail_tokens = {s["config"]["token"] for s in slots}
    venue = make_venue()

    result = await refresh_venue(venue, ctx, today=TODAY)

    assert result.status == RefreshStatus.EXHAUSTED
    assert result.to_dict()["attempts"] == 2
    assert not venue.is_booked


@pytest.mark.asyncio
async def test_provider_error_reported_as_failed(ctx, provider):
    provider.slots = {1505: ProviderError("Resy API error: 500")}
    result = await refresh_venue(make_venue(), ctx, today=TODAY)
    assert result.status == RefreshStatus.FAILED
    assert result.error == "Resy API error: 500"
    assert result.to_dict()["error"] == "Resy API error: 500"


@pytest.mark.asyncio
async def test_already_booked_venue_is_not_checked(ctx, provider):
    venue = make_venue(reservation_details={"resy_token": "abc"})
    result = await refresh_venue(venue, ctx, today=TODAY)
    assert result.status == RefreshStatus.ALREADY_BOOKED
    assert provider.list_calls == []


@pytest.mark.asyncio
async def test_booked_result_dict(ctx, provider):
    provider.slots = {1505: [make_slot("2024-05-01 18:00:00")]}
    result = await refresh_venue(make_venue(), ctx, today=TODAY)
    assert result.to_dict() == {
        "watch_id": 1,
        "venue_name": "Don Angie",
        "status": "booked",
        "date_checked": "2024-05-01",
        "slots_found": 1,
        "candidates": 1,
        "attempts": 1,
        "booked_slot": "2024-05-01 18:00:00",
    }
