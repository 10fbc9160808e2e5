"""
Resy: watch list management and on-demand checks.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from tablewatch.db.session import get_db
from tablewatch.models.watch_list_entry import WatchListEntry
from tablewatch.scheduler.setup import schedule_venue, unschedule_venue
from tablewatch.scheduler.venue_refresh_job import drop_booked_jobs
from tablewatch.services.watch_list_service import (
    add_to_watch_list,
    get_watch_list,
    remove_from_watch_list,
    to_watched_venue,
    watch_to_dict,
)

router = APIRouter()


class WatchAdd(BaseModel):
    venue_id: int
    venue_name: str
    min_time: str = Field(..., examples=["17:00"])
    max_time: str = Field(..., examples=["20:00"])
    preferred_time: str | None = Field(None, examples=["18:30"])
    cron: str = Field(..., examples=["*/5 9-23 * * *"])
    party_size: int = 2
    interval_days: int = 1


@router.get("/watch", response_model=list)
async def list_watch(db: Session = Depends(get_db)):
    """Return the watch list (venues checked on their own cron schedule)."""
    return get_watch_list(db)


@router.post("/watch", response_model=dict)
async def add_watch(body: WatchAdd, request: Request, db: Session = Depends(get_db)):
    """Add a venue to the watch list and schedule its cron job."""
    try:
        row = add_to_watch_list(
            db,
            venue_id=body.venue_id,
            venue_name=body.venue_name,
            min_time=body.min_time,
            max_time=body.max_time,
            preferred_time=body.preferred_time,
            cron=body.cron,
            party_size=body.party_size,
            interval_days=body.interval_days,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    scheduler = getattr(request.app.state, "scheduler", None)
    runner = getattr(request.app.state, "runner", None)
    scheduled = False
    if scheduler is not None and runner is not None:
        scheduled = schedule_venue(scheduler, runner, to_watched_venue(row))
    return {**watch_to_dict(row), "scheduled": scheduled}


@router.delete("/watch/{watch_id}", response_model=dict)
async def delete_watch(watch_id: int, request: Request, db: Session = Depends(get_db)):
    result = remove_from_watch_list(db, watch_id)
    if result.get("error"):
        raise HTTPException(status_code=404, detail=result["error"])
    scheduler = getattr(request.app.state, "scheduler", None)
    if scheduler is not None:
        unschedule_venue(scheduler, watch_id)
    return result


@router.post("/watch/{watch_id}/check", response_model=dict)
async def check_watch(watch_id: int, request: Request, db: Session = Depends(get_db)):
    """Run one refresh for this venue now (books if a slot in the window is open). Waits for a running cycle."""
    runner = getattr(request.app.state, "runner", None)
    if runner is None:
        raise HTTPException(status_code=503, detail="Monitor not running.")
    if db.get(WatchListEntry, watch_id) is None:
        raise HTTPException(status_code=404, detail="Watch not found.")
    result = await runner.refresh_one(watch_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Watch not found.")
    drop_booked_jobs(getattr(request.app.state, "scheduler", None), [result])
    return result.to_dict()
