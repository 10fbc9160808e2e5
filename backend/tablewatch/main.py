"""
FastAPI app entrypoint.

Starts the scheduler (hourly Resy re-login + one cron job per watched venue),
logs in and runs one full watch-list cycle on startup.
"""
import asyncio
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from tablewatch import __version__
from tablewatch.api.routes import watch
from tablewatch.config import settings
from tablewatch.core.logging_config import configure_logging
from tablewatch.scheduler.reauth_job import run_reauth_job
from tablewatch.scheduler.setup import build_scheduler
from tablewatch.scheduler.venue_refresh_job import run_cycle_job
from tablewatch.services.monitor import CycleRunner, MonitorContext
from tablewatch.services.notify import build_notifier
from tablewatch.services.providers import ResyProvider
from tablewatch.services.resy import build_client
from tablewatch.services.watch_list_service import SqlWatchListStore

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


def build_context() -> MonitorContext:
    provider = ResyProvider(
        build_client(settings),
        email=settings.resy_email,
        password=settings.resy_password,
    )
    return MonitorContext(provider=provider, notifier=build_notifier(settings), store=SqlWatchListStore())


def exit_process(code: int) -> None:
    """Fatal path for the re-login job: exit so the process supervisor restarts us."""
    logger.critical("Resy session could not be refreshed; exiting with status %s", code)
    logging.shutdown()
    os._exit(code)


async def startup_cycle(ctx: MonitorContext, runner: CycleRunner, scheduler: AsyncIOScheduler) -> None:
    # Try once at start
    await run_reauth_job(ctx.provider, settings, exit_process)
    await run_cycle_job(runner, scheduler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ctx = build_context()
    runner = CycleRunner(ctx)
    venues = await asyncio.to_thread(ctx.store.load_watched_venues)
    scheduler = build_scheduler(runner, ctx.provider, settings, exit_process, venues)
    scheduler.start()
    app.state.ctx = ctx
    app.state.runner = runner
    app.state.scheduler = scheduler

    startup_task = None
    if settings.run_cycle_on_startup:
        startup_task = asyncio.create_task(startup_cycle(ctx, runner, scheduler))
    logger.info("Tablewatch ready; watching %s venues", len(venues))
    yield
    if startup_task is not None and not startup_task.done():
        startup_task.cancel()
    scheduler.shutdown(wait=False)


app = FastAPI(title="Tablewatch", version=__version__, lifespan=lifespan)

app.include_router(watch.router, prefix="/resy", tags=["resy"])


@app.get("/", include_in_schema=False)
def root():
    return {"message": "Tablewatch", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
