#!/usr/bin/env python3
"""
Log in to Resy and run one watch-list cycle (or one venue) without the scheduler.
Run: cd backend && poetry run python scripts/run_cycle.py
     cd backend && poetry run python scripts/run_cycle.py --watch-id 3
"""
import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tablewatch.config import settings
from tablewatch.core.logging_config import configure_logging
from tablewatch.main import build_context
from tablewatch.scheduler.reauth_job import run_reauth_job
from tablewatch.services.monitor import CycleRunner


async def _run(watch_id: int | None) -> int:
    ctx = build_context()
    exit_codes: list[int] = []
    await run_reauth_job(ctx.provider, settings, exit_codes.append)
    if exit_codes:
        print("Resy login failed; see log above.")
        return exit_codes[0]

    runner = CycleRunner(ctx)
    if watch_id is not None:
        result = await runner.refresh_one(watch_id)
        if result is None:
            print(f"Watch {watch_id} not found.")
            return 1
        results = [result]
    else:
        report = await runner.run()
        results = report.results if report else []

    if not results:
        print("Watch list is empty.")
    for r in results:
        line = f"  [{r.watch_id}] {r.venue_name}: {r.status.value}"
        if r.date_checked:
            line += f" ({r.date_checked}, {r.candidates}/{r.slots_found} slots in window)"
        if r.error:
            line += f" - {r.error}"
        print(line)
    return 0


def main():
    parser = argparse.ArgumentParser(description="Run one Resy watch-list cycle")
    parser.add_argument("--watch-id", type=int, help="Refresh only this watch list entry")
    args = parser.parse_args()
    configure_logging(settings.log_level)
    sys.exit(asyncio.run(_run(args.watch_id)))


if __name__ == "__main__":
    main()
