import asyncio
import logging

from sqlalchemy.orm import sessionmaker

from jobwatch.config import settings
from jobwatch.services import storage_service
from jobwatch.services.job_source import JobSource
from jobwatch.services.run_service import RunService

logger = logging.getLogger(__name__)


def next_interval_hours(session_factory: sessionmaker) -> int:
    db = session_factory()
    try:
        return storage_service.load_config_or_default(db).schedule.interval_hours
    except Exception as exc:
        logger.warning("Could not read schedule, using %dh: %s", settings.default_interval_hours, exc)
        return settings.default_interval_hours
    finally:
        db.close()


async def run_scheduled_once(service: RunService, session_factory: sessionmaker, source: JobSource) -> None:
    if service.is_running:
        logger.info("[scheduler] skipped: a run is already in progress")
        return
    db = session_factory()
    try:
        summary = await service.run_once(db, source)
        logger.info("[scheduler] ran scrape: today=%d new=%d", summary.today_jobs, summary.new_jobs)
    except Exception as exc:
        logger.error("[scheduler] scrape failed: %s", exc)
    finally:
        db.close()


async def run_scheduler(service: RunService, session_factory: sessionmaker, source: JobSource) -> None:
    """Run forever: scrape, then sleep for the configured interval."""
    while True:
        await run_scheduled_once(service, session_factory, source)
        hours = next_interval_hours(session_factory)
        logger.info("[scheduler] next run in %d seconds", hours * 3600)
        await asyncio.sleep(hours * 3600)
