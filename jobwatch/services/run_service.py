import asyncio
import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from jobwatch.schemas.job import Job, JobSnapshot, RunSummary
from jobwatch.services import storage_service
from jobwatch.services.job_source import JobSource, JobSourceError
from jobwatch.utils.hashing import sha256_text

logger = logging.getLogger(__name__)


class RunInProgressError(Exception):
    pass


def with_job_id(job: Job) -> Job:
    if job.id:
        return job
    basis = job.url or f"{job.title}|{job.company}"
    return job.model_copy(update={"id": sha256_text(basis, 16)})


def filter_today_only(jobs: list[Job], today: date | None = None) -> list[Job]:
    """Keep postings dated today; postings with no date are dropped."""
    today = today or date.today()
    return [j for j in jobs if j.posted_date == today]


class RunService:
    """Runs one scrape cycle at a time.

    A second run requested while one is in flight is rejected rather than
    queued.
    """

    def __init__(self):
        self._lock = asyncio.Lock()
        self.last_run: datetime | None = None

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    async def run_once(self, db: Session, source: JobSource) -> RunSummary:
        if self.is_running:
            raise RunInProgressError("A scrape run is already in progress")
        async with self._lock:
            return await self._run(db, source)

    async def _run(self, db: Session, source: JobSource) -> RunSummary:
        config = storage_service.load_config_or_default(db)
        try:
            fetched = await source.fetch(config)
        except JobSourceError:
            raise
        except Exception as exc:
            raise JobSourceError(f"Job source failed: {exc}") from exc

        all_jobs = [with_job_id(j) for j in fetched]
        today_jobs = filter_today_only(all_jobs)
        new_jobs = storage_service.filter_new_jobs(db, today_jobs)
        updated_at = datetime.now().astimezone()
        snapshot = JobSnapshot(
            updated_at=updated_at,
            jobs=today_jobs,
            new_jobs=[j.id for j in new_jobs],
        )
        # Seen ids and the snapshot land together or not at all.
        try:
            storage_service.mark_jobs_seen(db, new_jobs)
            storage_service.save_snapshot(db, snapshot)
            db.commit()
        except Exception:
            db.rollback()
            raise
        self.last_run = updated_at

        logger.info(
            "Scrape finished: fetched=%d today=%d new=%d",
            len(all_jobs), len(today_jobs), len(new_jobs),
        )
        return RunSummary(
            new_jobs=len(new_jobs),
            today_jobs=len(today_jobs),
            total_jobs=len(all_jobs),
            updated_at=updated_at,
        )


run_service = RunService()
