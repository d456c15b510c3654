import json
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from jobwatch.config import settings
from jobwatch.models import AppConfig, SeenJob, Snapshot
from jobwatch.schemas.config import Config, ScheduleConfig, SearchConfig
from jobwatch.schemas.job import Job, JobSnapshot

logger = logging.getLogger(__name__)

CONFIG_KEY = "config"


def _utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def default_config() -> Config:
    return Config(
        search=SearchConfig(keywords="software engineer", location="", remote=False, salary_min=0),
        schedule=ScheduleConfig(interval_hours=settings.default_interval_hours),
    )


def load_config_or_default(db: Session) -> Config:
    row = db.get(AppConfig, CONFIG_KEY)
    if row is None:
        return default_config()
    return Config.model_validate_json(row.value)


def save_config(db: Session, config: Config) -> Config:
    db.merge(AppConfig(key=CONFIG_KEY, value=config.model_dump_json(), updated_at=_utc_now()))
    db.commit()
    logger.info("Stored config: %s", config.model_dump())
    return config


def load_snapshot(db: Session) -> JobSnapshot:
    row = db.get(Snapshot, 1)
    if row is None:
        return JobSnapshot.empty()
    return JobSnapshot(
        updated_at=datetime.fromisoformat(row.updated_at),
        jobs=[Job.model_validate(j) for j in json.loads(row.jobs)],
        new_jobs=json.loads(row.new_jobs),
    )


def save_snapshot(db: Session, snapshot: JobSnapshot) -> None:
    """Stage the snapshot row; the caller commits."""
    updated_at = snapshot.updated_at or datetime.now().astimezone()
    db.merge(Snapshot(
        id=1,
        updated_at=updated_at.isoformat(),
        jobs=json.dumps([j.model_dump(mode="json") for j in snapshot.jobs]),
        new_jobs=json.dumps(snapshot.new_jobs),
    ))


def filter_new_jobs(db: Session, jobs: list[Job]) -> list[Job]:
    """Jobs whose id has never been recorded as seen, in input order."""
    ids = [j.id for j in jobs]
    if not ids:
        return []
    seen = {
        row.job_id for row in db.query(SeenJob).filter(SeenJob.job_id.in_(ids)).all()
    }
    return [j for j in jobs if j.id not in seen]


def mark_jobs_seen(db: Session, jobs: list[Job]) -> None:
    """Stage seen-job rows; the caller commits."""
    now = _utc_now()
    for job in jobs:
        db.merge(SeenJob(job_id=job.id, first_seen_at=now))
