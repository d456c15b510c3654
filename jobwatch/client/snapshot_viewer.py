import logging
from datetime import datetime

import httpx

from jobwatch.client.display import SEPARATOR, JobEntry, JobsDisplay, Placeholder, ViewState
from jobwatch.client.errors import ClientError
from jobwatch.client.transport import fetch_json, parse_model
from jobwatch.schemas.job import JobSnapshot

logger = logging.getLogger(__name__)

JOBS_PATH = "/api/jobs"
NO_RUNS_YET = "No runs yet"
NO_JOBS_FOUND = "No jobs found yet."
LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_updated_at(updated_at: datetime | None) -> str:
    if updated_at is None:
        return NO_RUNS_YET
    # Naive timestamps are taken as already local.
    if updated_at.tzinfo is not None:
        updated_at = updated_at.astimezone()
    return updated_at.strftime(LOCAL_TIME_FORMAT)


def summary_line(snapshot: JobSnapshot) -> str:
    return SEPARATOR.join([
        f"Updated: {format_updated_at(snapshot.updated_at)}",
        f"Total today: {len(snapshot.jobs)}",
        f"New: {len(snapshot.new_jobs)}",
    ])


def build_items(snapshot: JobSnapshot) -> list[JobEntry | Placeholder]:
    if not snapshot.jobs:
        return [Placeholder(NO_JOBS_FOUND)]
    new_ids = snapshot.new_job_ids
    return [
        JobEntry(
            title=job.title,
            meta=f"{job.company}{SEPARATOR}{job.location}",
            url=job.url,
            is_new=job.id is not None and job.id in new_ids,
        )
        for job in snapshot.jobs
    ]


class SnapshotViewer:
    """Fetches the latest job snapshot and renders it onto a JobsDisplay.

    A fetch cycle goes LOADING -> RENDERED or LOADING -> FAILED. On failure
    only the meta line changes; the list keeps whatever it held before but the
    display state marks it as not current.
    """

    def __init__(self, http: httpx.AsyncClient, display: JobsDisplay | None = None):
        self._http = http
        self.display = display if display is not None else JobsDisplay()

    async def fetch_snapshot(self) -> JobSnapshot:
        data = await fetch_json(self._http, "GET", JOBS_PATH)
        return parse_model(JobSnapshot, data)

    def render(self, snapshot: JobSnapshot) -> None:
        self.display.meta = summary_line(snapshot)
        self.display.items = build_items(snapshot)
        self.display.state = ViewState.RENDERED

    def render_failure(self, error: ClientError) -> None:
        self.display.meta = f"Failed to load jobs: {error}"
        self.display.state = ViewState.FAILED

    async def refresh(self) -> JobSnapshot | None:
        self.display.state = ViewState.LOADING
        try:
            snapshot = await self.fetch_snapshot()
        except ClientError as exc:
            logger.error("Failed to load jobs: %s", exc)
            self.render_failure(exc)
            return None
        self.render(snapshot)
        return snapshot
