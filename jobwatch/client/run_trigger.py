import logging

import httpx

from jobwatch.client.transport import fetch_json, parse_model
from jobwatch.schemas.job import RunSummary

logger = logging.getLogger(__name__)

RUN_PATH = "/api/run"


class RunTrigger:
    """Starts a scrape cycle on the backend and waits for its summary.

    Every call issues a fresh run command; whether overlapping runs are
    accepted is up to the backend.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def trigger_run(self) -> RunSummary:
        data = await fetch_json(self._http, "POST", RUN_PATH)
        summary = parse_model(RunSummary, data)
        logger.info("Run finished: %d new, %d today", summary.new_jobs, summary.today_jobs)
        return summary


def describe_summary(summary: RunSummary) -> str:
    return f"Done. New jobs: {summary.new_jobs}, Today: {summary.today_jobs}."
