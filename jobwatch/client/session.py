import asyncio
import logging

import httpx

from jobwatch.client.config_client import ConfigClient, ConfigForm
from jobwatch.client.display import JobsDisplay, StatusLine
from jobwatch.client.errors import ClientError
from jobwatch.client.run_trigger import RunTrigger, describe_summary
from jobwatch.client.snapshot_viewer import SnapshotViewer
from jobwatch.config import settings

logger = logging.getLogger(__name__)


class PageSession:
    """One operator session against the backend.

    Owns the HTTP client and the transient display state. Each handler is a
    single round trip that rewrites its part of the display when it finishes;
    no handler raises a ClientError to the caller.
    """

    def __init__(self, base_url: str | None = None, http: httpx.AsyncClient | None = None):
        self._owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(
                base_url=base_url or settings.base_url,
                timeout=settings.request_timeout,
            )
        self.http = http
        self.form = ConfigForm()
        self.status = StatusLine()
        self.jobs = JobsDisplay()
        self.config_client = ConfigClient(http)
        self.run_trigger = RunTrigger(http)
        self.snapshot_viewer = SnapshotViewer(http, self.jobs)

    async def __aenter__(self) -> "PageSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def open(self) -> None:
        await asyncio.gather(self.load_config(), self.load_jobs())

    async def load_config(self) -> bool:
        try:
            config = await self.config_client.load()
        except ClientError as exc:
            logger.error("Failed to load config: %s", exc)
            self.status.set(f"Failed to load config: {exc}", is_error=True)
            return False
        self.form.fill(config)
        return True

    async def save_config(self) -> bool:
        config = self.form.to_config()
        try:
            await self.config_client.save(config)
        except ClientError as exc:
            logger.error("Failed to save config: %s", exc)
            self.status.set(f"Failed to save config: {exc}", is_error=True)
            return False
        self.status.set("Config saved.")
        return True

    async def run_now(self) -> bool:
        self.status.set("Running scrape...")
        try:
            summary = await self.run_trigger.trigger_run()
        except ClientError as exc:
            logger.error("Run failed: %s", exc)
            self.status.set(f"Run failed: {exc}", is_error=True)
            return False
        self.status.set(describe_summary(summary))
        return True

    async def load_jobs(self) -> bool:
        return await self.snapshot_viewer.refresh() is not None
