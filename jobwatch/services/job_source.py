from abc import ABC, abstractmethod

from jobwatch.schemas.config import Config
from jobwatch.schemas.job import Job


class JobSourceError(Exception):
    """The job source could not produce postings for this run."""


class JobSource(ABC):
    """Produces the current postings for a search configuration."""

    @abstractmethod
    async def fetch(self, config: Config) -> list[Job]:
        pass


class NullJobSource(JobSource):
    async def fetch(self, config: Config) -> list[Job]:
        return []


class StaticJobSource(JobSource):
    """Serves a fixed list of postings; handy for demos and tests."""

    def __init__(self, jobs: list[Job]):
        self.jobs = list(jobs)
        self.calls: list[Config] = []

    async def fetch(self, config: Config) -> list[Job]:
        self.calls.append(config)
        return list(self.jobs)


default_job_source: JobSource = NullJobSource()
