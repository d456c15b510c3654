from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, field_validator


class Job(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    company: str
    location: str
    url: str
    id: str | None = None
    posted_date: date | None = None


class JobSnapshot(BaseModel):
    updated_at: datetime | None = None
    jobs: list[Job]
    new_jobs: list[str]

    @field_validator("new_jobs", mode="before")
    @classmethod
    def _identifiers(cls, value):
        # Older backends store the full posting for each new job.
        if not isinstance(value, list):
            return value
        return [item.get("id") if isinstance(item, dict) else item for item in value]

    @property
    def new_job_ids(self) -> set[str]:
        return set(self.new_jobs)

    @classmethod
    def empty(cls) -> "JobSnapshot":
        return cls(updated_at=None, jobs=[], new_jobs=[])


class RunSummary(BaseModel):
    new_jobs: int
    today_jobs: int
    total_jobs: int | None = None
    updated_at: datetime | None = None

    @field_validator("new_jobs", "today_jobs")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be >= 0")
        return value
