from pydantic import BaseModel, Field, field_validator

from jobwatch.utils.numbers import lenient_int

DEFAULT_INTERVAL_HOURS = 4


class SearchConfig(BaseModel):
    keywords: str = ""
    location: str = ""
    remote: bool = False
    salary_min: int = 0

    @field_validator("keywords", "location", mode="before")
    @classmethod
    def _text_or_empty(cls, value):
        if value is None:
            return ""
        return value

    @field_validator("remote", mode="before")
    @classmethod
    def _truthy(cls, value):
        return bool(value)

    @field_validator("salary_min", mode="before")
    @classmethod
    def _lenient_salary(cls, value):
        return lenient_int(value, default=0, minimum=0)


class ScheduleConfig(BaseModel):
    interval_hours: int = DEFAULT_INTERVAL_HOURS

    @field_validator("interval_hours", mode="before")
    @classmethod
    def _lenient_interval(cls, value):
        return lenient_int(value, default=DEFAULT_INTERVAL_HOURS, minimum=1)


class Config(BaseModel):
    search: SearchConfig
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)

    @field_validator("schedule", mode="before")
    @classmethod
    def _schedule_or_default(cls, value):
        # A null schedule reads the same as a missing one.
        if value is None:
            return {}
        return value
