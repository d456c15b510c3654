import logging
from dataclasses import dataclass

import httpx

from jobwatch.client.transport import fetch_json, parse_model
from jobwatch.schemas.config import DEFAULT_INTERVAL_HOURS, Config, ScheduleConfig, SearchConfig
from jobwatch.utils.numbers import lenient_int

logger = logging.getLogger(__name__)

CONFIG_PATH = "/api/config"


class ConfigClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def load(self) -> Config:
        data = await fetch_json(self._http, "GET", CONFIG_PATH)
        config = parse_model(Config, data)
        logger.debug("Loaded config: %s", config.model_dump())
        return config

    async def save(self, config: Config) -> None:
        # The backend replaces its stored config wholesale; the reply is not needed.
        await fetch_json(
            self._http, "POST", CONFIG_PATH, payload=config.model_dump(), expect_body=False
        )
        logger.info("Saved config (keywords=%r, interval=%dh)",
                    config.search.keywords, config.schedule.interval_hours)


@dataclass
class ConfigForm:
    """Form-equivalent state for the config editor.

    Number fields hold raw text, as an input box would.
    """

    keywords: str = ""
    location: str = ""
    remote: bool = False
    salary_min: str = "0"
    interval_hours: str = str(DEFAULT_INTERVAL_HOURS)

    def fill(self, config: Config) -> None:
        self.keywords = config.search.keywords
        self.location = config.search.location
        self.remote = config.search.remote
        self.salary_min = str(config.search.salary_min)
        self.interval_hours = str(config.schedule.interval_hours)

    def to_config(self) -> Config:
        return Config(
            search=SearchConfig(
                keywords=self.keywords.strip(),
                location=self.location.strip(),
                remote=self.remote,
                salary_min=lenient_int(self.salary_min, default=0),
            ),
            schedule=ScheduleConfig(
                interval_hours=lenient_int(self.interval_hours, default=DEFAULT_INTERVAL_HOURS, minimum=1),
            ),
        )
