from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".jobwatch"
    # Client side: where the backend lives and how long a request may take.
    # None disables the client timeout.
    base_url: str = "http://127.0.0.1:8080"
    request_timeout: float | None = None
    # Backend side.
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 8080
    scheduler_enabled: bool = True
    default_interval_hours: int = 4

    @property
    def db_path(self) -> Path:
        return self.data_dir / "jobwatch.sqlite"

    @property
    def cookies_path(self) -> Path:
        return self.data_dir / "cookies.txt"

    model_config = {"env_prefix": "JOBWATCH_"}


settings = Settings()
