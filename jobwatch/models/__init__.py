from jobwatch.models.app_config import AppConfig
from jobwatch.models.seen_job import SeenJob
from jobwatch.models.snapshot import Snapshot

__all__ = ["AppConfig", "SeenJob", "Snapshot"]
