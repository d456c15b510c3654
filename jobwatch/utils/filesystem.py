from pathlib import Path
from jobwatch.config import settings


def ensure_data_dir(data_dir: Path | None = None) -> Path:
    path = data_dir or settings.data_dir
    path.mkdir(parents=True, exist_ok=True)
    return path
