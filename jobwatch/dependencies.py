from jobwatch.services import job_source
from jobwatch.services.job_source import JobSource
from jobwatch.services.run_service import RunService, run_service


def get_job_source() -> JobSource:
    return job_source.default_job_source


def get_run_service() -> RunService:
    return run_service
