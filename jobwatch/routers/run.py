from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobwatch.database import get_db
from jobwatch.dependencies import get_job_source, get_run_service
from jobwatch.schemas.job import RunSummary
from jobwatch.services.job_source import JobSource, JobSourceError
from jobwatch.services.run_service import RunInProgressError, RunService

router = APIRouter(prefix="/run", tags=["run"])


@router.post("", response_model=RunSummary)
async def run_scrape(
    db: Session = Depends(get_db),
    source: JobSource = Depends(get_job_source),
    service: RunService = Depends(get_run_service),
):
    try:
        return await service.run_once(db, source)
    except RunInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except JobSourceError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
