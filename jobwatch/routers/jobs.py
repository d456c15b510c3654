from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobwatch.database import get_db
from jobwatch.schemas.job import JobSnapshot
from jobwatch.services import storage_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobSnapshot)
async def get_jobs(db: Session = Depends(get_db)):
    return storage_service.load_snapshot(db)
