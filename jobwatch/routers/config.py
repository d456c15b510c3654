from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobwatch.database import get_db
from jobwatch.schemas.config import Config
from jobwatch.services import storage_service

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=Config)
async def get_config(db: Session = Depends(get_db)):
    return storage_service.load_config_or_default(db)


@router.post("", response_model=Config)
async def update_config(config: Config, db: Session = Depends(get_db)):
    return storage_service.save_config(db, config)
