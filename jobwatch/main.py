import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException

from jobwatch.config import settings
from jobwatch.database import SessionLocal, init_db
from jobwatch.dependencies import get_job_source, get_run_service
from jobwatch.routers import config, jobs, run
from jobwatch.services.scheduler_service import run_scheduler

logger = logging.getLogger("jobwatch")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(settings.db_path)
    task = None
    if settings.scheduler_enabled:
        task = asyncio.create_task(run_scheduler(get_run_service(), SessionLocal, get_job_source()))
        logger.info("Scheduler started.")
    yield
    if task is not None:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


app = FastAPI(
    title="jobwatch",
    description="Scheduled job scraping with new-since-last-run tracking",
    version="0.1.0",
    lifespan=lifespan,
)


# Error bodies are plain text.
@app.exception_handler(HTTPException)
async def http_error_as_text(request: Request, exc: HTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_as_text(request: Request, exc: RequestValidationError):
    first = exc.errors()[0]
    where = ".".join(str(part) for part in first["loc"])
    return PlainTextResponse(f"Invalid request at {where}: {first['msg']}", status_code=422)


app.include_router(config.router, prefix=settings.api_prefix)
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(run.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
