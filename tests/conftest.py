from contextlib import asynccontextmanager
from datetime import date

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from jobwatch.client.session import PageSession
from jobwatch.config import settings
from jobwatch.database import get_db, init_db
from jobwatch.dependencies import get_job_source, get_run_service
from jobwatch.main import app
from jobwatch.schemas.job import Job
from jobwatch.services.job_source import StaticJobSource
from jobwatch.services.run_service import RunService


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def _make_job(n: int, posted: date | None = None, job_id: str | None = None) -> Job:
    return Job(
        id=job_id if job_id is not None else str(n),
        title=f"Engineer {n}",
        company=f"Company {n}",
        location="Remote",
        url=f"https://example.com/jobs/{n}",
        posted_date=posted if posted is not None else date.today(),
    )


@pytest.fixture
def make_job():
    return _make_job


@pytest.fixture
def tmp_data_dir(tmp_path):
    data_dir = tmp_path / "jobwatch"
    data_dir.mkdir()
    original = settings.data_dir
    settings.data_dir = data_dir
    yield data_dir
    settings.data_dir = original


@pytest.fixture
def test_db(tmp_data_dir):
    db_path = tmp_data_dir / "jobwatch.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def job_source(test_db):
    source = StaticJobSource([])
    app.dependency_overrides[get_job_source] = lambda: source
    return source


@pytest.fixture
def run_service(test_db):
    service = RunService()
    app.dependency_overrides[get_run_service] = lambda: service
    return service


@pytest.fixture
def client(test_db, job_source, run_service):
    return TestClient(app)


@pytest.fixture
def backend_session(test_db, job_source, run_service):
    """Open a PageSession that talks to the app in-process."""

    @asynccontextmanager
    async def _open():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            yield PageSession(http=http)

    return _open


@pytest.fixture
def mock_session():
    """Open a PageSession whose requests are answered by ``handler``."""

    @asynccontextmanager
    async def _open(handler):
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://backend") as http:
            yield PageSession(http=http)

    return _open
