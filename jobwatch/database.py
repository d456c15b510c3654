import sqlite3
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from jobwatch.config import settings
from jobwatch.utils.filesystem import ensure_data_dir


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def get_engine(db_path: Path | None = None):
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


SCHEMA_SQL = """\
-- ============================================================
-- SEARCH / SCHEDULE CONFIGURATION
-- ============================================================
CREATE TABLE IF NOT EXISTS app_config (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

-- ============================================================
-- JOB IDS ALREADY REPORTED AS NEW
-- ============================================================
CREATE TABLE IF NOT EXISTS seen_jobs (
    job_id        TEXT PRIMARY KEY,
    first_seen_at TEXT NOT NULL
);

-- ============================================================
-- LATEST SNAPSHOT (single row, id = 1)
-- ============================================================
CREATE TABLE IF NOT EXISTS snapshots (
    id         INTEGER PRIMARY KEY CHECK(id = 1),
    updated_at TEXT NOT NULL,
    jobs       TEXT NOT NULL,
    new_jobs   TEXT NOT NULL
);
"""


def init_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    ensure_data_dir(path.parent)
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA_SQL)
    conn.close()
