"""Store initialization: file, connection, tables and first-run seeding.

Safe to run on every process start. Tables are only created when missing
and the demonstration runs are only written while `runs` is empty.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from skitrack import repository
from skitrack.core.config import Settings, settings as default_settings
from skitrack.core.constants import SEED_RUNS
from skitrack.core.time_utils import normalize_rfc3339, parse_rfc3339
from skitrack.db import Base, create_store_from_settings, is_memory_sqlite
from skitrack.errors import SchemaError, StoreConnectionError
from skitrack.models.run import Run  # noqa: F401  (import ensures table is registered)
from skitrack.models.turn import Turn  # noqa: F401

logger = structlog.get_logger(__name__)


def sqlite_file_path(url: str) -> Path | None:
    """Filesystem path of a file-backed SQLite URL, else None."""
    u = make_url(url)
    if u.get_backend_name() != "sqlite" or is_memory_sqlite(url):
        return None
    # sqlite:///file:name?mode=memory&uri=true style URLs are not plain files
    if u.database.startswith("file:"):
        return None
    return Path(u.database)


def ensure_sqlite_file(url: str) -> None:
    """Create the database file (and its directory) if it does not exist.

    Best-effort: the driver may still be able to create or open it, so a
    failure here is only logged.
    """
    path = sqlite_file_path(url)
    if path is None:
        return
    logger.info("database_path", path=str(path))
    if path.exists():
        logger.info("database_file_exists", path=str(path))
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        logger.info("database_file_created", path=str(path))
    except OSError as e:
        logger.warning("database_file_create_failed", path=str(path), error=str(e))


def seed_demo_runs(engine: Engine) -> int:
    """Write the demonstration runs and their turns through the repository.

    Each insert commits on its own, so an interrupted seed can leave a run
    with only some of its turns.
    """
    for run in SEED_RUNS:
        run_id = repository.insert_run(
            engine,
            normalize_rfc3339(run["start_time"]),
            normalize_rfc3339(run["end_time"]),
            run["path"],
        )
        for direction, parallelness, closeness, smoothness, start, end in run["turns"]:
            repository.insert_turn(
                engine,
                run_id,
                direction,
                parallelness,
                closeness,
                smoothness,
                parse_rfc3339(start),
                parse_rfc3339(end),
            )
    return len(SEED_RUNS)


def initialize(settings: Settings | None = None) -> Engine:
    settings = settings or default_settings
    url = settings.database_url
    try:
        safe_url = make_url(url).render_as_string(hide_password=True)
    except ArgumentError as e:
        raise StoreConnectionError(f"Invalid database URL {url!r}: {e}") from e
    logger.info("database_url", url=safe_url)

    ensure_sqlite_file(url)

    logger.info("database_connecting")
    try:
        engine = create_store_from_settings(settings)
    except (SQLAlchemyError, ImportError) as e:
        # unknown dialect or missing driver
        raise StoreConnectionError(f"Cannot create engine for {safe_url}: {e}") from e
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        engine.dispose()
        raise StoreConnectionError(f"Cannot connect to {safe_url}: {e}") from e
    logger.info("database_connected")

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        engine.dispose()
        raise SchemaError(f"Failed to create tables: {e}") from e
    logger.info("tables_ready", tables=sorted(Base.metadata.tables))

    existing = repository.count_runs(engine)
    if existing == 0:
        logger.info("database_empty_seeding")
        seeded = seed_demo_runs(engine)
        logger.info("database_seeded", runs=seeded)
    else:
        logger.info("database_has_runs", runs=existing)

    return engine
