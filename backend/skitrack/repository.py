"""Typed reads and writes against the `runs` and `turns` tables.

Every function takes the engine built at startup and runs a single
statement in its own session; there is no state between calls.
Timestamps are stored as text and parsed back to aware UTC datetimes
on read.
"""

from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skitrack.core.time_utils import format_rfc3339, parse_rfc3339
from skitrack.errors import DecodeError, StoreError, WriteError
from skitrack.models.run import Run
from skitrack.models.turn import Turn
from skitrack.schemas.run import RunRead
from skitrack.schemas.turn import TurnRead

logger = structlog.get_logger(__name__)


def _as_text(value: datetime | str) -> str:
    if isinstance(value, datetime):
        return format_rfc3339(value)
    return value


def _decode(table: str, column: str, row_id: int, value: str) -> datetime:
    try:
        return parse_rfc3339(value)
    except ValueError as e:
        raise DecodeError(table, column, row_id, value) from e


def _insert(engine: Engine, row: Run | Turn) -> int:
    try:
        with Session(engine, expire_on_commit=False) as session:
            session.add(row)
            session.commit()
            return row.id
    except SQLAlchemyError as e:
        logger.error("insert_failed", table=row.__tablename__, error=str(e))
        raise WriteError(f"Failed to insert into {row.__tablename__}: {e}") from e


def insert_run(engine: Engine, start_time: str, end_time: str, path: str) -> int:
    """Insert a run and return its id.

    The timestamps are stored exactly as given; a malformed value is
    accepted here and surfaces as DecodeError on the next read.
    """
    return _insert(engine, Run(start_time=start_time, end_time=end_time, path=path))


def insert_turn(
    engine: Engine,
    run_id: int,
    direction: str,
    parallelness: float,
    closeness: float,
    smoothness: str,
    timestamp_start: datetime | str,
    timestamp_end: datetime | str,
) -> int:
    """Insert a turn and return its id.

    `run_id` is not checked against `runs` (see ENFORCE_FOREIGN_KEYS).
    Datetimes are written in the canonical UTC form, strings as given.
    """
    return _insert(
        engine,
        Turn(
            run_id=run_id,
            direction=direction,
            parallelness=parallelness,
            closeness=closeness,
            smoothness=smoothness,
            timestamp_start=_as_text(timestamp_start),
            timestamp_end=_as_text(timestamp_end),
        ),
    )


def get_runs(engine: Engine) -> list[RunRead]:
    """All runs, most recent start first."""
    stmt = select(Run).order_by(Run.start_time.desc())
    try:
        with Session(engine) as session:
            rows = session.scalars(stmt).all()
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to fetch runs: {e}") from e

    runs = [
        RunRead(
            id=row.id,
            start_time=_decode("runs", "start_time", row.id, row.start_time),
            end_time=_decode("runs", "end_time", row.id, row.end_time),
            path=row.path,
        )
        for row in rows
    ]
    # Stored text may mix offsets and fraction widths, so text order is only a first pass
    return sorted(runs, key=lambda r: r.start_time, reverse=True)


def get_turns_for_run(engine: Engine, run_id: int) -> list[TurnRead]:
    """Turns recorded under `run_id` in chronological order.

    An unknown run and a run without turns both give an empty list.
    """
    stmt = (
        select(Turn)
        .where(Turn.run_id == run_id)
        .order_by(Turn.timestamp_start.asc())
    )
    try:
        with Session(engine) as session:
            rows = session.scalars(stmt).all()
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to fetch turns for run {run_id}: {e}") from e

    turns = [
        TurnRead(
            id=row.id,
            run_id=row.run_id,
            direction=row.direction,
            parallelness=row.parallelness,
            closeness=row.closeness,
            smoothness=row.smoothness,
            timestamp_start=_decode("turns", "timestamp_start", row.id, row.timestamp_start),
            timestamp_end=_decode("turns", "timestamp_end", row.id, row.timestamp_end),
        )
        for row in rows
    ]
    return sorted(turns, key=lambda t: t.timestamp_start)


def count_runs(engine: Engine) -> int:
    try:
        with Session(engine) as session:
            return session.scalar(select(func.count()).select_from(Run))
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to count runs: {e}") from e
