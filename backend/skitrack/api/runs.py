from fastapi import APIRouter, Depends, status
from sqlalchemy.engine import Engine

from skitrack import repository
from skitrack.core.config import Settings
from skitrack.core.time_utils import format_rfc3339
from skitrack.db import get_engine, get_settings
from skitrack.schemas.envelope import Envelope, build_links
from skitrack.schemas.run import RunCreate, RunList, RunWithTurns

router = APIRouter(prefix="/api/runs", tags=["runs"])


@router.get("", response_model=Envelope[RunList])
def list_runs(engine: Engine = Depends(get_engine)):
    """
    List every run, most recent first, each with its turns in order.

    One turns query per run; fine for the handful of runs a user records.
    """
    runs: list[RunWithTurns] = []
    for run in repository.get_runs(engine):
        turns = repository.get_turns_for_run(engine, run.id)
        runs.append(RunWithTurns(**run.model_dump(), turns=turns))

    return Envelope[RunList](links=build_links("/api/runs"), data=RunList(runs=runs))


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
def create_run(
    payload: RunCreate,
    engine: Engine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    # The client does not send a track yet; every API run gets the default path
    return repository.insert_run(
        engine,
        format_rfc3339(payload.start_time),
        format_rfc3339(payload.end_time),
        settings.default_run_path,
    )
