from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from skitrack import repository
from skitrack.db import get_engine
from skitrack.schemas.turn import TurnCreate

router = APIRouter(prefix="/api/turns", tags=["turns"])


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
def create_turn(payload: TurnCreate, engine: Engine = Depends(get_engine)):
    # run_id is passed through unchecked, like the repository does
    return repository.insert_turn(
        engine,
        payload.run_id,
        payload.direction,
        payload.parallelness,
        payload.closeness,
        payload.smoothness,
        payload.timestamp_start,
        payload.timestamp_end,
    )


@router.get("")
def list_turns_not_allowed():
    """Turns are only listed nested under their run (GET /api/runs)."""
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
        content={
            "error": "Method Not Allowed",
            "message": "This endpoint only accepts POST requests",
            "allowed_methods": ["POST"],
        },
    )
