from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from skitrack.core.time_utils import Rfc3339Datetime
from skitrack.schemas.turn import TurnRead


class RunCreate(BaseModel):
    """Schema for creating a new run. The path is set by the server."""

    start_time: Rfc3339Datetime
    end_time: Rfc3339Datetime

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class RunRead(BaseModel):
    id: int
    start_time: datetime
    end_time: datetime
    path: str


class RunWithTurns(RunRead):
    """A run with its turns in chronological order, as listed by GET /api/runs."""

    turns: list[TurnRead] = []


class RunList(BaseModel):
    runs: list[RunWithTurns]
