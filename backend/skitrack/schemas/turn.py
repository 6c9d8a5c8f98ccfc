from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from skitrack.core.time_utils import Rfc3339Datetime


class TurnBase(BaseModel):
    direction: str  # "left" / "right" by convention
    parallelness: float
    closeness: float
    smoothness: str  # "smooth" / "abrupt" by convention


class TurnCreate(TurnBase):
    run_id: int
    timestamp_start: Rfc3339Datetime
    timestamp_end: Rfc3339Datetime

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if self.timestamp_end < self.timestamp_start:
            raise ValueError("timestamp_end must not be before timestamp_start")
        return self


class TurnRead(TurnBase):
    id: int
    run_id: int
    timestamp_start: datetime
    timestamp_end: datetime
