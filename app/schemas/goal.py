"""Goal schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from app.domain.mixins import as_utc
from app.schemas.common import CamelModel

GoalStatus = Literal["in_progress", "completed", "failed"]


class GoalCreate(CamelModel):
    type: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    target_percentage: int = Field(ge=0, le=100)
    start_date: datetime
    end_date: datetime

    @model_validator(mode="after")
    def _check_dates(self) -> "GoalCreate":
        if as_utc(self.end_date) < as_utc(self.start_date):
            raise ValueError("endDate must not precede startDate")
        return self


class GoalUpdate(CamelModel):
    type: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, min_length=1)
    target_percentage: int | None = Field(default=None, ge=0, le=100)
    current_percentage: int | None = Field(default=None, ge=0, le=100)
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: GoalStatus | None = None


class GoalOut(CamelModel):
    id: str
    organization_id: str
    type: str
    description: str
    target_percentage: int
    current_percentage: int
    progress: float
    start_date: datetime
    end_date: datetime
    status: str
    user_id: str | None = None
    created_at: datetime
    updated_at: datetime
