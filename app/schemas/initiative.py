"""Initiative, task, milestone, Kanban board and Gantt timeline schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from app.domain.mixins import as_utc
from app.schemas.common import CamelModel

InitiativeCategory = Literal["circular", "recycling", "waste"]
InitiativeStatus = Literal["planning", "active", "completed", "cancelled"]
TaskStatus = Literal["todo", "in_progress", "completed", "blocked"]
TaskPriority = Literal["low", "medium", "high"]


class EstimatedImpact(CamelModel):
    waste_reduction: float = 0
    cost_savings: float = 0
    carbon_reduction: float = 0


class TaskCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    status: TaskStatus = "todo"
    priority: TaskPriority = "medium"
    progress: int = Field(default=0, ge=0, le=100)
    start_date: datetime | None = None
    due_date: datetime | None = None
    assigned_to: str | None = None


class TaskUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    progress: int | None = Field(default=None, ge=0, le=100)
    start_date: datetime | None = None
    due_date: datetime | None = None
    assigned_to: str | None = None


class TaskOut(CamelModel):
    id: str
    initiative_id: str
    title: str
    description: str
    status: str
    priority: str
    progress: int
    start_date: datetime | None = None
    due_date: datetime | None = None
    assigned_to: str | None = None
    created_at: datetime
    updated_at: datetime


class MilestoneCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    target_date: datetime
    status: Literal["pending", "completed"] = "pending"


class MilestoneUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    target_date: datetime | None = None
    status: Literal["pending", "completed"] | None = None


class MilestoneOut(CamelModel):
    id: str
    initiative_id: str
    title: str
    description: str
    target_date: datetime
    status: str


class InitiativeCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    category: InitiativeCategory
    status: InitiativeStatus = "planning"
    start_date: datetime
    target_date: datetime
    estimated_impact: EstimatedImpact = Field(default_factory=EstimatedImpact)
    tasks: list[TaskCreate] = Field(default_factory=list)
    milestones: list[MilestoneCreate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dates(self) -> "InitiativeCreate":
        if as_utc(self.target_date) < as_utc(self.start_date):
            raise ValueError("targetDate must not precede startDate")
        return self


class InitiativeUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    category: InitiativeCategory | None = None
    status: InitiativeStatus | None = None
    start_date: datetime | None = None
    target_date: datetime | None = None
    estimated_impact: EstimatedImpact | None = None

    @model_validator(mode="after")
    def _check_dates(self) -> "InitiativeUpdate":
        if self.start_date and self.target_date and as_utc(self.target_date) < as_utc(self.start_date):
            raise ValueError("targetDate must not precede startDate")
        return self


class InitiativeOut(CamelModel):
    id: str
    organization_id: str
    title: str
    description: str
    category: str
    status: str
    progress: int
    start_date: datetime
    target_date: datetime
    estimated_impact: EstimatedImpact
    created_by: str | None = None
    tasks: list[TaskOut] = Field(default_factory=list)
    milestones: list[MilestoneOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class StatusMove(CamelModel):
    """Kanban drop: the column the card landed in. Validated against the board columns."""

    status: str = Field(min_length=1)


class BoardColumn(CamelModel):
    id: str
    title: str
    initiatives: list[InitiativeOut]


class TimelineEvent(CamelModel):
    id: str
    title: str
    start: datetime
    end: datetime
    status: str
    all_day: bool = True
    color: str
