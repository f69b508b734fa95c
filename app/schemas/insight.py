"""AI sustainability insight schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel


class Insight(CamelModel):
    id: str
    category: str
    title: str
    description: str
    impact: Literal["High", "Medium", "Low"] = "Medium"
    recommendations: list[str] = Field(default_factory=list)
    timestamp: datetime


class InsightsOut(CamelModel):
    source: Literal["openai", "curated"]
    insights: list[Insight]
