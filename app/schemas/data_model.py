"""Data model schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from app.schemas.common import CamelModel

DataModelType = Literal["waste", "environmental", "material", "lca", "carbon", "cost", "cv"]
DataModelSource = Literal["internal", "ecoinvent", "external"]
DataModelStatus = Literal["active", "in progress", "inactive", "archived"]


class DataModelCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    type: DataModelType
    source: DataModelSource = "internal"
    version: str = Field(default="1.0", min_length=1, max_length=50)
    status: DataModelStatus = "in progress"
    builder_config: dict[str, Any] | None = None


class DataModelUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    type: DataModelType | None = None
    source: DataModelSource | None = None
    version: str | None = Field(default=None, min_length=1, max_length=50)
    status: DataModelStatus | None = None
    builder_config: dict[str, Any] | None = None


class DataModelOut(CamelModel):
    id: str
    organization_id: str
    name: str
    description: str | None = None
    type: str
    source: str
    version: str
    status: str
    builder_config: dict[str, Any] | None = None
    last_updated: datetime
    created_at: datetime
    updated_at: datetime
