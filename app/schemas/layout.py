"""Dashboard layout slot schemas."""

from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel

AppMode = Literal["simple", "advanced"]


class ModuleInfo(CamelModel):
    id: str
    name: str


class LayoutOut(CamelModel):
    slot: str
    visible_modules: list[str]
    available_modules: list[ModuleInfo]


class VisibleModulesUpdate(CamelModel):
    visible_modules: list[str] = Field(default_factory=list)


class ModuleToggle(CamelModel):
    module: str = Field(min_length=1)


class ModeOut(CamelModel):
    mode: AppMode


class ModeUpdate(CamelModel):
    mode: AppMode
