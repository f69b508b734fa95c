"""Per-user dashboard layout slots.

Each slot holds an ordered list of visible module ids drawn from a fixed
catalogue. A user who never saved a slot sees its default. The ``app-mode``
slot stores ``simple`` / ``advanced`` instead of a module list and picks the
default set for ``navigation-modules``.
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.domain.layout import LayoutPreference
from app.repositories.layout import LayoutRepository

logger = logging.getLogger(__name__)

APP_MODE_SLOT = "app-mode"
APP_MODES: tuple[str, ...] = ("simple", "advanced")
DEFAULT_APP_MODE = "simple"


@dataclass(frozen=True)
class SlotDefinition:
    name: str
    # module id -> display name, in catalogue order
    modules: dict[str, str]
    default: tuple[str, ...]
    mode_defaults: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def default_for(self, mode: str | None = None) -> list[str]:
        if mode and mode in self.mode_defaults:
            return list(self.mode_defaults[mode])
        return list(self.default)


_NAV_SIMPLE = (
    "home", "wastepoints", "projects", "vendors", "sensors", "locations",
    "circular", "analytics", "training", "alerts", "help",
)
_NAV_ADVANCED = ("home", "dataModels", "advancedAnalytics", "alerts", "help")

SLOTS: dict[str, SlotDefinition] = {
    slot.name: slot
    for slot in (
        SlotDefinition(
            name="dashboard-layout",
            modules={
                "metrics": "Metrics",
                "quickActions": "Quick Actions",
                "goals": "Goals",
                "initiatives": "Initiatives",
                "trends": "Trends",
                "pickups": "Pickups",
                "impactMeter": "Impact Meter",
                "leaderboard": "Leaderboard",
                "recommendations": "Recommendations",
                "disposalAnalytics": "Disposal Analytics",
            },
            default=("metrics", "quickActions", "goals", "initiatives", "trends", "pickups"),
        ),
        SlotDefinition(
            name="homepage-layout",
            modules={
                "metrics": "Metrics",
                "impactMeter": "Impact Meter",
                "goals": "Goals",
                "disposalAnalytics": "Disposal Analytics",
                "recommendations": "Recommendations",
                "trends": "Trends",
                "initiatives": "Initiatives",
                "leaderboard": "Leaderboard",
                "pickups": "Pickups",
                "sankey": "Sankey Chart",
            },
            default=(
                "metrics", "impactMeter", "goals", "disposalAnalytics", "recommendations",
                "trends", "initiatives", "leaderboard", "pickups", "sankey",
            ),
        ),
        SlotDefinition(
            name="navigation-modules",
            modules={
                "home": "Home",
                "wastepoints": "Wastepoints",
                "projects": "Projects",
                "vendors": "Vendors",
                "sensors": "Sensors",
                "locations": "Locations",
                "circular": "Circular",
                "analytics": "Analytics",
                "training": "Training",
                "help": "Help",
                "dataModels": "Data Models",
                "advancedAnalytics": "Advanced Analytics",
                "alerts": "Alerts",
                "dataBuilder": "Data Builder",
            },
            default=_NAV_SIMPLE,
            mode_defaults={"simple": _NAV_SIMPLE, "advanced": _NAV_ADVANCED},
        ),
    )
}


def get_slot(name: str) -> SlotDefinition:
    slot = SLOTS.get(name)
    if slot is None:
        raise NotFoundError("Layout slot", name)
    return slot


def normalize_modules(slot: SlotDefinition, modules: list[str]) -> list[str]:
    """Reject unknown ids; drop repeats keeping the first occurrence."""
    unknown = [m for m in modules if m not in slot.modules]
    if unknown:
        raise ValidationError(f"Unknown module(s) for {slot.name}: {', '.join(unknown)}")
    return list(dict.fromkeys(modules))


def toggled(modules: list[str], module: str) -> list[str]:
    if module in modules:
        return [m for m in modules if m != module]
    return [*modules, module]


def layout_view(slot: SlotDefinition, visible: list[str]) -> dict:
    return {
        "slot": slot.name,
        "visible_modules": visible,
        "available_modules": [{"id": k, "name": v} for k, v in slot.modules.items()],
    }


class LayoutService:
    def __init__(self, session: AsyncSession, organization_id: str, user_id: str):
        self._repo = LayoutRepository(session, organization_id)
        self._user_id = user_id

    async def _save(self, slot: str, **values) -> LayoutPreference:
        row = await self._repo.get_slot(self._user_id, slot)
        if row is None:
            values.setdefault("visible_modules", [])
            return await self._repo.create(user_id=self._user_id, slot=slot, **values)
        return await self._repo.update(row.id, **values)  # type: ignore[return-value]

    async def _visible(self, slot: SlotDefinition) -> list[str]:
        row = await self._repo.get_slot(self._user_id, slot.name)
        if row is None:
            return slot.default_for(await self.get_mode() if slot.mode_defaults else None)
        return list(row.visible_modules)

    # ------------------------------------------------------------------
    # Module slots
    # ------------------------------------------------------------------

    async def get_layout(self, slot_name: str) -> dict:
        slot = get_slot(slot_name)
        return layout_view(slot, await self._visible(slot))

    async def set_modules(self, slot_name: str, modules: list[str]) -> dict:
        slot = get_slot(slot_name)
        visible = normalize_modules(slot, modules)
        await self._save(slot.name, visible_modules=visible)
        return layout_view(slot, visible)

    async def toggle_module(self, slot_name: str, module: str) -> dict:
        slot = get_slot(slot_name)
        normalize_modules(slot, [module])
        visible = toggled(await self._visible(slot), module)
        await self._save(slot.name, visible_modules=visible)
        return layout_view(slot, visible)

    async def reset(self, slot_name: str, mode: str | None = None) -> dict:
        """Back to the slot default; navigation follows the given (or saved) app mode."""
        slot = get_slot(slot_name)
        if slot.mode_defaults and mode is None:
            mode = await self.get_mode()
        visible = slot.default_for(mode)
        await self._save(slot.name, visible_modules=visible)
        logger.debug("Reset %s for user %s", slot.name, self._user_id)
        return layout_view(slot, visible)

    # ------------------------------------------------------------------
    # App mode
    # ------------------------------------------------------------------

    async def get_mode(self) -> str:
        row = await self._repo.get_slot(self._user_id, APP_MODE_SLOT)
        if row is None or row.mode not in APP_MODES:
            return DEFAULT_APP_MODE
        return row.mode

    async def set_mode(self, mode: str) -> str:
        if mode not in APP_MODES:
            raise ValidationError(f"Unknown app mode '{mode}'")
        await self._save(APP_MODE_SLOT, mode=mode)
        return mode

    async def toggle_mode(self) -> str:
        current = await self.get_mode()
        return await self.set_mode("advanced" if current == "simple" else "simple")
