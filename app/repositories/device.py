"""Device, sensor, reading and image repositories."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.device import Device, Image, Sensor, SensorReading
from app.repositories.base import BaseRepository


class DeviceRepository(BaseRepository[Device]):
    model = Device

    async def access_code_taken(self, access_code: str) -> bool:
        # Access codes are unique across tenants
        result = await self._session.execute(
            select(Device.id).where(Device.device_id == access_code)
        )
        return result.first() is not None


class SensorRepository(BaseRepository[Sensor]):
    model = Sensor


class ImageRepository(BaseRepository[Image]):
    model = Image


class SensorReadingRepository(BaseRepository[SensorReading]):
    """Readings are append-only: no update or soft-delete is used."""

    model = SensorReading

    async def list_for_device(
        self,
        device_id: str,
        *,
        since: datetime,
        until: datetime,
        limit: int = 5000,
    ) -> list[SensorReading]:
        """Newest ``limit`` readings inside the window, returned oldest first."""
        q = (
            self._base_query()
            .where(SensorReading.device_id == device_id)
            .where(SensorReading.recorded_at >= since)
            .where(SensorReading.recorded_at <= until)
            .order_by(SensorReading.recorded_at.desc())
            .limit(limit)
        )
        newest = list((await self._session.execute(q)).scalars().all())
        newest.reverse()
        return newest


async def get_device_by_access_code(session: AsyncSession, access_code: str) -> Device | None:
    """Resolve a device before the tenant is known (device-side ingestion)."""
    result = await session.execute(
        select(Device)
        .where(Device.device_id == access_code)
        .where(Device.deleted_at.is_(None))
    )
    return result.scalars().first()
