"""Device, sensor, image and sensor-reading services, plus device-side ingestion."""

import hmac
import logging
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.core.pagination import PaginationParams
from app.core.security import new_access_code, new_device_token, token_hash
from app.domain.device import Device, Image, Sensor, SensorReading
from app.domain.mixins import utcnow
from app.repositories.device import (
    DeviceRepository,
    ImageRepository,
    SensorReadingRepository,
    SensorRepository,
    get_device_by_access_code,
)
from app.schemas.device import (
    DeviceCreate,
    DeviceUpdate,
    ImageCreate,
    ImageUpdate,
    ReadingCreate,
    SensorCreate,
    SensorUpdate,
)

logger = logging.getLogger(__name__)

READING_RANGES: dict[str, timedelta] = {
    "1h": timedelta(hours=1),
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_READING_RANGE = "24h"
MAX_READINGS_PER_WINDOW = 5000


class DeviceService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = DeviceRepository(session, organization_id)
        self._readings = SensorReadingRepository(session, organization_id)
        self._sensors = SensorRepository(session, organization_id)

    async def list_devices(self, pagination: PaginationParams, status: str | None = None):
        filters = {"status": status} if status else None
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters=filters,
        )

    async def get_device(self, device_id: str) -> Device:
        device = await self._repo.get_by_id(device_id)
        if not device:
            raise NotFoundError("Device", device_id)
        return device

    async def _free_access_code(self) -> str:
        code = new_access_code()
        while await self._repo.access_code_taken(code):
            code = new_access_code()
        return code

    async def create_device(self, data: DeviceCreate, user_id: str | None = None) -> tuple[Device, str]:
        """Register a device; returns the row and its raw device token."""
        payload = data.model_dump(exclude_none=True)
        if data.device_id:
            if await self._repo.access_code_taken(data.device_id):
                raise ConflictError(f"Device access code '{data.device_id}' is already in use")
        else:
            payload["device_id"] = await self._free_access_code()

        raw_token = new_device_token()
        device = await self._repo.create(
            **payload, device_token_hash=token_hash(raw_token), user_id=user_id
        )
        logger.info("Registered device %s (%s)", device.id, device.device_id)
        return device, raw_token

    async def update_device(self, device_id: str, data: DeviceUpdate) -> Device:
        _ = await self.get_device(device_id)
        updated = await self._repo.update(
            device_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_device(self, device_id: str) -> None:
        deleted = await self._repo.soft_delete(device_id)
        if not deleted:
            raise NotFoundError("Device", device_id)

    # ------------------------------------------------------------------
    # Readings
    # ------------------------------------------------------------------

    async def list_readings(self, device_id: str, range_key: str | None = None) -> list[SensorReading]:
        """The newest readings inside the window ending now, oldest first. Unknown ranges fall back to 24h."""
        _ = await self.get_device(device_id)
        window = READING_RANGES.get(range_key or DEFAULT_READING_RANGE, READING_RANGES[DEFAULT_READING_RANGE])
        until = utcnow()
        return await self._readings.list_for_device(
            device_id, since=until - window, until=until, limit=MAX_READINGS_PER_WINDOW
        )

    async def record_reading(self, device_id: str, data: ReadingCreate) -> SensorReading:
        device = await self.get_device(device_id)
        return await self.add_reading(device, data)

    async def add_reading(self, device: Device, data: ReadingCreate) -> SensorReading:
        if data.sensor_id:
            sensor = await self._sensors.get_by_id(data.sensor_id)
            if sensor is None or sensor.device_id != device.id:
                raise NotFoundError("Sensor", data.sensor_id)

        now = utcnow()
        payload = data.model_dump(exclude_none=True, exclude={"value", "unit"})
        payload.setdefault("recorded_at", now)
        reading = await self._readings.create(device_id=device.id, **payload)

        headline = data.value if data.value is not None else data.fill_level
        changes: dict = {"iot_status": "connected", "last_connected": now}
        if headline is not None:
            changes["last_reading"] = headline
            changes["last_reading_unit"] = data.unit or ("%" if data.value is None else None)
        if data.battery_level is not None:
            changes["battery_level"] = data.battery_level
        await self._repo.update(device.id, **changes)
        return reading


class IngestionService:
    """Device-side ingestion; the tenant comes from the authenticated device."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def authenticate(self, access_code: str | None, raw_token: str | None) -> Device:
        if not access_code or not raw_token:
            raise UnauthorizedError("Device credentials required")
        device = await get_device_by_access_code(self._session, access_code)
        if device is None or not hmac.compare_digest(device.device_token_hash, token_hash(raw_token)):
            raise UnauthorizedError("Invalid device credentials")
        if not device.is_active:
            raise UnauthorizedError("Device is disabled")
        return device

    async def ingest(self, access_code: str | None, raw_token: str | None, data: ReadingCreate) -> SensorReading:
        device = await self.authenticate(access_code, raw_token)
        reading = await DeviceService(self._session, device.organization_id).add_reading(device, data)
        logger.debug("Ingested reading %s from device %s", reading.id, device.device_id)
        return reading


class SensorService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = SensorRepository(session, organization_id)
        self._devices = DeviceRepository(session, organization_id)

    async def _check_device(self, device_id: str) -> None:
        if not await self._devices.get_by_id(device_id):
            raise NotFoundError("Device", device_id)

    async def list_sensors(self, pagination: PaginationParams, device_id: str | None = None):
        filters = {"device_id": device_id} if device_id else None
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters=filters,
        )

    async def get_sensor(self, sensor_id: str) -> Sensor:
        sensor = await self._repo.get_by_id(sensor_id)
        if not sensor:
            raise NotFoundError("Sensor", sensor_id)
        return sensor

    async def create_sensor(self, data: SensorCreate) -> Sensor:
        await self._check_device(data.device_id)
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_sensor(self, sensor_id: str, data: SensorUpdate) -> Sensor:
        _ = await self.get_sensor(sensor_id)
        updated = await self._repo.update(
            sensor_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_sensor(self, sensor_id: str) -> None:
        deleted = await self._repo.soft_delete(sensor_id)
        if not deleted:
            raise NotFoundError("Sensor", sensor_id)


class ImageService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = ImageRepository(session, organization_id)
        self._devices = DeviceRepository(session, organization_id)

    async def list_images(self, pagination: PaginationParams, device_id: str | None = None):
        filters = {"device_id": device_id} if device_id else None
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters=filters,
        )

    async def get_image(self, image_id: str) -> Image:
        image = await self._repo.get_by_id(image_id)
        if not image:
            raise NotFoundError("Image", image_id)
        return image

    async def create_image(self, data: ImageCreate, user_id: str | None = None) -> Image:
        if not await self._devices.get_by_id(data.device_id):
            raise NotFoundError("Device", data.device_id)
        return await self._repo.create(**data.model_dump(exclude_none=True), user_id=user_id)

    async def update_image(self, image_id: str, data: ImageUpdate) -> Image:
        _ = await self.get_image(image_id)
        updated = await self._repo.update(
            image_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_image(self, image_id: str) -> None:
        deleted = await self._repo.soft_delete(image_id)
        if not deleted:
            raise NotFoundError("Image", image_id)
