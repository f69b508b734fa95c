"""Data model service. Any update bumps ``last_updated``."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.pagination import PaginationParams
from app.domain.data_model import DataModel
from app.domain.mixins import utcnow
from app.repositories.data_model import DataModelRepository
from app.schemas.data_model import DataModelCreate, DataModelUpdate


class DataModelService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = DataModelRepository(session, organization_id)

    async def list_data_models(
        self,
        pagination: PaginationParams,
        model_type: str | None = None,
        status: str | None = None,
    ):
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters={"type": model_type, "status": status},
        )

    async def get_data_model(self, data_model_id: str) -> DataModel:
        data_model = await self._repo.get_by_id(data_model_id)
        if not data_model:
            raise NotFoundError("Data model", data_model_id)
        return data_model

    async def create_data_model(self, data: DataModelCreate) -> DataModel:
        return await self._repo.create(**data.model_dump(exclude_none=True), last_updated=utcnow())

    async def update_data_model(self, data_model_id: str, data: DataModelUpdate) -> DataModel:
        _ = await self.get_data_model(data_model_id)
        updated = await self._repo.update(
            data_model_id,
            **data.model_dump(exclude_none=True, exclude_unset=True),
            last_updated=utcnow(),
        )
        return updated  # type: ignore[return-value]

    async def delete_data_model(self, data_model_id: str) -> None:
        deleted = await self._repo.soft_delete(data_model_id)
        if not deleted:
            raise NotFoundError("Data model", data_model_id)
