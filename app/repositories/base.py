"""Generic async repository with soft-delete, pagination, and tenant isolation."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base
from app.domain.mixins import utcnow

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository. All queries are filtered by organization_id.

    Soft-deletes: rows with `deleted_at IS NOT NULL` are excluded from all
    standard reads. Hard-delete is intentionally never exposed.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession, organization_id: str):
        self._session = session
        self._organization_id = organization_id

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        """Return a SELECT filtered by organization_id and excluding soft-deleted rows."""
        q = select(self.model).where(self.model.organization_id == self._organization_id)
        if hasattr(self.model, "deleted_at"):
            q = q.where(self.model.deleted_at.is_(None))
        return q

    @staticmethod
    def _count_query(q):
        return select(func.count()).select_from(q.subquery())

    def _column(self, name: str):
        """Return the mapped column *name*, or None when it is not a real column."""
        if name not in self.model.__table__.columns:
            return None
        return getattr(self.model, name)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def get_many(self, entity_ids: list[str]) -> list[ModelT]:
        if not entity_ids:
            return []
        result = await self._session.execute(
            self._base_query()
            .where(self.model.id.in_(entity_ids))
            .order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 20,
        order_by: str = "created_at",
        order: str = "desc",
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) with pagination and optional column filters."""
        q = self._base_query()

        # Apply simple equality filters
        if filters:
            for col_name, value in filters.items():
                col = self._column(col_name)
                if value is not None and col is not None:
                    q = q.where(col == value)

        total = (await self._session.execute(self._count_query(q))).scalar_one()

        # Order + paginate
        col = self._column(order_by)
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())
        q = q.offset(offset).limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    async def count(self) -> int:
        return (await self._session.execute(self._count_query(self._base_query()))).scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(organization_id=self._organization_id, **kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        kwargs.pop("id", None)
        kwargs.pop("organization_id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = utcnow()

        await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.organization_id == self._organization_id)
            .values(**kwargs)
        )
        await self._session.flush()
        return await self.get_by_id(entity_id)

    async def soft_delete(self, entity_id: str) -> bool:
        q = (
            update(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.organization_id == self._organization_id)
        )
        if hasattr(self.model, "deleted_at"):
            q = q.where(self.model.deleted_at.is_(None))
        result = await self._session.execute(q.values(deleted_at=utcnow()))
        await self._session.flush()
        return result.rowcount > 0
