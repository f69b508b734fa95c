"""Vendor repository."""

from typing import Any

from sqlalchemy import func

from app.domain.vendor import Vendor
from app.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def search(
        self,
        term: str,
        *,
        offset: int = 0,
        limit: int = 20,
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[Vendor], int]:
        """Case-insensitive substring match on the vendor name, alphabetical."""
        q = self._base_query().where(func.lower(Vendor.name).contains(term.lower(), autoescape=True))
        for col_name, value in (filters or {}).items():
            col = self._column(col_name)
            if value is not None and col is not None:
                q = q.where(col == value)

        total = (await self._session.execute(self._count_query(q))).scalar_one()
        q = q.order_by(Vendor.name.asc()).offset(offset).limit(limit)
        return list((await self._session.execute(q)).scalars().all()), total
