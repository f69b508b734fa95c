"""Vendor service: the waste haulers and recyclers an organization contracts with.

A vendor carries a 0-100 scorecard (rating, on-time rate, recycling
efficiency, customer satisfaction) and optional contract terms.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.core.pagination import PaginationParams
from app.domain.mixins import as_utc
from app.domain.vendor import Vendor
from app.repositories.vendor import VendorRepository
from app.schemas.vendor import VendorCreate, VendorUpdate

logger = logging.getLogger(__name__)


def _check_contract(start, end) -> None:
    if start and end and as_utc(end) < as_utc(start):
        raise ValidationError("contractEnd must not precede contractStart")


class VendorService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = VendorRepository(session, organization_id)

    async def list_vendors(
        self,
        pagination: PaginationParams,
        status: str | None = None,
        search: str | None = None,
    ):
        """Paginated vendors; a ``search`` term switches to alphabetical name matching."""
        filters = {"status": status}
        if search:
            return await self._repo.search(
                search, offset=pagination.offset, limit=pagination.limit, filters=filters
            )
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters=filters,
        )

    async def get_vendor(self, vendor_id: str) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor

    async def create_vendor(self, data: VendorCreate) -> Vendor:
        _check_contract(data.contract_start, data.contract_end)
        vendor = await self._repo.create(**data.model_dump(exclude_none=True))
        logger.info("Added vendor %s (%s)", vendor.id, vendor.name)
        return vendor

    async def update_vendor(self, vendor_id: str, data: VendorUpdate) -> Vendor:
        current = await self.get_vendor(vendor_id)
        _check_contract(
            data.contract_start or current.contract_start,
            data.contract_end or current.contract_end,
        )
        updated = await self._repo.update(
            vendor_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_vendor(self, vendor_id: str) -> None:
        if not await self._repo.soft_delete(vendor_id):
            raise NotFoundError("Vendor", vendor_id)
