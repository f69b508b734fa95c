from datetime import datetime

from app.domain.metric import SustainabilityMetric
from app.repositories.base import BaseRepository


class MetricRepository(BaseRepository[SustainabilityMetric]):
    model = SustainabilityMetric

    async def list_between(
        self,
        since: datetime,
        until: datetime,
        metric_types: tuple[str, ...] | None = None,
    ) -> list[SustainabilityMetric]:
        """Samples inside ``[since, until]``, oldest first."""
        q = (
            self._base_query()
            .where(SustainabilityMetric.recorded_at >= since)
            .where(SustainabilityMetric.recorded_at <= until)
        )
        if metric_types:
            q = q.where(SustainabilityMetric.metric_type.in_(metric_types))
        q = q.order_by(SustainabilityMetric.recorded_at.asc())
        return list((await self._session.execute(q)).scalars().all())
