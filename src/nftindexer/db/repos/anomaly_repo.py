from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nftindexer.db.models.anomaly import AnomalyRecord
from nftindexer.reconcile.store import Anomaly


class AnomalyRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_many(self, anomalies: list[Anomaly]) -> list[AnomalyRecord]:
        records = [
            AnomalyRecord(
                anomaly_type=a.anomaly_type.value,
                entity_id=a.entity_id,
                message=a.message,
                block_number=a.block_number,
            )
            for a in anomalies
        ]
        self._session.add_all(records)
        await self._session.flush()
        return records

    async def list_anomalies(
        self,
        anomaly_type: Optional[str] = None,
        resolved: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[AnomalyRecord], int]:
        """Return a page of anomalies (oldest block first) and the total matching count."""
        base = select(AnomalyRecord)
        count_q = select(func.count()).select_from(AnomalyRecord)

        if anomaly_type:
            base = base.where(AnomalyRecord.anomaly_type == anomaly_type)
            count_q = count_q.where(AnomalyRecord.anomaly_type == anomaly_type)
        if resolved is not None:
            base = base.where(AnomalyRecord.resolved == resolved)
            count_q = count_q.where(AnomalyRecord.resolved == resolved)

        total = (await self._session.execute(count_q)).scalar_one()
        result = await self._session.execute(
            base.order_by(AnomalyRecord.block_number.asc(), AnomalyRecord.created_at.asc()).limit(limit).offset(offset)
        )
        return list(result.scalars().all()), total

    async def mark_resolved(self, record: AnomalyRecord) -> AnomalyRecord:
        record.resolved = True
        await self._session.flush()
        return record
