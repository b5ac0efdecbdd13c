# backend/agrismart/crud/monitoring.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional, List

from agrismart.core.database import commit_or_rollback
from agrismart.models.monitoring import MonitoringReading
from agrismart.schemas.monitoring import MonitoringReadingCreate

DEFAULT_HISTORY_LIMIT = 20


async def append_reading(db: AsyncSession, farm_id: str, payload: MonitoringReadingCreate) -> MonitoringReading:
    data = payload.model_dump(exclude_none=True)
    reading = MonitoringReading(farm_id=farm_id, **data)
    db.add(reading)
    await commit_or_rollback(db, "monitoring reading")
    await db.refresh(reading)
    return reading


async def get_latest_reading(db: AsyncSession, farm_id: str) -> Optional[MonitoringReading]:
    return await db.scalar(
        select(MonitoringReading)
        .where(MonitoringReading.farm_id == farm_id)
        .order_by(MonitoringReading.recorded_at.desc())
        .limit(1)
    )


async def list_history(db: AsyncSession, farm_id: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[MonitoringReading]:
    """Most recent `limit` readings, returned oldest -> newest."""
    rows = await db.scalars(
        select(MonitoringReading)
        .where(MonitoringReading.farm_id == farm_id)
        .order_by(MonitoringReading.recorded_at.desc())
        .limit(limit)
    )
    return list(reversed(rows.all()))
