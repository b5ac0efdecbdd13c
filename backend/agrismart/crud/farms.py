# backend/agrismart/crud/farms.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import Optional, List

from agrismart.core.database import commit_or_rollback
from agrismart.models.farm import Farm
from agrismart.schemas.farm import FarmCreate, FarmUpdate


async def create_farm(db: AsyncSession, user_id: str, payload: FarmCreate) -> Farm:
    farm = Farm(
        user_id=user_id,
        farm_name=payload.farm_name,
        location=payload.location,
        area_size=payload.area_size,
        soil_type=payload.soil_type,
        crop_type=payload.crop_type,
    )
    db.add(farm)
    await commit_or_rollback(db, "farm")
    return farm


async def get_farm(db: AsyncSession, farm_id: str) -> Optional[Farm]:
    return await db.get(Farm, farm_id)


async def get_farm_for_user(db: AsyncSession, farm_id: str, user_id: str) -> Optional[Farm]:
    # foreign farms are indistinguishable from missing ones
    farm = await get_farm(db, farm_id)
    if not farm or farm.user_id != user_id:
        return None
    return farm


async def list_farms(db: AsyncSession, user_id: str) -> List[Farm]:
    rows = await db.scalars(
        select(Farm).where(Farm.user_id == user_id).order_by(Farm.created_at.desc())
    )
    return rows.all()


async def count_farms(db: AsyncSession, user_id: str) -> int:
    total = await db.scalar(select(func.count(Farm.id)).where(Farm.user_id == user_id))
    return total or 0


async def update_farm(db: AsyncSession, farm: Farm, payload: FarmUpdate) -> Farm:
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field in ("farm_name", "location"):
            continue
        setattr(farm, field, value)

    await commit_or_rollback(db, "farm update")
    await db.refresh(farm)
    return farm
