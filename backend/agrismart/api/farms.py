# backend/agrismart/api/farms.py
from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.api.deps import get_owned_farm
from agrismart.core.auth import get_current_user_id
from agrismart.core.database import get_db
from agrismart.core.logger import logger
from agrismart.crud import farms as crud_farms
from agrismart.models.farm import Farm
from agrismart.schemas.farm import FarmCreate, FarmUpdate, Farm as FarmOut

router = APIRouter(prefix="/farms", tags=["farms"])


@router.post("/", response_model=FarmOut, status_code=status.HTTP_201_CREATED)
async def create_farm(
    payload: FarmCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    farm = await crud_farms.create_farm(db, user_id, payload)
    logger.info("Farm registered", extra={"farm_id": farm.id, "user_id": user_id})
    return farm


@router.get("/", response_model=List[FarmOut])
async def list_farms(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await crud_farms.list_farms(db, user_id)


@router.get("/{farm_id}", response_model=FarmOut)
async def get_farm(farm: Farm = Depends(get_owned_farm)):
    return farm


@router.patch("/{farm_id}", response_model=FarmOut)
async def update_farm(
    payload: FarmUpdate,
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    return await crud_farms.update_farm(db, farm, payload)
