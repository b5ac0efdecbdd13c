# backend/agrismart/api/appointments.py
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.core.auth import get_current_user_id
from agrismart.core.database import get_db
from agrismart.core.logger import logger
from agrismart.crud import expert_appointments as crud_appointments
from agrismart.crud import farms as crud_farms
from agrismart.schemas.expert_appointment import ExpertAppointmentCreate, ExpertAppointment

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("/", response_model=ExpertAppointment, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    payload: ExpertAppointmentCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    farm = await crud_farms.get_farm_for_user(db, str(payload.farm_id), user_id)
    if not farm:
        raise HTTPException(status_code=404, detail="Farm not found")

    appointment = await crud_appointments.create_appointment(db, user_id, farm, payload)
    logger.info("Expert appointment requested", extra={"user_id": user_id, "farm_id": farm.id})
    return appointment


@router.get("/", response_model=List[ExpertAppointment])
async def list_appointments(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await crud_appointments.list_appointments(db, user_id)
