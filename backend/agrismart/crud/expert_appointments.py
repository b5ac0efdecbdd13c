# backend/agrismart/crud/expert_appointments.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List

from agrismart.core.database import commit_or_rollback
from agrismart.models.expert_appointment import ExpertAppointment, AppointmentStatusEnum
from agrismart.models.farm import Farm
from agrismart.schemas.expert_appointment import ExpertAppointmentCreate


async def create_appointment(
    db: AsyncSession,
    farmer_id: str,
    farm: Farm,
    payload: ExpertAppointmentCreate,
) -> ExpertAppointment:
    """Request a consultation for one of the farmer's farms; starts as pending."""
    appointment = ExpertAppointment(
        farmer_id=farmer_id,
        farm=farm,
        appointment_date=payload.appointment_date,
        notes=payload.notes,
        status=AppointmentStatusEnum.pending,
    )
    db.add(appointment)
    await commit_or_rollback(db, "expert appointment")
    return appointment


async def list_appointments(db: AsyncSession, farmer_id: str) -> List[ExpertAppointment]:
    rows = await db.scalars(
        select(ExpertAppointment)
        .options(selectinload(ExpertAppointment.farm))
        .where(ExpertAppointment.farmer_id == farmer_id)
        .order_by(ExpertAppointment.created_at.desc())
    )
    return rows.all()
