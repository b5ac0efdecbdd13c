# backend/agrismart/schemas/expert_appointment.py

from typing import Optional
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel

from agrismart.models.expert_appointment import AppointmentStatusEnum


class ExpertAppointmentCreate(BaseModel):
    farm_id: UUID
    appointment_date: datetime
    notes: Optional[str] = None


class ExpertAppointment(BaseModel):
    id: str
    farmer_id: str
    farm_id: str
    farm_name: Optional[str] = None
    expert_id: Optional[str] = None
    appointment_date: datetime
    notes: Optional[str] = None
    status: AppointmentStatusEnum
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
