# backend/agrismart/models/expert_appointment.py

from sqlalchemy import Column, ForeignKey, DateTime, Text, Uuid, Enum as SAEnum
from sqlalchemy.orm import relationship
import enum
from datetime import datetime

from agrismart.core.database import Base
from agrismart.models.farm import gen_uuid


class AppointmentStatusEnum(str, enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


# ============================================================
# EXPERT APPOINTMENT (consultation requested by a farmer)
# ============================================================
class ExpertAppointment(Base):
    __tablename__ = "expert_appointments"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=gen_uuid)
    farmer_id = Column(Uuid(as_uuid=False), nullable=False, index=True)
    farm_id = Column(Uuid(as_uuid=False), ForeignKey("farms.id"), nullable=False, index=True)
    expert_id = Column(Uuid(as_uuid=False), nullable=True)     # assigned when confirmed
    appointment_date = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=True)
    status = Column(
        SAEnum(AppointmentStatusEnum, name="appointment_status", native_enum=False),
        default=AppointmentStatusEnum.pending,
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    farm = relationship("Farm")

    @property
    def farm_name(self):
        return self.farm.farm_name if self.farm else None
