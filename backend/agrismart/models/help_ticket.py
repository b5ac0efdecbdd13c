# backend/agrismart/models/help_ticket.py

from sqlalchemy import Column, String, DateTime, Text, Uuid, Enum as SAEnum
import enum
from datetime import datetime

from agrismart.core.database import Base
from agrismart.models.farm import gen_uuid


class TicketPriorityEnum(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TicketStatusEnum(str, enum.Enum):
    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"


class HelpTicket(Base):
    __tablename__ = "help_tickets"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=gen_uuid)
    user_id = Column(Uuid(as_uuid=False), nullable=False, index=True)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    priority = Column(SAEnum(TicketPriorityEnum, name="ticket_priority", native_enum=False), default=TicketPriorityEnum.medium)
    status = Column(SAEnum(TicketStatusEnum, name="ticket_status", native_enum=False), default=TicketStatusEnum.open)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
