# backend/agrismart/schemas/help_ticket.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from agrismart.models.help_ticket import TicketPriorityEnum, TicketStatusEnum


class HelpTicketCreate(BaseModel):
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)
    priority: TicketPriorityEnum = TicketPriorityEnum.medium


class HelpTicket(HelpTicketCreate):
    id: str
    user_id: str
    status: TicketStatusEnum
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
