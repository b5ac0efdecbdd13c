# backend/agrismart/crud/help_tickets.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from agrismart.core.database import commit_or_rollback
from agrismart.models.help_ticket import HelpTicket, TicketStatusEnum
from agrismart.schemas.help_ticket import HelpTicketCreate


async def create_ticket(db: AsyncSession, user_id: str, payload: HelpTicketCreate) -> HelpTicket:
    ticket = HelpTicket(
        user_id=user_id,
        subject=payload.subject,
        message=payload.message,
        priority=payload.priority,
        status=TicketStatusEnum.open,
    )
    db.add(ticket)
    await commit_or_rollback(db, "help ticket")
    return ticket


async def list_tickets(db: AsyncSession, user_id: str) -> List[HelpTicket]:
    rows = await db.scalars(
        select(HelpTicket).where(HelpTicket.user_id == user_id).order_by(HelpTicket.created_at.desc())
    )
    return rows.all()
