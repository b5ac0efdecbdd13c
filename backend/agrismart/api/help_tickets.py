# backend/agrismart/api/help_tickets.py
from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.core.auth import get_current_user_id
from agrismart.core.database import get_db
from agrismart.crud import help_tickets as crud_tickets
from agrismart.schemas.help_ticket import HelpTicketCreate, HelpTicket

router = APIRouter(prefix="/help-tickets", tags=["help"])


@router.post("/", response_model=HelpTicket, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    payload: HelpTicketCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await crud_tickets.create_ticket(db, user_id, payload)


@router.get("/", response_model=List[HelpTicket])
async def list_tickets(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await crud_tickets.list_tickets(db, user_id)
