# backend/agrismart/api/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.core.auth import get_current_user_id
from agrismart.core.database import get_db
from agrismart.crud import farms as crud_farms
from agrismart.crud import monitoring as crud_monitoring
from agrismart.crud import recommendations as crud_recommendations
from agrismart.schemas.dashboard import DashboardSummary

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
async def dashboard_summary(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Counts for the user's farms plus the newest farm's latest reading."""
    farms = await crud_farms.list_farms(db, user_id)
    latest_farm = farms[0] if farms else None

    return DashboardSummary(
        total_farms=await crud_farms.count_farms(db, user_id),
        total_recommendations=await crud_recommendations.count_for_user(db, user_id),
        latest_farm_id=latest_farm.id if latest_farm else None,
        latest_reading=(
            await crud_monitoring.get_latest_reading(db, latest_farm.id) if latest_farm else None
        ),
    )
