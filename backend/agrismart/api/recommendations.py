# backend/agrismart/api/recommendations.py
from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.api.deps import get_owned_farm, get_chat_client
from agrismart.core.auth import get_current_user_id
from agrismart.core.database import get_db
from agrismart.crud import recommendations as crud_recommendations
from agrismart.models.farm import Farm
from agrismart.schemas.recommendation import Recommendation
from agrismart.services.ai_service import ChatCompletionClient
from agrismart.services.recommendation_service import generate_for_farm

router = APIRouter(prefix="/farms/{farm_id}/recommendations", tags=["recommendations"])


@router.get("/", response_model=List[Recommendation])
async def list_recommendations(
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    return await crud_recommendations.list_for_farm(db, farm.id)


@router.post("/generate", response_model=List[Recommendation], status_code=status.HTTP_201_CREATED)
async def generate_recommendations(
    farm: Farm = Depends(get_owned_farm),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    client: ChatCompletionClient = Depends(get_chat_client),
):
    return await generate_for_farm(db, client, farm, user_id)
