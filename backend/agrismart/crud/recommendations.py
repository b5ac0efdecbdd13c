# backend/agrismart/crud/recommendations.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List, Iterable
from datetime import datetime

from agrismart.core.database import commit_or_rollback
from agrismart.models.farm import Farm
from agrismart.models.recommendation import Recommendation, RecommendationStatusEnum
from agrismart.schemas.recommendation import RecommendationDraft, clamp_confidence


async def create_recommendations(
    db: AsyncSession,
    farm_id: str,
    user_id: str,
    drafts: Iterable[RecommendationDraft],
) -> List[Recommendation]:
    """
    Insert a batch of recommendations in one transaction.
    Either every row is committed or none is (PersistenceError).
    """
    # one timestamp per batch; batch_index keeps the drafts' order
    created_at = datetime.utcnow()
    rows = [
        Recommendation(
            farm_id=farm_id,
            created_at=created_at,
            batch_index=i,
            recommendation_type=d.type,
            content=d.content,
            confidence_score=clamp_confidence(d.confidence),
            created_by=user_id,
            status=RecommendationStatusEnum.pending,
        )
        for i, d in enumerate(drafts)
    ]
    db.add_all(rows)
    await commit_or_rollback(db, "recommendations")
    return rows


async def list_for_farm(db: AsyncSession, farm_id: str) -> List[Recommendation]:
    rows = await db.scalars(
        select(Recommendation)
        .where(Recommendation.farm_id == farm_id)
        .order_by(Recommendation.created_at.desc(), Recommendation.batch_index)
    )
    return rows.all()


async def count_for_user(db: AsyncSession, user_id: str) -> int:
    """Recommendations across every farm the user owns."""
    total = await db.scalar(
        select(func.count(Recommendation.id))
        .join(Farm, Farm.id == Recommendation.farm_id)
        .where(Farm.user_id == user_id)
    )
    return total or 0
