# backend/agrismart/schemas/recommendation.py

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, field_validator

from agrismart.models.recommendation import RecommendationTypeEnum, RecommendationStatusEnum
from agrismart.schemas.farm import FarmSnapshot
from agrismart.schemas.monitoring import MonitoringSnapshot


def clamp_confidence(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class RecommendationDraft(BaseModel):
    type: RecommendationTypeEnum
    content: str
    confidence: float

    # out-of-range scores are clamped, not rejected
    @field_validator("confidence")
    @classmethod
    def clamp(cls, v: float) -> float:
        return clamp_confidence(v)


class GenerateRecommendationsRequest(BaseModel):
    farm: FarmSnapshot
    monitoring: Optional[MonitoringSnapshot] = None


class GenerateRecommendationsResponse(BaseModel):
    recommendations: List[RecommendationDraft]


class Recommendation(BaseModel):
    id: str
    farm_id: str
    recommendation_type: RecommendationTypeEnum
    content: str
    confidence_score: Optional[float] = None
    created_by: Optional[str] = None
    status: RecommendationStatusEnum
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
