# backend/agrismart/models/recommendation.py

from sqlalchemy import Column, Float, ForeignKey, DateTime, Integer, Text, Uuid, Enum as SAEnum
from sqlalchemy.orm import relationship
import enum
from datetime import datetime

from agrismart.core.database import Base
from agrismart.models.farm import gen_uuid


class RecommendationTypeEnum(str, enum.Enum):
    crop = "crop"
    fertilizer = "fertilizer"
    irrigation = "irrigation"
    pest_control = "pest_control"


class RecommendationStatusEnum(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# ============================================================
# RECOMMENDATION (written in batches by the synthesizer)
# ============================================================
class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=gen_uuid)
    farm_id = Column(Uuid(as_uuid=False), ForeignKey("farms.id"), nullable=False, index=True)
    recommendation_type = Column(
        SAEnum(RecommendationTypeEnum, name="recommendation_type", native_enum=False),
        nullable=False,
    )
    content = Column(Text, nullable=False)
    confidence_score = Column(Float, nullable=True)      # 0..1, clamped
    created_by = Column(Uuid(as_uuid=False), nullable=True)
    status = Column(
        SAEnum(RecommendationStatusEnum, name="recommendation_status", native_enum=False),
        default=RecommendationStatusEnum.pending,
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    batch_index = Column(Integer, nullable=False, default=0)      # order within one generate call

    farm = relationship("Farm", back_populates="recommendations")
