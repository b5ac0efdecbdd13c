# backend/agrismart/services/recommendation_service.py

"""
AI Recommendation Synthesizer

Provides:
- Prompt construction from a farm snapshot + latest monitoring snapshot
- Completion call through the chat relay
- Conversion of the model answer into typed recommendation drafts
- Generate-and-persist flow for a stored farm

The model is asked for four JSON entries (crop, fertilizer, irrigation,
pest_control) but its answer is NOT parsed: the raw text becomes the
"crop" recommendation and fertilizer / irrigation are fixed advice.
No pest_control entry is produced. Clients depend on exactly these
three records, in this order.
"""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.core.logger import logger
from agrismart.crud import monitoring as crud_monitoring
from agrismart.crud import recommendations as crud_recommendations
from agrismart.models.farm import Farm
from agrismart.models.recommendation import Recommendation, RecommendationTypeEnum
from agrismart.schemas.farm import FarmSnapshot
from agrismart.schemas.monitoring import MonitoringSnapshot
from agrismart.schemas.recommendation import RecommendationDraft
from agrismart.services.ai_service import ChatCompletionClient

MISSING = "N/A"

CROP_CONFIDENCE = 0.85
FERTILIZER_ADVICE = "Apply balanced NPK fertilizer based on soil test results"
FERTILIZER_CONFIDENCE = 0.90
IRRIGATION_ADVICE = "Implement drip irrigation for water efficiency"
IRRIGATION_CONFIDENCE = 0.88

PROMPT_TEMPLATE = """Based on the following farm data, provide 3-4 specific agricultural recommendations:

Farm: {farm_name}
Location: {location}
Soil Type: {soil_type}
Current Crop: {crop_type}
Area: {area_size} hectares

Recent Monitoring Data:
- Temperature: {temperature}°C
- Humidity: {humidity}%
- Soil Moisture: {soil_moisture}%
- Soil pH: {soil_ph}
- NPK: N={nitrogen}, P={phosphorus}, K={potassium}

Provide recommendations for: crop selection, fertilizer application, irrigation schedule, and pest control.
Format each as JSON: {{type: "crop|fertilizer|irrigation|pest_control", content: "detailed recommendation", confidence: 0-1}}"""


def _fmt(value: Any) -> str:
    if value is None:
        return MISSING
    # 12.0 -> "12"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    # enums render as their value
    return str(getattr(value, "value", value))


def build_prompt(farm: FarmSnapshot, monitoring: Optional[MonitoringSnapshot]) -> str:
    m = monitoring or MonitoringSnapshot()
    return PROMPT_TEMPLATE.format(
        farm_name=_fmt(farm.farm_name),
        location=_fmt(farm.location),
        soil_type=_fmt(farm.soil_type),
        crop_type=_fmt(farm.crop_type),
        area_size=_fmt(farm.area_size),
        temperature=_fmt(m.temperature),
        humidity=_fmt(m.humidity),
        soil_moisture=_fmt(m.soil_moisture),
        soil_ph=_fmt(m.soil_ph),
        nitrogen=_fmt(m.nitrogen),
        phosphorus=_fmt(m.phosphorus),
        potassium=_fmt(m.potassium),
    )


def drafts_from_completion(ai_text: str) -> List[RecommendationDraft]:
    return [
        RecommendationDraft(type=RecommendationTypeEnum.crop, content=ai_text, confidence=CROP_CONFIDENCE),
        RecommendationDraft(type=RecommendationTypeEnum.fertilizer, content=FERTILIZER_ADVICE, confidence=FERTILIZER_CONFIDENCE),
        RecommendationDraft(type=RecommendationTypeEnum.irrigation, content=IRRIGATION_ADVICE, confidence=IRRIGATION_CONFIDENCE),
    ]


async def synthesize_recommendations(
    client: ChatCompletionClient,
    farm: FarmSnapshot,
    monitoring: Optional[MonitoringSnapshot],
) -> List[RecommendationDraft]:
    """generate-recommendations: prompt -> completion -> three drafts (nothing stored)."""
    prompt = build_prompt(farm, monitoring)
    ai_text = await client.complete([{"role": "user", "content": prompt}])
    return drafts_from_completion(ai_text)


async def generate_for_farm(
    db: AsyncSession,
    client: ChatCompletionClient,
    farm: Farm,
    user_id: str,
) -> List[Recommendation]:
    """
    Full flow for a stored farm: read the latest reading, synthesize,
    persist the batch. Any upstream failure happens before the write, so
    nothing is stored; a failed write is rolled back as a whole.
    """
    latest = await crud_monitoring.get_latest_reading(db, farm.id)

    drafts = await synthesize_recommendations(
        client,
        FarmSnapshot.model_validate(farm),
        MonitoringSnapshot.model_validate(latest) if latest else None,
    )

    rows = await crud_recommendations.create_recommendations(db, farm.id, user_id, drafts)
    logger.info(
        "Recommendations generated",
        extra={"farm_id": farm.id, "user_id": user_id},
    )
    return rows
