import json

import pytest
from sqlalchemy import select, func

from agrismart.core.errors import PersistenceError, UpstreamUnavailable
from agrismart.crud.monitoring import append_reading
from agrismart.crud.recommendations import list_for_farm
from agrismart.models.recommendation import Recommendation, RecommendationStatusEnum, RecommendationTypeEnum
from agrismart.schemas.farm import FarmSnapshot
from agrismart.schemas.monitoring import MonitoringReadingCreate, MonitoringSnapshot
from agrismart.schemas.recommendation import RecommendationDraft
from agrismart.services import recommendation_service
from agrismart.services.ai_service import ChatCompletionClient
from agrismart.services.recommendation_service import (
    FERTILIZER_ADVICE,
    IRRIGATION_ADVICE,
    build_prompt,
    generate_for_farm,
    synthesize_recommendations,
)

from conftest import USER_ID, completion_payload

FARM = FarmSnapshot(
    farm_name="Green Acres", location="Pune", soil_type="loamy", crop_type="wheat", area_size=12.5
)
MONITORING = MonitoringSnapshot(
    temperature=24.5, humidity=61, soil_moisture=52.7, soil_ph=6.4, nitrogen=31, phosphorus=15, potassium=20
)


async def count_recommendations(session_factory) -> int:
    async with session_factory() as fresh:
        return await fresh.scalar(select(func.count(Recommendation.id)))


def test_prompt_embeds_farm_and_monitoring_fields():
    prompt = build_prompt(FARM, MONITORING)

    assert "Farm: Green Acres" in prompt
    assert "Location: Pune" in prompt
    assert "Soil Type: loamy" in prompt
    assert "Current Crop: wheat" in prompt
    assert "Area: 12.5 hectares" in prompt
    assert "Temperature: 24.5°C" in prompt
    assert "Humidity: 61%" in prompt
    assert "Soil Moisture: 52.7%" in prompt
    assert "Soil pH: 6.4" in prompt
    assert "NPK: N=31, P=15, K=20" in prompt
    assert "crop selection, fertilizer application, irrigation schedule, and pest control" in prompt
    assert '{type: "crop|fertilizer|irrigation|pest_control"' in prompt


def test_prompt_without_monitoring_marks_fields_missing():
    prompt = build_prompt(FARM, None)

    assert "Temperature: N/A°C" in prompt
    assert "NPK: N=N/A, P=N/A, K=N/A" in prompt


def test_prompt_prints_whole_numbers_without_decimal_point():
    prompt = build_prompt(
        FarmSnapshot(farm_name="Plot", location="Nashik", area_size=12),
        MonitoringSnapshot(temperature=21.5, humidity=61, soil_ph=6.0),
    )

    assert "Area: 12 hectares" in prompt
    assert "Humidity: 61%" in prompt
    assert "Soil pH: 6\n" in prompt
    assert "Temperature: 21.5°C" in prompt


def test_prompt_is_deterministic():
    assert build_prompt(FARM, MONITORING) == build_prompt(FARM, MONITORING)


async def test_synthesis_yields_three_fixed_records(providers):
    providers.ai_json = completion_payload('[{"type": "pest_control", "content": "spray neem"}]')

    async with providers.client() as http:
        drafts = await synthesize_recommendations(ChatCompletionClient(http, api_key="k"), FARM, MONITORING)

    assert [d.type for d in drafts] == [
        RecommendationTypeEnum.crop,
        RecommendationTypeEnum.fertilizer,
        RecommendationTypeEnum.irrigation,
    ]
    # the model answer is kept verbatim, never parsed
    assert drafts[0].content == '[{"type": "pest_control", "content": "spray neem"}]'
    assert drafts[1].content == FERTILIZER_ADVICE == "Apply balanced NPK fertilizer based on soil test results"
    assert drafts[2].content == IRRIGATION_ADVICE == "Implement drip irrigation for water efficiency"
    assert [d.confidence for d in drafts] == [0.85, 0.90, 0.88]


async def test_synthesis_sends_a_single_user_message(providers):
    async with providers.client() as http:
        await synthesize_recommendations(ChatCompletionClient(http, api_key="k"), FARM, None)

    assert len(providers.requests) == 1
    messages = json.loads(providers.requests[0].content)["messages"]
    assert len(messages) == 1
    assert messages[0]["role"] == "user"
    assert messages[0]["content"] == build_prompt(FARM, None)


def test_draft_confidence_is_clamped():
    assert RecommendationDraft(type="crop", content="x", confidence=1.7).confidence == 1.0
    assert RecommendationDraft(type="crop", content="x", confidence=-0.2).confidence == 0.0
    assert RecommendationDraft(type="crop", content="x", confidence=0.42).confidence == 0.42


async def test_generate_for_farm_persists_pending_batch(db, farm, providers):
    await append_reading(db, farm.id, MonitoringReadingCreate(temperature=19.0, humidity=70, nitrogen=30))

    async with providers.client() as http:
        rows = await generate_for_farm(db, ChatCompletionClient(http, api_key="k"), farm, USER_ID)

    assert len(rows) == 3
    for row in rows:
        assert row.farm_id == farm.id
        assert row.created_by == USER_ID
        assert row.status == RecommendationStatusEnum.pending

    prompt = json.loads(providers.requests[0].content)["messages"][0]["content"]
    assert "Temperature: 19°C" in prompt
    assert "Soil Type: loamy" in prompt


async def test_generate_for_farm_without_readings(db, farm, providers):
    async with providers.client() as http:
        rows = await generate_for_farm(db, ChatCompletionClient(http, api_key="k"), farm, USER_ID)

    assert len(rows) == 3
    prompt = json.loads(providers.requests[0].content)["messages"][0]["content"]
    assert "Soil pH: N/A" in prompt


async def test_ai_failure_persists_nothing(db, farm, providers, session_factory):
    providers.ai_status = 503

    async with providers.client() as http:
        with pytest.raises(UpstreamUnavailable):
            await generate_for_farm(db, ChatCompletionClient(http, api_key="k"), farm, USER_ID)

    assert await count_recommendations(session_factory) == 0


async def test_failed_batch_insert_leaves_no_partial_rows(db, farm, providers, session_factory, monkeypatch):
    original = recommendation_service.drafts_from_completion

    def two_good_one_bad(ai_text):
        # content is NOT NULL in the table, so the third insert fails
        bad = RecommendationDraft.model_construct(
            type=RecommendationTypeEnum.irrigation, content=None, confidence=0.5
        )
        return original(ai_text)[:2] + [bad]

    monkeypatch.setattr(recommendation_service, "drafts_from_completion", two_good_one_bad)

    async with providers.client() as http:
        with pytest.raises(PersistenceError):
            await generate_for_farm(db, ChatCompletionClient(http, api_key="k"), farm, USER_ID)

    assert await count_recommendations(session_factory) == 0


async def test_listing_keeps_batch_order_newest_batch_first(db, farm, providers):
    async with providers.client() as http:
        client = ChatCompletionClient(http, api_key="k")
        providers.ai_json = completion_payload("first answer")
        await generate_for_farm(db, client, farm, USER_ID)
        providers.ai_json = completion_payload("second answer")
        await generate_for_farm(db, client, farm, USER_ID)

    listed = await list_for_farm(db, farm.id)

    assert [(r.recommendation_type, r.batch_index) for r in listed] == [
        (RecommendationTypeEnum.crop, 0),
        (RecommendationTypeEnum.fertilizer, 1),
        (RecommendationTypeEnum.irrigation, 2),
    ] * 2
    assert [r.content for r in listed if r.recommendation_type == RecommendationTypeEnum.crop] == [
        "second answer",
        "first answer",
    ]
