import pytest

from app.core.exceptions import InsightGenerationError
from app.services import insights as insights_module
from app.services.insights import InsightsAIService, curated_insights

API = "/api/v1"


def test_curated_insights_are_complete():
    items = curated_insights()
    assert [i.id for i in items] == ["insight_1", "insight_2", "insight_3"]
    assert items[0].title == "AI-Powered Waste Sorting"
    assert all(len(i.recommendations) >= 2 for i in items)


async def test_endpoint_serves_curated_insights_without_a_key(client):
    response = await client.get(f"{API}/insights")
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["source"] == "curated"
    assert len(body["insights"]) == 3
    assert body["insights"][1]["category"] == "Circular Economy"


async def test_endpoint_requires_auth(anon):
    assert (await anon.get(f"{API}/insights")).status_code == 401


def test_ai_service_needs_a_key():
    with pytest.raises(InsightGenerationError):
        InsightsAIService()


async def test_generated_insights_are_validated(monkeypatch):
    monkeypatch.setattr(insights_module.settings, "openai_api_key", "sk-test")
    service = InsightsAIService()

    async def fake_call(system_prompt, user_message):
        assert "Focus area: plastics" in user_message
        return {
            "insights": [
                {
                    "category": "Plastics",
                    "title": f"Insight {n}",
                    "description": "Short description",
                    "impact": "Low",
                    "recommendations": ["Do this", "Then that"],
                }
                for n in range(4)
            ]
        }

    monkeypatch.setattr(service, "_call_openai", fake_call)
    items = await service.generate("plastics")
    assert [i.id for i in items] == ["insight_1", "insight_2", "insight_3"]
    assert items[2].title == "Insight 2"


async def test_short_ai_reply_is_an_upstream_error(monkeypatch):
    monkeypatch.setattr(insights_module.settings, "openai_api_key", "sk-test")
    service = InsightsAIService()

    async def fake_call(system_prompt, user_message):
        return {"insights": [{"category": "x"}]}

    monkeypatch.setattr(service, "_call_openai", fake_call)
    with pytest.raises(InsightGenerationError) as excinfo:
        await service.generate()
    assert excinfo.value.status_code == 502
