"""Sustainability insights — OpenAI-generated when a key is configured, curated otherwise.

The OpenAI path asks for exactly three insights in JSON mode and validates the
reply against the ``Insight`` schema. Upstream or parse failures surface as
``InsightGenerationError`` (502); they never fall back silently.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError as SchemaValidationError

from app.core.config import settings
from app.core.exceptions import InsightGenerationError
from app.domain.mixins import utcnow
from app.schemas.insight import Insight

logger = logging.getLogger(__name__)

INSIGHT_COUNT = 3

# ── System prompt ─────────────────────────────────────────────────────────

INSIGHTS_PROMPT = """You are a sustainability analyst advising operations teams on waste management and the circular economy.

Produce exactly three current, actionable insights for an organization that tracks waste points, recycling initiatives and vendor performance.

Output ONLY valid JSON matching this schema:

{
  "insights": [
    {
      "category": "<short topic, e.g. 'Circular Economy'>",
      "title": "<headline, at most 8 words>",
      "description": "<one or two sentences>",
      "impact": "High" | "Medium" | "Low",
      "recommendations": ["<concrete action>", "<concrete action>", "<concrete action>"]
    }
  ]
}

## Rules
1. Output ONLY valid JSON — no markdown, no commentary.
2. The "insights" array MUST contain exactly three entries.
3. Every entry needs two to four recommendations."""

CURATED_INSIGHTS: List[Dict[str, Any]] = [
    {
        "id": "insight_1",
        "category": "Waste Management Technology",
        "title": "AI-Powered Waste Sorting",
        "description": (
            "Advanced AI systems are being deployed in waste management facilities "
            "to improve sorting accuracy"
        ),
        "impact": "High",
        "recommendations": [
            "Invest in AI-powered sorting systems",
            "Train staff on new technology",
            "Monitor sorting accuracy improvements",
        ],
    },
    {
        "id": "insight_2",
        "category": "Circular Economy",
        "title": "Product Design for Recyclability",
        "description": "Companies are redesigning products to be more recyclable from the start",
        "impact": "High",
        "recommendations": [
            "Review product design specifications",
            "Incorporate recycling considerations in design phase",
            "Partner with recycling facilities for feedback",
        ],
    },
    {
        "id": "insight_3",
        "category": "Collection Logistics",
        "title": "Sensor-Driven Pickup Scheduling",
        "description": (
            "Fill-level sensors let haulers collect only full containers, cutting "
            "pickups and transport emissions"
        ),
        "impact": "Medium",
        "recommendations": [
            "Fit fill-level sensors to high-volume waste points",
            "Share fill data with vendors to move from fixed to on-demand pickups",
            "Track avoided pickups as a cost-savings metric",
        ],
    },
]


def curated_insights() -> List[Insight]:
    now = utcnow()
    return [Insight(**item, timestamp=now) for item in CURATED_INSIGHTS]


class InsightsAIService:
    """Thin async wrapper around OpenAI for generating sustainability insights."""

    def __init__(self) -> None:
        if not settings.ai_enabled:
            raise InsightGenerationError(
                "OpenAI API key is not configured. Set OPENAI_API_KEY in your .env file."
            )
        self.client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
        )
        self.model = settings.openai_model
        self.max_tokens = settings.openai_max_tokens

    # ── Core OpenAI call ──────────────────────────────────────────────────

    async def _call_openai(self, system_prompt: str, user_message: str) -> Dict[str, Any]:
        """Send an async request to OpenAI and return parsed JSON."""
        try:
            logger.info("Calling OpenAI model=%s for insights", self.model)
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
                max_completion_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )

            content = response.choices[0].message.content
            if not content:
                raise InsightGenerationError("Empty response from OpenAI")

            logger.info("OpenAI call successful")
            return json.loads(content)

        except OpenAIError as exc:
            logger.error("OpenAI API error: %s", exc)
            raise InsightGenerationError(f"OpenAI service error: {exc}") from exc
        except json.JSONDecodeError as exc:
            logger.error("Invalid JSON from OpenAI: %s", exc)
            raise InsightGenerationError(f"Invalid JSON response: {exc}") from exc

    # ── Public methods ────────────────────────────────────────────────────

    async def generate(self, focus: str | None = None) -> List[Insight]:
        user_message = "Generate this week's sustainability insights."
        if focus:
            user_message += f"\nFocus area: {focus}"
        payload = await self._call_openai(INSIGHTS_PROMPT, user_message)

        raw_items = payload.get("insights")
        if not isinstance(raw_items, list) or len(raw_items) < INSIGHT_COUNT:
            raise InsightGenerationError("OpenAI returned fewer than three insights")

        now = utcnow()
        try:
            return [
                Insight.model_validate({**item, "id": f"insight_{i}", "timestamp": now})
                for i, item in enumerate(raw_items[:INSIGHT_COUNT], start=1)
            ]
        except (TypeError, SchemaValidationError) as exc:
            logger.error("Malformed insight from OpenAI: %s", exc)
            raise InsightGenerationError(f"Malformed insight: {exc}") from exc


async def get_insights(focus: str | None = None) -> tuple[str, List[Insight]]:
    """Return ``(source, insights)``; source is ``"openai"`` or ``"curated"``."""
    if not settings.ai_enabled:
        return "curated", curated_insights()
    return "openai", await InsightsAIService().generate(focus)
