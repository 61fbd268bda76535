"""
Insight Enrichment
==================
Optional rewrite of the engine's insight sentence by a language model.

This module:
- Defines the InsightEnricher capability (enrich(context) -> str)
- Provides the OpenAI-backed enricher and a disabled (null) enricher

This module MUST NOT:
- Alter scores, risk level or recommendations
- Retry failed calls
- Return blank text (raises instead)

The engine's sentence is always computed first; callers keep it whenever
enrich() raises.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Protocol

from mindtrack import config
from mindtrack.catalog.questions import get_platform_display_name
from mindtrack.llm.client import LLMClientException, OpenAIChatClient, build_default_client
from mindtrack.scoring.models import ScoringResult

logger = logging.getLogger(__name__)

ENRICHMENT_TEMPERATURE = 0.4

SYSTEM_PROMPT = (
    "You are a licensed mental health professional specializing in digital wellness "
    "and social media impact analysis. Provide concise, personalized insights."
)


class EnrichmentError(Enum):
    DISABLED = "ENRICHMENT_DISABLED"
    UPSTREAM_FAILURE = "ENRICHMENT_UPSTREAM_FAILURE"
    INVALID_OUTPUT = "ENRICHMENT_INVALID_OUTPUT"


class EnrichmentException(Exception):
    """Raised when an enricher cannot produce a usable insight."""

    def __init__(self, error_code: EnrichmentError, message: str):
        self.error_code = error_code
        self.message = message
        super().__init__(f"{error_code.value}: {message}")


@dataclass(frozen=True)
class EnrichmentContext:
    platform: str
    scores: ScoringResult
    responses: Mapping[str, str] = field(default_factory=dict)


class InsightEnricher(Protocol):
    def enrich(self, context: EnrichmentContext) -> str:
        ...


# ============================================
# IMPLEMENTATIONS
# ============================================

class NullInsightEnricher:
    """Used when AI enrichment is switched off or no API key is configured."""

    def enrich(self, context: EnrichmentContext) -> str:
        raise EnrichmentException(EnrichmentError.DISABLED, "AI enrichment is disabled")


class OpenAIInsightEnricher:
    """Asks the model for a 2-3 sentence key insight grounded on the computed scores."""

    def __init__(self, client: OpenAIChatClient):
        self.client = client

    def build_prompt(self, context: EnrichmentContext) -> str:
        name = get_platform_display_name(context.platform)
        return (
            "You are a mental health expert analyzing social media usage patterns.\n"
            "I have already calculated precise scores using a rule-based algorithm:\n\n"
            f"Platform: {name}\n"
            f"Overall Score: {context.scores.overall_score}/10\n"
            f"Risk Level: {context.scores.risk_level.value}\n"
            f"Assessment responses: {json.dumps(dict(context.responses), sort_keys=True)}\n\n"
            "Based on these specific scores and responses, provide a single, personalized key "
            f"insight (2-3 sentences) that explains the main finding about their {name} usage "
            "patterns and mental health impact.\n\n"
            "Focus on:\n"
            "- Specific patterns in their responses\n"
            f"- How {name} uniquely affects them\n"
            "- The most important area for improvement\n\n"
            'Return JSON with only: { "keyInsight": "your insight here" }'
        )

    def enrich(self, context: EnrichmentContext) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": self.build_prompt(context)},
        ]
        try:
            raw = self.client.complete(messages, temperature=ENRICHMENT_TEMPERATURE, json_mode=True)
        except LLMClientException as e:
            raise EnrichmentException(EnrichmentError.UPSTREAM_FAILURE, e.message)

        return parse_key_insight(raw)


def parse_key_insight(raw: str) -> str:
    """Extract a non-blank keyInsight string from the model's JSON output."""
    try:
        parsed = json.loads(raw or "")
    except ValueError:
        raise EnrichmentException(EnrichmentError.INVALID_OUTPUT, "Model output is not valid JSON")

    if not isinstance(parsed, dict):
        raise EnrichmentException(EnrichmentError.INVALID_OUTPUT, "Model output is not a JSON object")

    insight = parsed.get("keyInsight")
    if not isinstance(insight, str) or not insight.strip():
        raise EnrichmentException(EnrichmentError.INVALID_OUTPUT, "keyInsight missing or blank")
    return insight.strip()


def build_default_enricher(client: Optional[OpenAIChatClient] = None) -> InsightEnricher:
    """OpenAI enricher when enabled and configured, otherwise the null enricher."""
    if not config.AI_ENRICHMENT_ENABLED:
        return NullInsightEnricher()
    client = client or build_default_client()
    if client is None:
        return NullInsightEnricher()
    return OpenAIInsightEnricher(client)
