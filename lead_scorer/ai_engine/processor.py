"""
lead_scorer/ai_engine/processor.py — Intent classification for a single lead.

Public functions:
  classify_intent(lead, offer)         → ClassifierResult  (LLM, or fallback on any failure)
  fallback_classification(lead, offer) → ClassifierResult  (local heuristic, no network)
  build_prompt_inputs(lead, offer)     → dict of template variables
  render_prompt(lead, offer)           → the human message sent to the model
"""

import logging
from dataclasses import dataclass

from lead_scorer.ai_engine.prompt_templates import INTENT_CLASSIFICATION_PROMPT
from lead_scorer.ai_engine.utils import build_chat_llm, join_for_prompt, parse_intent_response
from lead_scorer.config import settings
from lead_scorer.models import Lead, Offer
from lead_scorer.services.rules import industry_matches_use_case

logger = logging.getLogger(__name__)

SENIOR_ROLE_KEYWORDS = ["ceo", "cto", "founder", "vp", "director", "head"]
MANAGEMENT_ROLE_KEYWORDS = ["manager", "lead"]

METHOD_AI = "ai"
METHOD_FALLBACK = "fallback"


# ── Output dataclass ──────────────────────────────────────────────────────────

@dataclass
class ClassifierResult:
    intent: str                     # "High" | "Medium" | "Low"
    reasoning: str
    method: str = METHOD_AI         # "ai" or "fallback"
    raw_response: str = ""          # original LLM text (for debugging)


# ── Prompt ────────────────────────────────────────────────────────────────────

def build_prompt_inputs(lead: Lead, offer: Offer) -> dict[str, str]:
    return {
        "offer_name": offer.name,
        "value_props": join_for_prompt(offer.value_props),
        "ideal_use_cases": join_for_prompt(offer.ideal_use_cases),
        "lead_name": lead.name,
        "role": lead.role,
        "company": lead.company,
        "industry": lead.industry,
        "location": lead.location,
        "linkedin_bio": lead.linkedin_bio or "Not provided",
    }


def render_prompt(lead: Lead, offer: Offer) -> str:
    messages = INTENT_CLASSIFICATION_PROMPT.format_messages(**build_prompt_inputs(lead, offer))
    return messages[-1].content


# ── Classification ────────────────────────────────────────────────────────────

def classify_intent(lead: Lead, offer: Offer) -> ClassifierResult:
    """
    Ask the LLM how likely this lead is to buy the offer.

    Never raises for service problems: a missing API key skips the call
    entirely, and any error from the call (auth, network, rate limit, bad
    response) is logged and answered by fallback_classification().

    Args:
        lead:  The prospect to classify.
        offer: The offer the prospect is evaluated against.

    Returns:
        ClassifierResult with intent and reasoning.
    """
    if not settings.openai_api_key:
        logger.warning("No OpenAI API key found. Using fallback classification.")
        return fallback_classification(lead, offer)

    try:
        llm = build_chat_llm()
        chain = INTENT_CLASSIFICATION_PROMPT | llm

        logger.info("Classifying intent: %s (%s @ %s)", lead.name, lead.role, lead.company)

        response = chain.invoke(build_prompt_inputs(lead, offer))
        raw_text = response.content if hasattr(response, "content") else str(response)
        if not isinstance(raw_text, str):
            raise ValueError(f"Expected text content from LLM, got: {type(raw_text)}")

    except Exception as e:
        logger.error("OpenAI API error for %s: %s", lead.name, e)
        return fallback_classification(lead, offer)

    intent, reasoning = parse_intent_response(raw_text)
    logger.info("Intent result: %s for %s @ %s", intent, lead.name, lead.company)
    return ClassifierResult(
        intent=intent,
        reasoning=reasoning,
        method=METHOD_AI,
        raw_response=raw_text,
    )


def fallback_classification(lead: Lead, offer: Offer) -> ClassifierResult:
    """
    Heuristic stand-in for the LLM.

    Points: senior role +2 (else management role +1), industry/ICP overlap +2.
    3 or more → High, 1–2 → Medium, 0 → Low.
    """
    points = 0
    signals: list[str] = []

    role_lower = (lead.role or "").lower()
    if any(keyword in role_lower for keyword in SENIOR_ROLE_KEYWORDS):
        points += 2
        signals.append("senior role")
    elif any(keyword in role_lower for keyword in MANAGEMENT_ROLE_KEYWORDS):
        points += 1
        signals.append("management role")

    industry = lead.industry or ""
    if any(industry_matches_use_case(industry, use_case) for use_case in offer.ideal_use_cases):
        points += 2
        signals.append("industry match")

    if points >= 3:
        intent = "High"
    elif points >= 1:
        intent = "Medium"
    else:
        intent = "Low"

    if signals:
        reasoning = f"Prospect shows {' and '.join(signals)} indicating potential fit."
    else:
        reasoning = "Limited signals for product fit based on available data."

    logger.debug("Fallback classification for %s: %s (%d points)", lead.name, intent, points)
    return ClassifierResult(intent=intent, reasoning=reasoning, method=METHOD_FALLBACK)
