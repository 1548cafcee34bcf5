"""
lead_scorer/services/scoring.py — Combines rule and AI scores into one 0–100 score.

  score  = rule_score (0–50) + ai_score (High 50 / Medium 30 / Low 10)
  intent = High ≥ 70, Medium ≥ 40, Low otherwise

The final intent is taken from the combined score, not from the classifier's
own label, so the two can disagree.
"""

import logging

from lead_scorer.ai_engine.processor import classify_intent
from lead_scorer.models import Lead, Offer, ScoreDetails, ScoredLead
from lead_scorer.services.rules import MAX_RULE_SCORE, RuleScoreResult, calculate_rule_score

logger = logging.getLogger(__name__)

AI_INTENT_POINTS = {"high": 50, "medium": 30, "low": 10}
AI_DEFAULT_POINTS = 30
AI_MAX_SCORE = 50

HIGH_INTENT_THRESHOLD = 70
MEDIUM_INTENT_THRESHOLD = 40

AI_UNAVAILABLE_ERROR = "AI service unavailable"


def map_intent_to_score(intent: str) -> int:
    """Substring match so labels like "High intent" still count; unknown → Medium points."""
    intent_lower = (intent or "").lower()
    for label, points in AI_INTENT_POINTS.items():
        if label in intent_lower:
            return points
    return AI_DEFAULT_POINTS


def determine_intent(total_score: int) -> str:
    if total_score >= HIGH_INTENT_THRESHOLD:
        return "High"
    if total_score >= MEDIUM_INTENT_THRESHOLD:
        return "Medium"
    return "Low"


def build_reasoning(rule_result: RuleScoreResult, ai_score: int, ai_reasoning: str) -> str:
    breakdown = rule_result.breakdown
    return " ".join([
        f"Rule Score ({rule_result.score}/{MAX_RULE_SCORE}):",
        f"- {breakdown.role.reason} (+{breakdown.role.score})",
        f"- {breakdown.industry.reason} (+{breakdown.industry.score})",
        f"- {breakdown.completeness.reason} (+{breakdown.completeness.score})",
        f"AI Analysis ({ai_score}/{AI_MAX_SCORE}): {ai_reasoning}",
    ])


def _lead_fields(lead: Lead) -> dict:
    return lead.model_dump(include={"name", "role", "company", "industry", "location", "linkedin_bio"})


def score_lead(lead: Lead, offer: Offer) -> ScoredLead:
    """
    Score a single lead against the offer.

    Any unexpected error while scoring degrades this lead to a rule-only
    result (ai_score=0, details.error set) instead of propagating. Without
    AI points the best reachable intent on that path is Medium.
    """
    try:
        rule_result = calculate_rule_score(lead, offer)
        ai_result = classify_intent(lead, offer)
        ai_score = map_intent_to_score(ai_result.intent)

        total_score = rule_result.score + ai_score
        return ScoredLead(
            **_lead_fields(lead),
            intent=determine_intent(total_score),
            score=total_score,
            reasoning=build_reasoning(rule_result, ai_score, ai_result.reasoning),
            details=ScoreDetails(
                rule_score=rule_result.score,
                ai_score=ai_score,
                ai_intent=ai_result.intent,
            ),
        )

    except Exception as e:
        logger.error("Error scoring lead %s: %s", lead.name, e)

        rule_result = calculate_rule_score(lead, offer)
        breakdown = rule_result.breakdown
        return ScoredLead(
            **_lead_fields(lead),
            intent=determine_intent(rule_result.score),
            score=rule_result.score,
            reasoning=(
                "Rule-based scoring only (AI unavailable). "
                f"{breakdown.role.reason}, {breakdown.industry.reason}, "
                f"{breakdown.completeness.reason}."
            ),
            details=ScoreDetails(
                rule_score=rule_result.score,
                ai_score=0,
                error=AI_UNAVAILABLE_ERROR,
            ),
        )
