"""
lead_scorer/services/results.py — Read-only views over a scoring run's results.

Nothing here re-scores or reorders: callers pass the already-sorted list
produced by the pipeline.
"""

import math

from lead_scorer.models import (
    INTENTS,
    IntentDistribution,
    ResultsSummary,
    ScoredLead,
    ScoreStatistics,
    TopLead,
)

DEFAULT_TOP_N = 5


def normalize_intent(intent: str | None) -> str | None:
    """Case-fold to a canonical label, e.g. 'hIGH' → 'High'. None if not a known intent."""
    if not intent:
        return None
    normalized = intent.strip().capitalize()
    return normalized if normalized in INTENTS else None


def filter_by_intent(scored_leads: list[ScoredLead], intent: str | None) -> list[ScoredLead]:
    """Keep leads with the given intent. Unknown or empty filters return everything."""
    wanted = normalize_intent(intent)
    if wanted is None:
        return list(scored_leads)
    return [s for s in scored_leads if s.intent == wanted]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize(scored_leads: list[ScoredLead], top_n: int = DEFAULT_TOP_N) -> ResultsSummary:
    """
    Aggregate counts and score statistics for a run.

    Raises:
        ValueError: If there are no scored leads to summarize.
    """
    if not scored_leads:
        raise ValueError("No scored results found. Please run scoring first.")

    scores = [s.score for s in scored_leads]
    return ResultsSummary(
        total_leads=len(scored_leads),
        intent_distribution=IntentDistribution(
            high=sum(1 for s in scored_leads if s.intent == "High"),
            medium=sum(1 for s in scored_leads if s.intent == "Medium"),
            low=sum(1 for s in scored_leads if s.intent == "Low"),
        ),
        score_statistics=ScoreStatistics(
            average=_round_half_up(sum(scores) / len(scores)),
            highest=max(scores),
            lowest=min(scores),
        ),
        top_leads=[
            TopLead(name=s.name, company=s.company, score=s.score, intent=s.intent)
            for s in scored_leads[:top_n]
        ],
    )
