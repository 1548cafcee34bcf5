"""
lead_scorer/services/lead_service.py — Business logic driving a full scoring run.

This is the "glue" layer that coordinates:
  - Checking the context has an offer and leads
  - Scoring each lead in upload order (rules + AI + composition)
  - Sorting the results, highest score first
  - Storing the results back on the context
"""

import logging

from lead_scorer.context import ScoringContext
from lead_scorer.models import Lead, Offer, ScoredLead
from lead_scorer.services.scoring import score_lead

logger = logging.getLogger(__name__)


class ScoringPreconditionError(ValueError):
    """The context is not ready to be scored (no offer, or no leads)."""


def score_all_leads(leads: list[Lead], offer: Offer) -> list[ScoredLead]:
    """
    Score every lead sequentially and sort by score, descending.

    One failing lead never aborts the run; score_lead() degrades it instead.
    The sort is stable, so equal scores keep their upload order.
    """
    scored: list[ScoredLead] = []
    for index, lead in enumerate(leads, start=1):
        logger.debug("Scoring lead %d/%d: %s", index, len(leads), lead.name)
        scored.append(score_lead(lead, offer))

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def run_scoring(context: ScoringContext) -> list[ScoredLead]:
    """
    Score the context's leads against its offer and replace its stored results.

    Args:
        context: Caller-owned scoring state.

    Returns:
        The scored leads, highest score first.

    Raises:
        ScoringPreconditionError: If no offer is set or no leads are loaded.
        ScoringInProgressError:   If another run on this context has not finished.
    """
    if not context.has_offer():
        raise ScoringPreconditionError("No offer found. Please create an offer first.")
    if not context.has_leads():
        raise ScoringPreconditionError("No leads found. Please upload leads first.")

    with context.exclusive_run():
        logger.info("Starting scoring for %d leads...", len(context.leads))
        scored = score_all_leads(context.leads, context.offer)
        context.set_scored_leads(scored)

    degraded = sum(1 for s in scored if s.details.error)
    logger.info(
        "Scoring completed: %d leads scored (%d rule-only).",
        len(scored), degraded,
    )
    return scored
