"""
lead_scorer/context.py — State for one single-tenant scoring workflow.

The caller creates a ScoringContext at startup and passes it to
run_scoring(); nothing in the package keeps module-level state. Every setter
replaces wholesale, nothing is merged or accumulated.

Usage:
    ctx = ScoringContext()
    ctx.set_offer(offer)
    ctx.set_leads(leads)
    results = run_scoring(ctx)
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator

from lead_scorer.models import Lead, Offer, ScoredLead

logger = logging.getLogger(__name__)


class ScoringInProgressError(RuntimeError):
    """A second scoring run was started while one is still running on the same context."""


class ScoringContext:
    def __init__(self) -> None:
        self.offer: Offer | None = None
        self.leads: list[Lead] = []
        self.scored_leads: list[ScoredLead] = []
        self.leads_uploaded_at: datetime | None = None
        self.scored_at: datetime | None = None
        self._run_lock = threading.Lock()

    # ── Offer ─────────────────────────────────────────────────────────────────

    def set_offer(self, offer: Offer) -> Offer:
        """Replace the current offer. Results scored against the old one are dropped."""
        self._ensure_idle()
        self.offer = offer
        self.reset_scores()
        logger.info("Offer set: %s", offer.name)
        return offer

    def has_offer(self) -> bool:
        return self.offer is not None

    # ── Leads ─────────────────────────────────────────────────────────────────

    def set_leads(self, leads: list[Lead]) -> list[Lead]:
        self._ensure_idle()
        self.leads = list(leads)
        self.leads_uploaded_at = datetime.now(timezone.utc)
        self.reset_scores()
        logger.info("Leads set: %d leads", len(self.leads))
        return self.leads

    def has_leads(self) -> bool:
        return len(self.leads) > 0

    # ── Scored leads ──────────────────────────────────────────────────────────

    def set_scored_leads(self, scored_leads: list[ScoredLead]) -> list[ScoredLead]:
        self.scored_leads = list(scored_leads)
        self.scored_at = datetime.now(timezone.utc)
        return self.scored_leads

    def has_scored_leads(self) -> bool:
        return len(self.scored_leads) > 0

    # ── Reset ─────────────────────────────────────────────────────────────────

    def reset(self) -> None:
        self._ensure_idle()
        self.offer = None
        self.leads = []
        self.leads_uploaded_at = None
        self.reset_scores()

    def reset_scores(self) -> None:
        self.scored_leads = []
        self.scored_at = None

    # ── Run serialization ─────────────────────────────────────────────────────

    def _ensure_idle(self) -> None:
        if self._run_lock.locked():
            raise ScoringInProgressError("A scoring run is in progress; inputs cannot change until it finishes.")

    @contextmanager
    def exclusive_run(self) -> Generator[None, None, None]:
        """Hold the run lock for the duration of a scoring run; reject, don't queue."""
        if not self._run_lock.acquire(blocking=False):
            raise ScoringInProgressError("A scoring run is already in progress for this context.")
        try:
            yield
        finally:
            self._run_lock.release()
