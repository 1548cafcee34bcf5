"""
lead_scorer/services/rules.py — Deterministic rule layer of the lead score (max 50).

Three criteria, each scored independently:
  role          0 / 10 / 20   decision maker > influencer > everyone else
  industry      0 / 10 / 20   ICP match > adjacent industry > no match
  completeness  0 / 10        every profile field filled in, bio included

Pure functions only: no I/O, no errors. Missing values score 0.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from lead_scorer.models import Lead, Offer

ROLE_DECISION_MAKER_POINTS = 20
ROLE_INFLUENCER_POINTS = 10
INDUSTRY_EXACT_POINTS = 20
INDUSTRY_ADJACENT_POINTS = 10
COMPLETENESS_POINTS = 10
MAX_RULE_SCORE = ROLE_DECISION_MAKER_POINTS + INDUSTRY_EXACT_POINTS + COMPLETENESS_POINTS

DECISION_MAKER_KEYWORDS = [
    "ceo", "cto", "cfo", "coo", "president", "founder",
    "owner", "director", "vp", "vice president", "head of",
    "chief", "principal", "partner", "managing",
]

INFLUENCER_KEYWORDS = [
    "manager", "lead", "senior", "sr.", "coordinator",
    "specialist", "supervisor", "team lead",
]

ADJACENT_INDUSTRY_KEYWORDS = ["saas", "software", "tech", "b2b", "enterprise"]

COMPLETENESS_FIELDS = ("name", "role", "company", "industry", "location", "linkedin_bio")


@dataclass(frozen=True)
class CriterionScore:
    score: int
    reason: str


@dataclass(frozen=True)
class ScoreBreakdown:
    role: CriterionScore
    industry: CriterionScore
    completeness: CriterionScore

    @property
    def total(self) -> int:
        return self.role.score + self.industry.score + self.completeness.score


@dataclass(frozen=True)
class RuleScoreResult:
    score: int                  # 0 – 50
    breakdown: ScoreBreakdown


# ── Criteria ──────────────────────────────────────────────────────────────────

def score_role(role: str | None) -> CriterionScore:
    """Decision-maker keywords are checked first, so "Head of Sales Ops Manager" scores 20."""
    if not role:
        return CriterionScore(0, "No role provided")

    role_lower = role.lower()
    if any(keyword in role_lower for keyword in DECISION_MAKER_KEYWORDS):
        return CriterionScore(ROLE_DECISION_MAKER_POINTS, "Decision maker role")
    if any(keyword in role_lower for keyword in INFLUENCER_KEYWORDS):
        return CriterionScore(ROLE_INFLUENCER_POINTS, "Influencer role")
    return CriterionScore(0, "Individual contributor role")


def industry_matches_use_case(industry: str, use_case: str) -> bool:
    """Case-insensitive substring containment in either direction."""
    industry_lower = industry.lower()
    use_case_lower = use_case.lower()
    return industry_lower in use_case_lower or use_case_lower in industry_lower


def score_industry(industry: str | None, ideal_use_cases: Sequence[str] | None) -> CriterionScore:
    if not industry or not ideal_use_cases:
        return CriterionScore(0, "No industry match data")

    for use_case in ideal_use_cases:
        if industry_matches_use_case(industry, use_case):
            return CriterionScore(INDUSTRY_EXACT_POINTS, "Exact industry match with ICP")

    texts = [industry.lower()] + [use_case.lower() for use_case in ideal_use_cases]
    if any(keyword in text for keyword in ADJACENT_INDUSTRY_KEYWORDS for text in texts):
        return CriterionScore(INDUSTRY_ADJACENT_POINTS, "Adjacent industry match")

    return CriterionScore(0, "No industry match")


def score_data_completeness(lead: Lead) -> CriterionScore:
    # linkedin_bio is optional on upload but required here for the full 10
    complete = all(
        (getattr(lead, field, None) or "").strip()
        for field in COMPLETENESS_FIELDS
    )
    if complete:
        return CriterionScore(COMPLETENESS_POINTS, "Complete data")
    return CriterionScore(0, "Incomplete data")


# ── Combined ──────────────────────────────────────────────────────────────────

def calculate_rule_score(lead: Lead, offer: Offer) -> RuleScoreResult:
    """Score a lead against the offer's ICP. Always returns a value in [0, 50]."""
    breakdown = ScoreBreakdown(
        role=score_role(lead.role),
        industry=score_industry(lead.industry, offer.ideal_use_cases),
        completeness=score_data_completeness(lead),
    )
    return RuleScoreResult(score=breakdown.total, breakdown=breakdown)
