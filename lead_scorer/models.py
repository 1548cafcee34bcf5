"""
lead_scorer/models.py — Typed records flowing through the scoring pipeline.

Inputs (Offer, Lead) are validated and trimmed on construction, so everything
downstream can assume clean values. Outputs (ScoredLead, ResultsSummary) are
plain Pydantic models so they serialize straight to JSON.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

Intent = Literal["High", "Medium", "Low"]
INTENTS: tuple[str, ...] = ("High", "Medium", "Low")

REQUIRED_LEAD_FIELDS = ("name", "role", "company", "industry", "location")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Offer ─────────────────────────────────────────────────────────────────────

class Offer(BaseModel):
    """The product being sold. One per scoring context; replaced, never merged."""

    model_config = ConfigDict(frozen=True)

    name: str
    value_props: tuple[str, ...]
    ideal_use_cases: tuple[str, ...]
    created_at: datetime = Field(default_factory=_utcnow)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required and must be a non-empty string")
        return value

    @field_validator("value_props", "ideal_use_cases")
    @classmethod
    def _non_empty_string_list(cls, value: tuple[str, ...], info) -> tuple[str, ...]:
        if not value:
            raise ValueError(f"{info.field_name} is required and must be a non-empty array")
        cleaned = tuple(item.strip() for item in value)
        if not all(cleaned):
            raise ValueError(f"all {info.field_name} must be non-empty strings")
        return cleaned


# ── Lead ──────────────────────────────────────────────────────────────────────

class Lead(BaseModel):
    """A single prospect. Immutable input to scoring."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: str
    company: str
    industry: str
    location: str
    linkedin_bio: str | None = None     # optional on input, rewarded by completeness

    @field_validator(*REQUIRED_LEAD_FIELDS)
    @classmethod
    def _required_not_blank(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} is required and must be a non-empty string")
        return value

    @field_validator("linkedin_bio")
    @classmethod
    def _blank_bio_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


def _row_error_messages(exc: ValidationError) -> list[str]:
    """Collapse Pydantic errors into one readable message per offending field."""
    messages: list[str] = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "row"
        if field == "linkedin_bio":
            message = "linkedin_bio must be a string if provided"
        else:
            message = f"{field} is required and must be a non-empty string"
        if message not in messages:
            messages.append(message)
    return messages


def validate_lead_rows(rows: list[dict[str, Any]]) -> tuple[list[Lead], list[dict[str, Any]]]:
    """
    Validate raw lead rows (e.g. parsed CSV records) into Lead models.

    Header keys are trimmed and lowercased, string values trimmed. Invalid rows
    are not raised; they are returned alongside their messages.

    Returns:
        (valid_leads, errors) where each error is {"row": ..., "errors": [...]}.
    """
    leads: list[Lead] = []
    errors: list[dict[str, Any]] = []

    for raw in rows:
        if not isinstance(raw, dict):
            errors.append({"row": {}, "errors": ["row must be a mapping of field names to values"]})
            continue
        row = {
            str(key).strip().lower(): (value.strip() if isinstance(value, str) else value)
            for key, value in raw.items()
        }
        try:
            leads.append(Lead.model_validate(row))
        except ValidationError as exc:
            errors.append({"row": row, "errors": _row_error_messages(exc)})

    logger.info("Validated lead rows: %d valid, %d rejected.", len(leads), len(errors))
    return leads, errors


# ── Scored output ─────────────────────────────────────────────────────────────

class ScoreDetails(BaseModel):
    rule_score: int = Field(ge=0, le=50)
    ai_score: int = Field(ge=0, le=50)
    ai_intent: str | None = None
    error: str | None = None


class ScoredLead(BaseModel):
    """Lead fields plus the combined score, final intent label and explanation."""

    name: str
    role: str
    company: str
    industry: str
    location: str
    linkedin_bio: str | None = None
    intent: Intent
    score: int = Field(ge=0, le=100)
    reasoning: str
    details: ScoreDetails


# ── Results summary ───────────────────────────────────────────────────────────

class IntentDistribution(BaseModel):
    high: int
    medium: int
    low: int


class ScoreStatistics(BaseModel):
    average: int
    highest: int
    lowest: int


class TopLead(BaseModel):
    name: str
    company: str
    score: int
    intent: Intent


class ResultsSummary(BaseModel):
    total_leads: int
    intent_distribution: IntentDistribution
    score_statistics: ScoreStatistics
    top_leads: list[TopLead]
