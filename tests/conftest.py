"""
tests/conftest.py — Shared pytest configuration and fixtures.

Blanks the OpenAI key BEFORE any package module is imported, so the settings
singleton never picks up a real key from the shell and no test reaches the
network. Tests that exercise the LLM path patch settings explicitly.
"""

import os

import pytest

# ── Force the no-credential path unless a test opts in ───────────────────────
os.environ["OPENAI_API_KEY"] = ""

from lead_scorer.models import Lead, Offer  # noqa: E402


@pytest.fixture
def offer() -> Offer:
    return Offer(
        name="X",
        value_props=["a"],
        ideal_use_cases=["B2B SaaS mid-market"],
    )


@pytest.fixture
def ava() -> Lead:
    """Decision maker, ICP industry, full profile — the best possible rule score."""
    return Lead(
        name="Ava",
        role="Head of Growth",
        company="F",
        industry="B2B SaaS",
        location="SF",
        linkedin_bio="bio",
    )


@pytest.fixture
def make_lead():
    def _make(**overrides) -> Lead:
        fields = {
            "name": "Sam Lee",
            "role": "Software Engineer",
            "company": "Acme",
            "industry": "Retail",
            "location": "Austin",
            "linkedin_bio": None,
        }
        fields.update(overrides)
        return Lead(**fields)
    return _make
