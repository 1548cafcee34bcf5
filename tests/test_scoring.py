"""
tests/test_scoring.py — Unit tests for combining rule and AI scores.

classify_intent is patched where score_lead looks it up, so no test depends
on the LLM or on the fallback heuristic unless it says so.
"""

import pytest
from unittest.mock import patch

from lead_scorer.ai_engine.processor import ClassifierResult
from lead_scorer.services.rules import calculate_rule_score
from lead_scorer.services.scoring import (
    AI_UNAVAILABLE_ERROR,
    build_reasoning,
    determine_intent,
    map_intent_to_score,
    score_lead,
)


# ── map_intent_to_score ───────────────────────────────────────────────────────

class TestMapIntentToScore:
    @pytest.mark.parametrize("intent, points", [
        ("High", 50), ("Medium", 30), ("Low", 10),
        ("high", 50), ("HIGH intent", 50), ("low-ish", 10),
    ])
    def test_known_labels(self, intent, points):
        assert map_intent_to_score(intent) == points

    @pytest.mark.parametrize("intent", ["", "Unknown", None])
    def test_unknown_defaults_to_medium_points(self, intent):
        assert map_intent_to_score(intent) == 30


# ── determine_intent ──────────────────────────────────────────────────────────

class TestDetermineIntent:
    @pytest.mark.parametrize("score, intent", [
        (100, "High"), (70, "High"),
        (69, "Medium"), (40, "Medium"),
        (39, "Low"), (0, "Low"),
    ])
    def test_thresholds(self, score, intent):
        assert determine_intent(score) == intent


# ── build_reasoning ───────────────────────────────────────────────────────────

class TestBuildReasoning:
    def test_fixed_order_role_industry_completeness_ai(self, ava, offer):
        rule_result = calculate_rule_score(ava, offer)
        reasoning = build_reasoning(rule_result, 50, "Strong fit.")
        assert reasoning == (
            "Rule Score (50/50): "
            "- Decision maker role (+20) "
            "- Exact industry match with ICP (+20) "
            "- Complete data (+10) "
            "AI Analysis (50/50): Strong fit."
        )


# ── score_lead ────────────────────────────────────────────────────────────────

class TestScoreLead:
    @patch("lead_scorer.services.scoring.classify_intent")
    def test_combines_rule_and_ai_scores(self, mock_classify, make_lead, offer):
        mock_classify.return_value = ClassifierResult(intent="Low", reasoning="Not a buyer.")
        lead = make_lead(role="Product Manager", industry="Retail", linkedin_bio="ops")

        scored = score_lead(lead, offer)

        # role 10 + industry 10 (adjacent via "b2b saas" use case) + complete 10
        assert scored.details.rule_score == 30
        assert scored.details.ai_score == 10
        assert scored.details.ai_intent == "Low"
        assert scored.details.error is None
        assert scored.score == 40
        assert scored.intent == "Medium"
        assert scored.reasoning.endswith("AI Analysis (10/50): Not a buyer.")

    @patch("lead_scorer.services.scoring.classify_intent")
    def test_final_intent_can_disagree_with_ai(self, mock_classify, make_lead, offer):
        mock_classify.return_value = ClassifierResult(intent="High", reasoning="Enthusiastic bio.")
        lead = make_lead(role="Engineer", industry="Agriculture")

        scored = score_lead(lead, offer)

        assert scored.details.ai_intent == "High"
        assert scored.score == 10 + 50
        assert scored.intent == "Medium"

    @patch("lead_scorer.services.scoring.classify_intent")
    def test_keeps_lead_fields(self, mock_classify, ava, offer):
        mock_classify.return_value = ClassifierResult(intent="Medium", reasoning="Fine.")
        scored = score_lead(ava, offer)
        assert (scored.name, scored.role, scored.company, scored.industry, scored.location) == (
            "Ava", "Head of Growth", "F", "B2B SaaS", "SF",
        )
        assert scored.linkedin_bio == "bio"

    @patch("lead_scorer.services.scoring.classify_intent")
    def test_unexpected_error_degrades_to_rule_only(self, mock_classify, ava, offer):
        mock_classify.side_effect = RuntimeError("boom")

        scored = score_lead(ava, offer)

        assert scored.score == 50
        assert scored.details.rule_score == 50
        assert scored.details.ai_score == 0
        assert scored.details.ai_intent is None
        assert scored.details.error == AI_UNAVAILABLE_ERROR
        # 70/40 thresholds on a 0–50 scale: Medium is the ceiling here
        assert scored.intent == "Medium"
        assert scored.reasoning == (
            "Rule-based scoring only (AI unavailable). "
            "Decision maker role, Exact industry match with ICP, Complete data."
        )

    @patch("lead_scorer.services.scoring.classify_intent")
    def test_rule_only_low(self, mock_classify, make_lead, offer):
        mock_classify.side_effect = RuntimeError("boom")
        scored = score_lead(make_lead(role="Engineer", industry="Agriculture"), offer)
        assert scored.score == 10
        assert scored.intent == "Low"

    def test_without_api_key_uses_classifier_fallback(self, ava, offer):
        # No credential: the classifier's own heuristic answers (High → 50 points)
        scored = score_lead(ava, offer)

        assert scored.details.rule_score == 50
        assert scored.details.ai_intent == "High"
        assert scored.details.ai_score == 50
        assert scored.details.error is None
        assert scored.score == 100
        assert scored.intent == "High"


# ── Score invariants ──────────────────────────────────────────────────────────

class TestScoreInvariants:
    @pytest.mark.parametrize("role", ["CEO", "Senior Manager", "Engineer", "Team Lead"])
    @pytest.mark.parametrize("industry", ["B2B SaaS", "Retail", "Enterprise Software"])
    @pytest.mark.parametrize("bio", [None, "Ten years in growth"])
    def test_score_is_rule_plus_ai(self, role, industry, bio, make_lead, offer):
        scored = score_lead(make_lead(role=role, industry=industry, linkedin_bio=bio), offer)
        details = scored.details
        assert 0 <= details.rule_score <= 50
        assert details.ai_score in (0, 10, 30, 50)
        assert scored.score == details.rule_score + details.ai_score
        assert 0 <= scored.score <= 100
        assert scored.intent == determine_intent(scored.score)
