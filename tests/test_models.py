"""
tests/test_models.py — Unit tests for input validation.

Covers Offer / Lead construction and batch validation of raw lead rows.
"""

import pytest
from pydantic import ValidationError

from lead_scorer.models import Lead, Offer, validate_lead_rows


VALID_ROW = {
    "name": "Ava Patel",
    "role": "Head of Growth",
    "company": "FlowMetrics",
    "industry": "B2B SaaS",
    "location": "San Francisco",
    "linkedin_bio": "Growth leader scaling SaaS GTM.",
}


# ── Offer ─────────────────────────────────────────────────────────────────────

class TestOffer:
    def test_valid_offer_is_trimmed(self):
        offer = Offer(name="  LeadFlow ", value_props=[" 24/7 outreach "], ideal_use_cases=["B2B SaaS "])
        assert offer.name == "LeadFlow"
        assert offer.value_props == ("24/7 outreach",)
        assert offer.ideal_use_cases == ("B2B SaaS",)
        assert offer.created_at is not None

    def test_list_fields_are_immutable(self):
        offer = Offer(name="X", value_props=["a", "b"], ideal_use_cases=["SaaS"])
        assert isinstance(offer.value_props, tuple)
        assert isinstance(offer.ideal_use_cases, tuple)
        assert not hasattr(offer.ideal_use_cases, "append")
        with pytest.raises(ValidationError):
            offer.ideal_use_cases = ("Fintech",)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Offer(name="   ", value_props=["a"], ideal_use_cases=["b"])

    @pytest.mark.parametrize("field", ["value_props", "ideal_use_cases"])
    def test_empty_lists_rejected(self, field):
        data = {"name": "X", "value_props": ["a"], "ideal_use_cases": ["b"]}
        data[field] = []
        with pytest.raises(ValidationError, match=f"{field} is required"):
            Offer(**data)

    def test_blank_list_item_rejected(self):
        with pytest.raises(ValidationError, match="all value_props must be non-empty strings"):
            Offer(name="X", value_props=["a", " "], ideal_use_cases=["b"])

    def test_offer_is_immutable(self, offer):
        with pytest.raises(ValidationError):
            offer.name = "Other"


# ── Lead ──────────────────────────────────────────────────────────────────────

class TestLead:
    def test_fields_are_trimmed(self):
        lead = Lead(**{**VALID_ROW, "name": "  Ava Patel  "})
        assert lead.name == "Ava Patel"

    def test_bio_is_optional(self):
        row = {k: v for k, v in VALID_ROW.items() if k != "linkedin_bio"}
        assert Lead(**row).linkedin_bio is None

    def test_blank_bio_becomes_none(self):
        assert Lead(**{**VALID_ROW, "linkedin_bio": "   "}).linkedin_bio is None

    @pytest.mark.parametrize("field", ["name", "role", "company", "industry", "location"])
    def test_required_fields_must_be_non_blank(self, field):
        with pytest.raises(ValidationError, match=f"{field} is required"):
            Lead(**{**VALID_ROW, field: "  "})


# ── validate_lead_rows ────────────────────────────────────────────────────────

class TestValidateLeadRows:
    def test_all_valid(self):
        leads, errors = validate_lead_rows([VALID_ROW, {**VALID_ROW, "name": "Ben"}])
        assert [lead.name for lead in leads] == ["Ava Patel", "Ben"]
        assert errors == []

    def test_headers_and_values_normalized(self):
        row = {" Name ": " Ava ", "ROLE": "CEO", "Company": "F", "Industry": "SaaS", "Location": "SF"}
        leads, errors = validate_lead_rows([row])
        assert errors == []
        assert leads[0].name == "Ava"
        assert leads[0].linkedin_bio is None

    def test_invalid_rows_collected_not_raised(self):
        bad = {**VALID_ROW, "company": ""}
        del bad["location"]
        leads, errors = validate_lead_rows([VALID_ROW, bad])

        assert len(leads) == 1
        assert len(errors) == 1
        assert errors[0]["row"]["name"] == "Ava Patel"
        assert errors[0]["errors"] == [
            "company is required and must be a non-empty string",
            "location is required and must be a non-empty string",
        ]

    def test_non_string_bio_rejected(self):
        _, errors = validate_lead_rows([{**VALID_ROW, "linkedin_bio": 42}])
        assert errors[0]["errors"] == ["linkedin_bio must be a string if provided"]

    def test_non_mapping_row_rejected(self):
        leads, errors = validate_lead_rows([VALID_ROW, "Ava,CEO,F"])
        assert len(leads) == 1
        assert errors == [{"row": {}, "errors": ["row must be a mapping of field names to values"]}]

    def test_empty_input(self):
        assert validate_lead_rows([]) == ([], [])
