"""
scripts/run_scoring.py — CLI to run the lead scoring pipeline end-to-end.

Usage:
    python scripts/run_scoring.py --offer offer.json --leads leads.json
    python scripts/run_scoring.py --offer offer.json --leads leads.json --intent high
    python scripts/run_scoring.py --offer offer.json --leads leads.json --json > results.json

offer.json:  {"name": ..., "value_props": [...], "ideal_use_cases": [...]}
leads.json:  [{"name": ..., "role": ..., "company": ..., "industry": ...,
               "location": ..., "linkedin_bio": ...}, ...]
"""

import sys
import os
import argparse
import json
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from lead_scorer.config import settings
from lead_scorer.context import ScoringContext
from lead_scorer.models import Offer, validate_lead_rows
from lead_scorer.services.lead_service import ScoringPreconditionError, run_scoring
from lead_scorer.services.results import DEFAULT_TOP_N, filter_by_intent, summarize


def _load_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def run(offer_path: str, leads_path: str, intent: str | None, top: int, as_json: bool) -> int:
    ctx = ScoringContext()
    out = sys.stderr if as_json else sys.stdout

    print("\n" + "="*55, file=out)
    print("  🎯  Lead Intent Scorer — Scoring Pipeline", file=out)
    print("="*55, file=out)

    # ── Step 1: Offer ─────────────────────────────────────────
    print(f"\n[1/3] 📦 Loading offer from {offer_path}...", file=out)
    try:
        offer = ctx.set_offer(Offer.model_validate(_load_json(offer_path)))
    except ValidationError as e:
        print(f"      ❌ Invalid offer data:\n{e}", file=out)
        return 1
    print(f"      ✅ Offer: {offer.name}", file=out)

    # ── Step 2: Leads ─────────────────────────────────────────
    print(f"\n[2/3] 📋 Loading leads from {leads_path}...", file=out)
    rows = _load_json(leads_path)
    if not isinstance(rows, list):
        print("      ❌ Leads file must contain a JSON array of lead objects.", file=out)
        return 1
    leads, errors = validate_lead_rows(rows)
    for error in errors:
        print(f"      ⚠️  Skipped {error['row'].get('name') or '<unnamed>'}: {'; '.join(error['errors'])}", file=out)
    ctx.set_leads(leads)
    print(f"      ✅ {len(leads)} valid leads, {len(errors)} rejected.", file=out)

    # ── Step 3: Score ─────────────────────────────────────────
    mode = f"AI ({settings.openai_model})" if settings.openai_api_key else "fallback heuristic"
    print(f"\n[3/3] 🧮 Scoring with {mode}...", file=out)
    try:
        scored = run_scoring(ctx)
    except ScoringPreconditionError as e:
        print(f"      ❌ {e}", file=out)
        return 1

    summary = summarize(scored, top_n=top)
    selected = filter_by_intent(scored, intent)

    if as_json:
        payload = {
            "summary": summary.model_dump(),
            "results": [s.model_dump() for s in selected],
        }
        print(json.dumps(payload, indent=2))
        return 0

    dist = summary.intent_distribution
    stats = summary.score_statistics
    print(f"      ✅ Scored {summary.total_leads} leads.", file=out)
    print(f"      High: {dist.high}  Medium: {dist.medium}  Low: {dist.low}", file=out)
    print(f"      Average: {stats.average}  Highest: {stats.highest}  Lowest: {stats.lowest}", file=out)

    print("\n" + "-"*55, file=out)
    for s in selected:
        print(f"  {s.score:>3}  {s.intent:<6}  {s.name} — {s.role} @ {s.company}", file=out)
        print(f"        {s.reasoning}", file=out)

    print("\n" + "="*55, file=out)
    print(f"  🎉 Scoring complete! Top lead: {scored[0].name}", file=out)
    print("="*55 + "\n", file=out)
    return 0


def main():
    parser = argparse.ArgumentParser(description="Score leads against an offer.")
    parser.add_argument("--offer", required=True, help="Path to the offer JSON file")
    parser.add_argument("--leads", required=True, help="Path to the leads JSON file (array)")
    parser.add_argument(
        "--intent", default=None,
        help="Only show leads with this intent (High, Medium or Low)",
    )
    parser.add_argument(
        "--top", type=int, default=DEFAULT_TOP_N,
        help="Number of top leads in the summary (default: 5)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print summary and results as JSON on stdout",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(run(args.offer, args.leads, args.intent, args.top, args.json))


if __name__ == "__main__":
    main()
