"""
scripts/score_intake.py — CLI to score intake forms stored as JSON.

Usage:
    python scripts/score_intake.py form.json
    python scripts/score_intake.py forms.json --threshold 60
    python scripts/score_intake.py forms.json --json   # machine-readable output

The file may hold a single intake form object or an array of them.
"""

import sys
import os
import argparse
import json
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.config import settings
from app.scoring.models import IntakeFormData
from app.services.intake_service import IntakeAssessment, assess_batch

logger = logging.getLogger("score_intake")


def load_forms(path: str) -> list[IntakeFormData]:
    """Read one form or a list of forms from a JSON file."""
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)

    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list) or not all(isinstance(p, dict) for p in payload):
        raise ValueError("Expected a JSON object or an array of objects.")

    return [IntakeFormData.from_dict(p) for p in payload]


def print_assessment(index: int, form: IntakeFormData, assessment: IntakeAssessment) -> None:
    result = assessment.result
    print(f"\n[{index}] {form.project_type} | {form.budget_range} | {form.timeline}")
    print(
        f"    Score: {result.overall_score}/100 ({assessment.score_label}) "
        f"→ {assessment.status.value}  confidence={result.confidence_level:.2f}"
    )
    for factor, value in result.component_scores.items():
        print(f"      {factor:<22} {value:>3}")
    print(f"    Approach: {result.recommended_approach}")
    print(f"    Duration: {result.estimated_project_duration}  Team: {result.suggested_team_size}")
    if result.risk_factors:
        print("    Risks:         " + "; ".join(result.risk_factors))
    if result.opportunity_factors:
        print("    Opportunities: " + "; ".join(result.opportunity_factors))
    print("    Next steps:    " + " → ".join(result.next_steps))


def run(path: str, threshold: int, as_json: bool) -> int:
    try:
        forms = load_forms(path)
    except (OSError, ValueError) as exc:
        logger.error("Could not read intake forms from %s: %s", path, exc)
        return 1

    assessments, stats = assess_batch(forms, threshold=threshold)

    if as_json:
        print(json.dumps([a.to_dict() for a in assessments], indent=2))
        return 0

    print("\n" + "="*55)
    print("  📋  Intake Qualification")
    print("="*55)
    for i, (form, assessment) in enumerate(zip(forms, assessments), start=1):
        print_assessment(i, form, assessment)
    print("\n" + "="*55)
    print(
        f"  ✅ {stats['processed']} scored — {stats['qualified']} qualified, "
        f"{stats['under_review']} under review (threshold={threshold})."
    )
    print("="*55 + "\n")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Score intake forms from a JSON file.")
    parser.add_argument("path", help="JSON file with one intake form or a list of forms")
    parser.add_argument(
        "--threshold", type=int, default=settings.qualified_threshold,
        help="Minimum overall score to mark a form qualified (default from .env)"
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print assessments as JSON instead of a summary"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper() if not args.json else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(run(args.path, args.threshold, args.json))


if __name__ == "__main__":
    main()
