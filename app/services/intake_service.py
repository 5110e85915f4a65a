"""
app/services/intake_service.py — Business logic for scoring submitted intake forms.

This is the "glue" layer between callers (API routes, scripts) and the
scoring engine. For every form it:
  - Runs the deterministic qualification engine
  - Derives the form's workflow status from the overall score
  - Returns both together, so a status is never seen without its score
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from app.scoring.engine import score
from app.scoring.models import IntakeFormData, QualificationResult
from app.services.scoring import IntakeStatus, score_label, status_for_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntakeAssessment:
    result: QualificationResult
    status: IntakeStatus
    score_label: str

    def to_dict(self) -> dict:
        return {
            "result": self.result.to_dict(),
            "status": self.status.value,
            "score_label": self.score_label,
        }


def assess_intake(form: IntakeFormData, threshold: Optional[int] = None) -> IntakeAssessment:
    """
    Score one intake form and derive its status.

    Args:
        form:      The submitted form data.
        threshold: Override for the configured qualification threshold.

    Returns:
        IntakeAssessment with the engine result, status, and score label.
    """
    result = score(form)
    status = status_for_score(result.overall_score, threshold)

    logger.info(
        "Scored intake (%s, %s, %s): overall=%d confidence=%.2f → %s",
        form.project_type, form.budget_range, form.timeline,
        result.overall_score, result.confidence_level, status.value,
    )
    return IntakeAssessment(
        result=result,
        status=status,
        score_label=score_label(result.overall_score),
    )


def assess_batch(
    forms: Iterable[IntakeFormData],
    threshold: Optional[int] = None,
) -> tuple[list[IntakeAssessment], dict]:
    """
    Score many intake forms.

    Returns:
        (assessments in input order, {"processed": int, "qualified": int, "under_review": int})
    """
    stats = {"processed": 0, "qualified": 0, "under_review": 0}
    assessments: list[IntakeAssessment] = []

    for form in forms:
        assessment = assess_intake(form, threshold)
        assessments.append(assessment)
        stats["processed"] += 1
        if assessment.status is IntakeStatus.QUALIFIED:
            stats["qualified"] += 1
        else:
            stats["under_review"] += 1

    logger.info("Batch scoring done: %s", stats)
    return assessments, stats
