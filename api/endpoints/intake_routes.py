"""
api/endpoints/intake_routes.py — Routes for scoring intake forms.

GET  /intake/options      — Selectable values and labels for the intake form
POST /intake/score        — Score one intake form
POST /intake/score/batch  — Score several intake forms at once
"""

import logging

from fastapi import APIRouter, HTTPException

from app.config import settings
from app.scoring import tables
from app.scoring.models import IntakeFormData
from app.services.intake_service import assess_batch, assess_intake
from api.schemas import (
    BatchScoreRequest,
    BatchScoreResult,
    IntakeAssessmentOut,
    IntakeFormIn,
    IntakeOptionsOut,
    OptionOut,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _options(labels) -> list[OptionOut]:
    return [OptionOut(value=value, label=label) for value, label in labels.items()]


@router.get("/options", response_model=IntakeOptionsOut, summary="Intake form options")
def intake_options():
    """Return the allowed project types, timelines, and budget ranges with display labels."""
    return IntakeOptionsOut(
        project_types=_options(tables.PROJECT_TYPE_LABELS),
        timelines=_options(tables.TIMELINE_LABELS),
        budget_ranges=_options(tables.BUDGET_RANGE_LABELS),
    )


@router.post("/score", response_model=IntakeAssessmentOut, summary="Score an intake form")
def score_intake(payload: IntakeFormIn):
    """
    Run the qualification engine on a validated intake form.
    Returns the full score breakdown and the status the form should move to.
    """
    assessment = assess_intake(IntakeFormData.from_dict(payload.model_dump()))
    return assessment.to_dict()


@router.post("/score/batch", response_model=BatchScoreResult, summary="Score several intake forms")
def score_intake_batch(request: BatchScoreRequest):
    """Score up to MAX_BATCH_SIZE intake forms in one call."""
    if len(request.forms) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(request.forms)} forms exceeds the limit of {settings.max_batch_size}.",
        )

    forms = [IntakeFormData.from_dict(form.model_dump()) for form in request.forms]
    assessments, stats = assess_batch(forms)

    return BatchScoreResult(
        assessments=[a.to_dict() for a in assessments],
        processed=stats["processed"],
        qualified=stats["qualified"],
        under_review=stats["under_review"],
        message=f"Scored {stats['processed']} forms. {stats['qualified']} qualified.",
    )
