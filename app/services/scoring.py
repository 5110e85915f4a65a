"""
app/services/scoring.py — Intake qualification policy.

Applies a configurable threshold on the engine's overall_score to decide
the workflow status of an intake form. The engine only scores; what counts
as "qualified" is decided here.
"""

import enum
import logging
from typing import Optional

from app.config import settings
from app.scoring import tables
from app.scoring.models import QualificationResult

logger = logging.getLogger(__name__)


class IntakeStatus(str, enum.Enum):
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under-review"
    QUALIFIED = "qualified"
    DISQUALIFIED = "disqualified"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    ARCHIVED = "archived"


def status_for_score(overall_score: int, threshold: Optional[int] = None) -> IntakeStatus:
    """
    Map an overall score to the status a freshly scored form should get.

    Args:
        overall_score: The engine's 0–100 overall score.
        threshold:     Override for settings.qualified_threshold.

    Returns:
        QUALIFIED if the score meets the threshold, otherwise UNDER_REVIEW.
    """
    if threshold is None:
        threshold = settings.qualified_threshold

    if overall_score >= threshold:
        logger.debug("Intake qualified — score=%d, threshold=%d.", overall_score, threshold)
        return IntakeStatus.QUALIFIED

    logger.debug(
        "Intake needs review — score %d below threshold %d.",
        overall_score, threshold,
    )
    return IntakeStatus.UNDER_REVIEW


def is_intake_qualified(result: QualificationResult, threshold: Optional[int] = None) -> bool:
    """True if the scored form passes the qualification threshold."""
    return status_for_score(result.overall_score, threshold) is IntakeStatus.QUALIFIED


def score_label(score: int) -> str:
    """Human-readable label for a 0–100 score ("Excellent" … "Very Poor")."""
    for minimum, label in tables.SCORE_LABELS:
        if score >= minimum:
            return label
    return tables.SCORE_LABELS[-1][1]
