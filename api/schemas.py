"""
api/schemas.py — Pydantic request/response models for all API endpoints.

These are the API contract — separate from the engine's dataclasses so we
can validate submissions upstream of scoring and control exactly what data
is exposed over HTTP.
"""

from typing import Optional
from pydantic import BaseModel, Field

from app.scoring.models import BudgetRange, ProjectType, Timeline
from app.services.scoring import IntakeStatus


# ── Intake form ───────────────────────────────────────────────────────────────

class IntakeFormIn(BaseModel):
    """A submitted intake form. Only the scoring fields are required."""

    # Project details
    project_type: ProjectType
    project_description: str = Field(..., min_length=50, max_length=2000)

    # Requirements & goals
    key_requirements: str = Field(..., min_length=20, max_length=1000)
    business_goals: Optional[str] = None
    success_metrics: Optional[str] = None

    # Timeline & budget
    timeline: Timeline
    budget_range: BudgetRange

    # Contact / metadata — accepted but not scored
    project_name: Optional[str] = Field(default=None, max_length=200)
    contact_name: Optional[str] = Field(default=None, max_length=100)
    company_name: Optional[str] = None
    preferred_tech_stack: list[str] = Field(default_factory=list)

    model_config = {"use_enum_values": True}


class BatchScoreRequest(BaseModel):
    forms: list[IntakeFormIn] = Field(..., min_length=1, description="Intake forms to score")


# ── Qualification result ──────────────────────────────────────────────────────

class AnalysisOut(BaseModel):
    strengths: list[str]
    concerns: list[str]
    market_fit: str
    technical_feasibility: str


class QualificationResultOut(BaseModel):
    budget_score: int
    timeline_score: int
    technical_complexity_score: int
    business_impact_score: int
    market_potential_score: int
    overall_score: int
    confidence_level: float
    analysis: AnalysisOut
    risk_factors: list[str]
    opportunity_factors: list[str]
    recommended_approach: str
    estimated_project_duration: str
    suggested_team_size: int
    next_steps: list[str]


class IntakeAssessmentOut(BaseModel):
    result: QualificationResultOut
    status: IntakeStatus
    score_label: str


class BatchScoreResult(BaseModel):
    assessments: list[IntakeAssessmentOut]
    processed: int
    qualified: int
    under_review: int
    message: str


# ── Form options ──────────────────────────────────────────────────────────────

class OptionOut(BaseModel):
    value: str
    label: str


class IntakeOptionsOut(BaseModel):
    project_types: list[OptionOut]
    timelines: list[OptionOut]
    budget_ranges: list[OptionOut]
