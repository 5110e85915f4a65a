"""
app/scoring/models.py — Input and output types of the qualification engine.

  IntakeFormData        → the scoring-relevant fields of a submitted intake form
  QualificationResult   → the engine's verdict for one form (immutable)
  QualificationAnalysis → strengths / concerns / fit ratings inside a result
"""

import enum
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional


# ── Enums ────────────────────────────────────────────────────────────────────

class BudgetRange(str, enum.Enum):
    UNDER_10K = "under-10k"
    FROM_10K_TO_25K = "10k-25k"
    FROM_25K_TO_50K = "25k-50k"
    FROM_50K_TO_100K = "50k-100k"
    OVER_100K = "100k+"


class Timeline(str, enum.Enum):
    ONE_TO_TWO_WEEKS = "1-2-weeks"
    ONE_MONTH = "1-month"
    TWO_TO_THREE_MONTHS = "2-3-months"
    THREE_TO_SIX_MONTHS = "3-6-months"
    SIX_PLUS_MONTHS = "6+months"


class ProjectType(str, enum.Enum):
    AI_INTEGRATION = "ai-integration"
    DATA_ANALYTICS = "data-analytics"
    API_DEVELOPMENT = "api-development"
    WEB_APP = "web-app"
    MOBILE_APP = "mobile-app"
    E_COMMERCE = "e-commerce"
    CUSTOM_SOFTWARE = "custom-software"
    OTHER = "other"


# ── Input ────────────────────────────────────────────────────────────────────

def _enum_value(value: Any) -> str:
    """Accept either an enum member or its raw string value."""
    if isinstance(value, enum.Enum):
        return str(value.value)
    return "" if value is None else str(value)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class IntakeFormData:
    budget_range: str
    timeline: str
    project_type: str
    project_description: str = ""
    key_requirements: str = ""
    business_goals: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "IntakeFormData":
        """
        Build form data from a loose mapping (API payload, JSON file, DB row).

        Missing text fields become empty strings, non-string values (numbers
        from hand-written JSON) are converted with str(), and unknown keys are
        ignored.
        Enum members are reduced to their string values so the engine's
        lookups always compare plain strings.
        """
        goals = payload.get("business_goals")
        return cls(
            budget_range=_enum_value(payload.get("budget_range")),
            timeline=_enum_value(payload.get("timeline")),
            project_type=_enum_value(payload.get("project_type")),
            project_description=_text(payload.get("project_description")),
            key_requirements=_text(payload.get("key_requirements")),
            business_goals=goals if goals is None else str(goals),
        )


# ── Output ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class QualificationAnalysis:
    strengths: tuple[str, ...]
    concerns: tuple[str, ...]
    market_fit: str                 # "Low" | "Medium" | "High"
    technical_feasibility: str      # "Low" | "Medium" | "High"


@dataclass(frozen=True)
class QualificationResult:
    budget_score: int
    timeline_score: int
    technical_complexity_score: int
    business_impact_score: int
    market_potential_score: int
    overall_score: int              # 0 – 100
    confidence_level: float         # 0.30 – 0.95
    analysis: QualificationAnalysis
    risk_factors: tuple[str, ...]
    opportunity_factors: tuple[str, ...]
    recommended_approach: str
    estimated_project_duration: str
    suggested_team_size: int
    next_steps: tuple[str, ...]

    @property
    def component_scores(self) -> dict[str, int]:
        """The five component scores keyed by factor name."""
        return {
            "budget": self.budget_score,
            "timeline": self.timeline_score,
            "technical_complexity": self.technical_complexity_score,
            "business_impact": self.business_impact_score,
            "market_potential": self.market_potential_score,
        }

    def to_dict(self) -> dict:
        """JSON-ready representation (tuples become lists)."""
        data = asdict(self)
        data["analysis"] = {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in data["analysis"].items()
        }
        for key in ("risk_factors", "opportunity_factors", "next_steps"):
            data[key] = list(data[key])
        return data
