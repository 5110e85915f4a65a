"""
app/scoring/engine.py — Deterministic lead qualification scoring.

One public function:
  score(form: IntakeFormData) → QualificationResult

The engine is total: unknown enum values and empty text fall through to the
lowest or default branch instead of raising. It performs no I/O and keeps no
state, so it can be called concurrently from any number of callers.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Mapping, Optional, TypeVar

from app.scoring import tables
from app.scoring.models import IntakeFormData, QualificationAnalysis, QualificationResult

# (factor, comparator, threshold, sentence)
Rule = tuple[str, Callable[[int, int], bool], int, str]
T = TypeVar("T")


# ── Component scores ──────────────────────────────────────────────────────────

def _mentions_any(text: str, keywords: tuple[str, ...]) -> bool:
    text = text.lower()
    return any(keyword in text for keyword in keywords)


def budget_score(budget_range: str) -> int:
    return tables.BUDGET_SCORES.get(budget_range, tables.UNKNOWN_SCORE)


def timeline_score(timeline: str) -> int:
    return tables.TIMELINE_SCORES.get(timeline, tables.UNKNOWN_SCORE)


def technical_complexity_score(project_type: str, project_description: str) -> int:
    """
    Base score by project type. Web and mobile apps score higher when the
    description mentions complex technology (AI, IoT, real-time, ...).
    """
    scores = tables.TECHNICAL_SCORES.get(project_type)
    if scores is None:
        return tables.DEFAULT_TECHNICAL_SCORE
    base, with_keywords = scores
    if _mentions_any(project_description, tables.TECHNICAL_KEYWORDS):
        return with_keywords
    return base


def business_impact_score(key_requirements: str, business_goals: Optional[str]) -> int:
    text = f"{key_requirements} {business_goals or ''}"
    if _mentions_any(text, tables.BUSINESS_KEYWORDS):
        return tables.BUSINESS_IMPACT_WITH_KEYWORDS
    return tables.BUSINESS_IMPACT_DEFAULT


def market_potential_score(project_type: str) -> int:
    return tables.MARKET_SCORES.get(project_type, tables.DEFAULT_MARKET_SCORE)


# ── Aggregates ────────────────────────────────────────────────────────────────

def overall_score(components: Mapping[str, int]) -> int:
    """Weighted sum of the component scores, rounded half-up."""
    total = sum(
        (tables.WEIGHTS[factor] * components[factor] for factor in tables.FACTORS),
        Decimal(0),
    )
    return int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def confidence_level(overall: int) -> float:
    return min(tables.MAX_CONFIDENCE, max(tables.MIN_CONFIDENCE, overall / 100))


def rating(score: int) -> str:
    for minimum, label in tables.RATING_BANDS:
        if score >= minimum:
            return label
    return tables.LOWEST_RATING


def _threshold_notes(
    components: Mapping[str, int],
    notes: Mapping[str, str],
    passes: Callable[[int], bool],
) -> tuple[str, ...]:
    """One note per factor whose score satisfies `passes`, in FACTORS order."""
    return tuple(
        notes[factor] for factor in tables.FACTORS if passes(components[factor])
    )


def strengths(components: Mapping[str, int]) -> tuple[str, ...]:
    return _threshold_notes(
        components, tables.STRENGTHS, lambda s: s >= tables.STRENGTH_THRESHOLD
    )


def concerns(components: Mapping[str, int]) -> tuple[str, ...]:
    return _threshold_notes(
        components, tables.CONCERNS, lambda s: s < tables.CONCERN_THRESHOLD
    )


def _apply_rules(components: Mapping[str, int], rules: tuple[Rule, ...]) -> tuple[str, ...]:
    return tuple(
        sentence
        for factor, compare, threshold, sentence in rules
        if compare(components[factor], threshold)
    )


def _first_band(value: int, bands: tuple[tuple[int, T], ...]) -> T:
    for minimum, outcome in bands:
        if value >= minimum:
            return outcome
    return bands[-1][1]


def suggested_team_size(technical: int, overall: int) -> int:
    # Technical complexity is checked before the overall score.
    if technical >= tables.LARGE_TEAM_TECHNICAL_SCORE:
        return tables.LARGE_TEAM_SIZE
    elif technical >= tables.MEDIUM_TEAM_TECHNICAL_SCORE:
        return tables.MEDIUM_TEAM_SIZE
    elif overall >= tables.MEDIUM_TEAM_OVERALL_SCORE:
        return tables.MEDIUM_TEAM_SIZE
    return tables.DEFAULT_TEAM_SIZE


# ── Public entry point ────────────────────────────────────────────────────────

def score(form: IntakeFormData) -> QualificationResult:
    """
    Score a submitted intake form.

    Args:
        form: The scoring-relevant fields of the intake form. Values outside
              the known enumerations score as 0 (or the stated default).

    Returns:
        A new QualificationResult. Identical input always yields an equal result.
    """
    components = {
        tables.BUDGET: budget_score(form.budget_range),
        tables.TIMELINE: timeline_score(form.timeline),
        tables.TECHNICAL_COMPLEXITY: technical_complexity_score(
            form.project_type, form.project_description or ""
        ),
        tables.BUSINESS_IMPACT: business_impact_score(
            form.key_requirements or "", form.business_goals
        ),
        tables.MARKET_POTENTIAL: market_potential_score(form.project_type),
    }
    overall = overall_score(components)

    analysis = QualificationAnalysis(
        strengths=strengths(components),
        concerns=concerns(components),
        market_fit=rating(components[tables.MARKET_POTENTIAL]),
        technical_feasibility=rating(components[tables.TECHNICAL_COMPLEXITY]),
    )

    return QualificationResult(
        budget_score=components[tables.BUDGET],
        timeline_score=components[tables.TIMELINE],
        technical_complexity_score=components[tables.TECHNICAL_COMPLEXITY],
        business_impact_score=components[tables.BUSINESS_IMPACT],
        market_potential_score=components[tables.MARKET_POTENTIAL],
        overall_score=overall,
        confidence_level=confidence_level(overall),
        analysis=analysis,
        risk_factors=_apply_rules(components, tables.RISK_RULES),
        opportunity_factors=_apply_rules(components, tables.OPPORTUNITY_RULES),
        recommended_approach=_first_band(overall, tables.RECOMMENDED_APPROACHES),
        estimated_project_duration=tables.PROJECT_DURATIONS.get(
            form.timeline, tables.UNKNOWN_DURATION
        ),
        suggested_team_size=suggested_team_size(
            components[tables.TECHNICAL_COMPLEXITY], overall
        ),
        next_steps=_first_band(overall, tables.NEXT_STEPS),
    )
