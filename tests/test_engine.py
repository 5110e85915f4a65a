"""
tests/test_engine.py — Unit tests for the qualification scoring engine.

The engine is pure, so every test builds an IntakeFormData, scores it,
and checks the result. No mocks, no env, no network.
"""

import dataclasses
from decimal import Decimal

import pytest

from app.scoring import tables
from app.scoring.engine import (
    _first_band,
    business_impact_score,
    overall_score,
    score,
    suggested_team_size,
    technical_complexity_score,
)
from app.scoring.models import (
    BudgetRange,
    IntakeFormData,
    ProjectType,
    QualificationResult,
    Timeline,
)


def make_form(**overrides) -> IntakeFormData:
    fields = {
        "budget_range": "25k-50k",
        "timeline": "2-3-months",
        "project_type": "web-app",
        "project_description": "A simple brochure website for a bakery",
        "key_requirements": "Contact page and menu",
        "business_goals": None,
    }
    fields.update(overrides)
    return IntakeFormData(**fields)


# ── Worked examples ───────────────────────────────────────────────────────────

class TestStrongLead:
    def test_component_scores(self, strong_form):
        result = score(strong_form)
        assert result.component_scores == {
            "budget": 95,
            "timeline": 90,
            "technical_complexity": 90,
            "business_impact": 80,
            "market_potential": 95,
        }

    def test_overall_and_confidence(self, strong_form):
        result = score(strong_form)
        assert result.overall_score == 90
        assert result.confidence_level == pytest.approx(0.90)

    def test_recommendation_is_high_priority(self, strong_form):
        result = score(strong_form)
        assert result.recommended_approach.startswith("High-priority lead.")
        assert result.suggested_team_size == 4
        assert result.estimated_project_duration == "6+ months"
        assert result.next_steps == (
            "Schedule technical discovery call",
            "Prepare detailed proposal",
            "Identify key stakeholders",
        )

    def test_analysis(self, strong_form):
        analysis = score(strong_form).analysis
        assert len(analysis.strengths) == 5
        assert analysis.concerns == ()
        assert analysis.market_fit == "High"
        assert analysis.technical_feasibility == "High"

    def test_risks_and_opportunities_co_occur(self, strong_form):
        result = score(strong_form)
        assert result.risk_factors == ("High technical complexity requires experienced team",)
        assert len(result.opportunity_factors) == 4


class TestWeakLead:
    def test_component_scores(self, weak_form):
        result = score(weak_form)
        assert result.component_scores == {
            "budget": 30,
            "timeline": 20,
            "technical_complexity": 50,
            "business_impact": 50,
            "market_potential": 50,
        }

    def test_overall_is_low_priority(self, weak_form):
        result = score(weak_form)
        # 7.5 + 4 + 12.5 + 10 + 5
        assert result.overall_score == 39
        assert result.recommended_approach.startswith("Low-priority lead.")
        assert result.confidence_level == pytest.approx(0.39)

    def test_small_team_and_short_next_steps(self, weak_form):
        result = score(weak_form)
        assert result.suggested_team_size == 2
        assert result.next_steps == ("Review project alignment", "Consider referral to partner")
        assert result.estimated_project_duration == "2-4 weeks"

    def test_budget_and_timeline_risks(self, weak_form):
        result = score(weak_form)
        assert "Limited budget may constrain project scope" in result.risk_factors
        assert "Aggressive timeline may impact quality" in result.risk_factors
        assert "Limited market validation for this project type" in result.risk_factors
        assert result.opportunity_factors == ()

    def test_concerns_only_below_fifty(self, weak_form):
        analysis = score(weak_form).analysis
        assert analysis.concerns == (
            "Limited budget may impact scope",
            "Aggressive timeline may affect quality",
        )
        assert analysis.strengths == ()
        assert analysis.market_fit == "Medium"
        assert analysis.technical_feasibility == "Medium"


# ── Unknown values never raise ────────────────────────────────────────────────

class TestUnknownValues:
    def test_unknown_budget_scores_zero(self, strong_form):
        result = score(dataclasses.replace(strong_form, budget_range="free"))
        assert result.budget_score == 0
        assert result.timeline_score == 90
        assert result.technical_complexity_score == 90
        assert result.overall_score == 66
        assert "Limited budget may impact scope" in result.analysis.concerns

    def test_unknown_timeline(self):
        result = score(make_form(timeline="yesterday"))
        assert result.timeline_score == 0
        assert result.estimated_project_duration == "TBD"

    def test_unknown_project_type_uses_defaults(self):
        result = score(make_form(project_type="quantum"))
        assert result.technical_complexity_score == 50
        assert result.market_potential_score == 50

    def test_all_fields_empty(self):
        result = score(IntakeFormData(budget_range="", timeline="", project_type=""))
        # 0 + 0 + 12.5 + 10 + 5 = 27.5 → rounds half-up
        assert result.overall_score == 28
        assert result.confidence_level == pytest.approx(0.30)
        assert result.estimated_project_duration == "TBD"

    def test_enum_members_score_like_their_values(self):
        by_value = score(make_form(budget_range="100k+", timeline="1-month", project_type="e-commerce"))
        by_member = score(IntakeFormData.from_dict({
            "budget_range": BudgetRange.OVER_100K,
            "timeline": Timeline.ONE_MONTH,
            "project_type": ProjectType.E_COMMERCE,
            "project_description": "A simple brochure website for a bakery",
            "key_requirements": "Contact page and menu",
        }))
        assert by_member == by_value


# ── Technical complexity ──────────────────────────────────────────────────────

class TestTechnicalComplexity:
    @pytest.mark.parametrize("project_type,expected", [
        ("ai-integration", 90),
        ("data-analytics", 80),
        ("api-development", 70),
        ("e-commerce", 70),
        ("custom-software", 50),
        ("other", 50),
    ])
    def test_base_scores(self, project_type, expected):
        assert technical_complexity_score(project_type, "") == expected

    @pytest.mark.parametrize("project_type,plain,complex_", [
        ("web-app", 60, 75),
        ("mobile-app", 65, 80),
    ])
    def test_keyword_bonus_for_apps(self, project_type, plain, complex_):
        assert technical_complexity_score(project_type, "Loyalty card for a coffee shop") == plain
        assert technical_complexity_score(project_type, "Uses Machine Learning for offers") == complex_

    def test_keyword_bonus_does_not_apply_to_other_types(self):
        assert technical_complexity_score("e-commerce", "blockchain microservices") == 70
        assert technical_complexity_score("ai-integration", "scalable real-time AI") == 90


# ── Business impact ───────────────────────────────────────────────────────────

class TestBusinessImpact:
    def test_keyword_in_requirements(self):
        assert business_impact_score("Cost Reduction in logistics", None) == 80

    def test_keyword_only_in_goals(self):
        assert business_impact_score("Contact page", "Long-term growth") == 80

    def test_no_keywords(self):
        assert business_impact_score("Contact page", "") == 50
        assert business_impact_score("", None) == 50


# ── Overall score and team size ───────────────────────────────────────────────

class TestOverallScore:
    def test_weights_sum_to_one(self):
        assert sum(tables.WEIGHTS.values()) == Decimal("1.00")
        assert set(tables.WEIGHTS) == set(tables.FACTORS)

    def test_rounds_half_up(self):
        # 12.5 + 8 + 15 + 10 + 7 = 52.5
        components = {
            "budget": 50,
            "timeline": 40,
            "technical_complexity": 60,
            "business_impact": 50,
            "market_potential": 70,
        }
        assert overall_score(components) == 53

    def test_maximum_is_one_hundred(self):
        assert overall_score({factor: 100 for factor in tables.FACTORS}) == 100

    @pytest.mark.parametrize("overall,prefix", [
        (80, "High-priority"),
        (79, "Qualified"),
        (60, "Qualified"),
        (59, "Potential"),
        (40, "Potential"),
        (39, "Low-priority"),
    ])
    def test_recommendation_buckets(self, overall, prefix):
        assert _first_band(overall, tables.RECOMMENDED_APPROACHES).startswith(prefix)


class TestTeamSize:
    def test_high_complexity_wins(self):
        assert suggested_team_size(technical=80, overall=30) == 4

    def test_medium_complexity(self):
        assert suggested_team_size(technical=60, overall=90) == 3

    def test_high_overall_with_low_complexity(self):
        assert suggested_team_size(technical=50, overall=70) == 3

    def test_default(self):
        assert suggested_team_size(technical=50, overall=69) == 2

    def test_end_to_end_low_complexity_high_score(self):
        result = score(make_form(
            budget_range="100k+",
            timeline="6+months",
            project_type="custom-software",
            key_requirements="Automation of billing",
        ))
        # 23.75 + 18 + 12.5 + 16 + 6 = 76.25
        assert result.overall_score == 76
        assert result.suggested_team_size == 3


# ── Result object ─────────────────────────────────────────────────────────────

class TestResultObject:
    def test_result_is_immutable(self, strong_form):
        result = score(strong_form)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.overall_score = 0

    def test_each_call_returns_a_new_equal_result(self, strong_form):
        first = score(strong_form)
        second = score(strong_form)
        assert first == second
        assert first is not second

    def test_to_dict_is_json_shaped(self, weak_form):
        data = score(weak_form).to_dict()
        assert data["overall_score"] == 39
        assert isinstance(data["risk_factors"], list)
        assert isinstance(data["next_steps"], list)
        assert data["analysis"]["concerns"] == [
            "Limited budget may impact scope",
            "Aggressive timeline may affect quality",
        ]
        assert data["analysis"]["market_fit"] == "Medium"

    def test_returns_qualification_result(self, weak_form):
        assert isinstance(score(weak_form), QualificationResult)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            tables.BUDGET_SCORES["under-10k"] = 100


# ── IntakeFormData.from_dict ──────────────────────────────────────────────────

class TestFromDict:
    def test_missing_text_fields_become_empty(self):
        form = IntakeFormData.from_dict({"budget_range": "100k+"})
        assert form.project_description == ""
        assert form.key_requirements == ""
        assert form.business_goals is None
        assert form.timeline == ""

    def test_ignores_unknown_keys(self):
        form = IntakeFormData.from_dict({
            "budget_range": "10k-25k",
            "timeline": "1-month",
            "project_type": "web-app",
            "contact_email": "someone@example.com",
        })
        assert form.budget_range == "10k-25k"

    def test_none_text_fields(self):
        form = IntakeFormData.from_dict({"project_description": None, "key_requirements": None})
        assert form.project_description == ""
        assert score(form).business_impact_score == 50

    def test_non_string_text_fields_are_stringified(self):
        form = IntakeFormData.from_dict({
            "budget_range": "50k-100k",
            "timeline": "3-6-months",
            "project_type": "web-app",
            "project_description": 12345,
            "key_requirements": ["scalable", "growth"],
        })
        assert form.project_description == "12345"
        result = score(form)
        assert result.technical_complexity_score == 60
        assert result.business_impact_score == 80


# ── Rule boundaries ───────────────────────────────────────────────────────────

TECH_RISK = "High technical complexity requires experienced team"
MARKET_RISK = "Limited market validation for this project type"
MARKET_OPPORTUNITY = "Strong market demand for this solution"


class TestRuleBoundaries:
    @pytest.mark.parametrize("project_type,description", [
        ("data-analytics", "A simple brochure website for a bakery"),
        ("mobile-app", "Uses Machine Learning for offers"),
    ])
    def test_technical_eighty_is_not_a_risk(self, project_type, description):
        result = score(make_form(project_type=project_type, project_description=description))
        assert result.technical_complexity_score == 80
        assert TECH_RISK not in result.risk_factors
        assert result.suggested_team_size == 4

    def test_technical_above_eighty_is_a_risk(self):
        result = score(make_form(project_type="ai-integration"))
        assert TECH_RISK in result.risk_factors

    def test_market_sixty_is_not_a_risk(self):
        result = score(make_form(project_type="custom-software"))
        assert result.market_potential_score == 60
        assert MARKET_RISK not in result.risk_factors

    def test_market_below_sixty_is_a_risk(self):
        assert MARKET_RISK in score(make_form(project_type="other")).risk_factors

    @pytest.mark.parametrize("project_type,expected", [
        ("e-commerce", True),      # market 80
        ("mobile-app", False),     # market 75
    ])
    def test_market_opportunity_starts_at_eighty(self, project_type, expected):
        result = score(make_form(project_type=project_type))
        assert (MARKET_OPPORTUNITY in result.opportunity_factors) is expected

    def test_budget_fifty_is_neither_concern_nor_risk(self):
        result = score(make_form(budget_range="10k-25k"))
        assert result.budget_score == 50
        assert tables.CONCERNS["budget"] not in result.analysis.concerns
        assert tables.STRENGTHS["budget"] not in result.analysis.strengths
        assert "Limited budget may constrain project scope" not in result.risk_factors
        assert "Adequate budget for comprehensive solution" not in result.opportunity_factors

    def test_budget_seventy_is_a_strength(self):
        result = score(make_form(budget_range="25k-50k"))
        assert tables.STRENGTHS["budget"] in result.analysis.strengths
        assert "Adequate budget for comprehensive solution" in result.opportunity_factors
