"""
app/scoring/tables.py — Static scoring configuration for the qualification engine.

Every number and sentence the engine emits lives here. The engine only reads
these tables; changing a weight, a threshold, or a lookup value is a one-line
edit in this file.

All mappings are read-only (MappingProxyType) so no caller can alter scoring
at runtime.
"""

import operator
from decimal import Decimal
from types import MappingProxyType

# ── Factor names (also the order of strengths / concerns) ────────────────────

BUDGET = "budget"
TIMELINE = "timeline"
TECHNICAL_COMPLEXITY = "technical_complexity"
BUSINESS_IMPACT = "business_impact"
MARKET_POTENTIAL = "market_potential"

FACTORS = (BUDGET, TIMELINE, TECHNICAL_COMPLEXITY, BUSINESS_IMPACT, MARKET_POTENTIAL)

# ── Component lookups ─────────────────────────────────────────────────────────

UNKNOWN_SCORE = 0

BUDGET_SCORES = MappingProxyType({
    "under-10k": 30,
    "10k-25k": 50,
    "25k-50k": 70,
    "50k-100k": 85,
    "100k+": 95,
})

TIMELINE_SCORES = MappingProxyType({
    "1-2-weeks": 20,
    "1-month": 40,
    "2-3-months": 70,
    "3-6-months": 85,
    "6+months": 90,
})

# (base, score when the description mentions complex technology)
TECHNICAL_SCORES = MappingProxyType({
    "ai-integration": (90, 90),
    "data-analytics": (80, 80),
    "api-development": (70, 70),
    "e-commerce": (70, 70),
    "web-app": (60, 75),
    "mobile-app": (65, 80),
})
DEFAULT_TECHNICAL_SCORE = 50

TECHNICAL_KEYWORDS = (
    "ai",
    "machine learning",
    "blockchain",
    "iot",
    "microservices",
    "scalable",
    "real-time",
)

BUSINESS_KEYWORDS = (
    "revenue",
    "growth",
    "efficiency",
    "automation",
    "roi",
    "cost reduction",
)
BUSINESS_IMPACT_WITH_KEYWORDS = 80
BUSINESS_IMPACT_DEFAULT = 50

MARKET_SCORES = MappingProxyType({
    "ai-integration": 95,
    "data-analytics": 85,
    "e-commerce": 80,
    "mobile-app": 75,
    "web-app": 70,
    "api-development": 65,
    "custom-software": 60,
    "other": 50,
})
DEFAULT_MARKET_SCORE = 50

# ── Overall score ─────────────────────────────────────────────────────────────

# Must sum to exactly 1.00; re-normalize when adding a factor.
WEIGHTS = MappingProxyType({
    BUDGET: Decimal("0.25"),
    TIMELINE: Decimal("0.20"),
    TECHNICAL_COMPLEXITY: Decimal("0.25"),
    BUSINESS_IMPACT: Decimal("0.20"),
    MARKET_POTENTIAL: Decimal("0.10"),
})

MIN_CONFIDENCE = 0.30
MAX_CONFIDENCE = 0.95

# ── Analysis thresholds ───────────────────────────────────────────────────────

STRENGTH_THRESHOLD = 70   # score >= this → strength
CONCERN_THRESHOLD = 50    # score <  this → concern

# (minimum score, rating) — first match wins
RATING_BANDS = ((70, "High"), (50, "Medium"))
LOWEST_RATING = "Low"

STRENGTHS = MappingProxyType({
    BUDGET: "Strong budget allocation",
    TIMELINE: "Realistic timeline expectations",
    TECHNICAL_COMPLEXITY: "Clear technical requirements",
    BUSINESS_IMPACT: "Strong business value proposition",
    MARKET_POTENTIAL: "High market potential",
})

CONCERNS = MappingProxyType({
    BUDGET: "Limited budget may impact scope",
    TIMELINE: "Aggressive timeline may affect quality",
    TECHNICAL_COMPLEXITY: "Unclear technical requirements",
    BUSINESS_IMPACT: "Unclear business value",
    MARKET_POTENTIAL: "Limited market validation",
})

# ── Risk / opportunity rules: (factor, comparator, threshold, sentence) ──────

RISK_RULES = (
    (BUDGET, operator.lt, 50, "Limited budget may constrain project scope"),
    (TIMELINE, operator.lt, 50, "Aggressive timeline may impact quality"),
    (TECHNICAL_COMPLEXITY, operator.gt, 80, "High technical complexity requires experienced team"),
    (MARKET_POTENTIAL, operator.lt, 60, "Limited market validation for this project type"),
)

OPPORTUNITY_RULES = (
    (BUDGET, operator.ge, 70, "Adequate budget for comprehensive solution"),
    (TIMELINE, operator.ge, 70, "Realistic timeline allows for proper development"),
    (BUSINESS_IMPACT, operator.ge, 70, "Clear business value and ROI potential"),
    (MARKET_POTENTIAL, operator.ge, 80, "Strong market demand for this solution"),
)

# ── Recommendations ───────────────────────────────────────────────────────────

# (minimum overall score, approach) — checked top-down, first match wins
RECOMMENDED_APPROACHES = (
    (80, "High-priority lead. Recommend immediate engagement and proposal generation."),
    (60, "Qualified lead. Schedule technical discussion to refine requirements."),
    (40, "Potential lead. Gather more information through discovery call."),
    (0, "Low-priority lead. Consider if project aligns with company capabilities."),
)

NEXT_STEPS = (
    (70, (
        "Schedule technical discovery call",
        "Prepare detailed proposal",
        "Identify key stakeholders",
    )),
    (50, (
        "Schedule initial consultation",
        "Gather additional requirements",
        "Assess technical feasibility",
    )),
    (0, (
        "Review project alignment",
        "Consider referral to partner",
    )),
)

PROJECT_DURATIONS = MappingProxyType({
    "1-2-weeks": "2-4 weeks",
    "1-month": "1-2 months",
    "2-3-months": "2-4 months",
    "3-6-months": "3-6 months",
    "6+months": "6+ months",
})
UNKNOWN_DURATION = "TBD"

# ── Team size ─────────────────────────────────────────────────────────────────

DEFAULT_TEAM_SIZE = 2
LARGE_TEAM_SIZE = 4
MEDIUM_TEAM_SIZE = 3
LARGE_TEAM_TECHNICAL_SCORE = 80
MEDIUM_TEAM_TECHNICAL_SCORE = 60
MEDIUM_TEAM_OVERALL_SCORE = 70

# ── Display labels for the intake form options ───────────────────────────────

PROJECT_TYPE_LABELS = MappingProxyType({
    "web-app": "Web Application",
    "mobile-app": "Mobile Application",
    "e-commerce": "E-commerce Platform",
    "ai-integration": "AI Integration",
    "data-analytics": "Data Analytics",
    "api-development": "API Development",
    "custom-software": "Custom Software",
    "other": "Other",
})

TIMELINE_LABELS = MappingProxyType({
    "1-2-weeks": "1-2 weeks",
    "1-month": "1 month",
    "2-3-months": "2-3 months",
    "3-6-months": "3-6 months",
    "6+months": "6+ months",
})

BUDGET_RANGE_LABELS = MappingProxyType({
    "under-10k": "Under $10,000",
    "10k-25k": "$10,000 - $25,000",
    "25k-50k": "$25,000 - $50,000",
    "50k-100k": "$50,000 - $100,000",
    "100k+": "$100,000+",
})

# (minimum score, label) — first match wins
SCORE_LABELS = (
    (90, "Excellent"),
    (80, "Very Good"),
    (70, "Good"),
    (60, "Fair"),
    (40, "Poor"),
    (0, "Very Poor"),
)
