"""
tests/conftest.py — Shared pytest configuration and fixtures.

Pins environment variables BEFORE any app module is imported, so that a
developer's local .env can't change the thresholds the tests assert on.
"""

import os
import pytest

# ── Set env vars before any app module is imported ───────────────────────────
# This runs at collection time, before tests execute.
os.environ["QUALIFIED_THRESHOLD"] = "70"
os.environ["MAX_BATCH_SIZE"] = "100"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.scoring.models import IntakeFormData  # noqa: E402


# ── Forms ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def strong_form() -> IntakeFormData:
    """Big budget, long timeline, AI project with clear business goals."""
    return IntakeFormData(
        budget_range="100k+",
        timeline="6+months",
        project_type="ai-integration",
        project_description="building a scalable real-time AI platform",
        key_requirements="increase revenue through automation",
    )


@pytest.fixture
def weak_form() -> IntakeFormData:
    """Tiny budget, rushed timeline, vague project."""
    return IntakeFormData(
        budget_range="under-10k",
        timeline="1-2-weeks",
        project_type="other",
        project_description="",
        key_requirements="",
    )


@pytest.fixture
def intake_payload() -> dict:
    """A valid API payload (passes the upstream length checks)."""
    return {
        "project_name": "Customer Insights Portal",
        "contact_name": "Jordan Lee",
        "project_type": "web-app",
        "project_description": (
            "A customer portal with a real-time dashboard of orders, "
            "invoices and support tickets for our B2B clients."
        ),
        "key_requirements": "Single sign-on, role-based access, exports to CSV.",
        "business_goals": "Reduce support load and drive growth in repeat orders.",
        "timeline": "3-6-months",
        "budget_range": "50k-100k",
    }
