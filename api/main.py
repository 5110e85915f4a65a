"""
api/main.py — FastAPI application entry point.

Run with:
    uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from api.endpoints.intake_routes import router as intake_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ─────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown logic."""
    logger.info(
        "%s starting (qualified_threshold=%d, max_batch_size=%d).",
        settings.app_name, settings.qualified_threshold, settings.max_batch_size,
    )
    yield
    logger.info("%s shutting down.", settings.app_name)


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Intake Qualification Service",
    description=(
        "Scores submitted project-intake forms into a multi-factor lead "
        "qualification verdict with risks, opportunities, and next steps."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(intake_router, prefix="/intake", tags=["Intake"])


# ── Health check ─────────────────────────────────────────────────────────────

@app.get("/health", tags=["System"])
def health_check():
    """Returns service liveness status."""
    return {"status": "ok", "service": settings.app_name}


@app.get("/", tags=["System"])
def root():
    return {
        "message": "Intake Qualification Service is running.",
        "docs": "/docs",
        "qualified_threshold": settings.qualified_threshold,
    }
