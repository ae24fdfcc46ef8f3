"""
api/app.py — FastAPI application factory
==========================================
Builds the scoring service: metadata from `config.py`, CORS for the
dashboards that render scores, and the scoring router.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from config import API_TITLE, API_VERSION, CORS_ALLOW_ORIGINS
from utils.logger import get_logger

logger = get_logger("api.app")


def create_app(allow_origins: list[str] | None = None) -> FastAPI:
    """
    Return a configured scoring API.

    Parameters
    ----------
    allow_origins : list[str] | None
        Origins allowed by CORS; defaults to CORS_ALLOW_ORIGINS.
    """
    origins = list(allow_origins) if allow_origins is not None else list(CORS_ALLOW_ORIGINS)

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=(
            "Rule-based health score from cardiovascular and voice biomarkers. "
            "Wellness indicator only, not a medical device."
        ),
    )

    # Scoring is read-only, so browsers only need GET and POST.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(router)

    logger.info("Health score API ready (origins=%s).", ", ".join(origins))
    return app
