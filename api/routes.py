"""
api/routes.py — FastAPI route definitions
==========================================
All HTTP endpoints are defined here and wired into the app via
`app.include_router(router)` in `api/app.py`.

Endpoint summary
----------------
    GET  /health              — Liveness probe
    POST /score               — Score a biomarker map (score, advice, risk, status)
    GET  /ranges              — Reference ranges and weights in use
    GET  /levels/{score}      — Level, description, colour and icon for a score
    GET  /docs                — Auto-generated Swagger UI (FastAPI built-in)
"""

from fastapi import APIRouter, Path

from api.schemas import ScoreRequest, ScoreResponse, StatusData
from scoring.calculator import HealthScoreCalculator
from scoring.ranges import ranges_as_dict
from utils.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter()

# ── Disclaimer string injected into every score response ────────────────────
DISCLAIMER = (
    "⚠️ This health score is a WELLNESS INDICATOR computed from a fixed rule "
    "table — NOT a medical assessment. "
    "Do NOT make medical decisions based on it. "
    "Consult a qualified healthcare professional for diagnosis or treatment."
)

# The calculator is stateless, so one instance serves every request.
_calculator = HealthScoreCalculator()


# ── Health ────────────────────────────────────────────────────────────────────

@router.get("/health")
async def health():
    """Simple liveness check."""
    return {"status": "ok", "service": "Biomarker Health Score"}


# ── Scoring ───────────────────────────────────────────────────────────────────

@router.post("/score")
async def score(request: ScoreRequest) -> ScoreResponse:
    """
    Score a flat biomarker map.

    Body (JSON):
        biomarkers : {name: number | string | null}

    An input with no assessable biomarker is not an error: the response
    carries `health_score: null`, the generic recommendation and an
    "unknown" risk level.
    """
    logger.info("Scoring request with %d biomarker keys.", len(request.biomarkers))
    report = _calculator.evaluate(request.biomarkers)
    return ScoreResponse.from_report(report, DISCLAIMER)


@router.get("/ranges")
async def ranges():
    """Reference ranges, weights and categories used for scoring."""
    return ranges_as_dict()


@router.get("/levels/{score}")
async def level_status(score: float = Path(..., ge=0, le=100)) -> StatusData:
    """Health level for a composite score, with its display description."""
    status = _calculator.get_health_score_status(score)
    return StatusData(**status.to_dict())
