"""
scoring/levels.py — Composite score → health level
===================================================
Five levels with inclusive lower bounds:

    ≥ 85  Excelente
    ≥ 70  Buena
    ≥ 55  Aceptable
    ≥ 40  Regular
    else  Preocupante

The same thresholds drive the display status (description, colour, icon).
"""

from config import LEVEL_ACCEPTABLE, LEVEL_EXCELLENT, LEVEL_FAIR, LEVEL_GOOD
from scoring.results import HealthScoreStatus

EXCELLENT = "Excelente"
GOOD = "Buena"
ACCEPTABLE = "Aceptable"
FAIR = "Regular"
CONCERNING = "Preocupante"

HEALTH_LEVELS = (EXCELLENT, GOOD, ACCEPTABLE, FAIR, CONCERNING)

_INTERPRETATIONS = {
    EXCELLENT: {
        "description": "Sus biomarcadores indican un excelente estado de salud.",
        "color": "#10B981",
        "icon": "🟢",
    },
    GOOD: {
        "description": "Sus biomarcadores muestran un buen estado de salud general.",
        "color": "#059669",
        "icon": "🟢",
    },
    ACCEPTABLE: {
        "description": "Sus biomarcadores están dentro de rangos aceptables.",
        "color": "#F59E0B",
        "icon": "🟡",
    },
    FAIR: {
        "description": "Algunos biomarcadores requieren atención y mejora.",
        "color": "#EF4444",
        "icon": "🟠",
    },
    CONCERNING: {
        "description": "Varios biomarcadores indican la necesidad de atención médica.",
        "color": "#DC2626",
        "icon": "🔴",
    },
}


def score_to_health_level(score: float) -> str:
    if score >= LEVEL_EXCELLENT:
        return EXCELLENT
    if score >= LEVEL_GOOD:
        return GOOD
    if score >= LEVEL_ACCEPTABLE:
        return ACCEPTABLE
    if score >= LEVEL_FAIR:
        return FAIR
    return CONCERNING


def status_for_level(level: str, score: float) -> HealthScoreStatus:
    return HealthScoreStatus(level=level, score=score, **_INTERPRETATIONS[level])


def get_health_score_status(score: float) -> HealthScoreStatus:
    """Level plus the description, colour and icon a UI shows for it."""
    return status_for_level(score_to_health_level(score), score)
