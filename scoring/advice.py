"""
scoring/advice.py — Recommendations & risk assessment
======================================================
Turns a `HealthScoreResult` into the two follow-up artefacts a report
shows next to the score:

* a short, ordered list of recommendations (biomarker-specific first,
  then general advice), capped at MAX_RECOMMENDATIONS;
* a risk assessment: overall level, the biomarkers that look concerning,
  and an urgency flag for follow-up.

Both accept None (no assessable biomarkers) and degrade to generic output.
Messages are the user-facing Spanish strings rendered verbatim by the UI.
"""

from typing import Optional

from config import (
    HEART_RATE_HIGH_BPM,
    LEVEL_ACCEPTABLE,
    LEVEL_GOOD,
    MAX_RECOMMENDATIONS,
    RECOMMENDATION_SCORE_THRESHOLD,
    RISK_FACTOR_SCORE_THRESHOLD,
    SYSTOLIC_HIGH_MMHG,
)
from scoring.results import HealthScoreResult, RiskAssessment
from utils.logger import get_logger

logger = get_logger("scoring.advice")

INSUFFICIENT_ANALYSIS = "Análisis insuficiente para generar recomendaciones específicas."
CONSULT_PROFESSIONAL = (
    "Considere consultar con un profesional de la salud para una evaluación más detallada."
)
MAINTAIN_HABITS = (
    "Mantenga sus hábitos saludables actuales y continúe con el monitoreo regular."
)
GENERAL_WELLNESS = (
    "Continúe con un estilo de vida saludable: ejercicio regular, "
    "alimentación balanceada y descanso adecuado."
)

# biomarker → {"high": msg, "low": msg}
_BIOMARKER_ADVICE = {
    "heartRate": {
        "high": "Considere técnicas de relajación y reduzca el consumo de cafeína "
                "para normalizar su frecuencia cardíaca.",
        "low": "Si experimenta fatiga, consulte con un médico sobre su frecuencia cardíaca baja.",
    },
    "rmssd": {
        "low": "Mejore su variabilidad cardíaca con ejercicio regular, técnicas de "
               "respiración y manejo del estrés.",
    },
    "oxygenSaturation": {
        "low": "Practique ejercicios de respiración profunda y considere evaluación "
               "médica si persiste.",
    },
    "bloodPressureSystolic": {
        "high": "Reduzca el consumo de sal, mantenga un peso saludable y practique "
                "actividad física regular.",
        "low": "Manténgase hidratado y consulte si experimenta mareos frecuentes.",
    },
    "stressLevel": {
        "high": "Implemente técnicas de manejo del estrés como meditación, yoga o "
                "ejercicio regular.",
    },
    "vocalStress": {
        "high": "Practique técnicas de relajación vocal y considere reducir factores "
                "de estrés en su entorno.",
    },
}

# Value above the cut-off → "high" advice, otherwise "low"
_DIRECTION_CUTOFFS = {
    "heartRate": HEART_RATE_HIGH_BPM,
    "bloodPressureSystolic": SYSTOLIC_HIGH_MMHG,
}

# Low stress is never flagged, so stress biomarkers only have "high" advice
_ALWAYS_HIGH = ("stressLevel", "vocalStress")

# Risk factors on these biomarkers force urgency to the given minimum
_URGENCY_ESCALATION = {
    "oxygenSaturation": "high",
    "bloodPressureSystolic": "high",
    "heartRate": "moderate",
    "stressLevel": "moderate",
}
_URGENCY_ORDER = {"low": 0, "moderate": 1, "high": 2}


def get_biomarker_recommendation(biomarker: str, value: float) -> Optional[str]:
    """Specific advice for one poorly-scoring biomarker, or None if there is none."""
    advice = _BIOMARKER_ADVICE.get(biomarker)
    if advice is None:
        return None

    if biomarker in _DIRECTION_CUTOFFS:
        direction = "high" if value > _DIRECTION_CUTOFFS[biomarker] else "low"
        return advice[direction]
    if biomarker in _ALWAYS_HIGH:
        return advice["high"]
    return advice.get("low") or advice.get("high")


def generate_recommendations(result: Optional[HealthScoreResult]) -> list[str]:
    """
    Ranked recommendations for an evaluation.

    Returns
    -------
    list[str]
        At most MAX_RECOMMENDATIONS messages, biomarker-specific advice in
        assessment order first, then general advice keyed on the composite.
    """
    if result is None or not result.individual_scores:
        return [INSUFFICIENT_ANALYSIS]

    recommendations = []
    for biomarker, entry in result.individual_scores.items():
        if entry.score < RECOMMENDATION_SCORE_THRESHOLD:
            message = get_biomarker_recommendation(biomarker, entry.value)
            if message:
                recommendations.append(message)

    if result.score < LEVEL_ACCEPTABLE:
        recommendations.append(CONSULT_PROFESSIONAL)
    if result.score >= LEVEL_GOOD:
        recommendations.append(MAINTAIN_HABITS)

    if not recommendations:
        recommendations.append(GENERAL_WELLNESS)

    if len(recommendations) > MAX_RECOMMENDATIONS:
        logger.debug("Truncating %d recommendations to %d.", len(recommendations), MAX_RECOMMENDATIONS)
    return recommendations[:MAX_RECOMMENDATIONS]


def _escalate(current: str, minimum: str) -> str:
    return minimum if _URGENCY_ORDER[minimum] > _URGENCY_ORDER[current] else current


def calculate_risk_assessment(result: Optional[HealthScoreResult]) -> RiskAssessment:
    """Overall risk level, concerning biomarkers and follow-up urgency."""
    if result is None:
        return RiskAssessment(level="unknown", factors=[], urgency="low")

    factors = []
    urgency = "low"
    for biomarker, entry in result.individual_scores.items():
        if entry.score < RISK_FACTOR_SCORE_THRESHOLD:
            factors.append(f"{biomarker}: valor preocupante")
            minimum = _URGENCY_ESCALATION.get(biomarker)
            if minimum is not None:
                urgency = _escalate(urgency, minimum)

    if result.score >= LEVEL_GOOD:
        level = "low"
    elif result.score >= LEVEL_ACCEPTABLE:
        level = "moderate"
    else:
        level = "high"

    if factors:
        logger.info("Risk factors: %s (urgency=%s)", ", ".join(factors), urgency)

    return RiskAssessment(level=level, factors=factors, urgency=urgency, score=result.score)
