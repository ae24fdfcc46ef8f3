"""
scoring/calculator.py — Composite Health Score
================================================

⚠️  DISCLAIMER: The health score is a WELLNESS INDICATOR built from a fixed
    rule table.  It is not a validated clinical index and must not be used
    for diagnosis or treatment decisions.

────────────────────────────────────────────────────────────────────────
Algorithm
────────────────────────────────────────────────────────────────────────
Each known biomarker present in the input is scored in [0, 1] against
its reference bands (see `scoring/ranges.py`):

    inside optimal          →  1.0
    inside acceptable       →  0.7 … 1.0, linear in the distance to the
                               optimal edge
    outside acceptable      →  max(0.1, 0.4 − min(0.6, distance / boundary))

The composite is the weight-averaged score × 100, plus a completeness
bonus (0.5 per biomarker, capped at 10) minus a consistency penalty
(30 × population std-dev of the individual scores, capped at 15, only
with ≥ 3 biomarkers), clamped to [0, 100].

Confidence is independent of the score value:

    min(0.9, 0.08 · count) + min(0.1, 0.1 · Σweight)   →   0–100 %

The fundamental frequency is scored against a male or female band picked
by a crude F0 threshold (200 Hz).  The threshold is a placeholder, so the
estimator is injectable.
────────────────────────────────────────────────────────────────────────
"""

import math
from typing import Any, Callable, Mapping, Optional

import numpy as np

from config import (
    ACCEPTABLE_FLOOR,
    ACCEPTABLE_SPAN,
    COMPLETENESS_BONUS_MAX,
    COMPLETENESS_BONUS_PER_BIOMARKER,
    CONFIDENCE_COUNT_MAX,
    CONFIDENCE_PER_BIOMARKER,
    CONFIDENCE_WEIGHT_FACTOR,
    CONFIDENCE_WEIGHT_MAX,
    CONSISTENCY_MIN_SCORES,
    CONSISTENCY_PENALTY_FACTOR,
    CONSISTENCY_PENALTY_MAX,
    GENDER_F0_THRESHOLD_HZ,
    MIN_BIOMARKER_SCORE,
    NEUTRAL_SCORE,
    OUT_OF_RANGE_BASE,
    OUT_OF_RANGE_MAX_PENALTY,
)
from scoring import advice, levels
from scoring.extraction import extract_biomarker_value
from scoring.ranges import REFERENCE_RANGES, VOICE_RANGES, GenderedRange, ReferenceRange
from scoring.results import (
    HealthReport,
    HealthScoreResult,
    HealthScoreStatus,
    IndividualScore,
    RiskAssessment,
    ScoreBreakdown,
)
from utils.logger import get_logger

logger = get_logger("scoring.calculator")

GenderEstimator = Callable[[float], str]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (2.5 → 3), unlike built-in round()."""
    return int(math.floor(value + 0.5))


def _bands(ranges: Any) -> Optional[tuple[tuple[float, float], tuple[float, float]]]:
    if ranges is None:
        return None
    if isinstance(ranges, ReferenceRange):
        return ranges.optimal, ranges.acceptable
    if isinstance(ranges, Mapping):
        optimal = ranges.get("optimal")
        acceptable = ranges.get("acceptable")
        if optimal and acceptable:
            return tuple(optimal), tuple(acceptable)
    return None


def _out_of_range_score(distance: float, boundary: float) -> float:
    # A zero boundary has no relative scale; treat it as the maximum penalty.
    if boundary == 0:
        penalty = OUT_OF_RANGE_MAX_PENALTY
    else:
        penalty = min(OUT_OF_RANGE_MAX_PENALTY, distance / boundary)
    return max(MIN_BIOMARKER_SCORE, OUT_OF_RANGE_BASE - penalty)


def calculate_biomarker_score(value: float, ranges: Any) -> float:
    """
    Score one biomarker value against its optimal / acceptable bands.

    Parameters
    ----------
    value  : float                         Measured value.
    ranges : ReferenceRange | Mapping      Anything with `optimal` and
                                           `acceptable` (min, max) pairs.

    Returns
    -------
    float in [0.1, 1.0], or NEUTRAL_SCORE (0.5) if the bands are incomplete.
    """
    bands = _bands(ranges)
    if bands is None:
        return NEUTRAL_SCORE

    (optimal_min, optimal_max), (acceptable_min, acceptable_max) = bands

    if optimal_min <= value <= optimal_max:
        return 1.0

    if acceptable_min <= value <= acceptable_max:
        if value < optimal_min:
            distance = optimal_min - value
            max_distance = optimal_min - acceptable_min
        else:
            distance = value - optimal_max
            max_distance = acceptable_max - optimal_max
        return ACCEPTABLE_FLOOR + ACCEPTABLE_SPAN * (1 - distance / max_distance)

    if value < acceptable_min:
        return _out_of_range_score(acceptable_min - value, acceptable_min)
    return _out_of_range_score(value - acceptable_max, acceptable_max)


def estimate_gender(f0: float) -> str:
    """Pick the F0 sub-range: below 200 Hz → 'male', otherwise 'female'."""
    return "male" if f0 < GENDER_F0_THRESHOLD_HZ else "female"


def calculate_completeness_bonus(assessed_biomarkers: int) -> float:
    return min(COMPLETENESS_BONUS_MAX, assessed_biomarkers * COMPLETENESS_BONUS_PER_BIOMARKER)


def calculate_consistency_penalty(individual_scores: Mapping[str, IndividualScore]) -> float:
    """
    Penalty for biomarkers that disagree with each other.

    A mix of excellent and poor readings makes a single composite number
    less trustworthy than uniformly mediocre ones, so the penalty scales
    with the population standard deviation of the 0–1 scores.
    """
    scores = [entry.score for entry in individual_scores.values()]
    if len(scores) < CONSISTENCY_MIN_SCORES:
        return 0.0
    std_dev = float(np.std(scores))   # ddof=0 → population std
    return min(CONSISTENCY_PENALTY_MAX, std_dev * CONSISTENCY_PENALTY_FACTOR)


def calculate_confidence(assessed_biomarkers: int, total_weight: float) -> int:
    confidence = min(CONFIDENCE_COUNT_MAX, assessed_biomarkers * CONFIDENCE_PER_BIOMARKER)
    confidence += min(CONFIDENCE_WEIGHT_MAX, total_weight * CONFIDENCE_WEIGHT_FACTOR)
    return round_half_up(confidence * 100)


class HealthScoreCalculator:
    """
    Rule-based aggregation of cardiovascular and voice biomarkers into a
    0–100 health score, plus recommendations and a risk assessment.

    Stateless: the reference tables are shared read-only module data, so a
    single instance can serve any number of callers.

    Parameters
    ----------
    gender_estimator : callable, optional
        `f0 → 'male' | 'female'`, used to pick the fundamental-frequency
        band.  Defaults to `estimate_gender`.
    """

    def __init__(self, gender_estimator: Optional[GenderEstimator] = None):
        self.reference_ranges = REFERENCE_RANGES
        self.voice_ranges = VOICE_RANGES
        self._gender_estimator = gender_estimator or estimate_gender

    # ── Building blocks ────────────────────────────────────────────────────

    extract_biomarker_value = staticmethod(extract_biomarker_value)
    calculate_biomarker_score = staticmethod(calculate_biomarker_score)
    calculate_consistency_penalty = staticmethod(calculate_consistency_penalty)
    calculate_confidence = staticmethod(calculate_confidence)
    score_to_health_level = staticmethod(levels.score_to_health_level)

    def estimate_gender(self, f0: float) -> str:
        return self._gender_estimator(f0)

    # ── Composite score ────────────────────────────────────────────────────

    def calculate_health_score(self, biomarkers: Any) -> Optional[HealthScoreResult]:
        """
        Score a flat `name → value` biomarker map.

        Returns None when nothing could be assessed (empty map, all values
        missing or malformed, non-mapping input) or when scoring fails
        unexpectedly; the failure is logged, never raised.
        """
        try:
            return self._calculate(biomarkers)
        except Exception:
            logger.exception("Error calculating health score:")
            return None

    def _calculate(self, biomarkers: Any) -> Optional[HealthScoreResult]:
        if not isinstance(biomarkers, Mapping):
            logger.warning("Biomarker input is not a mapping (%s); nothing to score.",
                           type(biomarkers).__name__)
            return None

        total_score = 0.0
        total_weight = 0.0
        individual_scores: dict[str, IndividualScore] = {}

        for table in (self.reference_ranges, self.voice_ranges):
            for name, entry in table.items():
                value = extract_biomarker_value(biomarkers, name)
                if value is None:
                    continue

                if isinstance(entry, GenderedRange):
                    bands = entry.for_gender(self.estimate_gender(value))
                else:
                    bands = entry
                score = calculate_biomarker_score(value, bands)

                individual_scores[name] = IndividualScore(
                    value=value,
                    score=score,
                    weight=entry.weight,
                    category=entry.category,
                )
                total_score += score * entry.weight
                total_weight += entry.weight
                logger.debug("%s=%.2f → score %.3f (weight %.2f)", name, value, score, entry.weight)

        assessed = len(individual_scores)
        if assessed == 0 or total_weight == 0:
            logger.warning("No assessable biomarkers in input (%d keys).", len(biomarkers))
            return None

        base_score = (total_score / total_weight) * 100
        completeness_bonus = calculate_completeness_bonus(assessed)
        consistency_penalty = calculate_consistency_penalty(individual_scores)
        final_score = max(0.0, min(100.0, base_score + completeness_bonus - consistency_penalty))

        result = HealthScoreResult(
            score=round_half_up(final_score),
            level=levels.score_to_health_level(final_score),
            confidence=calculate_confidence(assessed, total_weight),
            assessed_biomarkers=assessed,
            individual_scores=individual_scores,
            breakdown=ScoreBreakdown(
                base_score=round_half_up(base_score),
                completeness_bonus=round_half_up(completeness_bonus),
                consistency_penalty=round_half_up(consistency_penalty),
            ),
        )

        logger.info(
            "Health score: %d (%s), confidence=%d%%, %d biomarkers",
            result.score, result.level, result.confidence, assessed,
        )
        return result

    # ── Derived outputs ────────────────────────────────────────────────────

    def generate_recommendations(self, result: Optional[HealthScoreResult]) -> list[str]:
        return advice.generate_recommendations(result)

    def calculate_risk_assessment(self, result: Optional[HealthScoreResult]) -> RiskAssessment:
        return advice.calculate_risk_assessment(result)

    def get_health_score_status(self, score: float) -> HealthScoreStatus:
        return levels.get_health_score_status(score)

    def evaluate(self, biomarkers: Any) -> HealthReport:
        """Score, recommendations, risk and status for one biomarker map."""
        result = self.calculate_health_score(biomarkers)
        return HealthReport(
            health_score=result,
            recommendations=self.generate_recommendations(result),
            risk=self.calculate_risk_assessment(result),
            # The level is taken from the unrounded score, so reuse it as is.
            status=levels.status_for_level(result.level, result.score) if result else None,
        )
