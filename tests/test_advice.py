import pytest

from scoring import advice
from scoring.calculator import HealthScoreCalculator
from scoring.levels import HEALTH_LEVELS, get_health_score_status
from scoring.results import HealthScoreResult, IndividualScore, ScoreBreakdown


@pytest.fixture
def calculator():
    return HealthScoreCalculator()


def _result(score, **individual):
    """Build a result directly: individual=(value, score) pairs."""
    return HealthScoreResult(
        score=score,
        level="Regular",
        confidence=50,
        assessed_biomarkers=len(individual),
        individual_scores={
            name: IndividualScore(value=v, score=s, weight=0.1, category="cardiovascular")
            for name, (v, s) in individual.items()
        },
        breakdown=ScoreBreakdown(base_score=score, completeness_bonus=0, consistency_penalty=0),
    )


# ── Recommendations ──────────────────────────────────────────────────────────

def test_no_result_gives_insufficient_analysis():
    assert advice.generate_recommendations(None) == [advice.INSUFFICIENT_ANALYSIS]


def test_tachycardia_gets_relaxation_and_consult(calculator):
    result = calculator.calculate_health_score({"heartRate": 130})
    recs = calculator.generate_recommendations(result)
    assert "relajación" in recs[0]
    assert recs[1] == advice.CONSULT_PROFESSIONAL
    assert len(recs) == 2


def test_direction_dependent_messages():
    assert "baja" in advice.get_biomarker_recommendation("heartRate", 40)
    assert "cafeína" in advice.get_biomarker_recommendation("heartRate", 95)
    assert "sal" in advice.get_biomarker_recommendation("bloodPressureSystolic", 160)
    assert "hidratado" in advice.get_biomarker_recommendation("bloodPressureSystolic", 80)


def test_stress_always_uses_high_message():
    assert "meditación" in advice.get_biomarker_recommendation("stressLevel", 0)
    assert "vocal" in advice.get_biomarker_recommendation("vocalStress", 5)


def test_biomarkers_without_advice_are_skipped():
    assert advice.get_biomarker_recommendation("jitter", 10) is None
    recs = advice.generate_recommendations(_result(60, jitter=(10, 0.1)))
    assert recs == [advice.GENERAL_WELLNESS]


def test_good_score_keeps_habits():
    recs = advice.generate_recommendations(_result(75, heartRate=(72, 1.0)))
    assert recs == [advice.MAINTAIN_HABITS]


def test_mid_score_without_issues_gets_general_wellness():
    assert advice.generate_recommendations(_result(60, heartRate=(72, 1.0))) == [advice.GENERAL_WELLNESS]


def test_scores_at_threshold_are_not_flagged():
    recs = advice.generate_recommendations(_result(60, rmssd=(25, 0.6)))
    assert recs == [advice.GENERAL_WELLNESS]


def test_recommendations_are_capped_at_five(calculator):
    result = calculator.calculate_health_score({
        "heartRate": 150,
        "rmssd": 5,
        "oxygenSaturation": 80,
        "bloodPressure": "180/110",
        "stressLevel": 90,
        "vocalStress": 90,
    })
    recs = calculator.generate_recommendations(result)
    assert len(recs) == 5
    assert advice.CONSULT_PROFESSIONAL not in recs
    assert "cafeína" in recs[0]


# ── Risk assessment ──────────────────────────────────────────────────────────

def test_no_result_risk_is_unknown():
    risk = advice.calculate_risk_assessment(None)
    assert risk.level == "unknown"
    assert risk.factors == []
    assert risk.urgency == "low"


def test_low_oxygen_is_urgent(calculator):
    result = calculator.calculate_health_score({"oxygenSaturation": 80, "heartRate": 70, "rmssd": 40})
    risk = calculator.calculate_risk_assessment(result)
    assert risk.urgency == "high"
    assert risk.factors == ["oxygenSaturation: valor preocupante"]
    assert risk.score == result.score


def test_heart_rate_escalates_to_moderate():
    risk = advice.calculate_risk_assessment(_result(60, heartRate=(150, 0.1)))
    assert risk.urgency == "moderate"
    assert risk.level == "moderate"


def test_urgency_never_downgrades():
    risk = advice.calculate_risk_assessment(
        _result(30, bloodPressureSystolic=(200, 0.1), stressLevel=(90, 0.1))
    )
    assert risk.urgency == "high"
    assert len(risk.factors) == 2


def test_other_biomarkers_add_factors_without_urgency():
    risk = advice.calculate_risk_assessment(_result(80, jitter=(10, 0.1)))
    assert risk.factors == ["jitter: valor preocupante"]
    assert risk.urgency == "low"
    assert risk.level == "low"


@pytest.mark.parametrize("score, level", [(70, "low"), (69, "moderate"), (55, "moderate"), (54, "high")])
def test_risk_level_thresholds(score, level):
    assert advice.calculate_risk_assessment(_result(score)).level == level


# ── Status ───────────────────────────────────────────────────────────────────

def test_status_for_every_level():
    seen = set()
    for score in (95, 75, 60, 45, 10):
        status = get_health_score_status(score)
        assert status.description
        assert status.color.startswith("#")
        assert status.score == score
        seen.add(status.level)
    assert seen == set(HEALTH_LEVELS)
