"""
api/schemas.py — Pydantic request & response models
=====================================================
Centralises all data-transfer objects so that FastAPI can auto-generate
OpenAPI docs and perform input validation for free.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from scoring.results import HealthReport


# ── Request Models ───────────────────────────────────────────────────────────


class ScoreRequest(BaseModel):
    """
    Flat biomarker map produced by the capture pipeline.

    Values may be numbers, numeric strings or null; blood pressure is a
    "systolic/diastolic" string.  Unknown names are ignored.
    """
    biomarkers: dict[str, Union[float, str, None]] = Field(
        default_factory=dict,
        description="Biomarker name → value, e.g. {\"heartRate\": 72, \"bloodPressure\": \"120/80\"}.",
    )


# ── Response Models ──────────────────────────────────────────────────────────


class IndividualScoreData(BaseModel):
    value: float
    score: float
    weight: float
    category: str


class BreakdownData(BaseModel):
    base_score: int
    completeness_bonus: int
    consistency_penalty: int


class HealthScoreData(BaseModel):
    score: int = Field(..., ge=0, le=100)
    level: str
    confidence: int = Field(..., ge=0, le=100)
    assessed_biomarkers: int
    individual_scores: dict[str, IndividualScoreData]
    breakdown: BreakdownData


class RiskData(BaseModel):
    level: str                           # "low" | "moderate" | "high" | "unknown"
    factors: list[str]
    urgency: str                         # "low" | "moderate" | "high"
    score: Optional[int] = None


class StatusData(BaseModel):
    level: str
    score: float
    description: str
    color: str
    icon: str


class ScoreResponse(BaseModel):
    """Full evaluation payload.  `health_score` is null when nothing was assessable."""
    disclaimer: str
    health_score: Optional[HealthScoreData] = None
    recommendations: list[str]
    risk: RiskData
    status: Optional[StatusData] = None

    @classmethod
    def from_report(cls, report: HealthReport, disclaimer: str) -> "ScoreResponse":
        health_score = None
        result = report.health_score
        if result is not None:
            health_score = HealthScoreData(
                score=result.score,
                level=result.level,
                confidence=result.confidence,
                assessed_biomarkers=result.assessed_biomarkers,
                individual_scores={
                    name: IndividualScoreData(**entry.to_dict())
                    for name, entry in result.individual_scores.items()
                },
                breakdown=BreakdownData(
                    base_score=result.breakdown.base_score,
                    completeness_bonus=result.breakdown.completeness_bonus,
                    consistency_penalty=result.breakdown.consistency_penalty,
                ),
            )

        return cls(
            disclaimer=disclaimer,
            health_score=health_score,
            recommendations=report.recommendations,
            risk=RiskData(**report.risk.to_dict()),
            status=StatusData(**report.status.to_dict()) if report.status else None,
        )
