"""
scoring/results.py — Result containers returned by the scoring engine
=====================================================================
Plain dataclasses, rebuilt on every call.  `to_dict()` produces the
camelCase payload that dashboards and report generators render.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class IndividualScore:
    value: float
    score: float          # 0–1
    weight: float
    category: str         # "cardiovascular" | "voice"

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "score": self.score,
            "weight": self.weight,
            "category": self.category,
        }


@dataclass
class ScoreBreakdown:
    base_score: int
    completeness_bonus: int
    consistency_penalty: int

    def to_dict(self) -> dict:
        return {
            "baseScore": self.base_score,
            "completenessBonus": self.completeness_bonus,
            "consistencyPenalty": self.consistency_penalty,
        }


@dataclass
class HealthScoreResult:
    """Composite health index for one evaluation."""

    score: int                    # 0–100
    level: str                    # Excelente | Buena | Aceptable | Regular | Preocupante
    confidence: int               # 0–100
    assessed_biomarkers: int
    individual_scores: dict[str, IndividualScore]
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "confidence": self.confidence,
            "assessedBiomarkers": self.assessed_biomarkers,
            "individualScores": {
                name: entry.to_dict() for name, entry in self.individual_scores.items()
            },
            "breakdown": self.breakdown.to_dict(),
        }


@dataclass
class RiskAssessment:
    level: str                    # low | moderate | high | unknown
    factors: list[str] = field(default_factory=list)
    urgency: str = "low"          # low | moderate | high
    score: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "factors": list(self.factors),
            "urgency": self.urgency,
            "score": self.score,
        }


@dataclass
class HealthScoreStatus:
    level: str
    score: float
    description: str
    color: str
    icon: str

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "score": self.score,
            "description": self.description,
            "color": self.color,
            "icon": self.icon,
        }


@dataclass
class HealthReport:
    """Everything a presentation layer needs for one evaluation."""

    health_score: Optional[HealthScoreResult]
    recommendations: list[str]
    risk: RiskAssessment
    status: Optional[HealthScoreStatus] = None

    def to_dict(self) -> dict:
        return {
            "healthScore": self.health_score.to_dict() if self.health_score else None,
            "recommendations": list(self.recommendations),
            "risk": self.risk.to_dict(),
            "status": self.status.to_dict() if self.status else None,
        }
