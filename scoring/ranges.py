"""
scoring/ranges.py — Biomarker reference ranges, weights and aliases
====================================================================
Static lookup tables shared by every `HealthScoreCalculator`.  They are
built once at import time and exposed as read-only mappings, so two
calculators can never disagree on reference data.

Each biomarker has

    optimal    : (min, max)   Values here score 1.0.
    acceptable : (min, max)   Wider band; values here score 0.7–1.0.
    weight     : float        Contribution to the weighted composite.

Weights are relative: the composite divides by the sum of the weights of
the biomarkers actually assessed, so they do not need to add up to 1.

Cardiovascular reference bands follow common adult resting values:

    heartRate               60–80 bpm optimal, 50–100 acceptable
    oxygenSaturation        97–100 % optimal,  95–100 acceptable
    bloodPressureSystolic   110–130 mmHg,      90–140 acceptable

Voice bands use percentages for jitter/shimmer and a 0–100 stress scale.
The fundamental frequency is the only gender-conditioned biomarker.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

CARDIOVASCULAR = "cardiovascular"
VOICE = "voice"


@dataclass(frozen=True)
class ReferenceRange:
    optimal: tuple[float, float]
    acceptable: tuple[float, float]
    weight: float
    category: str = CARDIOVASCULAR

    def __post_init__(self):
        _validate_band(self.optimal, self.acceptable)
        if self.weight <= 0:
            raise ValueError(f"Range weight must be positive, got {self.weight}")


@dataclass(frozen=True)
class GenderedRange:
    """Per-gender optimal/acceptable bands sharing a single weight."""

    male: ReferenceRange
    female: ReferenceRange
    weight: float
    category: str = VOICE

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"Range weight must be positive, got {self.weight}")

    def for_gender(self, gender: str) -> ReferenceRange:
        if gender == "male":
            return self.male
        if gender == "female":
            return self.female
        raise ValueError(f"Unknown gender {gender!r}; expected 'male' or 'female'")


def _validate_band(optimal: tuple[float, float], acceptable: tuple[float, float]) -> None:
    opt_min, opt_max = optimal
    acc_min, acc_max = acceptable
    if opt_min > opt_max or acc_min > acc_max:
        raise ValueError(f"Inverted range: optimal={optimal}, acceptable={acceptable}")
    if acc_min > opt_min or acc_max < opt_max:
        raise ValueError(
            f"Acceptable range {acceptable} must contain optimal range {optimal}"
        )


def _voice(optimal, acceptable, weight) -> ReferenceRange:
    return ReferenceRange(optimal=optimal, acceptable=acceptable, weight=weight, category=VOICE)


# ── Cardiovascular ───────────────────────────────────────────────────────────
# Insertion order is the assessment order (and the order of individual
# scores in every result).
REFERENCE_RANGES: Mapping[str, ReferenceRange] = MappingProxyType({
    "heartRate":              ReferenceRange((60, 80), (50, 100), 0.15),
    "rmssd":                  ReferenceRange((30, 60), (20, 80), 0.12),
    "sdnn":                   ReferenceRange((35, 65), (25, 80), 0.10),
    "oxygenSaturation":       ReferenceRange((97, 100), (95, 100), 0.15),
    "bloodPressureSystolic":  ReferenceRange((110, 130), (90, 140), 0.12),
    "bloodPressureDiastolic": ReferenceRange((70, 85), (60, 90), 0.10),
    "respiratoryRate":        ReferenceRange((12, 20), (8, 25), 0.08),
    "perfusionIndex":         ReferenceRange((1.0, 5.0), (0.5, 8.0), 0.06),
    "stressLevel":            ReferenceRange((0, 30), (0, 50), 0.12),
})

# ── Voice ────────────────────────────────────────────────────────────────────
VOICE_RANGES: Mapping[str, ReferenceRange | GenderedRange] = MappingProxyType({
    "fundamentalFrequency": GenderedRange(
        male=_voice((85, 180), (70, 250), 0.08),
        female=_voice((165, 265), (120, 350), 0.08),
        weight=0.08,
    ),
    "jitter":      _voice((0, 1.5), (0, 3.0), 0.06),
    "shimmer":     _voice((0, 3.0), (0, 6.0), 0.06),
    "vocalStress": _voice((0, 25), (0, 50), 0.10),
})

# ── Alternative input names ──────────────────────────────────────────────────
# canonical name → aliases, tried in order after the canonical key.
# stressLevel and vocalStress alias each other, so a single stress reading
# feeds both when only one of them was measured.
ALTERNATIVE_NAMES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "heartRate":            ("hr", "pulse", "bpm"),
    "rmssd":                ("heartRateVariability", "hrv"),
    "oxygenSaturation":     ("spo2", "o2sat", "spO2"),
    "respiratoryRate":      ("rr", "breathingRate"),
    "stressLevel":          ("stress", "vocalStress"),
    "fundamentalFrequency": ("f0", "pitch"),
    "vocalStress":          ("stressLevel", "stress"),
})

# Derived from the raw "systolic/diastolic" string rather than read directly
BLOOD_PRESSURE_KEY = "bloodPressure"
BLOOD_PRESSURE_SIDES = ("bloodPressureSystolic", "bloodPressureDiastolic")


def get_range(name: str) -> Optional[ReferenceRange | GenderedRange]:
    """Return the reference entry for `name`, or None if the biomarker is unknown."""
    if name in REFERENCE_RANGES:
        return REFERENCE_RANGES[name]
    return VOICE_RANGES.get(name)


def known_biomarkers() -> tuple[str, ...]:
    """All scored biomarker names in assessment order."""
    return tuple(REFERENCE_RANGES) + tuple(VOICE_RANGES)


def ranges_as_dict() -> dict:
    """JSON-friendly dump of both tables, used by the API."""

    def _flat(entry: ReferenceRange) -> dict:
        return {
            "optimal": list(entry.optimal),
            "acceptable": list(entry.acceptable),
            "weight": entry.weight,
            "category": entry.category,
        }

    voice = {}
    for name, entry in VOICE_RANGES.items():
        if isinstance(entry, GenderedRange):
            voice[name] = {
                "male": {"optimal": list(entry.male.optimal), "acceptable": list(entry.male.acceptable)},
                "female": {"optimal": list(entry.female.optimal), "acceptable": list(entry.female.acceptable)},
                "weight": entry.weight,
                "category": entry.category,
            }
        else:
            voice[name] = _flat(entry)

    return {
        "cardiovascular": {name: _flat(entry) for name, entry in REFERENCE_RANGES.items()},
        "voice": voice,
    }
