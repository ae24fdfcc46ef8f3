"""
utils/formatting.py — Display formatting for biomarker values
==============================================================
Fixed decimal precision and unit per biomarker, used by the CLI report
and available to any presentation layer.
"""

from typing import Any, Mapping

from scoring.extraction import to_number

NOT_CALCULATED = "No calculado"

# biomarker → (decimals, unit)
_FORMATS = {
    # Cardiovascular
    "heartRate":            (1, "BPM"),
    "heartRateVariability": (1, "ms"),
    "rmssd":                (1, "ms"),
    "sdnn":                 (1, "ms"),
    "pnn50":                (1, "%"),
    "bloodPressure":        (0, "mmHg"),
    "oxygenSaturation":     (1, "%"),
    "respiratoryRate":      (1, "rpm"),
    "stressLevel":          (1, "%"),
    # Voice
    "fundamentalFrequency": (1, "Hz"),
    "jitter":               (1, "%"),
    "shimmer":              (1, "%"),
    "harmonicToNoiseRatio": (1, "dB"),
    "vocalStress":          (1, "%"),
    # HRV frequency domain
    "lfPower":              (0, "ms²"),
    "hfPower":              (0, "ms²"),
    "lfHfRatio":            (2, ""),
}
_DEFAULT_FORMAT = (1, "")


def format_biomarker_value(value: Any, biomarker_type: str = "", fallback: str = NOT_CALCULATED) -> str:
    """
    Format `value` with the precision and unit registered for `biomarker_type`.

    None, empty strings and non-numeric values render as `fallback`.  A
    blood-pressure reading already in "systolic/diastolic" form is returned
    unchanged.
    """
    if biomarker_type == "bloodPressure" and isinstance(value, str) and "/" in value:
        return value

    number = to_number(value)
    if number is None:
        return fallback

    decimals, unit = _FORMATS.get(biomarker_type, _DEFAULT_FORMAT)
    text = f"{number:.{decimals}f}"
    return f"{text} {unit}" if unit else text


def format_all_biomarkers(biomarkers: Mapping[str, Any], fallback: str = NOT_CALCULATED) -> dict[str, str]:
    return {name: format_biomarker_value(value, name, fallback) for name, value in biomarkers.items()}
