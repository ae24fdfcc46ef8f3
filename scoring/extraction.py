"""
scoring/extraction.py — Pull a numeric biomarker out of a raw reading map
==========================================================================
The capture pipeline hands over a loose `name → value` mapping.  Values
may be numbers, numeric strings, None, or junk; some biomarkers arrive
under alternative names (`hr`, `spo2`, `f0`, …), and blood pressure comes
as a single `"systolic/diastolic"` string.

`extract_biomarker_value` turns that into a finite float or None.  It
never raises: anything unusable is simply treated as absent.
"""

import math
import numbers
import re
from decimal import Decimal
from typing import Any, Mapping, Optional

from scoring.ranges import ALTERNATIVE_NAMES, BLOOD_PRESSURE_KEY, BLOOD_PRESSURE_SIDES

# Leading integer, the way a lenient integer parse reads "120.7" or " 80 mmHg"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_number(raw: Any) -> Optional[float]:
    """
    Return `raw` as a finite float, or None if it is not numeric.

    Accepts any real number (numpy scalars included), Decimal and numeric
    strings.  Booleans are not readings.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
    elif not isinstance(raw, (numbers.Real, Decimal)):
        return None
    try:
        value = float(raw)
    except (OverflowError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _parse_leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_blood_pressure(raw: Any) -> Optional[tuple[int, int]]:
    """
    Split a `"systolic/diastolic"` string into two integers.

    Returns None when the value is not a string, has no slash, or either
    side fails to parse.
    """
    if not isinstance(raw, str) or "/" not in raw:
        return None
    parts = raw.split("/")
    systolic = _parse_leading_int(parts[0])
    diastolic = _parse_leading_int(parts[1])
    if systolic is None or diastolic is None:
        return None
    return systolic, diastolic


def extract_biomarker_value(biomarkers: Mapping[str, Any], name: str) -> Optional[float]:
    """
    Resolve the canonical biomarker `name` to a numeric value.

    Resolution order: blood-pressure special case, direct key, then the
    aliases listed in `ALTERNATIVE_NAMES` for that name.
    """
    if name in BLOOD_PRESSURE_SIDES:
        pressure = parse_blood_pressure(biomarkers.get(BLOOD_PRESSURE_KEY))
        if pressure is None:
            return None
        systolic, diastolic = pressure
        return float(systolic if name == BLOOD_PRESSURE_SIDES[0] else diastolic)

    value = to_number(biomarkers.get(name))
    if value is not None:
        return value

    for alias in ALTERNATIVE_NAMES.get(name, ()):
        value = to_number(biomarkers.get(alias))
        if value is not None:
            return value

    return None
