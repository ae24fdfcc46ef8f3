import math
from decimal import Decimal

import numpy as np
import pytest

from scoring.extraction import extract_biomarker_value, parse_blood_pressure, to_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        (72, 72.0),
        (98.5, 98.5),
        ("45", 45.0),
        (" 12.5 ", 12.5),
        (None, None),
        ("", None),
        ("abc", None),
        (True, None),
        ([72], None),
        (float("nan"), None),
        ("inf", None),
        (np.float32(72), 72.0),
        (np.int64(72), 72.0),
        (Decimal("72"), 72.0),
        (Decimal("NaN"), None),
        (10**400, None),
        (complex(72, 0), None),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_direct_value_wins_over_alias():
    assert extract_biomarker_value({"heartRate": 70, "hr": 90}, "heartRate") == 70.0


def test_aliases_resolve_in_order():
    assert extract_biomarker_value({"bpm": 80, "pulse": 75}, "heartRate") == 75.0
    assert extract_biomarker_value({"hrv": 40}, "rmssd") == 40.0
    assert extract_biomarker_value({"spO2": "97"}, "oxygenSaturation") == 97.0
    assert extract_biomarker_value({"pitch": 120}, "fundamentalFrequency") == 120.0


def test_malformed_direct_value_falls_through_to_alias():
    assert extract_biomarker_value({"heartRate": "n/a", "hr": 66}, "heartRate") == 66.0


def test_stress_names_feed_each_other():
    assert extract_biomarker_value({"stressLevel": 20}, "vocalStress") == 20.0
    assert extract_biomarker_value({"vocalStress": 35}, "stressLevel") == 35.0


def test_missing_biomarker_is_none():
    assert extract_biomarker_value({"jitter": 1.0}, "shimmer") is None
    assert extract_biomarker_value({}, "heartRate") is None


def test_blood_pressure_sides():
    reading = {"bloodPressure": "120/80"}
    assert extract_biomarker_value(reading, "bloodPressureSystolic") == 120.0
    assert extract_biomarker_value(reading, "bloodPressureDiastolic") == 80.0


def test_blood_pressure_parses_leading_integer():
    assert parse_blood_pressure(" 128.6 / 84 mmHg") == (128, 84)


@pytest.mark.parametrize("raw", [None, 120, "120", "abc/80", "120/", ""])
def test_malformed_blood_pressure_is_none(raw):
    assert parse_blood_pressure(raw) is None
    assert extract_biomarker_value({"bloodPressure": raw}, "bloodPressureSystolic") is None


def test_blood_pressure_sides_are_not_read_directly():
    assert extract_biomarker_value({"bloodPressureSystolic": 120}, "bloodPressureSystolic") is None


def test_extracted_values_are_finite():
    value = extract_biomarker_value({"sdnn": "1e3"}, "sdnn")
    assert math.isfinite(value)


def test_numpy_readings_are_scored():
    reading = {"heartRate": np.float64(72.0), "hrv": np.int32(45), "spo2": Decimal("98.5")}
    assert extract_biomarker_value(reading, "heartRate") == 72.0
    assert extract_biomarker_value(reading, "rmssd") == 45.0
    assert extract_biomarker_value(reading, "oxygenSaturation") == 98.5


def test_huge_integer_is_skipped_not_raised():
    assert extract_biomarker_value({"heartRate": 10**400}, "heartRate") is None
    assert extract_biomarker_value({"heartRate": 10**400, "hr": 70}, "heartRate") == 70.0
