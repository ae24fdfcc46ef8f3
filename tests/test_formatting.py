from utils.formatting import NOT_CALCULATED, format_all_biomarkers, format_biomarker_value


def test_units_and_precision():
    assert format_biomarker_value(72.345, "heartRate") == "72.3 BPM"
    assert format_biomarker_value(45, "rmssd") == "45.0 ms"
    assert format_biomarker_value(1.234, "lfHfRatio") == "1.23"
    assert format_biomarker_value("98", "oxygenSaturation") == "98.0 %"


def test_unknown_type_uses_default():
    assert format_biomarker_value(3.14159, "mystery") == "3.1"


def test_missing_values_use_fallback():
    assert format_biomarker_value(None, "heartRate") == NOT_CALCULATED
    assert format_biomarker_value("", "heartRate") == NOT_CALCULATED
    assert format_biomarker_value("abc", "jitter", fallback="—") == "—"


def test_zero_is_a_value():
    assert format_biomarker_value(0, "stressLevel") == "0.0 %"


def test_blood_pressure_string_passes_through():
    assert format_biomarker_value("120/80", "bloodPressure") == "120/80"
    assert format_biomarker_value(120, "bloodPressure") == "120 mmHg"


def test_format_all():
    formatted = format_all_biomarkers({"heartRate": 70, "bloodPressure": "118/76", "shimmer": None})
    assert formatted == {
        "heartRate": "70.0 BPM",
        "bloodPressure": "118/76",
        "shimmer": NOT_CALCULATED,
    }
