import pytest

from scoring.ranges import (
    ALTERNATIVE_NAMES,
    REFERENCE_RANGES,
    VOICE_RANGES,
    GenderedRange,
    ReferenceRange,
    get_range,
    known_biomarkers,
    ranges_as_dict,
)


def test_acceptable_contains_optimal_everywhere():
    entries = list(REFERENCE_RANGES.values())
    for entry in VOICE_RANGES.values():
        if isinstance(entry, GenderedRange):
            entries.extend([entry.male, entry.female])
        else:
            entries.append(entry)
    for entry in entries:
        assert entry.acceptable[0] <= entry.optimal[0]
        assert entry.acceptable[1] >= entry.optimal[1]
        assert entry.weight > 0


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        REFERENCE_RANGES["heartRate"] = ReferenceRange((0, 1), (0, 1), 1.0)
    with pytest.raises(TypeError):
        VOICE_RANGES["jitter"] = None


def test_entries_are_frozen():
    with pytest.raises(AttributeError):
        REFERENCE_RANGES["heartRate"].weight = 1.0


def test_invalid_range_is_a_configuration_error():
    with pytest.raises(ValueError):
        ReferenceRange(optimal=(10, 50), acceptable=(20, 40), weight=0.1)
    with pytest.raises(ValueError):
        ReferenceRange(optimal=(10, 20), acceptable=(0, 30), weight=0)


def test_get_range_known_and_unknown():
    assert get_range("heartRate").optimal == (60, 80)
    assert isinstance(get_range("fundamentalFrequency"), GenderedRange)
    assert get_range("cholesterol") is None


def test_fundamental_frequency_gender_bands():
    f0 = VOICE_RANGES["fundamentalFrequency"]
    assert f0.for_gender("male").optimal == (85, 180)
    assert f0.for_gender("female").acceptable == (120, 350)
    with pytest.raises(ValueError):
        f0.for_gender("other")


def test_assessment_order_is_cardiovascular_then_voice():
    names = known_biomarkers()
    assert names[0] == "heartRate"
    assert names.index("stressLevel") < names.index("fundamentalFrequency")
    assert len(names) == 13


def test_alias_lists_are_ordered():
    assert ALTERNATIVE_NAMES["heartRate"] == ("hr", "pulse", "bpm")
    assert ALTERNATIVE_NAMES["vocalStress"][0] == "stressLevel"


def test_ranges_as_dict_shape():
    dump = ranges_as_dict()
    assert dump["cardiovascular"]["oxygenSaturation"]["optimal"] == [97, 100]
    assert dump["voice"]["fundamentalFrequency"]["male"]["acceptable"] == [70, 250]
    assert dump["voice"]["jitter"]["category"] == "voice"
