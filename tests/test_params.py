# File: tests/test_params.py
"""
Test the params.py module (bird descriptor and field table).
"""

import pytest

from birdcraft.params import BirdParams, FIELDS, FIELD_BY_NAME, SECTIONS, fields_in_section


def test_default_bird_matches_documented_defaults():
    """
    The defaults are the documented starting bird.
    """
    params = BirdParams()

    assert params.beak_length == 15.0
    assert params.beak_size == 80.0
    assert params.beak_width == 5.0
    assert params.eye_size == 7.0
    assert params.head_pitch == 9.0
    assert params.tail_yaw == -5.0
    assert params.base_flat == 100.0

    print("✓ Default bird matches documented defaults")


def test_field_table_covers_every_parameter():
    """
    The table has one row per dataclass field, in seed order.
    """
    assert len(FIELDS) == 22
    assert [entry.name for entry in FIELDS] == list(BirdParams().to_dict().keys())
    assert set(entry.section for entry in FIELDS) == set(SECTIONS)

    counts = [len(fields_in_section(section)) for section in SECTIONS]
    assert counts == [4, 7, 5, 5, 1], f"Unexpected section sizes: {counts}"

    print("✓ Field table covers every parameter")


def test_defaults_lie_inside_intervals():
    params = BirdParams()
    for entry in FIELDS:
        assert entry.low <= entry.default <= entry.high, f"{entry.name} default outside interval"
    assert params.out_of_range() == []


def test_accessors_read_and_write():
    params = BirdParams()
    entry = FIELD_BY_NAME['tail_pitch']

    entry.set(params, 12)
    assert entry.get(params) == 12.0
    assert isinstance(params.tail_pitch, float)


def test_out_of_range_is_reported_not_enforced():
    """
    Intervals are informational: values outside are kept and listed.
    """
    params = BirdParams(head_size=500.0, eye_size=-3.0)

    assert params.head_size == 500.0
    assert params.out_of_range() == ['head_size', 'eye_size']


def test_copy_is_independent():
    original = BirdParams()
    clone = original.copy()
    clone.beak_length = 42.0

    assert original.beak_length == 15.0
    assert clone == BirdParams(beak_length=42.0)


def test_copy_from_overwrites_all_fields():
    target = BirdParams()
    source = BirdParams(**{entry.name: entry.low for entry in FIELDS})

    result = target.copy_from(source)

    assert result is target
    assert target == source
    assert target is not source


def test_from_dict_partial_and_unknown_keys():
    params = BirdParams.from_dict({'belly_fat': 120, 'tail_width': 3})
    assert params.belly_fat == 120.0
    assert params.tail_width == 3.0
    assert params.head_size == 22.0

    with pytest.raises(KeyError):
        BirdParams.from_dict({'wing_span': 10})


def test_unknown_section_rejected():
    with pytest.raises(ValueError):
        fields_in_section('wing')
