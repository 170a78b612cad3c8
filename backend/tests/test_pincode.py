"""
Tests for the pincode proximity heuristic and city lookup.
"""

import pytest

from bookmyblock.utils.pincode import (
    approximate_distance_km, get_pincode_from_city, is_pincode_nearby, is_valid_pincode,
)


@pytest.mark.parametrize("value,valid", [
    ("517501", True),
    ("51750", False),
    ("5175011", False),
    ("51750a", False),
    ("", False),
])
def test_is_valid_pincode(value, valid):
    assert is_valid_pincode(value) is valid


def test_same_district_is_nearby():
    assert is_pincode_nearby("517501", "517502") is True
    assert is_pincode_nearby("517501", "517999") is True


def test_numeric_proximity_across_districts():
    assert is_pincode_nearby("517999", "518100") is True


def test_distant_pincodes():
    assert is_pincode_nearby("110001", "700001") is False


def test_nearby_with_missing_or_bad_input():
    assert is_pincode_nearby("", "517501") is False
    assert is_pincode_nearby("abcdef", "517501") is False
    assert is_pincode_nearby(" 517501", "518000") is False
    assert is_pincode_nearby("518_000", "517501") is False


def test_approximate_distance():
    assert approximate_distance_km("517501", "517501") == 0
    assert approximate_distance_km("517501", "517502") == 0
    assert approximate_distance_km("517501", "517511") == 1  # 0.5 rounds up
    assert approximate_distance_km("517000", "518000") == 50


def test_approximate_distance_bad_input():
    assert approximate_distance_km("abc", "517501") == 0
    assert approximate_distance_km(" 517501", "518501") == 0
    assert approximate_distance_km("517_501", "518501") == 0


@pytest.mark.parametrize("city,pincode", [
    ("Tirupati", "517501"),
    ("  HYDERABAD ", "500001"),
    ("kolkata", "700001"),
    ("Greater Mumbai", "400001"),
])
def test_get_pincode_from_city(city, pincode):
    assert get_pincode_from_city(city) == pincode


@pytest.mark.parametrize("city", ["Atlantis", "", None])
def test_get_pincode_from_unknown_city(city):
    assert get_pincode_from_city(city) is None
