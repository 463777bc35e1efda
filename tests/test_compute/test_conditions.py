"""Tests for condition classification and description joining."""

import pytest

from weather_narrative.compute.conditions import (
    CONDITION_PHRASES,
    classify,
    compose,
    describe_conditions,
)
from weather_narrative.models import Condition


class TestClassify:
    def test_known_codes(self):
        assert classify(221, "ragged thunderstorm") == "ragged thunderstorms"
        assert classify(800, "clear sky") == "clear skies"
        assert classify(804, "overcast clouds") == "overcast skies"
        assert classify(520, "light intensity shower rain") == "light showers"

    def test_every_table_entry_returned_verbatim(self):
        for code, phrase in CONDITION_PHRASES.items():
            assert classify(code, "fallback") == phrase

    def test_unknown_code_falls_back(self):
        assert classify(500, "light rain") == "light rain"
        assert classify(230, "thunderstorm with light drizzle") == "thunderstorm with light drizzle"
        assert classify(999, "") == ""

    def test_heavy_rain_shared_across_families(self):
        assert classify(314, "x") == classify(502, "y") == "heavy rain"


class TestConditionTable:
    def test_codes_in_vocabulary_range(self):
        for code in CONDITION_PHRASES:
            assert 200 <= code <= 999

    def test_phrases_non_empty_lowercase(self):
        for phrase in CONDITION_PHRASES.values():
            assert phrase
            assert phrase == phrase.lower()

    def test_families_present(self):
        codes = set(CONDITION_PHRASES)
        assert {200, 221} <= codes
        assert {300, 321} <= codes
        assert {502, 622} <= codes
        assert {731, 804} <= codes
        assert {900, 962} <= codes


class TestDescribeConditions:
    def test_preserves_source_order(self):
        conditions = [
            Condition(701, "Mist", "mist", "50d"),
            Condition(804, "Clouds", "overcast clouds", "04d"),
        ]
        descriptors = describe_conditions(conditions)
        assert [d.code for d in descriptors] == [701, 804]
        assert [d.phrase for d in descriptors] == ["mist", "overcast skies"]


class TestCompose:
    def test_single(self):
        assert compose(["fog"]) == "fog"

    def test_two(self):
        assert compose(["rain", "snow"]) == "rain and snow"

    def test_three(self):
        assert compose(["a", "b", "c"]) == "a, b and c"

    def test_four_no_oxford_comma(self):
        assert compose(["a", "b", "c", "d"]) == "a, b, c and d"

    def test_order_not_sorted(self):
        assert compose(["snow", "fog"]) == "snow and fog"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            compose([])
