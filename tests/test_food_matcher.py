"""Tests for reference lookup and the reference tables themselves."""

import pytest
from pydantic import ValidationError

from meal_calories.data.food_reference import (
    FOOD_NAMES_BY_LENGTH,
    FOOD_REFERENCE,
    SOURCE_URLS,
)
from meal_calories.services.food_matcher import find_food


class TestFindFood:

    def test_exact_match(self):
        match = find_food("peanut butter")
        assert match.canonical_name == "peanut butter"
        assert match.entry.calories_per_unit == 95
        assert match.entry.unit == "tbsp"

    def test_case_and_whitespace(self):
        assert find_food("  Peanut Butter ").canonical_name == "peanut butter"

    def test_substring_match(self):
        assert find_food("crunchy peanut butter").canonical_name == "peanut butter"

    def test_longest_name_wins(self):
        assert find_food("grilled chicken breast strips").canonical_name == "grilled chicken breast"
        assert find_food("leftover chicken thigh").canonical_name == "chicken thigh"

    def test_no_match(self):
        assert find_food("moon dust") is None

    def test_empty(self):
        assert find_food("") is None


class TestReferenceTables:

    def test_names_sorted_longest_first(self):
        lengths = [len(name) for name in FOOD_NAMES_BY_LENGTH]
        assert lengths == sorted(lengths, reverse=True)
        assert set(FOOD_NAMES_BY_LENGTH) == set(FOOD_REFERENCE)

    def test_every_source_is_cited(self):
        for entry in FOOD_REFERENCE.values():
            assert entry.source_name in SOURCE_URLS

    def test_composites_flagged(self):
        assert FOOD_REFERENCE["sandwich"].is_composite
        assert not FOOD_REFERENCE["tuna"].is_composite

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FOOD_REFERENCE["moon dust"] = FOOD_REFERENCE["tuna"]

    def test_entries_are_frozen(self):
        with pytest.raises(ValidationError):
            FOOD_REFERENCE["tuna"].calories_per_unit = 0
