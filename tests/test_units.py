"""Tests for unit normalization, conversion and reconciliation."""

import pytest

from meal_calories.data.food_reference import FOOD_REFERENCE
from meal_calories.models import ParsedSegment
from meal_calories.services.units import (
    CONVERSION_FACTORS,
    convert_units,
    normalize_unit,
    reconcile_units,
)


def _parsed(quantity=1.0, unit=None, informal_word=None, **kwargs) -> ParsedSegment:
    """Create a parsed segment with sensible defaults."""
    defaults = {
        "raw_text": "test",
        "food_phrase": "test",
        "had_explicit_quantity": True,
        "had_informal_quantity_word": informal_word is not None,
    }
    defaults.update(kwargs)
    return ParsedSegment(quantity=quantity, unit=unit, informal_word=informal_word, **defaults)


# ═══════════════════════════════════════════════════════════════════
# TESTS: normalize_unit
# ═══════════════════════════════════════════════════════════════════

class TestNormalizeUnit:

    @pytest.mark.parametrize("raw, expected", [
        ("tablespoons", "tbsp"),
        ("Tablespoon", "tbsp"),
        ("T", "tbsp"),
        ("teaspoons", "tsp"),
        ("cups", "cup"),
        ("glass", "cup"),
        ("lbs", "lb"),
        ("strips", "slice"),
        ("grams", "g"),
    ])
    def test_synonyms(self, raw, expected):
        assert normalize_unit(raw) == expected

    def test_unknown_unit_lowercased(self):
        assert normalize_unit("Bowl") == "bowl"

    def test_empty(self):
        assert normalize_unit(None) is None
        assert normalize_unit("  ") is None

    def test_surrounding_whitespace(self):
        assert normalize_unit("  Cups ") == "cup"


# ═══════════════════════════════════════════════════════════════════
# TESTS: convert_units
# ═══════════════════════════════════════════════════════════════════

class TestConvertUnits:

    @pytest.mark.parametrize("quantity, src, dst, expected", [
        (1, "lb", "oz", 16),
        (2, "tbsp", "tsp", 6),
        (2, "cup", "tbsp", 32),
        (1, "cup", "oz", 8),
        (1, "oz", "g", 28.35),
        (32, "tbsp", "cup", 2),
    ])
    def test_known_pairs(self, quantity, src, dst, expected):
        converted, unit = convert_units(quantity, src, dst)
        assert converted == pytest.approx(expected)
        assert unit == dst

    def test_unknown_pair_keeps_original_unit(self):
        assert convert_units(2, "cup", "slice") == (2, "cup")

    def test_same_unit(self):
        assert convert_units(3, "oz", "oz") == (3, "oz")

    def test_missing_unit(self):
        assert convert_units(3, None, "oz") == (3, "oz")

    @pytest.mark.parametrize("src, dst", sorted(CONVERSION_FACTORS))
    def test_round_trip(self, src, dst):
        there, _ = convert_units(1.5, src, dst)
        back, unit = convert_units(there, dst, src)
        assert back == pytest.approx(1.5)
        assert unit == src

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CONVERSION_FACTORS[("cup", "bowl")] = 1


# ═══════════════════════════════════════════════════════════════════
# TESTS: reconcile_units
# ═══════════════════════════════════════════════════════════════════

class TestReconcileUnits:

    def test_no_unit_uses_reference_unit(self):
        assert reconcile_units(_parsed(2), FOOD_REFERENCE["peanut butter"]) == (2, "tbsp")

    def test_explicit_unit_converted(self):
        quantity, unit = reconcile_units(_parsed(0.5, "lb"), FOOD_REFERENCE["ground beef"])
        assert quantity == pytest.approx(8)
        assert unit == "oz"

    def test_unconvertible_unit_kept(self):
        quantity, unit = reconcile_units(_parsed(2, "slice"), FOOD_REFERENCE["peanut butter"])
        assert (quantity, unit) == (2, "slice")

    def test_handful_implies_cup(self):
        quantity, unit = reconcile_units(
            _parsed(0.25, informal_word="handful"), FOOD_REFERENCE["almonds"]
        )
        assert quantity == pytest.approx(2)
        assert unit == "oz"

    def test_handful_to_handful_entry(self):
        quantity, unit = reconcile_units(
            _parsed(0.25, informal_word="handful"), FOOD_REFERENCE["chickpeas"]
        )
        assert quantity == pytest.approx(1)
        assert unit == "handful"

    def test_implied_unit_matches_reference(self):
        quantity, unit = reconcile_units(
            _parsed(2, informal_word="dollop"), FOOD_REFERENCE["sour cream"]
        )
        assert (quantity, unit) == (2, "tbsp")

    def test_some_has_no_implied_unit(self):
        quantity, unit = reconcile_units(
            _parsed(1, informal_word="some", had_explicit_quantity=False), FOOD_REFERENCE["almonds"]
        )
        assert (quantity, unit) == (1, "oz")
