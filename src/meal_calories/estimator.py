"""
Offline calorie estimator.

Runs a meal description through the pipeline stages in order:

    normalize -> split -> parse -> match -> reconcile units
              -> build items -> deduplicate -> aggregate

Each call is independent; the only shared state is the read-only
reference data loaded at import.
"""

import logging
import math
from typing import Dict, List, Optional, Tuple

from .constants import MAX_INPUT_CHARS
from .data.food_reference import SOURCE_URLS
from .data.vocabulary import ABBREVIATED_UNITS, INFORMAL_NOTES
from .models.estimate import (
    ConfidenceLevel,
    EstimatedItem,
    EstimateResult,
    FoodMatch,
    ParsedSegment,
)
from .services.deduplicator import deduplicate_items
from .services.food_matcher import find_food
from .services.normalizer import normalize_quantities
from .services.segmenter import has_ingredient_list, parse_segment, split_segments
from .services.units import reconcile_units

logger = logging.getLogger(__name__)

TIP_MIN_CALORIES = 100
TIP_UNITS = ("tbsp", "oz")


# ═══════════════════════════════════════════════════════════════════
# ITEM BUILDER
# ═══════════════════════════════════════════════════════════════════

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _title(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def _format_quantity(quantity: float) -> str:
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:.1f}"


def _unit_label(quantity: float, unit: str) -> str:
    if quantity == 1 or unit.endswith("s") or unit in ABBREVIATED_UNITS:
        return unit
    return unit + "s"


def calculation_text(quantity: float, unit: str, calories_per_unit: float) -> str:
    """Human readable calculation, e.g. '2 tbsp × 95 cal/tbsp'."""
    return (
        f"{_format_quantity(quantity)} {_unit_label(quantity, unit)}"
        f" × {calories_per_unit:g} cal/{unit}"
    )


def _confidence(parsed: ParsedSegment, unit: str) -> Tuple[ConfidenceLevel, Optional[str]]:
    if parsed.had_informal_quantity_word:
        return "medium", INFORMAL_NOTES.get(parsed.informal_word)
    if not parsed.had_explicit_quantity:
        return "medium", f"Assumed 1 {unit}"
    return "high", None


def build_item(
    parsed: ParsedSegment,
    match: FoodMatch,
    tips: Dict[str, None],
) -> EstimatedItem:
    """
    Price one parsed segment against its matched reference entry.

    Calorie-dense foods add a tip to `tips`, an insertion-ordered dict
    used as an ordered set shared across one estimate call.
    """
    entry = match.entry
    quantity, unit = reconcile_units(parsed, entry)
    calories = _round_half_up(entry.calories_per_unit * quantity)
    level, note = _confidence(parsed, unit)

    if entry.calories_per_unit >= TIP_MIN_CALORIES and unit in TIP_UNITS:
        name = match.canonical_name
        tip = (
            f"{name[:1].upper()}{name[1:]} is calorie-dense at "
            f"{entry.calories_per_unit:g} cal per {unit}."
        )
        tips.setdefault(tip, None)

    return EstimatedItem(
        food_label=_title(match.canonical_name),
        calories=calories,
        quantity=round(quantity, 4),
        unit=unit,
        calculation_text=calculation_text(quantity, unit, entry.calories_per_unit),
        source_name=entry.source_name,
        source_url=SOURCE_URLS.get(entry.source_name),
        base_serving=entry.serving_description,
        confidence_level=level,
        confidence_note=note,
    )


# ═══════════════════════════════════════════════════════════════════
# AGGREGATOR
# ═══════════════════════════════════════════════════════════════════

def _overall_confidence(item_count: int) -> ConfidenceLevel:
    if item_count >= 3:
        return "high"
    if item_count >= 1:
        return "medium"
    return "low"


def aggregate(items: List[EstimatedItem], tips: List[str]) -> EstimateResult:
    """Sum deduplicated items into the final result."""
    return EstimateResult(
        total_calories=sum(item.calories for item in items),
        items=items,
        tips=tips,
        confidence=_overall_confidence(len(items)),
        matched_food_count=len(items),
    )


# ═══════════════════════════════════════════════════════════════════
# ENTRY POINT
# ═══════════════════════════════════════════════════════════════════

def estimate(meal_text: Optional[str]) -> EstimateResult:
    """
    Estimate the calories of a freeform meal description.

    Never raises on user input. Empty or unmatched text gives a zero
    result with "low" confidence.
    """
    if not isinstance(meal_text, str) or not meal_text.strip():
        return EstimateResult.empty()

    if len(meal_text) > MAX_INPUT_CHARS:
        logger.debug(f"Truncating meal text from {len(meal_text)} to {MAX_INPUT_CHARS} chars")
        meal_text = meal_text[:MAX_INPUT_CHARS]

    lists_ingredients = has_ingredient_list(meal_text)
    segments = split_segments(normalize_quantities(meal_text))
    logger.debug(f"Split meal into {len(segments)} segment(s): {segments}")

    items: List[EstimatedItem] = []
    tips: Dict[str, None] = {}

    for segment in segments:
        parsed = parse_segment(segment)
        match = find_food(parsed.food_phrase)
        if match is None:
            continue

        if match.entry.is_composite and lists_ingredients:
            logger.debug(f"Skipping composite '{match.canonical_name}', ingredients are listed")
            continue

        items.append(build_item(parsed, match, tips))

    unique_items = deduplicate_items(items)
    if len(unique_items) < len(items):
        logger.debug(f"Deduplicated {len(items)} item(s) down to {len(unique_items)}")

    result = aggregate(unique_items, list(tips))
    logger.info(
        f"Estimated {result.total_calories} cal from {result.matched_food_count} item(s) "
        f"({result.confidence} confidence)"
    )
    return result
