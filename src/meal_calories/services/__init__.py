"""Pipeline stages of the calorie estimator."""

from .clarification import detect_vague_quantity, get_educational_tip
from .deduplicator import deduplicate_items
from .food_matcher import find_food
from .normalizer import normalize_quantities
from .segmenter import has_ingredient_list, parse_segment, split_segments
from .units import convert_units, normalize_unit, reconcile_units

__all__ = [
    "normalize_quantities",
    "split_segments",
    "has_ingredient_list",
    "parse_segment",
    "find_food",
    "normalize_unit",
    "convert_units",
    "reconcile_units",
    "deduplicate_items",
    "detect_vague_quantity",
    "get_educational_tip",
]
