"""
Merge overlapping mentions of the same food.

"chicken breast, grilled chicken breast" should count once. Items are
compared longest label first and only one representative of each group
survives; calories are never summed across a group, the more specific
mention is taken to cover the full portion.

Word overlap is a coarse heuristic: two distinct foods sharing half of
their significant words ("tomato sauce" / "pesto sauce") merge as well.
"""

import logging
from typing import List

from ..data.food_reference import BRAND_NAMES, PRODUCT_WORDS
from ..models.estimate import EstimatedItem

logger = logging.getLogger(__name__)

WORD_OVERLAP_THRESHOLD = 0.5


def _significant_words(name: str) -> List[str]:
    return [w for w in name.split() if len(w) > 2]


def _has_product_word(name: str) -> bool:
    return any(p in name for p in PRODUCT_WORDS)


def _word_overlap(candidate: str, accepted: str) -> float:
    candidate_words = _significant_words(candidate)
    accepted_words = _significant_words(accepted)
    if not candidate_words or not accepted_words:
        return 0.0
    shared = sum(1 for w in candidate_words if w in accepted_words)
    return shared / min(len(candidate_words), len(accepted_words))


def _is_brand_pair(candidate: str, accepted: str) -> bool:
    """A bare brand ("vega") next to a generic product ("protein powder")."""
    if candidate in BRAND_NAMES and _has_product_word(accepted):
        return True
    return accepted in BRAND_NAMES and _has_product_word(candidate)


def deduplicate_items(items: List[EstimatedItem]) -> List[EstimatedItem]:
    """Return one item per duplicate group, in the order foods were mentioned."""
    if len(items) <= 1:
        return list(items)

    order = {id(item): i for i, item in enumerate(items)}
    by_length = sorted(items, key=lambda item: len(item.food_label), reverse=True)
    accepted: List[EstimatedItem] = []

    for candidate in by_length:
        name = candidate.food_label.lower()
        is_duplicate = False

        for existing in accepted:
            existing_name = existing.food_label.lower()

            if name in existing_name:
                logger.debug(f"'{candidate.food_label}' already covered by '{existing.food_label}'")
                is_duplicate = True
                break

            if existing_name in name:
                logger.debug(f"'{candidate.food_label}' replaces '{existing.food_label}'")
                accepted.remove(existing)
                break

            if _word_overlap(name, existing_name) >= WORD_OVERLAP_THRESHOLD:
                logger.debug(f"'{candidate.food_label}' overlaps '{existing.food_label}'")
                is_duplicate = True
                break

            if _is_brand_pair(name, existing_name):
                logger.debug(f"'{candidate.food_label}' is the brand of '{existing.food_label}'")
                is_duplicate = True
                break

        if not is_duplicate:
            accepted.append(candidate)

    return sorted(accepted, key=lambda item: order[id(item)])
