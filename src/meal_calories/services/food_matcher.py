"""Match a parsed food phrase against the reference table."""

import logging
from typing import Optional

from ..data.food_reference import FOOD_NAMES_BY_LENGTH, FOOD_REFERENCE
from ..models.estimate import FoodMatch

logger = logging.getLogger(__name__)


def find_food(food_phrase: str) -> Optional[FoodMatch]:
    """
    Find the reference food for a phrase.

    Exact key first, then the longest reference name contained in the
    phrase, so "grilled chicken breast" beats "chicken".
    """
    normalized = (food_phrase or "").lower().strip()
    if not normalized:
        return None

    entry = FOOD_REFERENCE.get(normalized)
    if entry is not None:
        return FoodMatch(canonical_name=normalized, entry=entry)

    for name in FOOD_NAMES_BY_LENGTH:
        if name in normalized:
            logger.debug(f"Matched '{normalized}' to reference food '{name}'")
            return FoodMatch(canonical_name=name, entry=FOOD_REFERENCE[name])

    logger.debug(f"No reference food for '{normalized}'")
    return None
