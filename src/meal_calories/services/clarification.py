"""
Clarification prompts for vague portions, and category tips.

These are suggestions for a calling UI; they never change an estimate.
"""

import re
from typing import List, Optional, Tuple

from ..data.food_reference import CATEGORY_TIPS
from ..models.estimate import ClarificationOption, VagueQuantityPrompt

_HANDFUL_OPTIONS = [
    ClarificationOption(label="Small (about 0.5 oz)", multiplier=0.5),
    ClarificationOption(label="Medium (about 1 oz)", multiplier=1),
    ClarificationOption(label="Large (about 1.5 oz)", multiplier=1.5),
]

_PORTION_OPTIONS = [
    ClarificationOption(label="Small portion", multiplier=0.5),
    ClarificationOption(label="Medium portion", multiplier=1),
    ClarificationOption(label="Large portion", multiplier=1.5),
]

# (pattern, question template, options), first match wins
_VAGUE_PATTERNS: List[Tuple[re.Pattern, str, List[ClarificationOption]]] = [
    (
        re.compile(r"\bhandful\s+(?:of\s+)?(\w+)"),
        'You mentioned "a handful of {food}" - roughly how much?',
        _HANDFUL_OPTIONS,
    ),
    (
        re.compile(r"\b(?:some|a\s+bit\s+of|a\s+little)\s+(\w+)"),
        'You mentioned "some {food}" - roughly how much?',
        _PORTION_OPTIONS,
    ),
]


def detect_vague_quantity(meal_text: Optional[str]) -> Optional[VagueQuantityPrompt]:
    """Propose a portion question when the text uses a vague amount."""
    if not meal_text or not isinstance(meal_text, str):
        return None

    lower = meal_text.lower()
    for pattern, question, options in _VAGUE_PATTERNS:
        match = pattern.search(lower)
        if match:
            food = match.group(1)
            return VagueQuantityPrompt(
                matched_food=food,
                question=question.format(food=food),
                options=list(options),
            )
    return None


def get_educational_tip(category: str) -> Optional[str]:
    """Tip for a food category ("nuts", "condiment", "protein")."""
    return CATEGORY_TIPS.get((category or "").lower())
