"""
Segment splitting and parsing.

A normalized meal description is broken into food mentions, then each
mention is read as `[quantity] [unit] [of] food`:

  "2 tbsp of peanut butter"   -> 2, tbsp, "peanut butter"
  ".5 pounds ground beef"     -> 0.5, lb, "ground beef"
  "large banana"              -> 1, None, "banana"
"""

import logging
import re
from typing import List, Optional

from ..data.food_reference import FOOD_REFERENCE
from ..data.vocabulary import (
    DESCRIPTION_WORDS,
    INFORMAL_QUANTITY_WORDS,
    UNIT_SYNONYMS,
)
from ..models.estimate import ParsedSegment
from .units import normalize_unit

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════
# SPLITTING
# ═══════════════════════════════════════════════════════════════════

_WORD_DELIMITER_RE = re.compile(r"\b(?:and|with|plus|added)\b")
# A period ends a sentence only before whitespace+letter or at the end;
# decimals such as "0.5" or ".5" are never split
_SENTENCE_PERIOD_RE = re.compile(r"\.(?=\s+[a-zA-Z]|$)")


def split_segments(text: str) -> List[str]:
    """Split a normalized meal description into trimmed food mentions."""
    if not text:
        return []
    marked = _WORD_DELIMITER_RE.sub(",", text)
    marked = _SENTENCE_PERIOD_RE.sub(",", marked)
    marked = marked.replace(";", ",").replace("\n", ",")
    return [s.strip() for s in marked.split(",") if s.strip()]


def has_ingredient_list(text: str) -> bool:
    """True when the description enumerates separate ingredients."""
    lower = text.lower()
    return (
        "," in lower
        or " and " in lower
        or " with " in lower
        or ":" in lower
        or ";" in lower
    )


# ═══════════════════════════════════════════════════════════════════
# PARSING
# ═══════════════════════════════════════════════════════════════════

# Longest tokens first; the trailing \b keeps "g" from eating "granola"
_UNIT_TOKENS = sorted(UNIT_SYNONYMS, key=len, reverse=True)
_SEGMENT_RE = re.compile(
    r"^(\.\d+|\d+(?:\.\d+)?)\s*"
    r"(?:(" + "|".join(re.escape(u) for u in _UNIT_TOKENS) + r")\b)?"
    r"\s*(?:of\s+)?(.+)$"
)

_INFORMAL_RE = re.compile(
    r"^(?:(?:a|an|\d*\.?\d+)\s+)?("
    + "|".join(INFORMAL_QUANTITY_WORDS)
    + r")(?:es|s)?\b"
)
_LEADING_INFORMAL_RE = re.compile(
    r"^(?:" + "|".join(INFORMAL_QUANTITY_WORDS) + r")(?:es|s)?\s+(?:of\s+)?"
)
_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)\s*")

# Reference foods named with a description word ("grilled chicken breast",
# "mixed nuts") must survive adjective stripping
_DESCRIBED_FOODS = tuple(
    name for name in FOOD_REFERENCE if name.split()[0] in DESCRIPTION_WORDS
)


def detect_informal_word(segment: str) -> Optional[str]:
    """Return the informal portion word that opens a segment, if any."""
    match = _INFORMAL_RE.match(segment.lower().strip())
    return match.group(1) if match else None


def strip_description_words(text: str) -> str:
    """Remove leading adjectives ("big", "grilled", ...), keeping at least one word."""
    words = text.split()
    start = 0
    while start < len(words) - 1 and words[start].lower() in DESCRIPTION_WORDS:
        remainder = " ".join(words[start:]).lower()
        if remainder.startswith(_DESCRIBED_FOODS):
            break
        start += 1
    return " ".join(words[start:]) if start > 0 else text


def _clean_food_phrase(text: str) -> str:
    food = _PARENTHETICAL_RE.sub(" ", text).strip()
    return strip_description_words(food)


def parse_segment(segment: str) -> ParsedSegment:
    """Parse one food mention into quantity, unit and food phrase."""
    text = segment.strip().lower()
    informal_word = detect_informal_word(text)

    match = _SEGMENT_RE.match(text)
    if match:
        quantity = float(match.group(1))
        unit = normalize_unit(match.group(2))
        if unit is not None and unit == informal_word:
            # The informal word carries the portion, not a measured unit
            unit = None
        food = _clean_food_phrase(match.group(3).strip())
        had_explicit_quantity = True
    else:
        quantity = 1.0
        unit = None
        food = _clean_food_phrase(_LEADING_INFORMAL_RE.sub("", text))
        had_explicit_quantity = False

    parsed = ParsedSegment(
        raw_text=segment,
        quantity=quantity,
        unit=unit,
        food_phrase=food,
        had_explicit_quantity=had_explicit_quantity,
        had_informal_quantity_word=informal_word is not None,
        informal_word=informal_word,
    )
    logger.debug(
        f"Parsed segment '{segment}': qty={parsed.quantity} unit={parsed.unit} "
        f"food='{parsed.food_phrase}' informal={parsed.informal_word}"
    )
    return parsed
