"""
First stage of the estimation pipeline: quantity normalization.

Rewrites spoken quantities into numeric literals so later stages only
deal with digits:

  "two and a half cups oats"     -> "2.5 cups oats"
  "a couple of eggs"             -> "2 eggs"
  "quarter of an avocado"        -> "0.25 avocado"
  "a handful of almonds"         -> "0.25 handful of almonds"

Informal portion words keep their word after the assumed amount so the
segment parser can still tell the quantity was a guess.
"""

import logging
import re

from ..data.vocabulary import (
    CARDINAL_WORDS,
    COMPOUND_FRACTIONS,
    FRACTIONS,
    INFORMAL_AMOUNTS,
    NUMBER_PHRASES,
)

logger = logging.getLogger(__name__)

_NUMBER = r"\d*\.?\d+"

# Phrases sorted longest first at import; the alternation order decides
# which phrase wins at a given position.
_PHRASES_BY_LENGTH = tuple(sorted(NUMBER_PHRASES, key=len, reverse=True))
_PHRASE_RE = re.compile(
    r"\b("
    + "|".join(r"[ \t]+".join(re.escape(w) for w in p.split()) for p in _PHRASES_BY_LENGTH)
    + r")\b"
)

_CARDINAL_RE = re.compile(r"\b(" + "|".join(CARDINAL_WORDS) + r")\b")

_FRACTION_ALT = "|".join(re.escape(f) for f in FRACTIONS)
_MIXED_FRACTION_RE = re.compile(rf"(?<![\d./])(\d+)[ \t]+({_FRACTION_ALT})(?![\d/])")
_FRACTION_RE = re.compile(rf"(?<![\d./])({_FRACTION_ALT})(?![\d/])")

_COMPOUND_ALT = "|".join(COMPOUND_FRACTIONS)
_COMPOUND_RE = re.compile(rf"({_NUMBER})[ \t]+and[ \t]+(?:a[ \t]+)?({_COMPOUND_ALT})\b")
_FRACTION_OF_ARTICLE_RE = re.compile(
    rf"\b({_COMPOUND_ALT}|{_NUMBER})[ \t]+of[ \t]+(?:a|an)\b"
)

_INFORMAL_ALT = "|".join(INFORMAL_AMOUNTS)
# A count on the same line scales the word: "2 handfuls", "3 dozen"
_COUNTED_INFORMAL_RE = re.compile(
    rf"(?:(?<![\d./])({_NUMBER})[ \t]+)?\b((?:{_INFORMAL_ALT})(?:es|s)?)\b"
)
_COUNTED_DOZEN_RE = re.compile(rf"(?<![\d./])({_NUMBER})[ \t]+(half[ \t]+dozen|dozen)\b")


def format_number(value: float) -> str:
    """Render a quantity without trailing zeros ("2", "2.5", "0.33")."""
    return f"{round(value, 4):g}"


def _informal_stem(token: str) -> str:
    for word in INFORMAL_AMOUNTS:
        if token.startswith(word):
            return word
    return token


def _counted_informal(m: re.Match) -> str:
    count = float(m.group(1)) if m.group(1) else 1.0
    amount = INFORMAL_AMOUNTS[_informal_stem(m.group(2))]
    return f"{format_number(count * amount)} {m.group(2)}"


def normalize_quantities(text: str) -> str:
    """
    Replace number words, fractions and compound quantities with digits.

    The result is lowercased. Pure function: the same input always yields
    the same output.
    """
    if not text:
        return ""

    result = text.lower()

    # Fractions: "1 1/2" -> 1.5, then "1/2" -> 0.5
    result = _MIXED_FRACTION_RE.sub(
        lambda m: format_number(int(m.group(1)) + FRACTIONS[m.group(2)]), result
    )
    result = _FRACTION_RE.sub(lambda m: format_number(FRACTIONS[m.group(1)]), result)

    # Cardinals before compounds so "two and a half" can be added up
    result = _CARDINAL_RE.sub(lambda m: format_number(CARDINAL_WORDS[m.group(1)]), result)

    # "2 and a half" -> 2.5
    result = _COMPOUND_RE.sub(
        lambda m: format_number(float(m.group(1)) + COMPOUND_FRACTIONS[m.group(2)]),
        result,
    )

    # "quarter of an avocado" -> "0.25 avocado"
    def _fraction_of_article(m: re.Match) -> str:
        token = m.group(1)
        if token in COMPOUND_FRACTIONS:
            return format_number(COMPOUND_FRACTIONS[token])
        return token

    result = _FRACTION_OF_ARTICLE_RE.sub(_fraction_of_article, result)

    # "2 dozen" -> 24, before "dozen" alone becomes 12
    result = _COUNTED_DOZEN_RE.sub(
        lambda m: format_number(float(m.group(1)) * NUMBER_PHRASES[" ".join(m.group(2).split())]),
        result,
    )

    # Remaining number phrases, longest first
    result = _PHRASE_RE.sub(
        lambda m: format_number(NUMBER_PHRASES[" ".join(m.group(1).split())]), result
    )

    # "splash" -> "2 splash", "1 handful" -> "0.25 handful"
    result = _COUNTED_INFORMAL_RE.sub(_counted_informal, result)

    if result != text.lower():
        logger.debug(f"Normalized quantities: '{text}' -> '{result}'")
    return result
