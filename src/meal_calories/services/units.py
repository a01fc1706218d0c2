"""
Unit reconciliation.

Converts a parsed quantity into the unit its reference entry is
expressed in. Conversion is best effort: when no factor is known for a
pair of units the quantity and the original unit are kept as they are.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..data.vocabulary import INFORMAL_UNITS, UNIT_SYNONYMS
from ..models.estimate import ParsedSegment, ReferenceEntry

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════
# CONVERSION FACTORS
# ═══════════════════════════════════════════════════════════════════

# 1 <from> = factor <to>
_BASE_FACTORS = {
    ("lb", "oz"): 16,
    ("tbsp", "tsp"): 3,
    ("cup", "tbsp"): 16,
    ("cup", "oz"): 8,       # fluid ounces
    ("oz", "g"): 28.35,
    ("handful", "cup"): 0.25,
}


def _with_inverses(factors: Mapping[Tuple[str, str], float]) -> Mapping[Tuple[str, str], float]:
    table = dict(factors)
    for (src, dst), factor in factors.items():
        table[(dst, src)] = 1 / factor
    return MappingProxyType(table)


CONVERSION_FACTORS: Mapping[Tuple[str, str], float] = _with_inverses(_BASE_FACTORS)


def normalize_unit(raw_unit: Optional[str]) -> Optional[str]:
    """Normalize a unit token to its canonical short form."""
    if raw_unit is None:
        return None
    clean = raw_unit.strip().lower()
    if not clean:
        return None
    return UNIT_SYNONYMS.get(clean, clean)


def convert_units(
    quantity: float,
    from_unit: Optional[str],
    to_unit: Optional[str],
) -> Tuple[float, Optional[str]]:
    """
    Convert `quantity` from one unit to another.

    Returns (quantity, unit). Unknown pairs are passed through unchanged
    with the original unit.
    """
    if not from_unit or not to_unit or from_unit == to_unit:
        return quantity, to_unit or from_unit

    factor = CONVERSION_FACTORS.get((from_unit, to_unit))
    if factor is None:
        logger.debug(f"No conversion from '{from_unit}' to '{to_unit}', keeping {quantity} {from_unit}")
        return quantity, from_unit
    return quantity * factor, to_unit


def reconcile_units(parsed: ParsedSegment, entry: ReferenceEntry) -> Tuple[float, str]:
    """Resolve the quantity and unit a segment should be priced in."""
    quantity = parsed.quantity
    unit = normalize_unit(parsed.unit) or entry.unit

    if parsed.informal_word in INFORMAL_UNITS and parsed.unit is None:
        implied_unit = INFORMAL_UNITS[parsed.informal_word]
        if implied_unit != entry.unit:
            quantity, unit = convert_units(quantity, implied_unit, entry.unit)
        else:
            unit = implied_unit
    elif unit != entry.unit:
        quantity, unit = convert_units(quantity, unit, entry.unit)

    return quantity, unit
