"""
Lexical tables used to read quantities and units out of meal text.

Plain read-only mappings; no behaviour lives here.
"""

from types import MappingProxyType
from typing import Mapping, Optional

# ═══════════════════════════════════════════════════════════════════
# NUMBERS
# ═══════════════════════════════════════════════════════════════════

CARDINAL_WORDS: Mapping[str, float] = MappingProxyType({
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
})

# Multi-word entries must win over their own prefixes ("a couple of" vs "a")
NUMBER_PHRASES: Mapping[str, float] = MappingProxyType({
    "half": 0.5, "quarter": 0.25, "a": 1, "an": 1,
    "a couple": 2, "couple": 2, "a couple of": 2,
    "a few": 3, "few": 3, "several": 3,
    "dozen": 12, "a dozen": 12, "half dozen": 6, "a half dozen": 6,
    "third": 0.33, "a third": 0.33,
})

FRACTIONS: Mapping[str, float] = MappingProxyType({
    "1/2": 0.5, "1/4": 0.25, "3/4": 0.75, "1/3": 0.33, "2/3": 0.67,
})

# "2 and a half", "quarter of an avocado"
COMPOUND_FRACTIONS: Mapping[str, float] = MappingProxyType({
    "half": 0.5, "quarter": 0.25, "third": 0.33,
})

# ═══════════════════════════════════════════════════════════════════
# INFORMAL PORTIONS
# ═══════════════════════════════════════════════════════════════════

INFORMAL_QUANTITY_WORDS = (
    "sprinkle", "drizzle", "dash", "pinch", "splash", "dollop", "handful", "some",
)

# Assumed amount, expressed in INFORMAL_UNITS
INFORMAL_AMOUNTS: Mapping[str, float] = MappingProxyType({
    "sprinkle": 0.5,
    "drizzle": 1,
    "dash": 0.25,
    "pinch": 0,
    "splash": 2,
    "dollop": 2,
    "handful": 0.25,
})

INFORMAL_UNITS: Mapping[str, str] = MappingProxyType({
    "drizzle": "tsp",
    "splash": "tbsp",
    "sprinkle": "tbsp",
    "dash": "tsp",
    "dollop": "tbsp",
    "handful": "cup",
    "pinch": "tsp",
})

INFORMAL_NOTES: Mapping[str, Optional[str]] = MappingProxyType({
    "handful": "Estimated as ~1/4 cup",
    "drizzle": "Estimated as ~1 tsp",
    "splash": "Estimated as ~2 tbsp",
    "sprinkle": "Estimated as ~1/2 tbsp",
    "pinch": "Negligible calories",
    "dollop": "Estimated as ~2 tbsp",
    "dash": "Estimated as ~1/4 tsp",
    "some": "Assumed 1 serving",
})

# ═══════════════════════════════════════════════════════════════════
# UNITS
# ═══════════════════════════════════════════════════════════════════

UNIT_SYNONYMS: Mapping[str, str] = MappingProxyType({
    "tablespoon": "tbsp", "tablespoons": "tbsp", "tbsp": "tbsp", "tbsps": "tbsp", "t": "tbsp",
    "teaspoon": "tsp", "teaspoons": "tsp", "tsp": "tsp", "tsps": "tsp",
    "cup": "cup", "cups": "cup", "c": "cup",
    "ounce": "oz", "ounces": "oz", "oz": "oz",
    "pound": "lb", "pounds": "lb", "lb": "lb", "lbs": "lb",
    "gram": "g", "grams": "g", "g": "g",
    "scoop": "scoop", "scoops": "scoop",
    "handful": "handful", "handfuls": "handful",
    "spoonful": "spoonful", "spoonfuls": "spoonful",
    "piece": "piece", "pieces": "piece",
    "slice": "slice", "slices": "slice",
    "strip": "slice", "strips": "slice",
    "serving": "serving", "servings": "serving",
    "glass": "cup", "glasses": "cup",
    "breast": "breast", "breasts": "breast",
    "thigh": "thigh", "thighs": "thigh",
    "fillet": "fillet", "fillets": "fillet",
    # Informal words read in the unit position
    "sprinkle": "sprinkle", "sprinkles": "sprinkle",
    "drizzle": "drizzle", "drizzles": "drizzle",
    "dash": "dash", "dashes": "dash",
    "pinch": "pinch", "pinches": "pinch",
    "splash": "splash", "splashes": "splash",
    "dollop": "dollop", "dollops": "dollop",
})

# Abbreviations read the same in singular and plural
ABBREVIATED_UNITS = frozenset({"tbsp", "tsp", "oz", "lb", "g"})

# ═══════════════════════════════════════════════════════════════════
# DESCRIPTIONS
# ═══════════════════════════════════════════════════════════════════

DESCRIPTION_WORDS = frozenset({
    "big", "large", "small", "medium", "little", "huge", "hearty", "loaded",
    "light", "simple", "plain", "classic", "homemade", "fresh", "mixed",
    "grilled", "baked", "fried", "steamed", "roasted",
})
