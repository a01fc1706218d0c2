"""
Static reference data for the calorie estimator.

Calories are per one `unit` of each food. Values come from USDA
FoodData Central or from product labels, as cited in SOURCE_URLS.
Composite entries ("sandwich", "bowl", ...) are whole-dish placeholders
that only apply when the meal description lists no separate ingredients.

Every table here is built once at import and exposed read-only.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..models.estimate import ReferenceEntry

# ---------------------------------------------------------------------------
# Source citations
# ---------------------------------------------------------------------------
SOURCE_URLS: Mapping[str, Optional[str]] = MappingProxyType({
    "USDA": "https://fdc.nal.usda.gov/",
    "Fage label": "https://usa.fage/products/yogurt",
    "Vega label": "https://myvega.com/products/vega-protein-greens",
    "Whole Foods label": "https://www.wholefoodsmarket.com/",
    "Starbucks": "https://www.starbucks.com/menu/nutrition-info",
    "Typical label": "https://fdc.nal.usda.gov/",
    "Estimated": None,
})

# ---------------------------------------------------------------------------
# Brands (paired with generic product words during deduplication)
# ---------------------------------------------------------------------------
BRAND_NAMES = frozenset({
    "vega", "oikos", "siggi", "siggis", "chobani", "fage", "quest",
    "orgain", "optimum", "garden of life", "bob's red mill", "bobs red mill",
    "whole foods", "trader joe", "trader joes", "kirkland",
    "premier protein", "fairlife", "muscle milk", "isopure",
    "rxbar", "kind", "larabar", "clif", "nature valley",
})

PRODUCT_WORDS = ("protein", "yogurt", "milk", "bar", "powder", "shake")

# ---------------------------------------------------------------------------
# Foods: name -> (calories per unit, unit, base serving, source[, composite])
# ---------------------------------------------------------------------------
_RAW_FOODS: Dict[str, Tuple] = {
    # Protein powders & supplements
    "vega protein": (140, "scoop", "1 scoop (36g)", "Vega label"),
    "vega": (140, "scoop", "1 scoop (36g)", "Vega label"),
    "protein powder": (120, "scoop", "1 scoop (~30g)", "Typical label"),
    "whey protein": (120, "scoop", "1 scoop", "Typical label"),
    "whey": (120, "scoop", "1 scoop", "Typical label"),
    "collagen": (35, "scoop", "1 scoop", "Typical label"),

    # Seeds
    "super seed blend": (60, "tbsp", "1 tbsp", "Whole Foods label"),
    "super seed": (60, "tbsp", "1 tbsp", "Whole Foods label"),
    "seed blend": (60, "tbsp", "1 tbsp", "USDA"),
    "chia seeds": (60, "tbsp", "1 tbsp", "USDA"),
    "chia": (60, "tbsp", "1 tbsp", "USDA"),
    "flax seeds": (55, "tbsp", "1 tbsp", "USDA"),
    "flax": (55, "tbsp", "1 tbsp", "USDA"),
    "hemp seeds": (55, "tbsp", "1 tbsp", "USDA"),
    "hemp": (55, "tbsp", "1 tbsp", "USDA"),

    # Dairy
    "fage 2% yogurt": (120, "cup", "1 cup", "Fage label"),
    "fage yogurt": (120, "cup", "1 cup", "Fage label"),
    "fage 2%": (120, "cup", "1 cup", "Fage label"),
    "fage": (120, "cup", "1 cup", "Fage label"),
    "greek yogurt": (130, "cup", "1 cup", "USDA"),
    "yogurt": (100, "cup", "1 cup", "USDA"),
    "almond milk": (40, "cup", "1 cup", "USDA"),
    "oat milk": (120, "cup", "1 cup", "USDA"),
    "soy milk": (80, "cup", "1 cup", "USDA"),
    "coconut milk": (45, "cup", "1 cup", "USDA"),
    "milk": (120, "cup", "1 cup", "USDA"),
    "cottage cheese": (110, "cup", "1/2 cup", "USDA"),
    "goat cheese": (75, "oz", "1 oz", "USDA"),
    "cream cheese": (50, "tbsp", "1 tbsp", "USDA"),
    "feta cheese": (75, "oz", "1 oz", "USDA"),
    "feta": (50, "tbsp", "1 tbsp crumbled", "USDA"),
    "parmesan": (22, "tbsp", "1 tbsp grated", "USDA"),
    "cheddar": (115, "oz", "1 oz", "USDA"),
    "mozzarella": (85, "oz", "1 oz", "USDA"),
    "cheese": (110, "oz", "1 oz", "USDA"),

    # Fruits
    "banana": (105, "banana", "1 medium (118g)", "USDA"),
    "apple": (95, "apple", "1 medium", "USDA"),
    "orange": (60, "orange", "1 medium", "USDA"),
    "blueberries": (85, "cup", "1 cup", "USDA"),
    "strawberries": (50, "cup", "1 cup", "USDA"),
    "mixed berries": (70, "cup", "1 cup", "USDA"),
    "berries": (70, "cup", "1 cup", "USDA"),
    "grapes": (60, "cup", "1 cup", "USDA"),
    "mango": (100, "cup", "1 cup", "USDA"),
    "avocado": (240, "avocado", "1 whole", "USDA"),

    # Vegetables
    "spinach": (7, "cup", "1 cup", "USDA"),
    "kale": (33, "cup", "1 cup", "USDA"),
    "broccoli": (55, "cup", "1 cup", "USDA"),
    "carrots": (50, "cup", "1 cup", "USDA"),
    "riced cauliflower": (25, "cup", "1 cup", "USDA"),
    "cauliflower rice": (25, "cup", "1 cup", "USDA"),
    "cauliflower": (25, "cup", "1 cup", "USDA"),
    "kimchi": (10, "cup", "1/4 cup", "USDA"),
    "vegetables": (50, "cup", "1 cup", "USDA"),
    "veggies": (50, "cup", "1 cup", "USDA"),
    "greens": (8, "cup", "1 cup", "USDA"),
    "mixed greens": (8, "cup", "1 cup", "USDA"),
    "salad greens": (8, "cup", "1 cup", "USDA"),
    "lettuce": (5, "cup", "1 cup", "USDA"),
    "arugula": (5, "cup", "1 cup", "USDA"),
    "beets": (60, "cup", "1 cup", "USDA"),
    "beet": (60, "cup", "1 cup", "USDA"),
    "cucumber": (16, "cup", "1 cup", "USDA"),
    "tomato": (22, "tomato", "1 medium", "USDA"),
    "tomatoes": (22, "tomato", "1 medium", "USDA"),
    "bell pepper": (30, "pepper", "1 medium", "USDA"),
    "onion": (45, "onion", "1 medium", "USDA"),

    # Proteins
    "scrambled eggs": (90, "egg", "1 egg", "USDA"),
    "hard boiled egg": (78, "egg", "1 large", "USDA"),
    "hardboiled egg": (78, "egg", "1 large", "USDA"),
    "boiled egg": (78, "egg", "1 large", "USDA"),
    "fried egg": (90, "egg", "1 large", "USDA"),
    "eggs": (70, "egg", "1 large", "USDA"),
    "egg": (70, "egg", "1 large", "USDA"),
    "chicken breast": (280, "breast", "1 breast (~6oz)", "USDA"),
    "grilled chicken breast": (280, "breast", "1 breast (~6oz)", "USDA"),
    "chicken thigh": (180, "thigh", "1 thigh (~4oz)", "USDA"),
    "grilled chicken": (45, "oz", "1 oz", "USDA"),
    "chicken": (45, "oz", "1 oz", "USDA"),
    "salmon": (50, "oz", "1 oz", "USDA"),
    "salmon fillet": (280, "fillet", "1 fillet (~6oz)", "USDA"),
    "tuna": (30, "oz", "1 oz", "USDA"),
    "steak": (270, "oz", "6 oz", "USDA"),
    "ground beef": (70, "oz", "1 oz (cooked)", "USDA"),
    "beef": (65, "oz", "1 oz", "USDA"),
    "turkey": (40, "oz", "1 oz", "USDA"),
    "bacon": (45, "slice", "1 slice", "USDA"),
    "tofu": (20, "oz", "1 oz", "USDA"),
    "shrimp": (25, "oz", "1 oz", "USDA"),

    # Grains
    "oatmeal": (150, "cup", "1 cup cooked", "USDA", True),
    "oats": (150, "cup", "1 cup cooked", "USDA"),
    "rice": (200, "cup", "1 cup cooked", "USDA"),
    "brown rice": (220, "cup", "1 cup cooked", "USDA"),
    "quinoa": (220, "cup", "1 cup cooked", "USDA"),
    "pasta": (200, "cup", "1 cup cooked", "USDA"),
    "bread": (80, "slice", "1 slice", "USDA"),
    "toast": (80, "slice", "1 slice", "USDA"),
    "bagel": (280, "bagel", "1 medium", "USDA"),
    "tortilla": (90, "tortilla", "1 medium", "USDA"),
    "pancake": (90, "pancake", "1 medium", "USDA"),
    "pancakes": (90, "pancake", "1 medium", "USDA"),
    "waffle": (220, "waffle", "1 large", "USDA"),
    "cereal": (150, "cup", "1 cup with milk", "USDA"),
    "granola": (140, "cup", "1/4 cup", "USDA"),
    "potato": (160, "potato", "1 medium", "USDA"),
    "sweet potato": (100, "potato", "1 medium", "USDA"),

    # Nuts & nut butters
    "peanut butter": (95, "tbsp", "1 tbsp", "USDA"),
    "almond butter": (100, "tbsp", "1 tbsp", "USDA"),
    "almonds": (165, "oz", "1 oz (~23)", "USDA"),
    "peanuts": (170, "oz", "1 oz", "USDA"),
    "walnuts": (185, "oz", "1 oz", "USDA"),
    "cashews": (160, "oz", "1 oz", "USDA"),
    "pecans": (195, "oz", "1 oz", "USDA"),
    "pistachios": (160, "oz", "1 oz", "USDA"),
    "mixed nuts": (170, "oz", "1 oz", "USDA"),

    # Legumes & beans
    "chickpeas": (65, "handful", "1/4 cup", "USDA"),
    "garbanzo beans": (65, "handful", "1/4 cup", "USDA"),
    "black beans": (110, "cup", "1/2 cup", "USDA"),
    "kidney beans": (110, "cup", "1/2 cup", "USDA"),
    "lentils": (115, "cup", "1/2 cup cooked", "USDA"),
    "edamame": (95, "cup", "1/2 cup shelled", "USDA"),

    # Condiments & dressings
    "honey": (60, "tbsp", "1 tbsp", "USDA"),
    "maple syrup": (50, "tbsp", "1 tbsp", "USDA"),
    "butter": (100, "tbsp", "1 tbsp", "USDA"),
    "olive oil": (120, "tbsp", "1 tbsp", "USDA"),
    "coconut oil": (120, "tbsp", "1 tbsp", "USDA"),
    "oil": (120, "tbsp", "1 tbsp", "USDA"),
    "cocoa powder": (12, "tbsp", "1 tbsp", "USDA"),
    "cocoa": (12, "tbsp", "1 tbsp", "USDA"),
    "french dressing": (70, "tbsp", "1 tbsp", "USDA"),
    "ranch dressing": (75, "tbsp", "1 tbsp", "USDA"),
    "ranch": (75, "tbsp", "1 tbsp", "USDA"),
    "italian dressing": (35, "tbsp", "1 tbsp", "USDA"),
    "caesar dressing": (80, "tbsp", "1 tbsp", "USDA"),
    "balsamic vinaigrette": (45, "tbsp", "1 tbsp", "USDA"),
    "vinaigrette": (45, "tbsp", "1 tbsp", "USDA"),
    "dressing": (70, "tbsp", "1 tbsp", "USDA"),
    "mayo": (90, "tbsp", "1 tbsp", "USDA"),
    "mayonnaise": (90, "tbsp", "1 tbsp", "USDA"),
    "hummus": (25, "tbsp", "1 tbsp", "USDA"),
    "salsa": (5, "tbsp", "1 tbsp", "USDA"),
    "guacamole": (25, "tbsp", "1 tbsp", "USDA"),
    "sour cream": (30, "tbsp", "1 tbsp", "USDA"),

    # Beverages
    "coffee": (5, "cup", "1 cup black", "USDA"),
    "latte": (190, "cup", "12 oz", "Starbucks"),
    "orange juice": (110, "cup", "8 oz", "USDA"),
    "juice": (120, "cup", "8 oz", "USDA"),

    # Snacks
    "protein bar": (220, "bar", "1 bar", "Typical label"),
    "granola bar": (140, "bar", "1 bar", "USDA"),
    "chips": (150, "oz", "1 oz", "USDA"),
    "dark chocolate": (170, "oz", "1 oz", "USDA"),
    "chocolate": (150, "oz", "1 oz", "USDA"),
    "ice cream": (250, "cup", "1/2 cup", "USDA"),
    "cookie": (100, "cookie", "1 medium", "USDA"),
    "cookies": (100, "cookie", "1 medium", "USDA"),

    # Composite meals (only used if no ingredients are listed)
    "smoothie": (300, "smoothie", "16 oz", "Estimated", True),
    "shake": (300, "shake", "16 oz", "Estimated", True),
    "sandwich": (400, "sandwich", "1 sandwich", "Estimated", True),
    "burger": (550, "burger", "1 with bun", "Estimated", True),
    "burrito": (500, "burrito", "1 burrito", "Estimated", True),
    "taco": (200, "taco", "1 taco", "USDA", True),
    "tacos": (200, "taco", "1 taco", "USDA", True),
    "pizza": (280, "slice", "1 slice", "USDA", True),
    "salad": (150, "salad", "1 side salad", "Estimated", True),
    "soup": (150, "cup", "1 cup", "USDA", True),
    "bowl": (450, "bowl", "1 bowl", "Estimated", True),
    "wrap": (350, "wrap", "1 wrap", "Estimated", True),
    "plate": (500, "plate", "1 plate", "Estimated", True),
    "stir fry": (400, "serving", "1 serving", "Estimated", True),
    "stir-fry": (400, "serving", "1 serving", "Estimated", True),
    "parfait": (300, "parfait", "1 parfait", "Estimated", True),
    "omelette": (250, "omelette", "1 omelette", "Estimated", True),
    "omelet": (250, "omelet", "1 omelet", "Estimated", True),
}


def _build_reference(raw: Dict[str, Tuple]) -> Mapping[str, ReferenceEntry]:
    """Validate the raw rows into ReferenceEntry objects."""
    table: Dict[str, ReferenceEntry] = {}
    for name, row in raw.items():
        calories, unit, serving, source, *rest = row
        if source not in SOURCE_URLS:
            raise ValueError(f"Unknown source '{source}' for reference food '{name}'")
        table[name] = ReferenceEntry(
            calories_per_unit=calories,
            unit=unit,
            serving_description=serving,
            source_name=source,
            is_composite=bool(rest and rest[0]),
        )
    return MappingProxyType(table)


FOOD_REFERENCE: Mapping[str, ReferenceEntry] = _build_reference(_RAW_FOODS)

# Longest names first, so specific foods win over generic substrings
FOOD_NAMES_BY_LENGTH: Tuple[str, ...] = tuple(
    sorted(FOOD_REFERENCE, key=len, reverse=True)
)

# ---------------------------------------------------------------------------
# Educational tips by food category
# ---------------------------------------------------------------------------
CATEGORY_TIPS: Mapping[str, str] = MappingProxyType({
    "nuts": (
        "Nuts are nutrient-dense but calorie-dense too! A small handful (1 oz) "
        "of almonds has about 165 calories."
    ),
    "condiment": (
        "Condiments and oils can add up quickly. Measure your portions to stay on track."
    ),
    "protein": (
        "Protein helps with satiety and muscle recovery. Aim for a palm-sized "
        "portion per meal."
    ),
})
