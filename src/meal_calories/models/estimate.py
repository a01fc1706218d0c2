"""Pydantic models for the calorie estimation pipeline."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ConfidenceLevel = Literal["low", "medium", "high"]


class _FrozenModel(BaseModel):
    """Immutable model serialised with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ── Reference data ───────────────────────────────────────────────────


class ReferenceEntry(_FrozenModel):
    """Calories for one standard unit of a food in the reference table."""

    calories_per_unit: float = Field(ge=0, description="Calories per one `unit`")
    unit: str = Field(description="Unit the calories are expressed in, e.g. 'tbsp'")
    serving_description: str = Field(description="Human readable base serving")
    source_name: str = Field(description="Citation key, see SOURCE_URLS")
    is_composite: bool = Field(
        default=False,
        description="Multi-ingredient placeholder, skipped when ingredients are listed",
    )


class FoodMatch(_FrozenModel):
    """Join between a parsed food phrase and the reference table."""

    canonical_name: str
    entry: ReferenceEntry


# ── Parsing ──────────────────────────────────────────────────────────


class ParsedSegment(_FrozenModel):
    """Quantity, unit and food phrase extracted from one segment."""

    raw_text: str
    quantity: float = 1
    unit: Optional[str] = None
    food_phrase: str
    had_explicit_quantity: bool = False
    had_informal_quantity_word: bool = False
    informal_word: Optional[str] = None


# ── Results ──────────────────────────────────────────────────────────


class EstimatedItem(_FrozenModel):
    """One matched food in an estimate."""

    food_label: str
    calories: int = Field(ge=0)
    quantity: float
    unit: str
    calculation_text: str = Field(description="e.g. '2 tbsp × 95 cal/tbsp'")
    source_name: str
    source_url: Optional[str] = None
    base_serving: str
    confidence_level: ConfidenceLevel
    confidence_note: Optional[str] = None


class EstimateResult(_FrozenModel):
    """Full calorie estimate for a meal description."""

    total_calories: int = 0
    items: List[EstimatedItem] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    confidence: ConfidenceLevel = "low"
    matched_food_count: int = 0

    @classmethod
    def empty(cls) -> "EstimateResult":
        return cls()


# ── Clarification ────────────────────────────────────────────────────


class ClarificationOption(_FrozenModel):
    """A portion choice offered to the user."""

    label: str
    multiplier: float = Field(gt=0)


class VagueQuantityPrompt(_FrozenModel):
    """Question to ask when a meal mentions a vague portion."""

    matched_food: str
    question: str
    options: List[ClarificationOption]
