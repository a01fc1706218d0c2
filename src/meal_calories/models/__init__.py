from .estimate import (
    ClarificationOption,
    ConfidenceLevel,
    EstimatedItem,
    EstimateResult,
    FoodMatch,
    ParsedSegment,
    ReferenceEntry,
    VagueQuantityPrompt,
)

__all__ = [
    "ClarificationOption",
    "ConfidenceLevel",
    "EstimatedItem",
    "EstimateResult",
    "FoodMatch",
    "ParsedSegment",
    "ReferenceEntry",
    "VagueQuantityPrompt",
]
