"""
meal_calories package for estimating the calories of freeform meal descriptions.
"""

from .data.food_reference import SOURCE_URLS
from .estimator import estimate
from .models import EstimatedItem, EstimateResult, VagueQuantityPrompt
from .services.clarification import detect_vague_quantity, get_educational_tip

__all__ = [
    "estimate",
    "detect_vague_quantity",
    "get_educational_tip",
    "EstimateResult",
    "EstimatedItem",
    "VagueQuantityPrompt",
    "SOURCE_URLS",
]
