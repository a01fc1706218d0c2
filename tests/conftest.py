import pytest

from meal_calories.models import EstimatedItem


@pytest.fixture
def make_item():
    """Factory for EstimatedItem with sensible defaults."""

    def _make(food_label: str, calories: int = 100, **kwargs) -> EstimatedItem:
        defaults = {
            "quantity": 1,
            "unit": "serving",
            "calculation_text": f"1 serving × {calories} cal/serving",
            "source_name": "USDA",
            "source_url": "https://fdc.nal.usda.gov/",
            "base_serving": "1 serving",
            "confidence_level": "high",
        }
        defaults.update(kwargs)
        return EstimatedItem(food_label=food_label, calories=calories, **defaults)

    return _make
