"""Tests for vague-portion prompts and category tips."""

import pytest

from meal_calories import detect_vague_quantity, get_educational_tip


class TestDetectVagueQuantity:

    def test_handful(self):
        prompt = detect_vague_quantity("A handful of almonds")
        assert prompt.matched_food == "almonds"
        assert prompt.question == 'You mentioned "a handful of almonds" - roughly how much?'
        assert [o.multiplier for o in prompt.options] == [0.5, 1, 1.5]
        assert prompt.options[0].label == "Small (about 0.5 oz)"

    def test_handful_without_of(self):
        assert detect_vague_quantity("handful cashews").matched_food == "cashews"

    def test_some(self):
        prompt = detect_vague_quantity("some rice")
        assert prompt.matched_food == "rice"
        assert prompt.question == 'You mentioned "some rice" - roughly how much?'
        assert [o.label for o in prompt.options] == [
            "Small portion", "Medium portion", "Large portion",
        ]

    @pytest.mark.parametrize("text, food", [
        ("a little honey", "honey"),
        ("a bit of cheese", "cheese"),
    ])
    def test_other_vague_phrases(self, text, food):
        assert detect_vague_quantity(text).matched_food == food

    def test_handful_checked_first(self):
        assert "handful" in detect_vague_quantity("some rice and a handful of nuts").question

    @pytest.mark.parametrize("text", [None, "", "2 eggs", "handsome toast"])
    def test_no_prompt(self, text):
        assert detect_vague_quantity(text) is None

    def test_camel_case_dump(self):
        payload = detect_vague_quantity("some rice").model_dump(by_alias=True)
        assert payload["matchedFood"] == "rice"


class TestEducationalTip:

    def test_known_categories(self):
        assert get_educational_tip("nuts").startswith("Nuts are nutrient-dense")
        assert "Measure your portions" in get_educational_tip("condiment")
        assert "palm-sized" in get_educational_tip("Protein")

    def test_unknown_category(self):
        assert get_educational_tip("dessert") is None
        assert get_educational_tip(None) is None
