from recipe_nutrition.application.cooking_time import estimate_cooking_time_minutes
from recipe_nutrition.application.health_score import (
    cooking_method_adjustment,
    health_score,
    micronutrient_bonus,
    round_half_up,
)
from recipe_nutrition.domain.entities import MacroTotals


class TestHealthScore:
    def test_empty_recipe(self):
        # low calories -10; unknown fat and sugar are not banded
        assert health_score(MacroTotals()) == 40

    def test_balanced_meal(self):
        ps = MacroTotals(calories=450, protein=30, fat=15, sugar=5, fiber=8)
        assert health_score(ps) == 95

    def test_clamped_low(self):
        ps = MacroTotals(calories=2000, protein=0, fat=100, sugar=100, fiber=0)
        text = "deep fry in oil, fried and crispy, brush with butter, fry again"
        assert health_score(ps, "", text) == 0

    def test_clamped_high(self):
        ps = MacroTotals(calories=450, protein=30, fat=15, sugar=5, fiber=8)
        produce = "spinach broccoli kale lentils carrot avocado"
        assert health_score(ps, produce, "steam, then roast, then grill") == 100

    def test_always_in_range(self):
        for kcal in (0, 150, 250, 450, 700, 900):
            for fat in (0, 10, 25, 40):
                score = health_score(MacroTotals(calories=kcal, fat=fat, sugar=fat, protein=fat))
                assert 0 <= score <= 100


class TestScoringParts:
    def test_micronutrient_bonus_capped(self):
        assert micronutrient_bonus("") == 0
        assert micronutrient_bonus("1 carrot and spinach") == 4
        # whole words only
        assert micronutrient_bonus("2 carrots") == 0
        assert micronutrient_bonus("spinach broccoli kale lentils carrot avocado banana") == 10

    def test_bell_pepper_counts_both_keywords(self):
        assert micronutrient_bonus("1 red bell pepper") == 4

    def test_cooking_adjustment(self):
        assert cooking_method_adjustment("Deep fry the chicken") == -10
        assert cooking_method_adjustment("Steam the broccoli and bake the fish") == 10
        assert cooking_method_adjustment("boil " * 10) == 25
        assert cooking_method_adjustment("") == 0

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(405.5) == 406
        assert round_half_up(1.49) == 1


class TestCookingTime:
    def test_each_side_range(self):
        assert estimate_cooking_time_minutes("Fry 3-4 minutes each side.") == 7

    def test_each_side_single(self):
        assert estimate_cooking_time_minutes("Grill 5 mins per side") == 10

    def test_range_averaged(self):
        assert estimate_cooking_time_minutes("Cook for 6 to 8 minutes") == 7

    def test_hours_and_minutes_summed(self):
        assert estimate_cooking_time_minutes("Simmer for 10 minutes. Bake for 1 hour.") == 70
        assert estimate_cooking_time_minutes("Braise 1-2 hours") == 90

    def test_summary_lines_ignored(self):
        assert estimate_cooking_time_minutes("Prep: 15 mins\nCook for 20 minutes") == 20

    def test_qualitative_phrases(self):
        assert estimate_cooking_time_minutes("Stir for a minute") == 1
        assert estimate_cooking_time_minutes("Rest for a couple of minutes") == 2

    def test_step_list(self):
        assert estimate_cooking_time_minutes(["Boil 10 minutes", "Rest 5 minutes"]) == 15

    def test_unknown_is_none(self):
        assert estimate_cooking_time_minutes(None) is None
        assert estimate_cooking_time_minutes("") is None
        assert estimate_cooking_time_minutes("Serve hot.") is None
        assert estimate_cooking_time_minutes([]) is None

    def test_unit_must_be_whole_word(self):
        assert estimate_cooking_time_minutes("Add 2 minced garlic") is None
        assert estimate_cooking_time_minutes("Add 2 minced garlic and simmer 10 minutes") == 10
