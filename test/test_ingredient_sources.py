from recipe_nutrition.application.ingredient_sources import (
    instructions_from_meal_record,
    instructions_text,
    lines_from_meal_record,
    lines_from_pairs,
    lines_from_text,
    meal_record_id,
)
from recipe_nutrition.domain.entities import IngredientLine


def test_lines_from_text_splits_and_lowercases():
    lines = lines_from_text("2 Eggs,\n100g Oats, ,")
    assert lines == [
        IngredientLine(name="2 eggs", original="2 eggs"),
        IngredientLine(name="100g oats", original="100g oats"),
    ]
    assert lines_from_text("") == []


def test_lines_from_pairs_builds_original():
    lines = lines_from_pairs([
        {"name": "Flour", "measure": "2 cups"},
        {"name": "Salt"},
        {"name": "Milk", "original": "1 glass of milk"},
        {"name": "  "},
        {"name": "Butter", "amount": 50, "unit": "g"},
    ])
    assert [l.original for l in lines] == ["2 cups Flour", "Salt", "1 glass of milk", "Butter"]
    assert lines[3].amount == 50.0
    assert lines[3].unit == "g"


def test_meal_record(sample_meal):
    lines = lines_from_meal_record(sample_meal)
    assert [l.name for l in lines] == ["soy sauce", "brown sugar", "chicken breasts", "carrots"]
    assert lines[0].original == "3/4 cup soy sauce"
    assert meal_record_id(sample_meal) == "52772"
    assert meal_record_id({}) is None


def test_meal_record_instructions(sample_meal):
    steps = instructions_from_meal_record(sample_meal)
    assert steps == ["Preheat oven to 350F.", "Boil the rice for 10 minutes.", "Bake for 15 minutes."]
    assert instructions_from_meal_record({}) == []


def test_instructions_text():
    assert instructions_text(None) == ""
    assert instructions_text("Boil.") == "Boil."
    assert instructions_text(["Boil.", "", "Serve."]) == "Boil. Serve."
