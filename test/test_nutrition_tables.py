import pytest

from recipe_nutrition.domain.nutrition_tables import NUTRITION_100G, OIL_KEYS, PIECE_WEIGHTS_G


def test_table_is_read_only():
    with pytest.raises(TypeError):
        NUTRITION_100G["egg"] = None


def test_piece_weights_reference_known_keys():
    assert set(PIECE_WEIGHTS_G) <= set(NUTRITION_100G)


def test_oil_keys():
    assert OIL_KEYS == {"olive oil", "vegetable oil", "coconut oil", "sesame oil", "oil"}
    assert "olive" not in OIL_KEYS


def test_facts_per_100g():
    egg = NUTRITION_100G["egg"]
    assert egg.calories == 155
    assert egg.carbs == pytest.approx(1.0)
    assert NUTRITION_100G.get("xyzzy") is None


def test_carbs_never_negative():
    assert all(f.carbs >= 0 for f in NUTRITION_100G.values())
