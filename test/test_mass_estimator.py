import pytest

from recipe_nutrition.services.mass_estimator import (
    GENERIC_FALLBACK_G,
    MassEstimator,
    MassInput,
    fry_mentioned,
    oil_retention,
)


@pytest.fixture(scope="module")
def est():
    return MassEstimator()


class TestResolveMass:
    def test_parsed_grams_used_directly(self, est):
        assert est.resolve_mass("flour", "200g flour", 200) == 200

    def test_unknown_key_is_zero(self, est):
        assert est.resolve_mass(None, "1 xyzzy", 0) == 0.0
        assert est.resolve_mass("unobtainium", "1 unobtainium", 0) == 0.0

    def test_egg(self, est):
        assert est.resolve_mass("egg", "3 eggs", 0) == 150
        assert est.resolve_mass("egg", "egg, beaten", 0) == 50

    def test_chicken_cuts(self, est):
        assert est.resolve_mass("chicken", "2 chicken breasts", 0) == 300
        assert est.resolve_mass("chicken", "4 thighs", 0) == 400

    def test_garlic_cloves(self, est):
        assert est.resolve_mass("garlic", "3 garlic cloves", 0) == 15
        assert est.resolve_mass("garlic", "2 cloves garlic", 0) == 10

    def test_onion(self, est):
        assert est.resolve_mass("onion", "2 onions", 0) == 220
        assert est.resolve_mass("onion", "onion, finely chopped", 0) == 55

    def test_fractional_counts(self, est):
        assert est.resolve_mass("onion", "1/2 onion", 0) == 55
        assert est.resolve_mass("onion", "1 1/2 onions", 0) == 165
        assert est.resolve_mass("chicken", "1/2 chicken breast", 0) == 75
        assert est.resolve_mass("garlic", "1/2 clove garlic", 0) == 2.5

    def test_spice_powder(self, est):
        assert est.resolve_mass("paprika", "1 tbsp paprika", 0) == 7.5
        assert est.resolve_mass("cumin", "1 tsp cumin", 0) == 2.5

    def test_tomato_puree(self, est):
        assert est.resolve_mass("tomato puree", "2 tbsp tomato puree", 0) == 30
        assert est.resolve_mass("tomato puree", "tomato puree", 0) == 50

    def test_toppings(self, est):
        assert est.resolve_mass("parmesan", "parmesan, for topping", 0) == 20
        assert est.resolve_mass("spinach", "spinach topping", 0) == 40

    def test_misc_rules(self, est):
        assert est.resolve_mass("creme fraiche", "1 pot creme fraiche", 0) == 200
        assert est.resolve_mass("bacon", "4 slices bacon", 0) == 80
        assert est.resolve_mass("olive", "12 olives", 0) == 12
        assert est.resolve_mass("carrot", "3 carrots", 0) == 180

    def test_count_from_leading_quantity(self, est):
        assert est.resolve_mass("egg", "large ones", 0, count=2) == 100

    def test_piece_weight(self, est):
        assert est.resolve_mass("banana", "2 bananas", 0, count=2) == 240

    def test_generic_fallback(self, est):
        assert est.resolve_mass("salmon", "salmon", 0) == GENERIC_FALLBACK_G
        assert est.resolve_mass("olive oil", "olive oil", 0) == GENERIC_FALLBACK_G


class TestFryingOil:
    def test_only_largest_oil_reduced(self, est):
        items = [
            MassInput("olive oil", "50 g olive oil", 50),
            MassInput("vegetable oil", "20 g vegetable oil", 20),
        ]
        assert est.resolve_all(items, "Shallow fry the onions") == pytest.approx([7.5, 20.0])

    def test_no_frying_no_reduction(self, est):
        items = [MassInput("olive oil", "50 g olive oil", 50)]
        assert est.resolve_all(items, "Bake for 20 minutes") == [50]

    def test_first_oil_wins_ties(self, est):
        items = [MassInput("oil", "30 g oil", 30), MassInput("sesame oil", "30 g sesame oil", 30)]
        assert est.resolve_all(items, "deep fry until golden") == pytest.approx([9.0, 30.0])

    def test_retention_levels(self):
        assert oil_retention("oil for deep frying") == 0.3
        assert oil_retention("oil", "shallow fry") == 0.15
        assert oil_retention("oil", "fry gently") == 0.2

    def test_fry_mentioned(self):
        assert fry_mentioned("Stir-FRY the veg")
        assert fry_mentioned("fried rice")
        assert not fry_mentioned("Roast for an hour")
        assert not fry_mentioned("")
