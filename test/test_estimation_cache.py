from recipe_nutrition.infrastructure.estimation_cache import (
    EstimationCache,
    RecipeSearchCache,
    search_fingerprint,
    text_fingerprint,
)

DAY_S = 24 * 3600
HOUR_S = 3600


class TestTTL:
    def test_hit_before_expiry(self, nutrition_cache, clock):
        nutrition_cache.set("2 eggs", {"calories": 155})
        clock.advance(6 * DAY_S + 23 * HOUR_S)
        assert nutrition_cache.get("2 eggs") == {"calories": 155}

    def test_miss_after_expiry(self, nutrition_cache, clock):
        nutrition_cache.set("2 eggs", {"calories": 155})
        clock.advance(7 * DAY_S + 1 * HOUR_S)
        assert nutrition_cache.get("2 eggs") is None

    def test_no_ttl_never_expires(self, calorie_cache, clock):
        calorie_cache.set("52772", 811)
        clock.advance(365 * DAY_S)
        assert calorie_cache.get("52772") == 811


class TestVersioning:
    def test_version_bump_is_a_miss(self, store, clock):
        v1 = EstimationCache(store, "recipe_calories_cache", version=1, clock=clock)
        v2 = EstimationCache(store, "recipe_calories_cache", version=2, clock=clock)
        v1.set("52772", 811)
        assert v1.get("52772") == 811
        assert v2.get("52772") is None

        v2.set("52772", 790)
        assert v2.get("52772") == 790
        assert v1.get("52772") is None


class TestEviction:
    def test_oldest_dropped(self, store, clock):
        cache = EstimationCache(store, "ns", version=1, max_entries=3, clock=clock)
        for i in range(4):
            cache.set(f"k{i}", i)
            clock.advance(1)
        assert len(cache) == 3
        assert cache.get("k0") is None
        assert [cache.get(f"k{i}") for i in (1, 2, 3)] == [1, 2, 3]


class TestCorruption:
    def test_corrupt_namespace_is_a_miss_and_recovers(self, store, clock):
        cache = EstimationCache(store, "ns", version=1, clock=clock)
        store.set("ns", "not a dict")
        assert cache.get("a") is None
        assert cache.set("a", 1)
        assert cache.get("a") == 1

    def test_malformed_entries_are_misses(self, store, clock):
        cache = EstimationCache(store, "ns", version=1, clock=clock)
        store.set("ns", {"a": "junk", "b": {"version": 1}, "c": {"value": 3, "version": "x"}})
        assert cache.get("a") is None
        assert cache.get("b") is None
        assert cache.get("c") is None

    def test_clear(self, nutrition_cache):
        nutrition_cache.set("x", 1)
        nutrition_cache.clear()
        assert len(nutrition_cache) == 0


class TestFingerprints:
    def test_text_fingerprint(self):
        assert text_fingerprint("  2 Eggs, 100g Oats ") == "2 eggs, 100g oats"

    def test_search_fingerprint_stable(self):
        a = search_fingerprint(" Chicken ", {"cuisine": "thai", "diet": "none"})
        b = search_fingerprint("chicken", {"diet": "none", "cuisine": "thai"})
        assert a == b
        assert a != search_fingerprint("chicken", {"cuisine": "italian"})


class TestRecipeSearchCache:
    def test_roundtrip_and_expiry(self, store, clock):
        search = RecipeSearchCache(
            EstimationCache(store, "recipes_cache", version=1, ttl_s=DAY_S, max_entries=50, clock=clock)
        )
        recipes = [{"id": "52772", "title": "Teriyaki Chicken Casserole"}]
        assert search.set("Chicken", {"cuisine": "japanese"}, recipes)
        assert search.get("chicken", {"cuisine": "japanese"}) == recipes
        assert search.get("chicken", None) is None
        clock.advance(DAY_S)
        assert search.get("chicken", {"cuisine": "japanese"}) is None
