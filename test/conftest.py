"""
Pytest configuration and shared fixtures.
"""

import random

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from main import wire_services
from recipe_nutrition.api.routes import router
from recipe_nutrition.application.usecases import (
    EstimateNutritionFromText,
    EstimateRecipeNutrition,
    ResolveIngredients,
)
from recipe_nutrition.core.config import CACHE_KEYS, CALC_VERSION
from recipe_nutrition.infrastructure.estimation_cache import EstimationCache
from recipe_nutrition.infrastructure.kv_stores import InMemoryKeyValueStore
from recipe_nutrition.services.canonicalizer import Canonicalizer
from recipe_nutrition.services.mass_estimator import MassEstimator

DAY_S = 24 * 3600


class FakeClock:
    """Settable replacement for time.time."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def resolve():
    return ResolveIngredients(canonicalizer=Canonicalizer(), mass_estimator=MassEstimator())


@pytest.fixture
def nutrition_cache(store, clock):
    return EstimationCache(
        store, CACHE_KEYS["nutrition"], CALC_VERSION, ttl_s=7 * DAY_S, max_entries=100, clock=clock
    )


@pytest.fixture
def calorie_cache(store, clock):
    return EstimationCache(store, CACHE_KEYS["recipe_calories"], CALC_VERSION, clock=clock)


@pytest.fixture
def text_uc(resolve, nutrition_cache):
    return EstimateNutritionFromText(resolve=resolve, cache=nutrition_cache, rng=random.Random(42))


@pytest.fixture
def recipe_uc(resolve, calorie_cache):
    return EstimateRecipeNutrition(resolve=resolve, calorie_cache=calorie_cache, default_servings=2)


@pytest.fixture
def sample_meal():
    """Trimmed TheMealDB lookup record."""
    return {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strInstructions": "Preheat oven to 350F.\r\nBoil the rice for 10 minutes.\r\nBake for 15 minutes.",
        "strIngredient1": "soy sauce",
        "strMeasure1": "3/4 cup",
        "strIngredient2": "brown sugar",
        "strMeasure2": "1/2 cup",
        "strIngredient3": "chicken breasts",
        "strMeasure3": "2",
        "strIngredient4": "carrots",
        "strMeasure4": "3",
        "strIngredient5": "",
        "strMeasure5": "",
        "strIngredient6": None,
        "strMeasure6": None,
    }


@pytest.fixture
def client(store):
    app = FastAPI()
    wire_services(app, store, rng=random.Random(7))
    app.include_router(router)
    with TestClient(app) as c:
        yield c
