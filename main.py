from __future__ import annotations

import logging
import random

import uvicorn
from fastapi import FastAPI
from pymongo import MongoClient
from dotenv import load_dotenv
load_dotenv()
from recipe_nutrition.api.routes import router
from recipe_nutrition.core.config import (
    CACHE_KEYS,
    CALC_VERSION,
    CONFIDENCE_MAX,
    CONFIDENCE_MIN,
    DEFAULT_SERVINGS,
    MONGO_CACHE_COL,
    MONGO_DB,
    MONGO_URI,
    NUTRITION_CACHE_MAX,
    NUTRITION_CACHE_TTL_S,
    Paths,
    SEARCH_CACHE_MAX,
    SEARCH_CACHE_TTL_S,
    STORAGE_BACKEND,
)

from recipe_nutrition.domain.nutrition_tables import NUTRITION_100G
from recipe_nutrition.domain.repositories import KeyValueStore
from recipe_nutrition.infrastructure.kv_stores import InMemoryKeyValueStore, JsonFileKeyValueStore, MongoKeyValueStore
from recipe_nutrition.infrastructure.estimation_cache import EstimationCache, RecipeSearchCache
from recipe_nutrition.services.canonicalizer import Canonicalizer
from recipe_nutrition.services.mass_estimator import MassEstimator
from recipe_nutrition.services.ingredient_suggester import IngredientSuggester
from recipe_nutrition.application.usecases import (
    AnalyzeMealRecord,
    EstimateCookingTime,
    EstimateNutritionFromText,
    EstimateRecipeNutrition,
    ResolveIngredients,
)

log = logging.getLogger("app")
app = FastAPI(title="Recipe Nutrition Engine")

_mongo_client: MongoClient | None = None


def build_store(backend: str = STORAGE_BACKEND) -> KeyValueStore:
    global _mongo_client

    if backend == "mongo":
        _mongo_client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=3000)
        return MongoKeyValueStore(_mongo_client[MONGO_DB][MONGO_CACHE_COL])
    if backend == "file":
        return JsonFileKeyValueStore(Paths.STORAGE_FILE)
    if backend != "memory":
        log.warning("Unknown STORAGE_BACKEND=%r, using memory", backend)
    return InMemoryKeyValueStore()


def wire_services(target: FastAPI, store: KeyValueStore, rng: random.Random | None = None) -> None:
    nutrition_cache = EstimationCache(
        store, CACHE_KEYS["nutrition"], CALC_VERSION,
        ttl_s=NUTRITION_CACHE_TTL_S, max_entries=NUTRITION_CACHE_MAX,
    )
    calorie_cache = EstimationCache(store, CACHE_KEYS["recipe_calories"], CALC_VERSION)
    search_cache = RecipeSearchCache(
        EstimationCache(
            store, CACHE_KEYS["search"], CALC_VERSION,
            ttl_s=SEARCH_CACHE_TTL_S, max_entries=SEARCH_CACHE_MAX,
        )
    )

    resolve = ResolveIngredients(canonicalizer=Canonicalizer(), mass_estimator=MassEstimator())
    suggester = IngredientSuggester(NUTRITION_100G.keys())

    estimate_text_uc = EstimateNutritionFromText(
        resolve=resolve,
        cache=nutrition_cache,
        suggester=suggester,
        rng=rng or random.Random(),
        confidence_range=(CONFIDENCE_MIN, CONFIDENCE_MAX),
    )
    estimate_recipe_uc = EstimateRecipeNutrition(
        resolve=resolve,
        calorie_cache=calorie_cache,
        default_servings=DEFAULT_SERVINGS,
    )

    # DI for routes.py
    target.state.estimate_text_uc = estimate_text_uc
    target.state.estimate_recipe_uc = estimate_recipe_uc
    target.state.cooking_time_uc = EstimateCookingTime()
    target.state.analyze_meal_uc = AnalyzeMealRecord(estimate_recipe_uc)

    # optional, for search callers
    target.state.search_cache = search_cache
    target.state.store = store


@app.on_event("startup")
def on_startup() -> None:
    store = build_store()
    wire_services(app, store)
    app.include_router(router)
    log.info("Startup complete (storage=%s)", STORAGE_BACKEND)


@app.on_event("shutdown")
def on_shutdown() -> None:
    global _mongo_client
    if _mongo_client:
        _mongo_client.close()
        _mongo_client = None


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8081, reload=False)
