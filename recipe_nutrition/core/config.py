# recipe_nutrition/core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
import logging

# Bump when estimation heuristics change; cached calorie entries from older
# versions are then recomputed.
CALC_VERSION: int = 1

DEFAULT_SERVINGS: int = int(os.getenv("DEFAULT_SERVINGS", "2"))
CONFIDENCE_MIN: float = float(os.getenv("CONFIDENCE_MIN", "0.85"))
CONFIDENCE_MAX: float = float(os.getenv("CONFIDENCE_MAX", "0.95"))

# Estimation cache
NUTRITION_CACHE_TTL_S: int = int(os.getenv("NUTRITION_CACHE_TTL_S", str(7 * 24 * 3600)))
NUTRITION_CACHE_MAX: int = int(os.getenv("NUTRITION_CACHE_MAX", "100"))
SEARCH_CACHE_TTL_S: int = int(os.getenv("SEARCH_CACHE_TTL_S", str(24 * 3600)))
SEARCH_CACHE_MAX: int = int(os.getenv("SEARCH_CACHE_MAX", "50"))

CACHE_KEYS = {
    "nutrition": "nutrition_cache",
    "recipe_calories": "recipe_calories_cache",
    "search": "recipes_cache",
}

# Storage: memory | file | mongo
STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory").strip().lower()

# Mongo settings
MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB: str = os.getenv("MONGO_DB", "recipe_nutrition")
MONGO_CACHE_COL: str = os.getenv("MONGO_CACHE_COL", "kv_cache")

@dataclass(frozen=True)
class Paths:
    ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    STORAGE_FILE: str = os.getenv("STORAGE_PATH", os.path.join(ROOT, "data", "kv_store.json"))

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
LOGGER = logging.getLogger("recipe_nutrition")
