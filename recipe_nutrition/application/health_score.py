# recipe_nutrition/application/health_score.py
from __future__ import annotations

import math
import re
from typing import List, Tuple

from recipe_nutrition.domain.entities import MacroTotals

BASE_SCORE = 50

# Produce, legumes and herbs that hint at micronutrient density
HEALTHY_INGREDIENTS: Tuple[str, ...] = (
    "spinach", "broccoli", "kale", "tomato", "bell pepper", "pepper", "peas",
    "lentils", "beans", "chickpeas", "carrot", "mushroom", "yogurt", "almond",
    "walnut", "avocado", "banana", "orange", "lemon", "parsley",
)
MICRONUTRIENT_POINTS = 2
MICRONUTRIENT_CAP = 10

UNHEALTHY_COOKING: Tuple[str, ...] = ("deep fry", "deep-fry", "fried", "fry", "crispy", "butter", "oil")
HEALTHY_COOKING: Tuple[str, ...] = ("steam", "boil", "grill", "bake", "poach", "roast")
COOKING_POINTS = 5
COOKING_CAP = 25


def _word_pattern(word: str) -> re.Pattern:
    return re.compile(r"\b" + r"\s+".join(re.escape(w) for w in word.split()) + r"\b")


_RE_HEALTHY_INGREDIENTS: List[re.Pattern] = [_word_pattern(w) for w in HEALTHY_INGREDIENTS]
_RE_UNHEALTHY_COOKING: List[re.Pattern] = [_word_pattern(w) for w in UNHEALTHY_COOKING]
_RE_HEALTHY_COOKING: List[re.Pattern] = [_word_pattern(w) for w in HEALTHY_COOKING]


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def micronutrient_bonus(ingredient_text: str) -> int:
    text = (ingredient_text or "").lower()
    hits = sum(1 for p in _RE_HEALTHY_INGREDIENTS if p.search(text))
    return min(MICRONUTRIENT_CAP, hits * MICRONUTRIENT_POINTS)


def cooking_method_adjustment(instructions: str) -> int:
    text = (instructions or "").lower()
    bad = sum(len(p.findall(text)) for p in _RE_UNHEALTHY_COOKING)
    good = sum(len(p.findall(text)) for p in _RE_HEALTHY_COOKING)
    return int(_clamp((good - bad) * COOKING_POINTS, -COOKING_CAP, COOKING_CAP))


def health_score(per_serving: MacroTotals, ingredient_text: str = "", instructions: str = "") -> int:
    """
    Heuristic 0-100 score from per-serving macros, ingredient keywords and
    cooking methods. Fat and sugar bands only apply when the value is known
    (> 0), so an empty recipe scores 40.
    """
    score = float(BASE_SCORE)

    kcal = per_serving.calories
    if 300 <= kcal <= 600:
        score += 10
    elif kcal < 200 or kcal > 800:
        score -= 10

    if per_serving.fat > 0:
        if per_serving.fat < 20:
            score += 10
        elif per_serving.fat > 30:
            score -= 10

    if per_serving.sugar > 0:
        if per_serving.sugar < 10:
            score += 10
        elif per_serving.sugar > 25:
            score -= 10

    if per_serving.protein > 10:
        score += 10
    if per_serving.fiber > 5:
        score += 5

    score += micronutrient_bonus(ingredient_text)
    score += cooking_method_adjustment(instructions)

    return round_half_up(_clamp(score, 0, 100))
