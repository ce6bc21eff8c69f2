# recipe_nutrition/application/usecases.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from recipe_nutrition.application.cooking_time import estimate_cooking_time_minutes
from recipe_nutrition.application.health_score import health_score, round_half_up
from recipe_nutrition.application.ingredient_sources import (
    Instructions,
    instructions_from_meal_record,
    instructions_text,
    lines_from_meal_record,
    lines_from_text,
    meal_record_id,
)
from recipe_nutrition.core.config import CONFIDENCE_MAX, CONFIDENCE_MIN, DEFAULT_SERVINGS
from recipe_nutrition.domain.entities import (
    IngredientLine,
    MacroTotals,
    NutritionEstimate,
    NutritionFact,
    ParsedIngredient,
    ParsedQuantity,
    RecipeNutrition,
    ResolvedIngredient,
    UnitKind,
)
from recipe_nutrition.domain.nutrition_tables import NUTRITION_100G
from recipe_nutrition.infrastructure.estimation_cache import EstimationCache, text_fingerprint
from recipe_nutrition.services.canonicalizer import Canonicalizer
from recipe_nutrition.services.ingredient_suggester import IngredientSuggester
from recipe_nutrition.services.mass_estimator import MassEstimator, MassInput
from recipe_nutrition.services.unit_converter import parse_ingredient_line, resolve_unit, unit_to_grams

log = logging.getLogger("application.usecases")

FIBER_SHARE_OF_CARBS = 0.10
SUGAR_SHARE_OF_CARBS = 0.05


def parse_line(line: IngredientLine) -> ParsedIngredient:
    """Structured amount/unit wins over parsing the original text."""
    if line.amount is None:
        return parse_ingredient_line(line.original or line.name)

    tok = resolve_unit(line.unit) if line.unit else None
    grams = 0.0
    if tok is not None and tok.kind != UnitKind.COUNT:
        grams = unit_to_grams(line.amount, tok, line.name)
    return ParsedIngredient(
        text=(line.original or line.name).lower(),
        name=line.name.lower(),
        quantity=ParsedQuantity(value=float(line.amount), unit=tok, explicit=True),
        grams=grams,
    )


@dataclass(frozen=True)
class ResolveIngredients:
    """parse -> canonicalize -> resolve mass, for a whole ingredient list"""

    canonicalizer: Canonicalizer
    mass_estimator: MassEstimator

    def __call__(self, lines: Sequence[IngredientLine], instructions: str = "") -> List[ResolvedIngredient]:
        parsed = [parse_line(line) for line in lines]
        keys = [self.canonicalizer.canonicalize(line.name, line.original) for line in lines]
        items = [
            MassInput(key=k, original=line.original, parsed_grams=p.grams, count=p.count)
            for line, p, k in zip(lines, parsed, keys)
        ]
        masses = self.mass_estimator.resolve_all(items, instructions)
        return [ResolvedIngredient(line=line, key=k, grams=g) for line, k, g in zip(lines, keys, masses)]


def _sum_macros(resolved: Sequence[ResolvedIngredient], table: Mapping[str, NutritionFact]) -> Tuple[MacroTotals, float]:
    kcal = protein = fat = sugar = fiber = carbs = 0.0
    for r in resolved:
        fact = table.get(r.key) if r.key else None
        if fact is None or r.grams <= 0:
            continue
        m = r.grams / 100.0
        kcal += fact.calories * m
        protein += fact.protein * m
        fat += fact.fat * m
        sugar += fact.sugar * m
        fiber += fact.fiber * m
        carbs += fact.carbs * m
    return MacroTotals(calories=kcal, protein=protein, fat=fat, sugar=sugar, fiber=fiber), carbs


@dataclass(frozen=True)
class EstimateNutritionFromText:
    resolve: ResolveIngredients
    cache: Optional[EstimationCache] = None
    suggester: Optional[IngredientSuggester] = None
    table: Mapping[str, NutritionFact] = field(default_factory=lambda: NUTRITION_100G)
    rng: random.Random = field(default_factory=random.Random)
    confidence_range: Tuple[float, float] = (CONFIDENCE_MIN, CONFIDENCE_MAX)

    def __call__(self, text: str) -> NutritionEstimate:
        fp = text_fingerprint(text)
        if fp and self.cache is not None:
            hit = self.cache.get(fp)
            if hit is not None:
                try:
                    return NutritionEstimate.from_dict(hit, cached=True)
                except (KeyError, TypeError, ValueError):
                    log.warning("Malformed cached estimate for %r; recomputing", fp)

        lines = lines_from_text(text)
        resolved = self.resolve(lines)
        totals, carbs = _sum_macros(resolved, self.table)

        warnings: List[str] = []
        unmatched: List[Dict[str, Any]] = []
        for r in resolved:
            if r.key is not None:
                continue
            warnings.append(f'Could not estimate nutrition for: "{r.line.original}"')
            name = parse_ingredient_line(r.line.original).name or r.line.original
            suggestions = self.suggester.suggest(name) if self.suggester is not None else []
            unmatched.append({"name": r.line.original, "suggestions": suggestions})
        if warnings:
            log.info("Unmatched ingredients: %d of %d", len(warnings), len(lines))

        lo, hi = self.confidence_range
        est = NutritionEstimate(
            calories=round_half_up(totals.calories),
            protein=round_half_up(totals.protein),
            fat=round_half_up(totals.fat),
            carbs=round_half_up(carbs),
            fiber=round_half_up(carbs * FIBER_SHARE_OF_CARBS),
            sugar=round_half_up(carbs * SUGAR_SHARE_OF_CARBS),
            confidence=lo + self.rng.random() * (hi - lo),
            warnings=warnings,
            unmatched=unmatched,
            cached=False,
        )
        if fp and self.cache is not None:
            self.cache.set(fp, est.to_dict())
        return est


@dataclass(frozen=True)
class EstimateRecipeNutrition:
    resolve: ResolveIngredients
    calorie_cache: Optional[EstimationCache] = None
    table: Mapping[str, NutritionFact] = field(default_factory=lambda: NUTRITION_100G)
    default_servings: int = DEFAULT_SERVINGS

    def __call__(
        self,
        ingredients: Sequence[IngredientLine],
        instructions: Instructions = None,
        recipe_id: Optional[str] = None,
        servings: Optional[int] = None,
    ) -> RecipeNutrition:
        instr = instructions_text(instructions)
        resolved = self.resolve(ingredients, instr)
        totals, _ = _sum_macros(resolved, self.table)

        cached = False
        total_kcal: Optional[int] = None
        rid = str(recipe_id) if recipe_id not in (None, "") else None
        if rid and self.calorie_cache is not None:
            hit = self.calorie_cache.get(rid)
            if isinstance(hit, (int, float)) and not isinstance(hit, bool):
                total_kcal = int(hit)
                cached = True
        if total_kcal is None:
            total_kcal = round_half_up(totals.calories)
            if rid and self.calorie_cache is not None:
                self.calorie_cache.set(rid, total_kcal)

        n = servings if servings and servings > 0 else self.default_servings
        per_serving = MacroTotals(
            calories=round_half_up(total_kcal / n),
            protein=round_half_up(totals.protein / n),
            fat=round_half_up(totals.fat / n),
            sugar=round_half_up(totals.sugar / n),
            fiber=round_half_up(totals.fiber / n),
        )
        ingredient_text = " ".join((line.original or line.name) for line in ingredients).lower()

        return RecipeNutrition(
            recipe_id=rid,
            total_calories=total_kcal,
            servings=n,
            per_serving=per_serving,
            health_score=health_score(per_serving, ingredient_text, instr),
            ready_in_minutes=estimate_cooking_time_minutes(instr),
            cached=cached,
        )


@dataclass(frozen=True)
class EstimateCookingTime:
    def __call__(self, instructions: Instructions) -> Optional[int]:
        return estimate_cooking_time_minutes(instructions)


@dataclass(frozen=True)
class AnalyzeMealRecord:
    """TheMealDB record -> nutrition, health score and ready-in minutes."""

    recipe_nutrition: EstimateRecipeNutrition

    def __call__(self, meal: Mapping[str, Any]) -> Dict[str, Any]:
        if not isinstance(meal, Mapping):
            raise ValueError("meal must be an object")
        lines = lines_from_meal_record(meal)
        steps = instructions_from_meal_record(meal)
        result = self.recipe_nutrition(lines, steps, recipe_id=meal_record_id(meal))
        out = result.to_dict()
        out["title"] = meal.get("strMeal")
        out["ingredients"] = [line.original for line in lines]
        return out
