# recipe_nutrition/application/ingredient_sources.py
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from recipe_nutrition.domain.entities import IngredientLine

_RE_SPLIT = re.compile(r",|\n")
_RE_STEP_SPLIT = re.compile(r"\r?\n+")

MEALDB_MAX_INGREDIENTS = 20

Instructions = Union[str, Sequence[str], None]


def lines_from_text(text: str) -> List[IngredientLine]:
    """Free text, one ingredient per comma- or newline-separated chunk."""
    out: List[IngredientLine] = []
    for chunk in _RE_SPLIT.split((text or "").lower()):
        c = chunk.strip()
        if c:
            out.append(IngredientLine(name=c, original=c))
    return out


def lines_from_pairs(pairs: Iterable[Mapping[str, Any]]) -> List[IngredientLine]:
    """
    Structured rows: {name, measure?} or {name, original?, amount?, unit?}.
    ``original`` defaults to "<measure> <name>".
    """
    out: List[IngredientLine] = []
    for p in pairs or []:
        name = str(p.get("name") or "").strip()
        if not name:
            continue
        original = str(p.get("original") or "").strip()
        if not original:
            measure = str(p.get("measure") or "").strip()
            original = " ".join(x for x in (measure, name) if x)
        amount = p.get("amount")
        out.append(
            IngredientLine(
                name=name,
                original=original,
                amount=float(amount) if isinstance(amount, (int, float)) else None,
                unit=(str(p["unit"]).strip() or None) if p.get("unit") else None,
            )
        )
    return out


def lines_from_meal_record(meal: Mapping[str, Any]) -> List[IngredientLine]:
    """TheMealDB record: strIngredient1..20 with matching strMeasure1..20."""
    pairs: List[Dict[str, str]] = []
    for i in range(1, MEALDB_MAX_INGREDIENTS + 1):
        name = meal.get(f"strIngredient{i}")
        measure = meal.get(f"strMeasure{i}")
        if name and str(name).strip():
            pairs.append({"name": str(name).strip(), "measure": str(measure or "").strip()})
    return lines_from_pairs(pairs)


def instructions_from_meal_record(meal: Mapping[str, Any]) -> List[str]:
    raw = str(meal.get("strInstructions") or "")
    return [s.strip() for s in _RE_STEP_SPLIT.split(raw) if s.strip()]


def instructions_text(instructions: Instructions) -> str:
    if instructions is None:
        return ""
    if isinstance(instructions, str):
        return instructions
    return " ".join(str(s) for s in instructions if s)


def meal_record_id(meal: Mapping[str, Any]) -> Optional[str]:
    rid = meal.get("idMeal")
    return str(rid) if rid not in (None, "") else None
