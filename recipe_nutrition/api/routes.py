# recipe_nutrition/api/routes.py
from __future__ import annotations

import logging
from functools import partial
from typing import Any

import anyio
from fastapi import APIRouter, Depends, HTTPException, Request

from recipe_nutrition.api.schemas import (
    CookingTimeRequest,
    CookingTimeResponse,
    EstimateTextRequest,
    MealAnalysisResponse,
    MealRecordRequest,
    NutritionEstimateResponse,
    RecipeNutritionRequest,
    RecipeNutritionResponse,
)
from recipe_nutrition.application.ingredient_sources import lines_from_pairs

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state
# -------------------------
def _state(request: Request, name: str):
    svc = getattr(request.app.state, name, None)
    if svc is None:
        raise RuntimeError(f"{name} not initialized. Check app startup wiring.")
    return svc


def get_text_estimator(request: Request):
    return _state(request, "estimate_text_uc")


def get_recipe_estimator(request: Request):
    return _state(request, "estimate_recipe_uc")


def get_cooking_time(request: Request):
    return _state(request, "cooking_time_uc")


def get_meal_analyzer(request: Request):
    return _state(request, "analyze_meal_uc")


# -------------------------
# /nutrition/estimate
# -------------------------
@router.post("/nutrition/estimate", response_model=NutritionEstimateResponse)
async def estimate_nutrition(req: EstimateTextRequest, uc=Depends(get_text_estimator)) -> Any:
    if not req.text.strip():
        raise HTTPException(status_code=400, detail="text is required")
    try:
        est = await anyio.to_thread.run_sync(uc, req.text)
        return est.to_dict()
    except Exception as e:
        log.exception("Processing /nutrition/estimate error")
        raise HTTPException(status_code=500, detail=str(e))


# -------------------------
# /recipes/nutrition
# -------------------------
@router.post("/recipes/nutrition", response_model=RecipeNutritionResponse)
async def recipe_nutrition(req: RecipeNutritionRequest, uc=Depends(get_recipe_estimator)) -> Any:
    lines = lines_from_pairs([i.model_dump() for i in req.ingredients])
    if not lines:
        raise HTTPException(status_code=400, detail="at least one ingredient is required")
    try:
        fn = partial(uc, lines, req.instructions, recipe_id=req.recipe_id, servings=req.servings)
        result = await anyio.to_thread.run_sync(fn)
        return result.to_dict()
    except Exception as e:
        log.exception("Processing /recipes/nutrition error")
        raise HTTPException(status_code=500, detail=str(e))


# -------------------------
# /recipes/cooking_time
# -------------------------
@router.post("/recipes/cooking_time", response_model=CookingTimeResponse)
def cooking_time(req: CookingTimeRequest, uc=Depends(get_cooking_time)) -> Any:
    try:
        return {"minutes": uc(req.instructions)}
    except Exception as e:
        log.exception("Processing /recipes/cooking_time error")
        raise HTTPException(status_code=500, detail=str(e))


# -------------------------
# /recipes/mealdb (TheMealDB record)
# -------------------------
@router.post("/recipes/mealdb", response_model=MealAnalysisResponse)
async def analyze_meal(req: MealRecordRequest, uc=Depends(get_meal_analyzer)) -> Any:
    if not req.meal:
        raise HTTPException(status_code=400, detail="meal is required")
    try:
        return await anyio.to_thread.run_sync(uc, req.meal)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Processing /recipes/mealdb error")
        raise HTTPException(status_code=500, detail=str(e))
