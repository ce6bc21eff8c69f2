# recipe_nutrition/api/schemas.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class UnmatchedIngredient(BaseModel):
    name: str
    suggestions: List[str] = Field(default_factory=list)


class EstimateTextRequest(BaseModel):
    text: str = Field(..., examples=["2 eggs, 100g oats"])


class NutritionEstimateResponse(BaseModel):
    calories: int
    protein: int
    fat: int
    carbs: int
    fiber: int
    sugar: int
    confidence: float = Field(ge=0.0, le=1.0)
    warnings: List[str] = Field(default_factory=list)
    unmatched: List[UnmatchedIngredient] = Field(default_factory=list)
    cached: bool = False


class IngredientIn(BaseModel):
    name: str
    measure: Optional[str] = None
    original: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = None


class RecipeNutritionRequest(BaseModel):
    recipe_id: Optional[str] = None
    ingredients: List[IngredientIn] = Field(default_factory=list)
    instructions: Union[str, List[str], None] = None
    servings: Optional[int] = Field(default=None, ge=1)


class PerServing(BaseModel):
    calories: float
    protein: float
    fat: float
    sugar: float
    fiber: float


class RecipeNutritionResponse(BaseModel):
    recipe_id: Optional[str] = None
    total_calories: int
    servings: int
    per_serving: PerServing
    health_score: int = Field(ge=0, le=100)
    ready_in_minutes: Optional[int] = None
    cached: bool = False


class CookingTimeRequest(BaseModel):
    instructions: Union[str, List[str], None] = None


class CookingTimeResponse(BaseModel):
    minutes: Optional[int] = None


class MealRecordRequest(BaseModel):
    meal: Dict[str, Any]


class MealAnalysisResponse(RecipeNutritionResponse):
    title: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
