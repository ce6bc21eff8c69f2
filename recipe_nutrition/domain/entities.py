# recipe_nutrition/domain/entities.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class UnitKind(str, Enum):
    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"
    QUALITATIVE = "qualitative"


@dataclass(frozen=True)
class UnitToken:
    name: str
    kind: UnitKind
    grams_per_unit: float  # ml-based for VOLUME before density


@dataclass(frozen=True)
class IngredientLine:
    name: str
    original: str
    amount: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class ParsedQuantity:
    value: float = 1.0
    unit: UnitToken | None = None
    explicit: bool = False


@dataclass(frozen=True)
class ParsedIngredient:
    text: str
    name: str
    quantity: ParsedQuantity
    grams: float

    @property
    def count(self) -> float | None:
        """Explicit bare count ("2 eggs"), None when a unit was given."""
        q = self.quantity
        if q.explicit and (q.unit is None or q.unit.kind == UnitKind.COUNT):
            return q.value
        return None


@dataclass(frozen=True)
class NutritionFact:
    calories: float
    protein: float
    fat: float
    sugar: float
    fiber: float

    @property
    def carbs(self) -> float:
        # Atwater factors: whatever energy is not protein or fat is carbohydrate.
        return max(0.0, (self.calories - 4.0 * self.protein - 9.0 * self.fat) / 4.0)


@dataclass(frozen=True)
class MacroTotals:
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    sugar: float = 0.0
    fiber: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "fat": self.fat,
            "sugar": self.sugar,
            "fiber": self.fiber,
        }


@dataclass(frozen=True)
class ResolvedIngredient:
    line: IngredientLine
    key: str | None
    grams: float


@dataclass(frozen=True)
class NutritionEstimate:
    calories: int
    protein: int
    fat: int
    carbs: int
    fiber: int
    sugar: int
    confidence: float
    warnings: List[str] = field(default_factory=list)
    unmatched: List[Dict[str, Any]] = field(default_factory=list)
    cached: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "fat": self.fat,
            "carbs": self.carbs,
            "fiber": self.fiber,
            "sugar": self.sugar,
            "confidence": self.confidence,
            "warnings": list(self.warnings),
            "unmatched": [dict(u) for u in self.unmatched],
            "cached": self.cached,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any], cached: bool = False) -> "NutritionEstimate":
        return cls(
            calories=int(d["calories"]),
            protein=int(d["protein"]),
            fat=int(d["fat"]),
            carbs=int(d["carbs"]),
            fiber=int(d["fiber"]),
            sugar=int(d["sugar"]),
            confidence=float(d["confidence"]),
            warnings=list(d.get("warnings") or []),
            unmatched=list(d.get("unmatched") or []),
            cached=cached,
        )


@dataclass(frozen=True)
class RecipeNutrition:
    recipe_id: str | None
    total_calories: int
    servings: int
    per_serving: MacroTotals
    health_score: int
    ready_in_minutes: Optional[int] = None
    cached: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipe_id": self.recipe_id,
            "total_calories": self.total_calories,
            "servings": self.servings,
            "per_serving": self.per_serving.to_dict(),
            "health_score": self.health_score,
            "ready_in_minutes": self.ready_in_minutes,
            "cached": self.cached,
        }


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    version: int
    timestamp: int  # epoch-ms

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "version": self.version, "timestamp": self.timestamp}
