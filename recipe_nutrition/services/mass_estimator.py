# recipe_nutrition/services/mass_estimator.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from recipe_nutrition.domain.nutrition_tables import NUTRITION_100G, OIL_KEYS, PIECE_WEIGHTS_G
from recipe_nutrition.services.quantity_parser import QUANTITY_PATTERN, parse_quantity

log = logging.getLogger("services.mass_estimator")

GENERIC_FALLBACK_G = 30.0

_RE_FRY = re.compile(r"fry|frying|fried")
_RE_DEEP = re.compile(r"deep")
_RE_SHALLOW = re.compile(r"shallow")

_RE_TBSP = re.compile(r"tbsp|tablespoon")
_RE_TSP = re.compile(r"tsp|teaspoon")
_RE_NUM = rf"({QUANTITY_PATTERN})\s*"

SPICE_POWDERS = frozenset({"curry powder", "garam masala", "paprika", "turmeric", "cumin", "chilli", "chili powder"})
_CHICKEN_CUT_G = {"breast": 150.0, "thigh": 100.0, "leg": 100.0}


def fry_mentioned(instructions: str) -> bool:
    return bool(_RE_FRY.search((instructions or "").lower()))


def oil_retention(original_text: str, instructions: str = "") -> float:
    """Share of frying oil that ends up in the food."""
    for text in ((original_text or "").lower(), (instructions or "").lower()):
        if _RE_DEEP.search(text):
            return 0.3
        if _RE_SHALLOW.search(text):
            return 0.15
    return 0.2


def _count_before(text: str, noun: str) -> Optional[float]:
    """Quantity written directly before ``noun``; "1/2 onion" is 0.5, not 2."""
    m = re.search(_RE_NUM + rf"(?:{noun})", text)
    if not m:
        return None
    n = parse_quantity(m.group(1))
    return n if n > 0 else None


# ----------------------------
# Key-specific heuristics (text, count) -> grams, 0.0 when not applicable
# ----------------------------
def _garlic(text: str, count: Optional[float]) -> float:
    if "clove" not in text:
        return 0.0
    n = _count_before(text, r"(?:garlic\s+)?cloves?") or count or 1.0
    return 5.0 * n


def _ginger(text: str, count: Optional[float]) -> float:
    return 10.0 if re.search(r"tbsp|tablespoon|piece", text) else 0.0


def _sugar(text: str, count: Optional[float]) -> float:
    return 5.0 if _RE_TSP.search(text) else 0.0


def _spaghetti(text: str, count: Optional[float]) -> float:
    return _count_before(text, "spaghetti") or 75.0


def _pilchards(text: str, count: Optional[float]) -> float:
    return _count_before(text, r"pilchards?") or 100.0


def _tomato_puree(text: str, count: Optional[float]) -> float:
    n = _count_before(text, r"tbsp|tablespoon")
    if n:
        return n * 15.0
    return 50.0 if "tomato puree" in text else 0.0


def _olive(text: str, count: Optional[float]) -> float:
    return _count_before(text, r"olives?") or 10.0


def _parmesan(text: str, count: Optional[float]) -> float:
    if re.search(r"shaved|scattered", text):
        return 10.0
    if "topping" in text:
        return 20.0
    return 0.0


def _topping_greens(text: str, count: Optional[float]) -> float:
    return 40.0 if "topping" in text else 0.0


def _onion(text: str, count: Optional[float]) -> float:
    n = _count_before(text, r"onions?") or count
    if n:
        return n * 110.0
    return 55.0 if re.search(r"finely|chopped|minced", text) else 0.0


def _carrot(text: str, count: Optional[float]) -> float:
    n = _count_before(text, r"carrots?") or count
    return n * 60.0 if n else 0.0


def _egg(text: str, count: Optional[float]) -> float:
    n = _count_before(text, r"eggs?") or count
    if n:
        return n * 50.0
    return 50.0 if re.search(r"\beggs?\b", text) else 0.0


def _spice(text: str, count: Optional[float]) -> float:
    if _RE_TBSP.search(text):
        return 7.5
    if _RE_TSP.search(text):
        return 2.5
    return 0.0


def _creme_fraiche(text: str, count: Optional[float]) -> float:
    return 200.0 if "pot" in text else 0.0


def _bacon(text: str, count: Optional[float]) -> float:
    n = _count_before(text, r"bacon|slices?|rashers?") or count
    if n:
        return n * 20.0
    return 20.0 if "bacon" in text else 0.0


def _chicken(text: str, count: Optional[float]) -> float:
    m = re.search(_RE_NUM + r"(breasts?|thighs?|legs?)", text)
    if not m:
        m = re.search(_RE_NUM + r"[a-z\s,.(){:-]{0,40}\b(breasts?|thighs?|legs?)\b", text)
    if not m:
        return 0.0
    n = parse_quantity(m.group(1))
    if n <= 0:
        return 0.0
    part = m.group(2)
    for cut, grams in _CHICKEN_CUT_G.items():
        if cut in part:
            return n * grams
    return 0.0


_RULES: Dict[str, Callable[[str, Optional[float]], float]] = {
    "garlic": _garlic,
    "ginger": _ginger,
    "sugar": _sugar,
    "spaghetti": _spaghetti,
    "pilchards": _pilchards,
    "tomato puree": _tomato_puree,
    "olive": _olive,
    "parmesan": _parmesan,
    "spinach": _topping_greens,
    "peas": _topping_greens,
    "onion": _onion,
    "carrot": _carrot,
    "egg": _egg,
    "creme fraiche": _creme_fraiche,
    "bacon": _bacon,
    "chicken": _chicken,
}


@dataclass(frozen=True)
class MassInput:
    key: Optional[str]
    original: str
    parsed_grams: float
    count: Optional[float] = None


class MassEstimator:
    """Resolves the effective mass of one ingredient line in grams."""

    def __init__(
        self,
        known_keys: Mapping[str, object] = NUTRITION_100G,
        piece_weights: Mapping[str, float] = PIECE_WEIGHTS_G,
        fallback_g: float = GENERIC_FALLBACK_G,
    ) -> None:
        self.known_keys = known_keys
        self.piece_weights = piece_weights
        self.fallback_g = fallback_g

    def resolve_mass(
        self,
        key: Optional[str],
        original_text: str,
        parsed_grams: float,
        largest_oil_frying: bool = False,
        instructions: str = "",
        count: Optional[float] = None,
    ) -> float:
        if not key or key not in self.known_keys:
            return 0.0

        text = (original_text or "").lower()
        if parsed_grams > 0:
            if largest_oil_frying:
                return parsed_grams * oil_retention(text, instructions)
            return parsed_grams

        grams = self._heuristic(key, text, count)
        if grams <= 0 and count and key in self.piece_weights:
            grams = count * self.piece_weights[key]
        if grams <= 0:
            grams = self.fallback_g
        return grams

    def resolve_all(self, items: Sequence[MassInput], instructions: str = "") -> List[float]:
        """
        Resolve every line of one recipe. Only the largest parsed oil entry
        (first on ties) loses mass to frying, and only if the instructions
        mention frying.
        """
        largest_oil: Optional[int] = None
        if fry_mentioned(instructions):
            for idx, it in enumerate(items):
                if it.key in OIL_KEYS and it.parsed_grams > 0:
                    if largest_oil is None or it.parsed_grams > items[largest_oil].parsed_grams:
                        largest_oil = idx

        out: List[float] = []
        for idx, it in enumerate(items):
            out.append(
                self.resolve_mass(
                    it.key,
                    it.original,
                    it.parsed_grams,
                    largest_oil_frying=(idx == largest_oil),
                    instructions=instructions,
                    count=it.count,
                )
            )
        return out

    def _heuristic(self, key: str, text: str, count: Optional[float]) -> float:
        fn = _RULES.get(key)
        if fn is None and key in SPICE_POWDERS:
            fn = _spice
        if fn is None:
            return 0.0
        return fn(text, count)
