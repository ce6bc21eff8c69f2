# recipe_nutrition/services/unit_converter.py
from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from recipe_nutrition.domain.entities import ParsedIngredient, ParsedQuantity, UnitKind, UnitToken
from recipe_nutrition.services.quantity_parser import (
    QUANTITY_PATTERN,
    expand_unicode_fractions,
    parse_quantity,
)

log = logging.getLogger("services.unit_converter")

# ----------------------------
# Unit table
# ----------------------------
UNITS: Dict[str, UnitToken] = {
    "g": UnitToken("g", UnitKind.WEIGHT, 1.0),
    "kg": UnitToken("kg", UnitKind.WEIGHT, 1000.0),
    "oz": UnitToken("oz", UnitKind.WEIGHT, 28.35),
    "lb": UnitToken("lb", UnitKind.WEIGHT, 453.59),
    "cup": UnitToken("cup", UnitKind.VOLUME, 240.0),
    "tbsp": UnitToken("tbsp", UnitKind.VOLUME, 14.0),
    "tsp": UnitToken("tsp", UnitKind.VOLUME, 5.0),
    "ml": UnitToken("ml", UnitKind.VOLUME, 1.0),
    "l": UnitToken("l", UnitKind.VOLUME, 1000.0),
    "pinch": UnitToken("pinch", UnitKind.QUALITATIVE, 1.0),
    "dash": UnitToken("dash", UnitKind.QUALITATIVE, 1.0),
    "handful": UnitToken("handful", UnitKind.QUALITATIVE, 30.0),
    "drizzle": UnitToken("drizzle", UnitKind.QUALITATIVE, 5.0),
    "splash": UnitToken("splash", UnitKind.QUALITATIVE, 5.0),
    "piece": UnitToken("piece", UnitKind.COUNT, 0.0),
}

# Regex alternation per unit. Order is the matching priority for lines that
# mention several units ("1 cup (240 ml) milk" -> cup).
_UNIT_ALIASES: List[Tuple[str, str]] = [
    ("g", r"g|gr|grams?|grammes?"),
    ("kg", r"kgs?|kilos?|kilograms?"),
    ("cup", r"cups?"),
    ("tbsp", r"tbsps?|tbs|tbls|tblsp|tablespoons?"),
    ("tsp", r"tsps?|teaspoons?"),
    ("ml", r"mls?|milliliters?|millilitres?"),
    ("l", r"l|liters?|litres?"),
    ("oz", r"oz|ounces?"),
    ("lb", r"lbs?|pounds?"),
]
_QUALITATIVE_ALIASES: List[Tuple[str, str]] = [
    ("pinch", r"pinch(?:es)?"),
    ("dash", r"dash(?:es)?"),
    ("handful", r"handfuls?"),
    ("drizzle", r"drizzles?"),
    ("splash", r"splash(?:es)?"),
]

_RE_ALIAS = [
    (name, re.compile(rf"(?:{alts})", re.IGNORECASE))
    for name, alts in _UNIT_ALIASES + _QUALITATIVE_ALIASES
]
_RE_UNIT_QTY = [
    (name, re.compile(rf"({QUANTITY_PATTERN})\s*(?:{alts})\b\.?", re.IGNORECASE))
    for name, alts in _UNIT_ALIASES
]
_RE_QUALITATIVE = [
    (name, re.compile(rf"(?:({QUANTITY_PATTERN})\s*)?\b(?:{alts})\b", re.IGNORECASE))
    for name, alts in _QUALITATIVE_ALIASES
]
_RE_LEADING_QTY = re.compile(rf"^\s*({QUANTITY_PATTERN})(?![\d/])")
_RE_LEADING_OF = re.compile(r"^(?:of\s+)", re.IGNORECASE)

# Density (g/ml) overrides, first keyword match wins.
_DENSITIES: List[Tuple[re.Pattern, float]] = [
    (re.compile(r"oil|olive"), 0.91),
    (re.compile(r"milk|cream"), 1.03),
    (re.compile(r"honey"), 1.42),
    (re.compile(r"lemon"), 1.03),
    (re.compile(r"soy sauce"), 1.16),
]


def density_for(ingredient_hint: str) -> float:
    hint = (ingredient_hint or "").lower()
    for pattern, dens in _DENSITIES:
        if pattern.search(hint):
            return dens
    return 1.0


def resolve_unit(unit: str | UnitToken | None) -> Optional[UnitToken]:
    if unit is None:
        return None
    if isinstance(unit, UnitToken):
        return unit
    u = unit.strip().lower().rstrip(".")
    if u in UNITS:
        return UNITS[u]
    if u in ("pieces", "pcs", "pc", "whole", "each"):
        return UNITS["piece"]
    for name, pattern in _RE_ALIAS:
        if pattern.fullmatch(u):
            return UNITS[name]
    return None


def unit_to_grams(quantity: float, unit: str | UnitToken | None, ingredient_hint: str = "") -> float:
    """
    Convert ``quantity`` of ``unit`` to grams.

    Weight and volume units use fixed factors; only ml/litre apply the
    ingredient density. Count and unknown units return 0.0 so the mass
    estimator can take over.
    """
    tok = resolve_unit(unit)
    if tok is None or tok.kind == UnitKind.COUNT:
        return 0.0
    qty = max(0.0, float(quantity or 0.0))
    if tok.name in ("ml", "l"):
        return qty * tok.grams_per_unit * density_for(ingredient_hint)
    return qty * tok.grams_per_unit


def _strip_span(text: str, start: int, end: int) -> str:
    rest = (text[:start] + " " + text[end:]).strip()
    rest = re.sub(r"\s+", " ", rest)
    rest = _RE_LEADING_OF.sub("", rest).strip()
    return rest


def parse_ingredient_line(text: str) -> ParsedIngredient:
    """
    Parse one ingredient line into quantity, unit, grams and leftover name.

    Never raises: unparseable input becomes a count of 1 with 0 grams.
    """
    raw = expand_unicode_fractions(text or "").lower().strip()
    raw = re.sub(r"\s+", " ", raw)
    if not raw:
        return ParsedIngredient(text="", name="", quantity=ParsedQuantity(), grams=0.0)

    for name, pattern in _RE_UNIT_QTY:
        m = pattern.search(raw)
        if m:
            qty = parse_quantity(m.group(1))
            tok = UNITS[name]
            return ParsedIngredient(
                text=raw,
                name=_strip_span(raw, m.start(), m.end()),
                quantity=ParsedQuantity(value=qty, unit=tok, explicit=True),
                grams=unit_to_grams(qty, tok, raw),
            )

    for name, pattern in _RE_QUALITATIVE:
        m = pattern.search(raw)
        if m:
            explicit = bool(m.group(1))
            qty = parse_quantity(m.group(1)) if explicit else 1.0
            tok = UNITS[name]
            return ParsedIngredient(
                text=raw,
                name=_strip_span(raw, m.start(), m.end()),
                quantity=ParsedQuantity(value=qty, unit=tok, explicit=explicit),
                grams=unit_to_grams(qty, tok, raw),
            )

    m = _RE_LEADING_QTY.match(raw)
    if m:
        qty = parse_quantity(m.group(1))
        return ParsedIngredient(
            text=raw,
            name=_strip_span(raw, m.start(), m.end()),
            quantity=ParsedQuantity(value=qty, unit=UNITS["piece"], explicit=True),
            grams=0.0,
        )

    return ParsedIngredient(text=raw, name=_RE_LEADING_OF.sub("", raw).strip(), quantity=ParsedQuantity(), grams=0.0)
