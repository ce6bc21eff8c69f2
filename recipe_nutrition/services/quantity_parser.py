# recipe_nutrition/services/quantity_parser.py
from __future__ import annotations

import re

_UNICODE_FRACTIONS = {
    "½": " 1/2",
    "¼": " 1/4",
    "¾": " 3/4",
    "⅓": " 1/3",
    "⅔": " 2/3",
    "⅛": " 1/8",
    "⅜": " 3/8",
    "⅝": " 5/8",
    "⅞": " 7/8",
    "⁄": "/",
}

_RE_FRACTION = re.compile(r"(?:(\d+)\s+)?(\d+)\s*/\s*(\d+)")
_RE_RANGE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:-|to|or)\s*(\d+(?:\.\d+)?)", re.IGNORECASE)
_RE_DECIMAL = re.compile(r"(\d+(?:\.\d+)?)")

# Any quantity expression; mixed numbers and ranges before plain numbers.
QUANTITY_PATTERN = (
    r"\d+\s+\d+\s*/\s*\d+"
    r"|\d+(?:\.\d+)?\s*(?:-|to|or)\s*\d+(?:\.\d+)?"
    r"|\d+(?:\.\d+)?(?:\s*/\s*\d+)?"
)


def expand_unicode_fractions(text: str) -> str:
    out = text or ""
    for ch, repl in _UNICODE_FRACTIONS.items():
        if ch in out:
            out = out.replace(ch, repl)
    return out


def parse_quantity(text: str) -> float:
    """
    Parse the first quantity expression in ``text``.

    Fractions (with an optional whole part, "1 1/2") win over ranges
    ("2-4", "2 to 4", "2 or 4", averaged), which win over plain numbers.
    Returns 0.0 when nothing numeric is found.
    """
    s = expand_unicode_fractions(text).strip()
    if not s:
        return 0.0

    m = _RE_FRACTION.search(s)
    if m:
        denominator = float(m.group(3))
        if denominator == 0:
            return 0.0
        whole = float(m.group(1)) if m.group(1) else 0.0
        return whole + float(m.group(2)) / denominator

    m = _RE_RANGE.search(s)
    if m:
        return (float(m.group(1)) + float(m.group(2))) / 2.0

    m = _RE_DECIMAL.search(s)
    return float(m.group(1)) if m else 0.0
