# recipe_nutrition/application/cooking_time.py
from __future__ import annotations

import re
from typing import Optional

from recipe_nutrition.application.ingredient_sources import Instructions

_RE_SUMMARY = re.compile(r"\b(?:prep|cook|ready\s*in)\s*:\s*\d{1,3}\s*(?:minutes?|mins?|hours?|hrs?)\b", re.IGNORECASE)
_RE_EACH_SIDE_RANGE = re.compile(
    r"(\d{1,3})\s*(?:-|to|or)\s*(\d{1,3})\s*(?:minutes?|mins?)\s*(?:each\s*side|per\s*side)", re.IGNORECASE
)
_RE_EACH_SIDE = re.compile(r"(\d{1,3})\s*(?:minutes?|mins?)\s*(?:each\s*side|per\s*side)", re.IGNORECASE)
_RE_RANGE = re.compile(r"(\d{1,3})\s*(?:-|to|or)\s*(\d{1,3})\s*(minutes?|mins?|hours?|hrs?)\b", re.IGNORECASE)
_RE_SINGLE = re.compile(r"(\d{1,3})\s*(hours?|hrs?|minutes?|mins?)\b", re.IGNORECASE)
_RE_A_MINUTE = re.compile(r"\ba\s+minute\b", re.IGNORECASE)
_RE_COUPLE = re.compile(r"\bcouple of minutes?\b", re.IGNORECASE)


def _is_hours(unit: str) -> bool:
    u = unit.lower()
    return u.startswith("hour") or u.startswith("hr")


def estimate_cooking_time_minutes(instructions: Instructions) -> Optional[int]:
    """
    Rough total cooking time from instruction text.

    "3-4 minutes each side" counts both sides, ranges are averaged, hours
    become minutes and every remaining duration is summed. Returns None when
    no duration is found, which callers must treat as unknown, not zero.
    """
    if instructions is None:
        return None
    if isinstance(instructions, str):
        text = instructions
    else:
        text = " ".join(str(s) for s in instructions if s)
    if not text.strip():
        return None

    text = re.sub(r"[–—]", "-", text)
    text = _RE_SUMMARY.sub("", text)

    total = 0.0

    def _each_side_range(m: re.Match) -> str:
        nonlocal total
        total += (int(m.group(1)) + int(m.group(2))) / 2.0 * 2
        return " "

    def _each_side(m: re.Match) -> str:
        nonlocal total
        total += int(m.group(1)) * 2
        return " "

    text = _RE_EACH_SIDE_RANGE.sub(_each_side_range, text)
    text = _RE_EACH_SIDE.sub(_each_side, text)

    for m in _RE_RANGE.finditer(text):
        avg = (int(m.group(1)) + int(m.group(2))) / 2.0
        total += avg * 60 if _is_hours(m.group(3)) else avg
    text = _RE_RANGE.sub("", text)

    for m in _RE_SINGLE.finditer(text):
        val = int(m.group(1))
        total += val * 60 if _is_hours(m.group(2)) else val

    if _RE_A_MINUTE.search(text):
        total += 1
    if _RE_COUPLE.search(text):
        total += 2

    if total <= 0:
        return None
    return int(total + 0.5)
