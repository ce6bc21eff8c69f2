# recipe_nutrition/services/canonicalizer.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from recipe_nutrition.domain.entities import NutritionFact
from recipe_nutrition.domain.nutrition_tables import NUTRITION_100G

log = logging.getLogger("services.canonicalizer")


@dataclass(frozen=True)
class NormalizationRule:
    pattern: re.Pattern
    replacement: str
    kind: str  # "compound" | "plural" | "cut"

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(pattern: str, replacement: str, kind: str) -> NormalizationRule:
    return NormalizationRule(re.compile(pattern, re.IGNORECASE), replacement, kind)


# Descriptive/state words removed before matching. "extra large" before
# "extra" and "large".
MODIFIERS: Tuple[str, ...] = (
    "boneless", "skinless", "skin", "breasts?", "thighs?", "legs?", "fillets?",
    "pieces", "chunks", "strips", "meat", "fresh", "raw", "cooked", "ground",
    "minced", "sliced", "diced", "chopped", "whole", "extra large", "large",
    "small", "medium", "extra", "peeled", "unpeeled", "deveined", "trimmed",
    "canned", "frozen", "dried",
)
_RE_MODIFIERS = re.compile(
    r"\b(?:" + "|".join(m.replace(" ", r"\s+") for m in MODIFIERS) + r")\b",
    re.IGNORECASE,
)
_RE_SPACES = re.compile(r"\s+")

# Applied in order: compounds first so plural rules never split them.
NORMALIZATION_RULES: Tuple[NormalizationRule, ...] = (
    # Multi-word ingredients
    _rule(r"\bolive\s+oils?\b", "olive oil", "compound"),
    _rule(r"\bvegetable\s+oils?\b", "vegetable oil", "compound"),
    _rule(r"\bcoconut\s+oils?\b", "coconut oil", "compound"),
    _rule(r"\bsesame\s+oils?\b", "sesame oil", "compound"),
    _rule(r"\bcr[eè]me\s+fra[iî]che\b", "creme fraiche", "compound"),
    _rule(r"\bsour\s+creams?\b", "sour cream", "compound"),
    _rule(r"\b(?:heavy|double|whipping)\s+creams?\b", "heavy cream", "compound"),
    _rule(r"\bcream\s+cheeses?\b", "cream cheese", "compound"),
    _rule(r"\bcheddar\s+cheeses?\b", "cheddar cheese", "compound"),
    _rule(r"\bgreek\s+yog(?:h)?urts?\b", "greek yogurt", "compound"),
    _rule(r"\bsweet\s+potato(?:es)?\b", "sweet potato", "compound"),
    _rule(r"\bbell\s+peppers?\b", "bell pepper", "compound"),
    _rule(r"\bgreen\s+beans?\b", "green beans", "compound"),
    _rule(r"\bblack\s+beans?\b", "black beans", "compound"),
    _rule(r"\bkidney\s+beans?\b", "kidney beans", "compound"),
    _rule(r"\bsoy(?:a)?\s+sauces?\b", "soy sauce", "compound"),
    _rule(r"\bfish\s+sauces?\b", "fish sauce", "compound"),
    _rule(r"\btomato\s+pur[eé]e\b", "tomato puree", "compound"),
    _rule(r"\bcurry\s+powder\b", "curry powder", "compound"),
    _rule(r"\bgaram\s+masala\b", "garam masala", "compound"),
    _rule(r"\bchil(?:l)?i\s+powder\b", "chili powder", "compound"),
    _rule(r"\bblack\s+pepper\b", "black pepper", "compound"),
    _rule(r"\bbalsamic\s+vinegar\b", "balsamic vinegar", "compound"),
    _rule(r"\bbrown\s+sugar\b", "brown sugar", "compound"),
    _rule(r"\bmaple\s+syrup\b", "maple syrup", "compound"),
    _rule(r"\bpeanut\s+butter\b", "peanut butter", "compound"),
    _rule(r"\bred\s+wine\b", "red wine", "compound"),
    _rule(r"\bwhite\s+wine\b", "white wine", "compound"),
    _rule(r"\bcoconut\s+milk\b", "coconut milk", "compound"),
    _rule(r"\bsoy(?:a)?\s+milk\b", "soy milk", "compound"),
    _rule(r"\balmond\s+milk\b", "almond milk", "compound"),
    _rule(r"\bpotato\s+starch\b", "potato starch", "compound"),
    _rule(r"\bsesame\s+seeds?\b", "sesame seeds", "compound"),
    _rule(r"\bsunflower\s+seeds?\b", "sunflower seeds", "compound"),
    _rule(r"\bchia\s+seeds?\b", "chia seeds", "compound"),

    # Plurals
    _rule(r"\bmushrooms\b", "mushroom", "plural"),
    _rule(r"\bpotatoes\b", "potato", "plural"),
    _rule(r"\btomatoes\b", "tomato", "plural"),
    _rule(r"\bonions\b", "onion", "plural"),
    _rule(r"\bcarrots\b", "carrot", "plural"),
    _rule(r"\beggs\b", "egg", "plural"),
    _rule(r"\bolives\b", "olive", "plural"),
    _rule(r"\bprawns\b", "prawn", "plural"),
    _rule(r"\bshrimps\b", "shrimp", "plural"),
    _rule(r"\balmonds\b", "almond", "plural"),
    _rule(r"\bwalnuts\b", "walnut", "plural"),
    _rule(r"\bpeanuts\b", "peanut", "plural"),
    _rule(r"\bcashews\b", "cashew", "plural"),
    _rule(r"\bapples\b", "apple", "plural"),
    _rule(r"\bbananas\b", "banana", "plural"),
    _rule(r"\boranges\b", "orange", "plural"),
    _rule(r"\blemons\b", "lemon", "plural"),
    _rule(r"\blimes\b", "lime", "plural"),
    _rule(r"\bavocados\b", "avocado", "plural"),
    _rule(r"\bstrawberries\b", "strawberry", "plural"),
    _rule(r"\bblueberries\b", "blueberry", "plural"),
    _rule(r"\bmango(?:e)?s\b", "mango", "plural"),
    _rule(r"\bcucumbers\b", "cucumber", "plural"),
    _rule(r"\bzucchinis\b", "zucchini", "plural"),
    _rule(r"\beggplants\b", "eggplant", "plural"),
    _rule(r"\bsausages\b", "sausage", "plural"),
    _rule(r"\bpeppers\b", "pepper", "plural"),
    _rule(r"\bchil(?:l)?ies\b", "chilli", "plural"),
    _rule(r"\bchili\b(?!\s+powder)", "chilli", "plural"),
    # The table stores these plural
    _rule(r"\bchickpeas?\b", "chickpeas", "plural"),
    _rule(r"\blentils?\b", "lentils", "plural"),
    _rule(r"\bbeans?\b", "beans", "plural"),
    _rule(r"\bnoodles?\b", "noodles", "plural"),

    # Meat cuts -> base protein
    _rule(r"\bchicken\s+(?:breasts?|thighs?|drumsticks?|wings?)\b", "chicken", "cut"),
    _rule(r"\bbeef\s+(?:steaks?|roast|chuck|sirloin|brisket|mince)\b", "beef", "cut"),
    _rule(r"\bpork\s+(?:chops?|loin|shoulder|ribs|belly)\b", "pork", "cut"),
    _rule(r"\blamb\s+(?:chops?|shoulder|shank|rack)\b", "lamb", "cut"),
)

_RE_STOCK = re.compile(r"\b(?:stock|broth|bouillon)\b")
_RE_PASTA = re.compile(r"\b(?:pasta|macaroni|penne|fusilli|linguine|fettuccine)\b")


def strip_modifiers(text: str) -> str:
    t = (text or "").lower()
    t = _RE_MODIFIERS.sub(" ", t)
    return _RE_SPACES.sub(" ", t).strip()


def normalize(text: str, rules: Iterable[NormalizationRule] = NORMALIZATION_RULES) -> str:
    """Lowercase, strip modifiers and apply ``rules`` in order."""
    t = strip_modifiers(text)
    for r in rules:
        t = r.apply(t)
    return _RE_SPACES.sub(" ", t).strip()


def _key_pattern(key: str) -> re.Pattern:
    return re.compile(r"\b" + r"\s+".join(re.escape(w) for w in key.split()) + r"\b")


class Canonicalizer:
    """
    Resolves free-text ingredient names to reference table keys.

    The first key, in table declaration order, whose word-boundary pattern
    matches the cleaned name or the cleaned original line wins; stock and
    pasta families are forced afterwards.
    """

    def __init__(
        self,
        table: Mapping[str, NutritionFact] = NUTRITION_100G,
        rules: Tuple[NormalizationRule, ...] = NORMALIZATION_RULES,
    ) -> None:
        self.table = table
        self.rules = rules
        self._patterns: List[Tuple[str, re.Pattern]] = [(k, _key_pattern(k)) for k in table]

    def normalize(self, text: str) -> str:
        return normalize(text, self.rules)

    def canonicalize(self, name: str, original_text: str = "") -> Optional[str]:
        name_clean = self.normalize(name)
        orig_clean = self.normalize(original_text) if original_text else ""

        key: Optional[str] = None
        for k, pattern in self._patterns:
            if pattern.search(name_clean) or (orig_clean and pattern.search(orig_clean)):
                key = k
                break

        source_text = orig_clean or name_clean
        if _RE_STOCK.search(source_text) or _RE_STOCK.search(name_clean):
            key = "stock" if "stock" in self.table else key
        if (_RE_PASTA.search(source_text) or _RE_PASTA.search(name_clean)) and key != "spaghetti":
            key = "pasta" if "pasta" in self.table else key

        if key is None:
            log.debug("No canonical match for %r (%r)", name, original_text)
        return key


_default = Canonicalizer()


def canonicalize(name: str, original_text: str = "") -> Optional[str]:
    return _default.canonicalize(name, original_text)
