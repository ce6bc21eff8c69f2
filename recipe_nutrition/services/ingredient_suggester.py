# recipe_nutrition/services/ingredient_suggester.py
from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from recipe_nutrition.services.canonicalizer import strip_modifiers

log = logging.getLogger("services.ingredient_suggester")


class IngredientSuggester:
    """
    "Did you mean" hints for ingredient names with no canonical match.

    Char n-gram TF-IDF over the reference keys, so misspellings
    ("brocoli", "parmezan") still land near the right key. Suggestions are
    informational only and never feed the estimate.
    """

    def __init__(self, keys: Iterable[str], min_score: float = 0.3) -> None:
        self.keys: List[str] = list(keys)
        self.min_score = min_score
        self._tfidf = TfidfVectorizer(analyzer="char_wb", ngram_range=(2, 4), min_df=1)
        self._X = self._tfidf.fit_transform(self.keys) if self.keys else None

    def suggest(self, name: str, top_k: int = 3) -> List[str]:
        q_norm = strip_modifiers(name)
        if not q_norm or self._X is None:
            return []
        q = self._tfidf.transform([q_norm])
        sims = (self._X @ q.T).toarray().ravel()  # rows are l2-normalized
        idxs = np.argsort(-sims)[:top_k]
        out = [self.keys[int(i)] for i in idxs if sims[int(i)] >= self.min_score]
        log.debug("Suggestions for %r: %s", name, out)
        return out
