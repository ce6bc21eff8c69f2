# recipe_nutrition/domain/repositories.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """
    Persistence used by the estimation cache.
    Values must be JSON-serializable; implementations only need
    read-your-writes consistency within one process.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        ...

    def remove(self, key: str) -> bool:
        return self.set(key, None)
