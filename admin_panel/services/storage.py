from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class KeyValueStorage(ABC):
    """
    Abstract interface for the opaque local key-value store (browser local storage, memory, etc.).
    Values must be JSON-serialisable.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass

    def __contains__(self, key: str) -> bool:
        return key in self.keys()


class InMemoryStorage(KeyValueStorage):
    """
    Dict-backed storage.

    In the Dash app it is seeded from a `dcc.Store(storage_type="local")`
    payload at the start of a callback and `snapshot()` is written back at
    the end, so the browser owns the data between requests.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(dict(initial or {}))

    def get(self, key: str, default: Any = None) -> Any:
        return copy.deepcopy(self._data.get(key, default))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)
