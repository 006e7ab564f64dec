from typing import Any, Dict, Iterator, Mapping

from propbag._storage.base import AbstractStorage
from propbag._types import ErasedKey, Lookup

class MemoryStorage(AbstractStorage):
    """A simple in-memory storage implementation using a dictionary."""

    def __init__(self) -> None:
        self._store: Dict[ErasedKey, Any] = {}

    def set(self, key: ErasedKey, value: Any) -> None:
        self._store[key] = value

    def get(self, key: ErasedKey) -> Lookup:
        # a stored None is still a hit, so membership decides
        if key in self._store:
            return True, self._store[key]
        return False, None

    def delete(self, key: ErasedKey) -> None:
        self._store.pop(key, None)

    def to_dict(self) -> Dict[ErasedKey, Any]:
        return dict(self._store)

    def update(self, data: Mapping[ErasedKey, Any]) -> None:
        self._store.update(data)

    def keys(self) -> Iterator[ErasedKey]:
        return iter(self._store.keys())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
