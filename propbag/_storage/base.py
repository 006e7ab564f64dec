from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Mapping

from propbag._types import ErasedKey, Lookup

class AbstractStorage(ABC):
    """Abstract base class for storage implementations."""

    @abstractmethod
    def set(self, key: ErasedKey, value: Any) -> None:
        pass

    @abstractmethod
    def get(self, key: ErasedKey) -> Lookup:
        pass

    @abstractmethod
    def delete(self, key: ErasedKey) -> None:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[ErasedKey, Any]:
        pass

    @abstractmethod
    def update(self, data: Mapping[ErasedKey, Any]) -> None:
        pass

    @abstractmethod
    def keys(self) -> Iterator[ErasedKey]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        pass
