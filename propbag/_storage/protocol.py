from typing import (
    Any,
    Dict,
    Iterator,
    Mapping,
    Protocol,
    runtime_checkable,
)

from propbag._types import ErasedKey, Lookup

@runtime_checkable
class StorageProtocol(Protocol):
    """Minimal protocol describing the storage interface expected by PropertyBag.

    Only the methods and members that `propbag.core.bag.PropertyBag` uses are
    specified here so the protocol stays small and permissive. `get` reports
    presence separately from the value because ``None`` is a legal value.
    """

    def set(self, key: ErasedKey, value: Any) -> None:  # pragma: no cover - interface
        ...

    def get(self, key: ErasedKey) -> Lookup:  # pragma: no cover - interface
        ...

    def delete(self, key: ErasedKey) -> None:  # pragma: no cover - interface
        ...

    def to_dict(self) -> Dict[ErasedKey, Any]:  # pragma: no cover - interface
        ...

    def update(
        self, data: Mapping[ErasedKey, Any]
    ) -> None:  # pragma: no cover - interface
        ...

    def keys(self) -> Iterator[ErasedKey]:  # pragma: no cover - interface
        ...

    def __len__(self) -> int:  # pragma: no cover - interface
        ...

    def __contains__(self, key: object) -> bool:  # pragma: no cover - interface
        ...
