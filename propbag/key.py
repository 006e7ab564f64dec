from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PropertyBagKey(Generic[T]):
    """
    Immutable identifier for a value stored in a property bag.

    A key is the pair of a runtime type descriptor and a name. Two keys are
    equal only when both parts are equal, so ``PropertyBagKey(int, "age")``
    and ``PropertyBagKey(str, "age")`` address different entries.

    The class is generic so ``PropertyBagKey[int]`` can be used in annotations
    to tie a key to the type of its value.

    Examples:
        >>> age = PropertyBagKey(int, "age")
        >>> age == PropertyBagKey(int, "age")
        True
        >>> age == PropertyBagKey(str, "age")
        False
    """

    type: Any
    name: str

    def erase(self) -> "PropertyBagKey[Any]":
        """Return the untyped form of this key, keeping type and name."""
        return PropertyBagKey(self.type, self.name)

    def __str__(self) -> str:
        type_name = getattr(self.type, "__qualname__", None) or repr(self.type)
        return f"{type_name}:{self.name}"
