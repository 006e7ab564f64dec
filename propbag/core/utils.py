import types
from typing import Any, Callable, Literal, Union, get_args, get_origin

from propbag._storage import MemoryStorage, StorageProtocol
from propbag.key import PropertyBagKey

StorageFactory = Callable[[], StorageProtocol]


def _make_default_store() -> StorageProtocol:
    """Create the default dict-backed storage."""
    return MemoryStorage()


def _validate_log_level(log_level: int) -> None:
    if not (50 >= log_level >= 0):
        raise ValueError("log_level must be a valid logging level between 0 and 50")


def _validate_key(key: Any) -> None:
    if not isinstance(key, PropertyBagKey):
        raise TypeError(f"PropertyBag key must be a PropertyBagKey, got {type(key)}")


def matches_type(value: Any, expected: Any) -> bool:
    """Check a stored value against a key's type descriptor.

    Plain classes use ``isinstance``. Unions match if any member matches,
    ``Literal`` compares values and parameterized generics such as
    ``list[int]`` only check the origin class. ``Any`` and descriptors that
    cannot be checked at runtime (a ``TypeVar`` for instance) accept anything.
    """
    if expected is Any or expected is object:
        return True

    origin = get_origin(expected)
    if origin is Union or origin is types.UnionType:
        return any(matches_type(value, arg) for arg in get_args(expected))
    if origin is Literal:
        return value in get_args(expected)
    if origin is not None:
        expected = origin

    if isinstance(expected, type):
        return isinstance(value, expected)
    return True
