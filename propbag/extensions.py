"""Shortcuts that build the key from a name and a type on the fly."""
from typing import Any, Optional, Tuple, Type

from propbag._types import T
from propbag.core.bag import PropertyBag
from propbag.key import PropertyBagKey


def set_value(
    bag: PropertyBag,
    value: Any,
    name: str,
    value_type: Optional[Any] = None,
) -> PropertyBag:
    """
    Set a value under ``PropertyBagKey(value_type, name)``.

    When value_type is omitted the runtime type of value is used, so
    ``set_value(bag, 30, "age")`` is the same as
    ``bag.set(PropertyBagKey(int, "age"), 30)``.

    Raises:
        TypeError: If value is None and no value_type is given.
    """
    if value_type is None:
        if value is None:
            raise TypeError("value_type is required when value is None")
        value_type = type(value)
    return bag.set(PropertyBagKey(value_type, name), value)


def try_get_value(
    bag: PropertyBag, value_type: Type[T], name: str
) -> Tuple[bool, Optional[T]]:
    """Look up ``PropertyBagKey(value_type, name)`` in the bag."""
    return bag.try_get(PropertyBagKey(value_type, name))
