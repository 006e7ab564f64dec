from typing import Any, Tuple

from propbag.key import PropertyBagKey, T

# Lookup is a convenient alias for the internal lookup result:
# a tuple of (found flag, value or None)
Lookup = Tuple[bool, Any]

ErasedKey = PropertyBagKey[Any]

__all__ = ["T", "Lookup", "ErasedKey"]
