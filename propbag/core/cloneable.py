from abc import ABC, abstractmethod
from typing import Any


class Cloneable(ABC):
    """Values that can produce an independent copy of themselves.

    The capability is opt-in: subclass `Cloneable` or register a class with
    ``Cloneable.register(...)``. `PropertyBag.clone` stores the result of
    ``clone()`` for such values and shares every other value by reference,
    even when it happens to have an unrelated ``clone`` attribute.
    """

    @abstractmethod
    def clone(self) -> Any:
        pass
