import logging
from types import TracebackType
from typing import TYPE_CHECKING, Optional, Type

from propbag._types import ErasedKey, Lookup

if TYPE_CHECKING:
    from propbag.core.bag import PropertyBag

logger = logging.getLogger(__name__)


class PropertyBagScope:
    """
    Handle for a temporary value set through `PropertyBag.scope`.

    On release the scope puts back the value the key held when the scope was
    opened, or removes the key if it had none. Release happens once; later
    calls do nothing. The scope does not own the bag.

    Scopes on the same key must be released in reverse order of opening, as
    `with` blocks do. Releasing an outer scope before an inner one leaves the
    inner scope to put the outer scope's value back, and it stays after both
    are released.

    Usage:
        with bag.scope(key, value) as scope:
            ...
        # or
        scope = bag.scope(key, value)
        try:
            ...
        finally:
            scope.release()
    """

    def __init__(
        self,
        bag: "PropertyBag",
        key: ErasedKey,
        previous: Lookup = (False, None),
    ) -> None:
        self._bag = bag
        self._key = key
        self._previous = previous
        self._released = False

    @property
    def bag(self) -> "PropertyBag":
        return self._bag

    @property
    def key(self) -> ErasedKey:
        return self._key

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True

        had_value, value = self._previous
        if had_value:
            self._bag.set(self._key, value)
            logger.debug("Released scope for %s, restored previous value", self._key)
        else:
            self._bag.remove(self._key)
            logger.debug("Released scope for %s, removed value", self._key)

    close = release

    def __enter__(self) -> "PropertyBagScope":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"{self.__class__.__name__}({str(self._key)!r}, {state})"
