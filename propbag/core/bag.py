import logging
from typing import (
    Any,
    Dict,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    cast,
)

from propbag._storage import StorageProtocol
from propbag._types import ErasedKey, Lookup, T
from propbag.core.cloneable import Cloneable
from propbag.core.scope import PropertyBagScope
from propbag.core.utils import (
    StorageFactory,
    _make_default_store,
    _validate_key,
    _validate_log_level,
    matches_type,
)
from propbag.exceptions import KeyNotFoundError
from propbag.key import PropertyBagKey

logger = logging.getLogger(__name__)


class PropertyBag(Mapping[ErasedKey, Any], Cloneable):
    """
    Heterogeneous container of named, typed values.

    Entries are addressed by `PropertyBagKey` instances, i.e. by the pair of a
    value type and a name. The backing store is only created on the first
    `set`, so empty bags are cheap to create and to clone.

    The bag is also a read-only `Mapping` from erased keys to values, which
    lets generic mapping code inspect it. Mutation only goes through `set`,
    `remove` and `scope`.

    Examples:
        >>> age = PropertyBagKey(int, "age")
        >>> bag = PropertyBag().set(age, 30)
        >>> bag.try_get(age)
        (True, 30)
        >>> with bag.scope(age, 31):
        ...     bag.get_value(age)
        31
        >>> bag.get_value(age)
        30
    """

    def __init__(
        self,
        *,
        storage_factory: Optional[StorageFactory] = None,
        log_level: Optional[int] = None,
    ) -> None:
        """
        Initialize an empty PropertyBag.

        Args:
            storage_factory: Callable returning a storage backend implementing
                StorageProtocol. It is called once, on the first `set`.
                Defaults to an in-memory dict store.
            log_level: Logging level for the bag logger. Left unchanged if None.

        Raises:
            ValueError: If log_level is not a valid logging level.
        """
        if log_level is not None:
            _validate_log_level(log_level)
            logger.setLevel(log_level)

        self._storage_factory: StorageFactory = (
            storage_factory if storage_factory is not None else _make_default_store
        )
        self._store: Optional[StorageProtocol] = None

    @property
    def _items(self) -> StorageProtocol:
        if self._store is None:
            store = self._storage_factory()
            if not isinstance(store, StorageProtocol):
                raise TypeError(
                    f"storage_factory must return a StorageProtocol, got {type(store)}"
                )
            self._store = store
        return self._store

    def set(self, key: PropertyBagKey[T], value: Optional[T]) -> "PropertyBag":
        """
        Store a value under the given key, replacing any existing value.

        ``None`` is stored as a value and is reported as present by `try_get`.

        Returns:
            The bag itself, so calls can be chained.

        Raises:
            TypeError: If key is not a PropertyBagKey.
        """
        _validate_key(key)
        self._items.set(key.erase(), value)
        logger.debug("Set %s -> %s", key, type(value))
        return self

    def try_get(self, key: PropertyBagKey[T]) -> Tuple[bool, Optional[T]]:
        """
        Look up the value stored under the given key.

        Returns:
            ``(True, value)`` when the key is present and the value matches the
            key's type (a stored ``None`` always matches), else ``(False, None)``.

        Raises:
            TypeError: If key is not a PropertyBagKey.
        """
        _validate_key(key)
        found, value = self._lookup(key.erase())
        if not found:
            return False, None
        if value is not None and not matches_type(value, key.type):
            logger.debug("Type mismatch for %s: stored %s", key, type(value))
            return False, None
        return True, cast(Optional[T], value)

    def get_value(
        self, key: PropertyBagKey[T], default: Optional[T] = None
    ) -> Optional[T]:
        """
        Get the typed value for the given key, or return default if not found.

        Unlike the mapping ``get``, a value that does not match the key type
        counts as not found.
        """
        found, value = self.try_get(key)
        return value if found else default

    def remove(self, key: ErasedKey) -> "PropertyBag":
        """
        Remove the entry for the given key. Removing a missing key does nothing.

        Returns:
            The bag itself, so calls can be chained.
        """
        _validate_key(key)
        if self._store is not None:
            self._store.delete(key.erase())
            logger.debug("Removed %s", key)
        return self

    def scope(self, key: PropertyBagKey[T], value: Optional[T]) -> PropertyBagScope:
        """
        Temporarily set a value, restoring the previous state on release.

        The returned scope is a context manager. When it is released, the value
        that was stored before the call is put back, or the key is removed if
        it was not present.

        Usage:
            with bag.scope(culture, "fr-FR"):
                render(bag)
        """
        _validate_key(key)
        erased = key.erase()
        previous = self._lookup(erased)
        self.set(erased, value)
        logger.debug("Opened scope for %s (had value: %s)", erased, previous[0])
        return PropertyBagScope(self, erased, previous)

    def clone(self) -> "PropertyBag":
        """
        Create an independent copy of the bag.

        Values that implement `Cloneable` are duplicated through their
        ``clone()`` method, every other value is shared with the source.
        """
        new_bag = type(self)(storage_factory=self._storage_factory)

        store = self._store
        if store is None or len(store) == 0:
            return new_bag

        items = {
            k: (v.clone() if isinstance(v, Cloneable) else v)
            for k, v in store.to_dict().items()
        }
        new_bag._items.update(items)
        logger.debug("Cloned bag with %d entries", len(items))
        return new_bag

    def snapshot(self) -> Dict[ErasedKey, Any]:
        """
        Get a shallow copy of the current entries as a dictionary.
        """
        if self._store is None:
            return {}
        return self._store.to_dict()

    def _lookup(self, key: ErasedKey) -> Lookup:
        if self._store is None:
            return False, None
        return self._store.get(key)

    def __getitem__(self, key: ErasedKey) -> Any:
        # other objects are never keys of the bag
        if not isinstance(key, PropertyBagKey):
            raise KeyNotFoundError(key)
        found, value = self._lookup(key.erase())
        if not found:
            raise KeyNotFoundError(key)
        return value

    def __iter__(self) -> Iterator[ErasedKey]:
        if self._store is None:
            return iter(())
        return iter(list(self._store.keys()))

    def __len__(self) -> int:
        return 0 if self._store is None else len(self._store)

    def __contains__(self, key: object) -> bool:
        if self._store is None or not isinstance(key, PropertyBagKey):
            return False
        return key.erase() in self._store

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({[str(k) for k in self]!r})"

    def __getstate__(self) -> Dict[str, Any]:
        return {"_store": self.snapshot()}

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._storage_factory = _make_default_store
        self._store = None
        items = state.get("_store", {})
        if items:
            self._items.update(items)
