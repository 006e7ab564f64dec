"""Factories for creating property bags.

Code that needs a bag without caring about the implementation calls
`create()`. An application can swap the implementation once at startup with
`set_default_factory`. The default factory is process-wide state and is not
meant to be reassigned while other threads create bags.
"""
import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from propbag.core.bag import PropertyBag
from propbag.core.utils import StorageFactory

logger = logging.getLogger(__name__)


class PropertyBagFactory(ABC):
    """Abstract factory for PropertyBag instances."""

    @abstractmethod
    def create(self) -> PropertyBag:
        pass


class DefaultPropertyBagFactory(PropertyBagFactory):
    """Creates plain `PropertyBag` instances.

    Arguments:
        storage_factory: Optional storage factory passed to every created bag.
    """

    singleton: ClassVar[PropertyBagFactory]

    def __init__(self, *, storage_factory: Optional[StorageFactory] = None) -> None:
        self._storage_factory = storage_factory

    def create(self) -> PropertyBag:
        return PropertyBag(storage_factory=self._storage_factory)


DefaultPropertyBagFactory.singleton = DefaultPropertyBagFactory()

_default_factory: Optional[PropertyBagFactory] = None


def get_default_factory() -> PropertyBagFactory:
    """Return the configured default factory, or the built-in singleton."""
    if _default_factory is None:
        return DefaultPropertyBagFactory.singleton
    return _default_factory


def set_default_factory(factory: Optional[PropertyBagFactory]) -> None:
    """
    Replace the process-wide default factory. Passing None restores the
    built-in `DefaultPropertyBagFactory.singleton`.

    Raises:
        TypeError: If factory is not a PropertyBagFactory or None.
    """
    global _default_factory
    if factory is not None and not isinstance(factory, PropertyBagFactory):
        raise TypeError(
            f"factory must be a PropertyBagFactory or None, got {type(factory)}"
        )
    _default_factory = factory
    logger.debug("Default property bag factory set to %r", factory)


def create() -> PropertyBag:
    """Create a new bag using the default factory."""
    return get_default_factory().create()
