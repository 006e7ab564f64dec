"""propbag: typed, heterogeneous property bags.

This package exposes `PropertyBag`, a container that stores values under
keys made of a type and a name, together with scoped overrides that put the
previous value back when they end. It's intentionally small and dependency-free.
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path
from typing import Optional

from propbag.core import Cloneable, PropertyBag, PropertyBagKey, PropertyBagScope
from propbag._storage import MemoryStorage, StorageProtocol
from propbag.exceptions import KeyNotFoundError, PropertyBagError
from propbag.extensions import set_value, try_get_value
from propbag.factory import (
    DefaultPropertyBagFactory,
    PropertyBagFactory,
    create,
    get_default_factory,
    set_default_factory,
)


def _read_version_file() -> Optional[str]:
    try:
        return Path(__file__).with_name("VERSION").read_text(encoding="utf8").strip()
    except OSError:
        return None


def _get_version() -> str:
    # 1) Try to read installed distribution metadata
    try:
        return _pkg_version("propbag")
    except PackageNotFoundError:
        pass

    # 2) Try the VERSION file that setuptools_scm can write at build time
    v = _read_version_file()
    if v:
        return v

    # 3) Fall back to a safe default
    return "0.0.0"


__version__ = _get_version()


__all__ = [
    "PropertyBag",
    "PropertyBagKey",
    "PropertyBagScope",
    "Cloneable",
    "PropertyBagFactory",
    "DefaultPropertyBagFactory",
    "create",
    "get_default_factory",
    "set_default_factory",
    "set_value",
    "try_get_value",
    "MemoryStorage",
    "StorageProtocol",
    "PropertyBagError",
    "KeyNotFoundError",
    "__version__",
]
