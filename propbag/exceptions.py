class PropertyBagError(Exception):
    """Base class for errors raised by propbag."""


class KeyNotFoundError(PropertyBagError, KeyError):
    """Raised by the read-only mapping view when a key is not present."""
