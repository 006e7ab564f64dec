from propbag.core.bag import PropertyBag
from propbag.core.cloneable import Cloneable
from propbag.core.scope import PropertyBagScope
from propbag.key import PropertyBagKey

__all__ = ["PropertyBag", "PropertyBagKey", "PropertyBagScope", "Cloneable"]
