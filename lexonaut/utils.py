"""
Lexonaut utilities shared by the tokenizer, the parser and the cursor.

Contents
- Unset: sentinel for an argument that was not passed at all, so that None
  stays available as an ordinary value.
- coalesce(value, default): swap Unset for a default, keep everything else.
- rename(callable, name) / @rename(name): give generated matchers a readable
  __name__ for tracebacks and rich output.
- freeze(container) / view(name): hand out internal containers as tuples,
  frozensets and mapping proxies.
- represent(self): a __repr__ built from __rich_repr__.

Only the names in __all__ are meant for use outside the package.

    >>> coalesce(Unset, "=")
    '='
    >>> coalesce(None, "=") is None
    True
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Type of the Unset sentinel.

    There is one instance per process, it is falsy, prints as "Unset", and
    the type refuses subclasses.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return UnsetType, ()

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' cannot be subclassed")


def coalesce(object, default=None, /):
    """
    Return `default` when `object` is Unset, otherwise `object` itself
    (None, 0 and empty containers included).
    """
    return default if object is Unset else object


def rename(*parameters):
    """
    Rename a callable in place, or build a decorator that does.

        rename(function, "match_flag")   -> function
        @rename("match_flag")            -> decorator
    """
    if len(parameters) == 1:
        name, = parameters
        if not isinstance(name, str):
            raise TypeError("@rename() argument must be a string")
        return functools.partial(_rename, name=name)
    if len(parameters) == 2:
        callable, name = parameters
        return _rename(callable, name=name)
    raise TypeError("rename() takes 1 or 2 arguments (%d given)" % len(parameters))


def _rename(callable, /, name):
    if not builtins.callable(callable):
        raise TypeError("rename() target must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() name must be a string")
    try:
        callable.__name__ = callable.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() target does not accept a new name") from None
    return callable


def freeze(object, /):
    """
    Shallow read-only copy of a container (str and non-containers pass through).
    """
    match object:
        case str():
            return object
        case Sequence():
            return tuple(object)
        case Mapping():
            return MappingProxyType(dict(object))
        case Set():
            return frozenset(object)
    return object


def view(name, /):
    """
    Read-only property returning freeze(self._<name>).
    """
    if not isinstance(name, str):
        raise TypeError("view() argument must be a string")
    attribute = "_" + name

    def getter(self):
        return freeze(getattr(self, attribute))

    return property(rename(getter, name))


def represent(self, /):
    """
    "Typename(field=value, ...)" built from __rich_repr__ pairs.
    """
    return "%s(%s)" % (
        type(self).__name__,
        ", ".join("%s=%r" % pair[:2] for pair in self.__rich_repr__())
    )


Unset = UnsetType()


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "freeze",
    "view",
    "represent",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
