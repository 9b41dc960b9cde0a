"""
optgroup utilities (internal helpers).

Overview
- UnsetType / Unset
  • Singleton sentinel for “value not provided”, distinct from None.
  • Falsey, printable as "Unset", non-subclassable.
- coalesce(value, default=None)
  • Replace Unset with a concrete default; None and other falsey values are kept.
- hyphenate(name)
  • Derive a command-line spelling from a declaration name (underscores → hyphens).
- freeze(object)
  • Shallow read-only view of a container (used for index snapshots).
"""
import functools
from collections.abc import Mapping, Sequence, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Used where None is a legitimate user value (an option default, a "set"
    value) but the API still has to tell “not provided” apart.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    return `default` when `object` is Unset; otherwise `object` unchanged.

    examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return default if object is Unset else object


def hyphenate(name, /):
    """
    command-line spelling of a declaration name: 'foo_bar' -> 'foo-bar'.
    """
    if not isinstance(name, str):
        raise TypeError("hyphenate() argument must be a string")
    return name.replace("_", "-")


def freeze(object, /):
    """
    shallow read-only view of a container.

    - Mapping            → MappingProxyType
    - Sequence (non-str) → tuple
    - Set                → frozenset
    - anything else      → returned as-is
    """
    if isinstance(object, Mapping):
        return MappingProxyType(object)
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    if isinstance(object, Set):
        return frozenset(object)
    return object


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "hyphenate",
    "freeze",
)
