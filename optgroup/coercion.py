"""
Value coercion: raw command-line text → typed values.

A value tag is one of
- a Kind member (Kind.INTEGER) or its name ("integer", case-insensitive),
- a (kind, label) tuple, where the label is shown on help pages (<INT>),
- a callable taking the raw string and returning the value; its exceptions
  propagate unchanged.

Kinds map to converters through an explicit table; anything else is an
UnknownTypeError (a configuration error, never gated by a policy).
"""
import functools
from enum import Enum
from fractions import Fraction

from .faults import FaultCode, UncastableValueError, UnknownTypeError


class Kind(Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    RATIONAL = "rational"


_CONVERTERS = {
    Kind.STRING: str,
    # base 0 accepts the 0x/0o/0b prefixes and '_' separators
    Kind.INTEGER: functools.partial(int, base=0),
    Kind.FLOAT: float,
    Kind.COMPLEX: complex,
    Kind.RATIONAL: Fraction,
}


def _kind(tag):
    if isinstance(tag, Kind):
        return tag
    if isinstance(tag, str):
        try:
            return Kind(tag.lower())
        except ValueError:
            pass
    raise UnknownTypeError(
        "Unknown type %r specified." % (tag,),
        code=FaultCode.UNKNOWN_TYPE,
        tag=tag,
    )


def converter(tag, /):
    """
    resolve a value tag into its converter callable.

    raises
    - UnknownTypeError when the tag is neither a known kind nor callable.
    """
    if isinstance(tag, tuple):
        tag = tag[0]
    if not isinstance(tag, Kind | str) and callable(tag):
        return tag
    return _CONVERTERS[_kind(tag)]


def label(tag, /):
    """
    help-page label of a value tag: Kind.INTEGER → 'INTEGER', (kind, 'INT') → 'INT',
    callable → 'PARAM'.
    """
    if isinstance(tag, tuple):
        return tag[1]
    if not isinstance(tag, Kind | str) and callable(tag):
        return "PARAM"
    return _kind(tag).value.upper()


def coerce(raw, tag, /, *, token=None):
    """
    convert one raw string according to `tag`.

    parameters
    - raw: str
      text taken from an inline value or from the following token.
    - tag: value tag (see module docstring).
    - token: str | None
      the command-line token that requested the value, kept on the fault.

    raises
    - UnknownTypeError for an unrecognized tag.
    - UncastableValueError when a kind converter rejects the text (ValueError,
      TypeError or ArithmeticError); the original error is chained.
    - whatever a callable tag raises, as is.
    """
    convert = converter(tag)
    if convert is (tag[0] if isinstance(tag, tuple) else tag):
        return convert(raw)
    try:
        return convert(raw)
    except (ValueError, TypeError, ArithmeticError) as error:
        raise UncastableValueError(
            "Invalid value '%s' for '%s' (expected %s)." % (raw, token, label(tag)),
            code=FaultCode.UNCASTABLE_VALUE,
            token=token,
            value=raw,
            tag=tag,
        ) from error


__all__ = (
    "Kind",
    "converter",
    "label",
    "coerce",
)
