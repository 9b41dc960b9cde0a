"""
optgroup faults (errors, interrupts and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the parser
  can surface. Codes are grouped by domain so logs and searches stay predictable.
- ParserException: base type carrying a message plus read-only options
  (code, token, candidates, hint, colorful, ...). It renders itself through rich.
- ParserWarning: base type for soft notices emitted through the warnings module.

Taxonomy
- input errors (policy-gated, recoverable by design)
  • InvalidParameterError, AmbiguousParameterError, NotArgumentError
- configuration errors (programming mistakes, always raised)
  • ShortCollisionError, UnknownTypeError
- value errors (user text that cannot become a value, always raised)
  • UncastableValueError, MissingValueError
- interrupts (the `raise` policy applied to informational events)
  • HelpRequested, VersionRequested
- control flow
  • StopParsing: internal, ends the scan loop without being an error.
"""
from enum import IntEnum
from types import MappingProxyType

from rich.text import Text

from .utils import Unset, UnsetType

HINT = "Run with '--help' to get help."


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - input (201xx): INVALID_PARAMETER, AMBIGUOUS_PARAMETER, NOT_ARGUMENT
    - configuration (202xx): SHORT_COLLISION, UNKNOWN_TYPE
    - values (203xx): UNCASTABLE_VALUE, MISSING_VALUE
    - interrupts (204xx): HELP_REQUESTED, VERSION_REQUESTED
    - warnings (205xx): REDEFINED_OPTION
    """
    # --- input errors ---
    INVALID_PARAMETER   = 20101
    AMBIGUOUS_PARAMETER = 20102
    NOT_ARGUMENT        = 20103

    # --- configuration errors ---
    SHORT_COLLISION     = 20201
    UNKNOWN_TYPE        = 20202

    # --- value errors ---
    UNCASTABLE_VALUE    = 20301
    MISSING_VALUE       = 20302

    # --- interrupts ---
    HELP_REQUESTED      = 20401
    VERSION_REQUESTED   = 20402

    # --- warnings ---
    REDEFINED_OPTION    = 20501


class ParserException(Exception):
    """
    base fault: a message plus a read-only mapping of context options.

    str(fault) is the plain message, so a fault surfaced by the `raise`
    policy reads the same as the text printed by the `exit` policy.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        colorful = self.options.get("colorful", False)
        message = Text(str(self), style="bold red" if colorful else "")
        hint = self.options.get("hint")
        if not hint:
            return message
        return Text.assemble(message, "\n\n", Text(hint, style="italic cyan" if colorful else ""))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidParameterError(ParserException): ...
class AmbiguousParameterError(ParserException): ...
class NotArgumentError(ParserException): ...


class ConfigurationError(ParserException): ...
class ShortCollisionError(ConfigurationError): ...
class UnknownTypeError(ConfigurationError): ...


class ValueFault(ParserException): ...
class UncastableValueError(ValueFault): ...
class MissingValueError(ValueFault): ...


class ParserInterrupt(ParserException): ...
class HelpRequested(ParserInterrupt): ...
class VersionRequested(ParserInterrupt): ...


class StopParsing(Exception):
    """
    raised by the `stop` policy and by OptionGrouper.stop(); caught by the scanner.
    """


class ParserWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return "" if self.message is Unset else self.message


class RedefinedOptionWarning(ParserWarning): ...


def invalid_parameter(token, /):
    return InvalidParameterError(
        "Unknown argument '%s'." % token,
        code=FaultCode.INVALID_PARAMETER,
        token=token,
        hint=HINT,
    )


def ambiguous_parameter(token, candidates, /):
    candidates = tuple(candidates)
    return AmbiguousParameterError(
        "Ambiguous parameter '%s'.\nCandidates:\n%s" % (token, "\n".join("  --%s" % c for c in candidates)),
        code=FaultCode.AMBIGUOUS_PARAMETER,
        token=token,
        candidates=candidates,
        hint=HINT,
    )


def not_argument(token, /):
    return NotArgumentError(
        "'%s' is not an argument." % token,
        code=FaultCode.NOT_ARGUMENT,
        token=token,
        hint=HINT,
    )


__all__ = (
    "FaultCode",
    "ParserException",
    "InvalidParameterError",
    "AmbiguousParameterError",
    "NotArgumentError",
    "ConfigurationError",
    "ShortCollisionError",
    "UnknownTypeError",
    "ValueFault",
    "UncastableValueError",
    "MissingValueError",
    "ParserInterrupt",
    "HelpRequested",
    "VersionRequested",
    "StopParsing",
    "ParserWarning",
    "RedefinedOptionWarning",
)
