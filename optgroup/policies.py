"""
Policies: the configured reaction to each class of parser event.

Events
- INVALID_PARAMETER, AMBIGUOUS_PARAMETER, NOT_ARGUMENT (error events)
- AFTER_HELP, AFTER_VERSION (informational events)

Actions
- EXIT: print (error events only) and terminate the process.
- CONTINUE: keep scanning; the offending token stays ignored.
- STOP: end the scan; the partial result is returned as-is.
- RAISE: surface the fault to the caller.
- CALLBACK: call the user function; scanning resumes unless it calls stop().

A Policy is a tagged value (action + optional callback). Policy.of() accepts
the spellings users tend to write: Policy, Action, "exit"/"stop"/..., or a
callable.
"""
import sys
from enum import Enum

from .faults import StopParsing


class Event(Enum):
    INVALID_PARAMETER = "invalid_parameter"
    AMBIGUOUS_PARAMETER = "ambiguous_parameter"
    NOT_ARGUMENT = "not_argument"
    AFTER_HELP = "help"
    AFTER_VERSION = "version"


class Action(Enum):
    EXIT = "exit"
    CONTINUE = "continue"
    STOP = "stop"
    RAISE = "raise"
    CALLBACK = "callback"


class Policy:
    __slots__ = ("action", "callback")

    def __init__(self, action, callback=None, /):
        if not isinstance(action, Action):
            raise TypeError("policy action must be an Action")
        if (action is Action.CALLBACK) != callable(callback):
            raise TypeError("only the callback action takes (and requires) a callable")
        self.action = action
        self.callback = callback

    @classmethod
    def of(cls, value, /):
        if isinstance(value, Policy):
            return value
        if isinstance(value, Action):
            if value is Action.CALLBACK:
                raise TypeError("the callback action requires a callable")
            return cls(value)
        if isinstance(value, str):
            try:
                action = Action(value.lower())
            except ValueError:
                raise ValueError("unknown policy %r" % value) from None
            return cls.of(action)
        if callable(value):
            return cls(Action.CALLBACK, value)
        raise TypeError("policy must be an Action, an action name or a callable, not %s" % type(value).__name__)

    def __eq__(self, other):
        if not isinstance(other, Policy):
            return NotImplemented
        return (self.action, self.callback) == (other.action, other.callback)

    def __hash__(self):
        return hash((self.action, self.callback))

    def __repr__(self):
        if self.callback is None:
            return "Policy(%s)" % self.action.name
        return "Policy(%s, %r)" % (self.action.name, self.callback)


EXIT = Policy(Action.EXIT)
CONTINUE = Policy(Action.CONTINUE)
STOP = Policy(Action.STOP)
RAISE = Policy(Action.RAISE)


def react(policy, fault, /, *, console):
    """
    apply `policy` to an error event.

    parameters
    - policy: Policy
    - fault: ParserException describing the event (message, token, hint, ...).
    - console: rich Console receiving the rendered fault under EXIT.

    behavior
    - EXIT: render the fault (message, blank line, hint) and sys.exit(1).
    - RAISE: raise the fault.
    - CONTINUE: return.
    - STOP: raise StopParsing (caught by the scanner).
    - CALLBACK: call policy.callback(message) and return.
    """
    match policy.action:
        case Action.EXIT:
            console.print(fault, soft_wrap=True)
            sys.exit(1)
        case Action.RAISE:
            raise fault
        case Action.CONTINUE:
            return
        case Action.STOP:
            raise StopParsing
        case Action.CALLBACK:
            policy.callback(str(fault))


def notify(policy, interrupt, /):
    """
    apply `policy` after an informational event (help or version was printed).

    EXIT terminates with status 0, RAISE raises `interrupt` (HelpRequested or
    VersionRequested), CALLBACK calls policy.callback() with no arguments.
    """
    match policy.action:
        case Action.EXIT:
            sys.exit(0)
        case Action.RAISE:
            raise interrupt
        case Action.CONTINUE:
            return
        case Action.STOP:
            raise StopParsing
        case Action.CALLBACK:
            policy.callback()


__all__ = (
    "Event",
    "Action",
    "Policy",
    "EXIT",
    "CONTINUE",
    "STOP",
    "RAISE",
    "react",
    "notify",
)
