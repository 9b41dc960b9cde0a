"""
Token scanner: walks an argument list against an Index and fills a result table.

states
- SCANNING: consuming tokens left to right.
- DONE: tokens exhausted, or '--' reached ('--' and what follows stay in the list).
- STOPPED: a stop policy or a callback calling stop() ended the scan early.

token classes
- '--'         → terminator
- '--name...'  → long option (optionally group-qualified, abbreviable, '=value')
- '-abc'       → short cluster
- anything else → not an argument

the scanner is destructive on its input: matched tokens and consumed values
are removed, while ignored tokens (unresolvable or not-an-argument) are put
back at the head of the list in their original order whatever the outcome.
"""
import re
from enum import Enum

from .coercion import coerce
from .faults import FaultCode, MissingValueError, StopParsing, ambiguous_parameter, invalid_parameter, not_argument
from .index import Ambiguous, Conflict, NotFound, Unique, lookup
from .policies import Event

LONG = re.compile(r"--[^-]")
SHORT = re.compile(r"-[^-]")


class State(Enum):
    SCANNING = "scanning"
    DONE = "done"
    STOPPED = "stopped"


class Scanner:
    """
    one scan over one argument list.

    parameters
    - groups: Mapping[str, Group] (the option model).
    - index: Index built for this parse call.
    - result: result table to write matched values into.
    - report: callable(event, fault) applying the configured policy; it may
      return, raise the fault, raise StopParsing or exit.
    """

    def __init__(self, groups, index, result, report):
        self.groups = groups
        self.index = index
        self.result = result
        self.report = report
        self.state = State.SCANNING
        self.ignored = []
        self.tokens = None

    def run(self, tokens):
        """
        consume `tokens` (a mutable list) and return the final state.
        """
        self.tokens = tokens
        try:
            while self.tokens:
                if self.tokens[0] == "--":
                    break
                token = self.tokens.pop(0)
                if LONG.match(token):
                    self._long(token)
                elif SHORT.match(token):
                    self._short(token[1:])
                else:
                    self._ignore(Event.NOT_ARGUMENT, token, not_argument(token))
        except StopParsing:
            self.state = State.STOPPED
        else:
            self.state = State.DONE
        finally:
            self.tokens[:0] = self.ignored
            self.ignored = []
        return self.state

    def _ignore(self, event, token, fault):
        self.ignored.append(token)
        self.report(event, fault)

    def _long(self, token):
        name, _, value = token[2:].partition("=")
        inline = value if "=" in token else None

        if not name:
            return self._ignore(Event.INVALID_PARAMETER, token, invalid_parameter(token))

        qualifier, colon, rest = name.partition(":")
        if colon:
            match lookup(self.index.aliases, qualifier):
                case NotFound():
                    return self._ignore(Event.INVALID_PARAMETER, token, invalid_parameter(token))
                case Ambiguous(candidates):
                    return self._ignore(
                        Event.AMBIGUOUS_PARAMETER,
                        token,
                        ambiguous_parameter(token, ("%s:..." % alias for alias in candidates)),
                    )
                case Unique(alias, _):
                    found = lookup(self.index.grouped, "%s:%s" % (alias, rest))
        else:
            found = lookup(self.index.ungrouped, name)

        match found:
            case NotFound():
                return self._ignore(Event.INVALID_PARAMETER, token, invalid_parameter(token))
            case Ambiguous(candidates):
                return self._ignore(Event.AMBIGUOUS_PARAMETER, token, ambiguous_parameter(token, candidates))
            case Unique(_, Conflict(_, candidates)):
                return self._ignore(Event.AMBIGUOUS_PARAMETER, token, ambiguous_parameter(token, candidates))
            case Unique(_, target):
                self._dispatch(target, token, inline)

    def _short(self, cluster):
        while cluster:
            try:
                target = self.index.shorts[cluster[0]]
            except KeyError:
                token = "-" + cluster
                return self._ignore(Event.INVALID_PARAMETER, token, invalid_parameter(token))

            token, rest = "-" + cluster[0], cluster[1:]
            if self.groups[target.group].opts[target.option].value is not None:
                # a value-taking flag absorbs the rest of the cluster
                return self._dispatch(target, token, rest or None)
            self._dispatch(target, token)
            cluster = rest

    def _shift(self, token):
        try:
            return self.tokens.pop(0)
        except IndexError:
            raise MissingValueError(
                "Missing value for '%s'." % token,
                code=FaultCode.MISSING_VALUE,
                token=token,
            ) from None

    def _dispatch(self, target, token, inline=None):
        option = self.groups[target.group].opts[target.option]

        if option.value is None:
            value = option.set
        else:
            values = []
            for tag in option.tags:
                raw = self._shift(token) if inline is None else inline
                inline = None
                values.append(coerce(raw, tag, token=token))
            value = values if option.multiple else values[0]

        self.result[target.group][target.option] = value
        if option.on is not None:
            option.on(value)


__all__ = (
    "State",
    "Scanner",
)
