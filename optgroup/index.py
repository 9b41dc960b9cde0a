"""
Resolution index: lookup tables compiled from the option model.

What this module provides
- Target: (group, option) pair identifying one declared option.
- Conflict: ungrouped entry for a long name declared by several non-default
  groups; carries every target and its qualified 'group:option' spelling.
- build_index(groups, result=None): compile the tables (and fill the result
  table with defaults) into a read-only Index.
- assign_shorts(groups, shorts): automatic one-letter aliases.
- abbreviate(table, prefix) / lookup(table, name): prefix matching with
  Unique / Ambiguous / NotFound outcomes.

Tables
- ungrouped: 'long' → Target | Conflict
- grouped:   'group-long:long' → Target
- shorts:    'x' → Target
- aliases:   'group-long' → group name

Precedence
- a default-group option always owns its ungrouped long name; other groups'
  options with the same long name stay reachable through --group:long.
- among non-default groups, a shared long name becomes a Conflict; the default
  group never takes part in one.
"""
import copy
from typing import NamedTuple

from .faults import FaultCode, ShortCollisionError
from .utils import freeze


class Target(NamedTuple):
    group: str
    option: str


class Conflict(NamedTuple):
    targets: tuple
    candidates: tuple


class Unique(NamedTuple):
    key: str
    value: object


class Ambiguous(NamedTuple):
    candidates: tuple


class NotFound(NamedTuple):
    prefix: str


def abbreviate(table, prefix, /):
    """
    prefix-match `prefix` against the keys of `table` (case-sensitive, in table order).

    returns
    - Unique(key, value) when exactly one key starts with the prefix.
    - Ambiguous(keys) when two or more do; keys are returned verbatim.
    - NotFound(prefix) otherwise.
    """
    matches = [key for key in table if key.startswith(prefix)]
    match matches:
        case []:
            return NotFound(prefix)
        case [key]:
            return Unique(key, table[key])
        case _:
            return Ambiguous(tuple(matches))


def lookup(table, name, /):
    """
    exact key first, abbreviation second.
    """
    try:
        return Unique(name, table[name])
    except KeyError:
        return abbreviate(table, name)


def _qualified(groups, target):
    group = groups[target.group]
    return "%s:%s" % (group.long, group.opts[target.option].long)


def _collision(groups, previous, target, short):
    return ShortCollisionError(
        "'--%s' and '--%s' both tried to set short option '-%s'." % (
            _qualified(groups, previous),
            _qualified(groups, target),
            short,
        ),
        code=FaultCode.SHORT_COLLISION,
        short=short,
        targets=(previous, target),
    )


def assign_shorts(groups, shorts, /):
    """
    give every option without an explicit short (and without no_short) the
    first free character of its long name.

    characters are tried left to right, '-' skipped, each as-is then upper-cased;
    explicit and earlier assignments are never overridden. groups and options
    are visited in declaration order, so the outcome is deterministic.
    """
    for group in groups.values():
        for option in group:
            if option.short or option.no_short:
                continue
            for char in option.long:
                if char == "-":
                    continue
                for candidate in (char, char.upper()):
                    if candidate not in shorts:
                        shorts[candidate] = Target(group.name, option.name)
                        break
                else:
                    continue
                break
    return shorts


class Index:
    """
    read-only snapshot of the resolution tables of one parse call.

    also serves help renderers: short_of() and is_shadowed() answer how an
    option can be spelled on the command line.
    """
    __slots__ = ("ungrouped", "grouped", "shorts", "aliases")

    def __init__(self, ungrouped, grouped, shorts, aliases):
        self.ungrouped = freeze(ungrouped)
        self.grouped = freeze(grouped)
        self.shorts = freeze(shorts)
        self.aliases = freeze(aliases)

    def short_of(self, target, /):
        for short, owner in self.shorts.items():
            if owner == target:
                return short
        return None

    def is_shadowed(self, target, long, /):
        """
        true when --long does not reach `target`, so it needs its group qualifier.
        """
        return self.ungrouped.get(long) != target

    def __repr__(self):
        return "Index(ungrouped=%d, grouped=%d, shorts=%d, aliases=%d)" % (
            len(self.ungrouped), len(self.grouped), len(self.shorts), len(self.aliases),
        )


def build_index(groups, /, result=None):
    """
    compile the option model into an Index.

    parameters
    - groups: Mapping[str, Group] in declaration order.
    - result: dict | None
      when given, cleared and filled with {group: {option: default}} for every
      declared group and option.

    raises
    - ShortCollisionError when two options declare the same explicit short.
    """
    ungrouped = {}
    grouped = {}
    shorts = {}
    aliases = {}
    conflicts = {}

    if result is not None:
        result.clear()

    for group in groups.values():
        aliases[group.long] = group.name
        if result is not None:
            result[group.name] = {}

        for option in group:
            target = Target(group.name, option.name)
            long = option.long

            if group.default:
                # the default group owns the ungrouped spelling
                ungrouped[long] = target
                conflicts.pop(long, None)
            elif long not in ungrouped:
                ungrouped[long] = target
            elif long in conflicts or not groups[ungrouped[long].group].default:
                previous = conflicts.setdefault(long, [ungrouped[long]])
                previous.append(target)
                ungrouped[long] = Conflict(
                    tuple(previous),
                    tuple(_qualified(groups, each) for each in previous),
                )

            grouped["%s:%s" % (group.long, long)] = target

            if option.short:
                if option.short in shorts:
                    raise _collision(groups, shorts[option.short], target, option.short)
                shorts[option.short] = target

            if result is not None:
                result[group.name][option.name] = copy.copy(option.default)

    assign_shorts(groups, shorts)
    return Index(ungrouped, grouped, shorts, aliases)


__all__ = (
    "Target",
    "Conflict",
    "Unique",
    "Ambiguous",
    "NotFound",
    "Index",
    "abbreviate",
    "lookup",
    "assign_shorts",
    "build_index",
)
