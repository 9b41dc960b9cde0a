"""
Index module behavioral tests (tables, short assignment, abbreviation).

Scope
- Validate build_index(): ungrouped/grouped/short/alias tables and defaults.
- Validate conflict marking between non-default groups and default precedence.
- Validate assign_shorts(): two-pass ordering and capitalization fallback.
- Validate abbreviate()/lookup() outcomes.

Conventions
- Test method names follow CamelCase per project convention.
- Groups are assembled directly from the model; no parser is involved.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optgroup.faults import ShortCollisionError
from optgroup.index import (
    Ambiguous,
    Conflict,
    NotFound,
    Target,
    Unique,
    abbreviate,
    assign_shorts,
    build_index,
    lookup,
)
from optgroup.model import DEFAULT, Group


def declare(*names):
    return {name: Group(name) for name in names}


class TestAbbreviation(TestCase):
    """Behavioral tests for prefix matching."""

    def setUp(self):
        self.table = {"foo-bar": 1, "foo-baz": 2, "asd": 3}

    def testUniquePrefix(self):
        self.assertEqual(abbreviate(self.table, "as"), Unique("asd", 3))

    def testAmbiguousPrefixKeepsTableOrder(self):
        self.assertEqual(abbreviate(self.table, "foo"), Ambiguous(("foo-bar", "foo-baz")))

    def testNoMatch(self):
        self.assertEqual(abbreviate(self.table, "x"), NotFound("x"))

    def testCaseSensitive(self):
        self.assertIsInstance(abbreviate(self.table, "ASD"), NotFound)

    def testLookupPrefersExactKey(self):
        table = {"foo": 1, "foo-bar": 2}
        self.assertEqual(lookup(table, "foo"), Unique("foo", 1))
        self.assertEqual(lookup(table, "foo-"), Unique("foo-bar", 2))


class TestShortAssignment(TestCase):
    """Behavioral tests for automatic short flags."""

    def testCapitalizationFallback(self):
        groups = declare(DEFAULT)
        for number in range(1, 6):
            groups[DEFAULT].opt("foo%d" % number)
        shorts = assign_shorts(groups, {})
        self.assertEqual(
            {short: target.option for short, target in shorts.items()},
            {"f": "foo1", "F": "foo2", "o": "foo3", "O": "foo4", "5": "foo5"},
        )

    def testHyphensSkipped(self):
        groups = declare(DEFAULT)
        groups[DEFAULT].opt("x", short="x")
        groups[DEFAULT].opt("x_ray")
        shorts = assign_shorts(groups, {"x": Target(DEFAULT, "x")})
        self.assertEqual(shorts["X"], Target(DEFAULT, "x_ray"))

    def testNoShortAndExhaustedOptionsStayUnset(self):
        groups = declare(DEFAULT)
        groups[DEFAULT].opt("a")
        groups[DEFAULT].opt("a_a")
        groups[DEFAULT].opt("a_a_a")
        groups[DEFAULT].opt("aa", no_short=True)
        shorts = assign_shorts(groups, {})
        self.assertEqual(set(shorts.values()), {Target(DEFAULT, "a"), Target(DEFAULT, "a_a")})

    def testExplicitShortsRegisteredBeforeAutomaticOnes(self):
        groups = declare("first", "second")
        groups["first"].opt("xray")
        groups["second"].opt("yes", short="x")
        index = build_index(groups)
        self.assertEqual(index.shorts["x"], Target("second", "yes"))
        self.assertEqual(index.shorts["X"], Target("first", "xray"))

    def testDeterministic(self):
        def build():
            groups = declare("a", "b")
            for name in ("alpha", "alps", "beta"):
                groups["a"].opt(name)
                groups["b"].opt(name)
            return dict(build_index(groups).shorts)

        self.assertEqual(build(), build())


class TestBuildIndex(TestCase):
    """Behavioral tests for the compiled tables."""

    def testTablesAndAliases(self):
        groups = declare(DEFAULT, "net_io")
        groups[DEFAULT].opt("verbose")
        groups["net_io"].opt("max_rate")
        index = build_index(groups)
        self.assertEqual(index.ungrouped["max-rate"], Target("net_io", "max_rate"))
        self.assertEqual(index.grouped["net-io:max-rate"], Target("net_io", "max_rate"))
        self.assertEqual(index.grouped["default:verbose"], Target(DEFAULT, "verbose"))
        self.assertEqual(dict(index.aliases), {"default": DEFAULT, "net-io": "net_io"})

    def testConflictBetweenNonDefaultGroups(self):
        groups = declare(DEFAULT, "a", "b")
        groups["a"].opt("foo")
        groups["b"].opt("foo")
        entry = build_index(groups).ungrouped["foo"]
        self.assertIsInstance(entry, Conflict)
        self.assertEqual(entry.targets, (Target("a", "foo"), Target("b", "foo")))
        self.assertEqual(entry.candidates, ("a:foo", "b:foo"))

    def testDefaultGroupNeverConflicts(self):
        groups = declare(DEFAULT, "a", "b")
        groups[DEFAULT].opt("foo")
        groups["a"].opt("foo")
        groups["b"].opt("foo")
        index = build_index(groups)
        self.assertEqual(index.ungrouped["foo"], Target(DEFAULT, "foo"))
        self.assertTrue(index.is_shadowed(Target("a", "foo"), "foo"))
        self.assertFalse(index.is_shadowed(Target(DEFAULT, "foo"), "foo"))

    def testQualifiedNamesUseGroupLong(self):
        groups = declare("a", "b")
        groups["a"].long = "alpha"
        groups["a"].opt("foo")
        groups["b"].opt("foo", long="foo")
        entry = build_index(groups).ungrouped["foo"]
        self.assertEqual(entry.candidates, ("alpha:foo", "b:foo"))

    def testExplicitShortCollision(self):
        groups = declare("a", "b")
        groups["a"].opt("one", short="q")
        groups["b"].opt("two", short="q")
        with self.assertRaises(ShortCollisionError) as caught:
            build_index(groups)
        self.assertEqual(caught.exception.options["targets"], (Target("a", "one"), Target("b", "two")))

    def testResultFilledWithDefaults(self):
        groups = declare(DEFAULT, "empty")
        groups[DEFAULT].opt("level", default=3)
        result = {"stale": {}}
        build_index(groups, result=result)
        self.assertEqual(result, {DEFAULT: {"level": 3}, "empty": {}})

    def testResultDefaultsAreCopies(self):
        groups = declare(DEFAULT)
        groups[DEFAULT].opt("paths", value=["string"], default=["."])
        result = {}
        build_index(groups, result=result)
        self.assertEqual(result[DEFAULT]["paths"], ["."])
        self.assertIsNot(result[DEFAULT]["paths"], groups[DEFAULT].opts["paths"].default)

    def testShortOf(self):
        groups = declare(DEFAULT)
        groups[DEFAULT].opt("quiet")
        groups[DEFAULT].opt("silent", no_short=True)
        index = build_index(groups)
        self.assertEqual(index.short_of(Target(DEFAULT, "quiet")), "q")
        self.assertIsNone(index.short_of(Target(DEFAULT, "silent")))


if __name__ == "__main__":
    unittest.main()
