"""
Unordered strategy behavioral tests (built-in strategies and combinators).

Scope
- Validate flag/option/compact matching for the long, long-short and prefixed strategies.
- Validate word tables of matching_strategy(), including case folding and clashes.
- Validate merge_strategies(), rename_keys() and map_keys().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from lexonaut import (
    UnorderedStrategy,
    no_strategy,
    long_strategy,
    long_short_strategy,
    prefixed_strategy,
    matching_strategy,
    merge_strategies,
    rename_keys,
    map_keys,
)


class TestNoStrategy(TestCase):
    """Behavioral tests for no_strategy()."""

    def testNothingMatches(self):
        strategy = no_strategy()
        for text in ("--a", "-a", "--a=", "--a=b", "a"):
            with self.subTest(text=text):
                self.assertIsNone(strategy.match_flag(text))
                self.assertIsNone(strategy.match_option(text))
                self.assertIsNone(strategy.match_compact_option(text))


class TestLongStrategy(TestCase):
    """Behavioral tests for long_strategy()."""

    def setUp(self):
        self.strategy = long_strategy()

    def testFlag(self):
        self.assertEqual(self.strategy.match_flag("--foo"), "foo")
        self.assertIsNone(self.strategy.match_flag("--foo=1"))
        self.assertIsNone(self.strategy.match_flag("-f"))
        self.assertIsNone(self.strategy.match_flag("foo"))
        self.assertIsNone(self.strategy.match_flag("--"))

    def testOption(self):
        self.assertEqual(self.strategy.match_option("--name="), "name")
        self.assertIsNone(self.strategy.match_option("--name"))
        self.assertIsNone(self.strategy.match_option("--="))

    def testCompactOption(self):
        self.assertEqual(self.strategy.match_compact_option("--bar=123"), ("bar", "123"))
        self.assertEqual(self.strategy.match_compact_option("--bar="), ("bar", ""))
        self.assertEqual(self.strategy.match_compact_option("--a=b=c"), ("a", "b=c"))
        self.assertIsNone(self.strategy.match_compact_option("--=x"))
        self.assertIsNone(self.strategy.match_compact_option("--bar"))

    def testMatchersHaveStableNames(self):
        self.assertEqual(self.strategy.match_flag.__name__, "match_flag")
        self.assertEqual(self.strategy.match_option.__name__, "match_option")
        self.assertEqual(self.strategy.match_compact_option.__name__, "match_compact_option")

    def testStrategyIsValue(self):
        self.assertIsInstance(self.strategy, UnorderedStrategy)
        with self.assertRaises(AttributeError):
            self.strategy.match_flag = None  # type: ignore[misc]


class TestLongShortStrategy(TestCase):
    """Behavioral tests for long_short_strategy()."""

    def setUp(self):
        self.strategy = long_short_strategy()

    def testShortForms(self):
        self.assertEqual(self.strategy.match_flag("-v"), "v")
        self.assertEqual(self.strategy.match_option("-o="), "o")
        self.assertEqual(self.strategy.match_compact_option("-o=x"), ("o", "x"))

    def testLongFormsUseTheLongestPrefix(self):
        self.assertEqual(self.strategy.match_flag("--verbose"), "verbose")
        self.assertEqual(self.strategy.match_compact_option("--out=a.txt"), ("out", "a.txt"))

    def testBarePrefixMatchesNothing(self):
        self.assertIsNone(self.strategy.match_flag("-"))
        self.assertIsNone(self.strategy.match_flag("--"))


class TestPrefixedStrategy(TestCase):
    """Behavioral tests for prefixed_strategy()."""

    def testCustomPrefixesAndSeparators(self):
        strategy = prefixed_strategy(["/", "+"], [":"])
        self.assertEqual(strategy.match_flag("/x"), "x")
        self.assertEqual(strategy.match_option("+k:"), "k")
        self.assertEqual(strategy.match_compact_option("+k:v"), ("k", "v"))
        self.assertIsNone(strategy.match_flag("-x"))

    def testPrefixOrderDoesNotMatter(self):
        strategy = prefixed_strategy(["-", "--"], ["="])
        self.assertEqual(strategy.match_flag("--x"), "x")

    def testEarliestSeparatorSplits(self):
        strategy = prefixed_strategy(["--"], ["=", ":"])
        self.assertEqual(strategy.match_compact_option("--a:b=c"), ("a", "b=c"))
        self.assertIsNone(strategy.match_flag("--a:b"))
        self.assertIsNone(strategy.match_option("--a:b="))

    def testValidation(self):
        with self.assertRaises(ValueError):
            prefixed_strategy([], ["="])
        with self.assertRaises(TypeError):
            prefixed_strategy("--", ["="])
        with self.assertRaises(ValueError):
            prefixed_strategy(["--"], [""])
        with self.assertRaises(ValueError):
            prefixed_strategy(["--", "--"], ["="])


class TestMatchingStrategy(TestCase):
    """Behavioral tests for matching_strategy()."""

    def setUp(self):
        self.strategy = matching_strategy(
            {"verbose": ["--verbose", "-v"]},
            {"output": ["--output", "-o"]},
        )

    def testFlagWords(self):
        self.assertEqual(self.strategy.match_flag("-v"), "verbose")
        self.assertEqual(self.strategy.match_flag("--verbose"), "verbose")
        self.assertIsNone(self.strategy.match_flag("--output"))
        self.assertIsNone(self.strategy.match_flag("--quiet"))

    def testOptionWords(self):
        self.assertEqual(self.strategy.match_option("-o"), "output")
        self.assertIsNone(self.strategy.match_option("-v"))

    def testCompactOptionWords(self):
        self.assertEqual(self.strategy.match_compact_option("-o=x"), ("output", "x"))
        self.assertEqual(self.strategy.match_compact_option("--output=a=b"), ("output", "a=b"))
        self.assertIsNone(self.strategy.match_compact_option("-x=1"))
        self.assertIsNone(self.strategy.match_compact_option("-v=1"))

    def testCaseFolding(self):
        strategy = matching_strategy({"verbose": ["--verbose"]}, {"name": ["--name"]}, casefold=True)
        self.assertEqual(strategy.match_flag("--VERBOSE"), "verbose")
        self.assertEqual(strategy.match_compact_option("--Name=Ada"), ("name", "Ada"))
        self.assertIsNone(self.strategy.match_flag("--VERBOSE"))

    def testCustomSeparators(self):
        strategy = matching_strategy({}, {"name": ["name"]}, separators=[":"])
        self.assertEqual(strategy.match_compact_option("name:Ada"), ("name", "Ada"))
        self.assertIsNone(strategy.match_compact_option("name=Ada"))

    def testWordUsedTwiceRejected(self):
        with self.assertRaises(ValueError):
            matching_strategy({"a": ["-x"], "b": ["-x"]}, {})
        with self.assertRaises(ValueError):
            matching_strategy({"a": ["-x"]}, {"b": ["-x"]})

    def testMalformedTablesRejected(self):
        with self.assertRaises(TypeError):
            matching_strategy([("a", ["-a"])], {})
        with self.assertRaises(ValueError):
            matching_strategy({"a": [""]}, {})
        with self.assertRaises(TypeError):
            matching_strategy({"a": "-a"}, {})


class TestCombinators(TestCase):
    """Behavioral tests for merge_strategies(), rename_keys() and map_keys()."""

    def testMergeTakesFirstMatch(self):
        strategy = merge_strategies(
            matching_strategy({"version": ["-v"]}, {}),
            long_short_strategy(),
        )
        self.assertEqual(strategy.match_flag("-v"), "version")
        self.assertEqual(strategy.match_flag("--foo"), "foo")
        self.assertEqual(strategy.match_compact_option("-o=1"), ("o", "1"))

    def testMergeValidation(self):
        with self.assertRaises(TypeError):
            merge_strategies()
        with self.assertRaises(TypeError):
            merge_strategies(long_strategy(), object())

    def testRenameKeys(self):
        strategy = rename_keys(long_short_strategy(), {"v": "verbose", "o": "output"})
        self.assertEqual(strategy.match_flag("-v"), "verbose")
        self.assertEqual(strategy.match_flag("-q"), "q")
        self.assertEqual(strategy.match_option("-o="), "output")
        self.assertEqual(strategy.match_compact_option("-o=x"), ("output", "x"))
        self.assertIsNone(strategy.match_flag("plain"))

    def testMapKeys(self):
        strategy = map_keys(long_strategy(), str.upper)
        self.assertEqual(strategy.match_flag("--a"), "A")
        self.assertEqual(strategy.match_option("--a="), "A")
        self.assertEqual(strategy.match_compact_option("--a=b"), ("A", "b"))

    def testMapKeysValidation(self):
        with self.assertRaises(TypeError):
            map_keys(long_strategy(), "upper")
        with self.assertRaises(TypeError):
            rename_keys(long_strategy(), ["v"])


if __name__ == "__main__":
    unittest.main()
