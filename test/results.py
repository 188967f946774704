"""
Sum type behavioral tests (Maybe, Result, LoopAction).

Scope
- Validate constructors, structural equality and pattern matching.
- Validate immutability, sealing and the Nothing singleton.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import pickle
import unittest
from unittest import TestCase

from rich.pretty import pretty_repr

from lexonaut import (
    Maybe,
    Some,
    Nothing,
    Result,
    Ok,
    Err,
    LoopAction,
    Step,
    Finish,
    Fail,
    some,
    none,
    maybe,
    ok,
    err,
    step,
    finish,
    fail,
)


def describe(variant):
    match variant:
        case Some(value):
            return "some", value
        case Nothing():
            return "nothing", None
        case Ok(value):
            return "ok", value
        case Err(error):
            return "err", error
        case Step(value):
            return "step", value
        case Finish(value):
            return "finish", value
        case Fail(error):
            return "fail", error


class TestMaybe(TestCase):
    """Behavioral tests for Some and Nothing."""

    def testConstructors(self):
        self.assertIsInstance(some(1), Some)
        self.assertIsInstance(none(), Nothing)
        self.assertTrue(some(None).exists)
        self.assertFalse(none().exists)
        self.assertEqual(maybe(None), none())
        self.assertEqual(maybe(0), some(0))

    def testNothingIsSingleton(self):
        self.assertIs(none(), Nothing())
        self.assertFalse(none())
        self.assertEqual(repr(none()), "Nothing()")
        with self.assertRaises(AttributeError):
            none().value

    def testEquality(self):
        self.assertEqual(some(1), some(1))
        self.assertNotEqual(some(1), some(2))
        self.assertNotEqual(some(1), ok(1))
        self.assertNotEqual(some(1), 1)
        self.assertEqual(len({some(1), some(1), none()}), 2)

    def testMaybeCannotBeBuiltDirectly(self):
        with self.assertRaises(TypeError):
            Maybe(1)


class TestResult(TestCase):
    """Behavioral tests for Ok and Err."""

    def testConstructors(self):
        self.assertTrue(ok(1).success)
        self.assertFalse(err("bad").success)
        self.assertEqual(err("bad").error, "bad")
        self.assertIsInstance(ok(1), Result)

    def testRepresentation(self):
        self.assertEqual(repr(ok(1)), "Ok(value=1)")
        self.assertEqual(repr(err("x")), "Err(error='x')")
        self.assertEqual(pretty_repr(some([1, 2])), "Some(value=[1, 2])")

    def testResultCannotBeBuiltDirectly(self):
        with self.assertRaises(TypeError):
            Result(1)


class TestLoopAction(TestCase):
    """Behavioral tests for Step, Finish and Fail."""

    def testConstructors(self):
        self.assertIsInstance(step("x"), LoopAction)
        self.assertEqual(finish(1).value, 1)
        self.assertEqual(fail("e").error, "e")
        self.assertNotEqual(step(1), finish(1))


class TestVariants(TestCase):
    """Properties shared by every variant."""

    def testPatternMatching(self):
        cases = [
            (some(1), ("some", 1)),
            (none(), ("nothing", None)),
            (ok(2), ("ok", 2)),
            (err("e"), ("err", "e")),
            (step("s"), ("step", "s")),
            (finish(3), ("finish", 3)),
            (fail("f"), ("fail", "f")),
        ]
        for variant, expected in cases:
            with self.subTest(variant=variant):
                self.assertEqual(describe(variant), expected)

    def testImmutable(self):
        for variant in (some(1), ok(1), err(1), step(1)):
            with self.subTest(variant=variant):
                with self.assertRaises(AttributeError):
                    variant.value = 2

    def testSealed(self):
        with self.assertRaises(TypeError):
            class Custom(Some): ...

    def testCopyAndPickle(self):
        for variant in (some([1]), none(), err("e"), finish(2)):
            with self.subTest(variant=variant):
                self.assertEqual(copy.deepcopy(variant), variant)
                self.assertEqual(pickle.loads(pickle.dumps(variant)), variant)
        self.assertIs(pickle.loads(pickle.dumps(none())), none())


if __name__ == "__main__":
    unittest.main()
