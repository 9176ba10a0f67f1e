"""
Engine options tests (extraction from a parse and the boundary call).

Scope
- Validate engine_options(): help request and comma-split tuning flags.
- Validate EngineOptions.apply(): call order, argv shape, at-most-once semantics.

Conventions
- Test method names follow CamelCase per project convention.
- The engine collaborator is replaced by a recording callable.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from denoflags import EngineOptions, HELP_OPTION, engine_options, parse_args


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, argv):
        self.calls.append(argv)
        return argv[:1]


class TestEngineOptions(TestCase):
    """Extraction from the parser result."""

    def testNothingRequested(self):
        options = engine_options(parse_args(["-A", "main.ts"]))
        self.assertFalse(options)
        self.assertFalse(options.help)
        self.assertEqual(options.flags, ())
        self.assertEqual(options.argv, ("deno",))

    def testHelpRequest(self):
        options = engine_options(parse_args(["--v8-options"]))
        self.assertTrue(options)
        self.assertTrue(options.help)

    def testFlagsSplitOnCommas(self):
        options = engine_options(parse_args(["--v8-flags=--expose-gc,,--max-old-space-size=64"]))
        self.assertEqual(options.flags, ("--expose-gc", "--max-old-space-size=64"))
        self.assertEqual(options.argv, ("deno", "--expose-gc", "--max-old-space-size=64"))

    def testCustomProgram(self):
        options = engine_options(parse_args(["--v8-flags=--a"]), program="denox")
        self.assertEqual(options.argv, ("denox", "--a"))

    def testFlagsMustBeStrings(self):
        with self.assertRaises(TypeError):
            EngineOptions(flags=("--a", 1))


class TestApply(TestCase):
    """The boundary call into the engine collaborator."""

    def testNothingIsForwardedWhenEmpty(self):
        recorder = Recorder()
        self.assertEqual(EngineOptions().apply(recorder), ())
        self.assertEqual(recorder.calls, [])

    def testHelpThenFlags(self):
        recorder = Recorder()
        options = EngineOptions(help=True, flags=("--expose-gc",))
        returned = options.apply(recorder)
        self.assertEqual(recorder.calls, [["deno", HELP_OPTION], ["deno", "--expose-gc"]])
        self.assertEqual(returned, (["deno"], ["deno"]))

    def testAtMostOnce(self):
        recorder = Recorder()
        options = EngineOptions(flags=("--expose-gc",))
        self.assertFalse(options.applied)
        options.apply(recorder)
        self.assertTrue(options.applied)
        self.assertEqual(options.apply(recorder), ())
        self.assertEqual(len(recorder.calls), 1)

    def testSetterMustBeCallable(self):
        with self.assertRaises(TypeError):
            EngineOptions(help=True).apply("v8")

    def testEquality(self):
        self.assertEqual(EngineOptions(flags=["--a"]), EngineOptions(flags=("--a",)))
        self.assertNotEqual(EngineOptions(help=True), EngineOptions())


if __name__ == "__main__":
    unittest.main()
