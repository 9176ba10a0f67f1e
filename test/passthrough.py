"""
Residual argv tests.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from types import MappingProxyType
from unittest import TestCase

from denoflags import Eval, Fmt, Info, NoSelection, ParseResult, RunScript, assemble_argv


def result(selection):
    return ParseResult(frozenset(), MappingProxyType({}), selection)


class TestAssembleArgv(TestCase):
    """One residual shape per selection variant."""

    def testNoSelection(self):
        self.assertEqual(assemble_argv(result(NoSelection())), ["deno"])

    def testEval(self):
        self.assertEqual(assemble_argv(result(Eval("console.log(1)"))), ["deno", "console.log(1)"])

    def testInfo(self):
        self.assertEqual(assemble_argv(result(Info("main.ts"))), ["deno", "main.ts"])

    def testFmt(self):
        self.assertEqual(assemble_argv(result(Fmt(("b.ts", "a.ts")))), ["deno", "b.ts", "a.ts"])

    def testRunScriptKeepsArgumentsUntouched(self):
        arguments = ("--title", "X", "-A", "", "--")
        self.assertEqual(
            assemble_argv(result(RunScript("gist.ts", arguments))),
            ["deno", "gist.ts", "--title", "X", "-A", "", "--"],
        )

    def testCustomProgram(self):
        self.assertEqual(assemble_argv(result(Info("a.ts")), program="denox"), ["denox", "a.ts"])

    def testFreshListEachTime(self):
        parsed = result(RunScript("a.ts", ()))
        first = assemble_argv(parsed)
        first.append("mutated")
        self.assertEqual(assemble_argv(parsed), ["deno", "a.ts"])

    def testUnexpectedSelection(self):
        with self.assertRaises(RuntimeError):
            assemble_argv(result(("main.ts",)))


if __name__ == "__main__":
    unittest.main()
