"""
Help rendering tests.

Conventions
- Test method names follow CamelCase per project convention.
- Rendered without colors on a wide console so lines do not wrap.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console

from denoflags import CATALOG
from denoflags.helper import render


def output(**options):
    console = Console(file=io.StringIO(), color_system=None, width=160)
    console.print(render(**options))
    return console.file.getvalue()


class TestHelp(TestCase):
    """The usage/help screen."""

    def testUsageLine(self):
        self.assertIn("usage: deno [FLAGS] [SUBCOMMAND | SCRIPT [SCRIPT_ARGS]...]", output(colorful=False))

    def testEverySpellingIsListed(self):
        text = output(colorful=False)
        for switch in CATALOG.switches:
            for name in switch.names:
                with self.subTest(name=name):
                    self.assertIn(name, text)

    def testValueBearingSwitchShowsMetavar(self):
        self.assertIn("--v8-flags=<V8_FLAGS>", output(colorful=False))

    def testSubcommandsAndScript(self):
        text = output(colorful=False)
        self.assertIn("info FILE", text)
        self.assertIn("eval CODE", text)
        self.assertIn("fmt FILES...", text)
        self.assertIn("<script>", text)
        self.assertIn("Script to run", text)

    def testEnvironmentEpilog(self):
        text = output(colorful=False)
        self.assertIn("ENVIRONMENT VARIABLES:", text)
        self.assertIn("DENO_DIR", text)
        self.assertIn("Set deno's base directory", text)
        self.assertIn("NO_COLOR", text)

    def testFancyPanel(self):
        text = output(colorful=False, fancy=True)
        self.assertIn("╭", text)
        self.assertIn("deno", text)


if __name__ == "__main__":
    unittest.main()
