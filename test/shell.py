"""
Shell entry point tests (python -m denoflags).

Conventions
- Test method names follow CamelCase per project convention.
- stdout/stderr are captured with contextlib redirections; rich consoles
  resolve the standard streams at print time.
"""

from __future__ import annotations

import io
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import TestCase, mock

from denoflags.__main__ import main


class TestShell(TestCase):
    """Exit statuses and printed output of main()."""

    def testPrintsFlagsAndArgv(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            status = main(["--reload", "gist.ts", "--title", "X"])
        self.assertEqual(status, 0)
        output = stdout.getvalue()
        self.assertIn("'reload': True", output)
        self.assertIn("'gist.ts'", output)
        self.assertIn("'--title'", output)

    def testVersion(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            self.assertEqual(main(["--version"]), 0)
        self.assertIn("'version': True", stdout.getvalue())

    def testEngineHelpStopsEarly(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            self.assertEqual(main(["--v8-options"]), 0)
        output = stdout.getvalue()
        self.assertIn("'--v8-options'", output)
        self.assertNotIn("'version'", output)

    def testFaultExitsWithStatusOne(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as context:
            main(["--relaod"])
        self.assertEqual(context.exception.code, 1)
        output = stderr.getvalue()
        self.assertIn("usage", output)
        self.assertIn("11131", output)
        self.assertIn("--reload", output)

    def testNoColor(self):
        stderr = io.StringIO()
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            with redirect_stderr(stderr), self.assertRaises(SystemExit):
                main(["info"])
        output = stderr.getvalue()
        self.assertIn("11121", output)
        self.assertNotIn("\x1b[", output)


if __name__ == "__main__":
    unittest.main()
