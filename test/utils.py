"""
Utility tests (Unset, coalesce, mirror, ordinal).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from types import MappingProxyType
from unittest import TestCase

from denoflags.utils import Unset, UnsetType, coalesce, mirror, ordinal


class TestUnset(TestCase):
    """The not-provided sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testSealed(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "deno"), "deno")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "deno"))
        self.assertEqual(coalesce("", "deno"), "")


class TestMirror(TestCase):
    """Read-only frozen views over private fields."""

    class Holder:
        names = mirror("names")
        table = mirror("table")
        kinds = mirror("kinds")
        label = mirror("label")

        def __init__(self):
            self._names = ["--reload", "-r"]
            self._table = {"reload": "-r"}
            self._kinds = {"flags"}
            self._label = "reload"

    def testFreezesContainers(self):
        holder = self.Holder()
        self.assertEqual(holder.names, ("--reload", "-r"))
        self.assertIsInstance(holder.table, MappingProxyType)
        self.assertEqual(holder.kinds, frozenset({"flags"}))
        self.assertEqual(holder.label, "reload")

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            self.Holder().names = ()

    def testRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            mirror(1)


class TestOrdinal(TestCase):
    """Position labels used in fault messages."""

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(2), "second")
        self.assertEqual(ordinal(10), "tenth")

    def testNumeric(self):
        for number, expected in (
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (103, "103rd"),
            (111, "111th"),
            (112, "112th"),
        ):
            with self.subTest(number=number):
                self.assertEqual(ordinal(number), expected)


if __name__ == "__main__":
    unittest.main()
