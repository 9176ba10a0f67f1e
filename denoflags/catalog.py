r"""
denoflags catalog: the declarative flag table.

Overview
- Declarations
  • Switch: a named global switch with one or more spellings (e.g., -r/--reload).
    Presence-only by default; value-bearing when takes_value is True (--v8-flags).
  • Subcommand: a built-in operating mode (info, eval, fmt) and the arity of the
    positional values it requires.
  • Catalog: the immutable collection of switches and subcommands, indexed by
    spelling and by canonical name.

- The module-level CATALOG declares exactly the switches and subcommands the
  deno command line understands. Any other leading token that does not start
  with '-' is a script path.

Introspection & representation
- SpecType metaclass provides stable __repr__/__rich_repr__ and exposes the
  fields listed in __introspectable__ as read-only properties (see utils.mirror).

Validation highlights
- Names must match r"--?[^\W\d_](-?[^\W_]+)*"; short names ("-x") are a single letter.
- Spellings and canonical names are unique across a whole catalog.
- Subcommand arity is 1 (exactly one value) or "+" (one or more values).
- descr/group strings are trimmed; empty strings are rejected.

Quick example:
    >>> from denoflags.catalog import CATALOG
    >>> CATALOG.lookup("-D").canonical
    'log-debug'
    >>> CATALOG.subcommand("fmt").nargs
    '+'
"""
import difflib
import functools
import operator
import re

from .utils import *

PROGRAM = "deno"
"""Program-name placeholder that leads every residual argv."""

ENVIRONMENT = (
    ("DENO_DIR", "Set deno's base directory"),
    ("NO_COLOR", "Set to disable color"),
)
"""Environment variables read by the collaborators (listed in help, never read here)."""


class SpecType(type):
    """
    Metaclass that gives catalog specs read-only fields and a stable representation.

    Conventions
    - __typename__ is derived from the class name and used in validation messages.
    - every name in __introspectable__ becomes a property over the "_<name>" field.
    """

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_text(cls, metadata, key, /):
    if not isinstance(value := metadata[key], str | Unset):
        raise TypeError(f"{cls.__typename__} {key!r} must be a string")
    elif isinstance(value, str) and not (value := value.strip()):
        raise ValueError(f"{cls.__typename__} {key!r} cannot be empty")
    metadata[key] = value


class Switch(metaclass=SpecType):
    """
    Named global switch of the deno command line.

    Highlights
    - canonical: the stable identifier used by the parser result (e.g., "allow-all").
    - names: every accepted spelling, short ("-A") and long ("--allow-all").
    - takes_value: when True the switch carries a payload, given inline
      ("--v8-flags=a,b") or as the following token.
    """

    __introspectable__ = (
        "canonical",
        "names",
        "takes_value",
        "group",
        "descr",
    )

    def __init__(self, canonical, *names, takes_value=False, group=Unset, descr=Unset):
        metadata = {"canonical": canonical, "group": group, "descr": descr}
        _sanitize_text(type(self), metadata, "canonical")
        if metadata["canonical"] is Unset:
            raise TypeError(f"{type(self).__typename__} must specify a canonical name")
        _sanitize_text(type(self), metadata, "group")
        _sanitize_text(type(self), metadata, "descr")

        if not names:
            raise TypeError(f"{type(self).__typename__} must specify at least one name")

        sanitized = []
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"{type(self).__typename__} names must be strings")
            elif not re.fullmatch(r"--?[^\W\d_](-?[^\W_]+)*", name):
                raise ValueError(f"{type(self).__typename__} names must be valid shell-style option names")
            elif not name.startswith("--") and len(name) != 2:
                raise ValueError(f"{type(self).__typename__} short names must be a single letter")
            elif name in sanitized:
                raise ValueError(f"{type(self).__typename__} names cannot contain duplicates")
            sanitized.append(name)

        self._canonical = metadata["canonical"]
        self._names = tuple(sanitized)
        self._takes_value = bool(takes_value)
        self._group = coalesce(metadata["group"], "options" if takes_value else "flags")
        self._descr = coalesce(metadata["descr"])

    @property
    def short(self):
        """The single-letter spelling ("-D"), or None."""
        return next((name for name in self._names if not name.startswith("--")), None)

    @property
    def long(self):
        """The double-dash spelling ("--log-debug"), or None."""
        return next((name for name in self._names if name.startswith("--")), None)


class Subcommand(metaclass=SpecType):
    """
    Built-in operating mode selected by a leading token.

    nargs
    - 1   → exactly one positional value (info FILE, eval CODE).
    - "+" → one or more positional values (fmt FILES...).
    """

    __introspectable__ = (
        "name",
        "metavar",
        "nargs",
        "descr",
    )

    def __init__(self, name, metavar, nargs=1, descr=Unset):
        metadata = {"name": name, "metavar": metavar, "descr": descr}
        for key in metadata:
            _sanitize_text(type(self), metadata, key)
        if metadata["name"] is Unset or metadata["metavar"] is Unset:
            raise TypeError(f"{type(self).__typename__} must specify a name and a metavar")
        if not re.fullmatch(r"[^\W\d_](-?[^\W_]+)*", metadata["name"]):
            raise ValueError(f"{type(self).__typename__} name must be a plain word")
        if nargs != "+" and (isinstance(nargs, bool) or nargs != 1):
            raise ValueError(f"{type(self).__typename__} 'nargs' must be 1 or '+'")

        self._name = metadata["name"]
        self._metavar = metadata["metavar"]
        self._nargs = nargs
        self._descr = coalesce(metadata["descr"])


class Catalog(metaclass=SpecType):
    """
    Immutable, indexed collection of switches and subcommands.

    Lookups
    - lookup(spelling)   → Switch | None   (e.g., "-r", "--reload")
    - switch(canonical)  → Switch          (KeyError when undeclared)
    - subcommand(name)   → Subcommand | None
    - suggest(token)     → close spellings or subcommand names, best first
    """

    __introspectable__ = (
        "switches",
        "subcommands",
    )

    def __init__(self, switches, subcommands):
        self._switches = tuple(switches)
        self._subcommands = tuple(subcommands)

        self._spellings = {}
        self._canonicals = {}
        for switch in self._switches:
            if not isinstance(switch, Switch):
                raise TypeError("catalog switches must be Switch instances")
            if switch.canonical in self._canonicals:
                raise ValueError(f"duplicated canonical name {switch.canonical!r} in catalog")
            self._canonicals[switch.canonical] = switch
            for name in switch.names:
                if name in self._spellings:
                    raise ValueError(f"duplicated spelling {name!r} in catalog")
                self._spellings[name] = switch

        self._modes = {}
        for subcommand in self._subcommands:
            if not isinstance(subcommand, Subcommand):
                raise TypeError("catalog subcommands must be Subcommand instances")
            if subcommand.name in self._modes:
                raise ValueError(f"duplicated subcommand {subcommand.name!r} in catalog")
            self._modes[subcommand.name] = subcommand

    def lookup(self, spelling, /):
        return self._spellings.get(spelling)

    def switch(self, canonical, /):
        return self._canonicals[canonical]

    def subcommand(self, name, /):
        return self._modes.get(name)

    def suggest(self, token, /):
        """Return up to five close matches among the declared spellings and subcommands."""
        candidates = self._spellings.keys() if token.startswith("-") else self._modes.keys()
        return difflib.get_close_matches(token, candidates, 5)


CATALOG = Catalog(
    (
        Switch("version", "-v", "--version", descr="Print the version"),
        Switch("allow-read", "--allow-read", group="permissions", descr="Allow file system read access"),
        Switch("allow-write", "--allow-write", group="permissions", descr="Allow file system write access"),
        Switch("allow-net", "--allow-net", group="permissions", descr="Allow network access"),
        Switch("allow-env", "--allow-env", group="permissions", descr="Allow environment access"),
        Switch("allow-run", "--allow-run", group="permissions", descr="Allow running subprocesses"),
        Switch("allow-high-precision", "--allow-high-precision", group="permissions",
               descr="Allow high precision time measurement"),
        Switch("allow-all", "-A", "--allow-all", group="permissions", descr="Allow all permissions"),
        Switch("no-prompt", "--no-prompt", descr="Do not use prompts"),
        Switch("log-debug", "-D", "--log-debug", descr="Log debug output"),
        Switch("reload", "-r", "--reload", descr="Reload source code cache (recompile TypeScript)"),
        Switch("v8-options", "--v8-options", group="engine", descr="Print V8 command line options"),
        Switch("v8-flags", "--v8-flags", takes_value=True, group="engine", descr="Set V8 command line options"),
        Switch("types", "--types", descr="Print runtime TypeScript declarations"),
        Switch("prefetch", "--prefetch", descr="Prefetch the dependencies"),
    ),
    (
        Subcommand("info", "FILE", 1, descr="Show source file related info"),
        Subcommand("eval", "CODE", 1, descr="Eval script"),
        Subcommand("fmt", "FILES", "+", descr="Format files"),
    ),
)

PERMISSIONS = (
    "allow-read",
    "allow-write",
    "allow-net",
    "allow-env",
    "allow-run",
    "allow-high-precision",
)
"""Switches implied by the allow-all umbrella switch."""


__all__ = (
    "Switch",
    "Subcommand",
    "Catalog",
    "CATALOG",
    "PERMISSIONS",
    "PROGRAM",
    "ENVIRONMENT",
)

del SpecType
