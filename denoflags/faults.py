"""
denoflags faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing parse
  failure. Codes are grouped by taxonomy so logs and searches stay predictable.
- CommandException: base type that carries a message plus read-only options and
  knows how to render itself through rich.
- MalformedArgumentsError / UnrecognizedLeadingTokenError: the two families of
  parse failures. Concrete subclasses narrow the cause.
- trigger(): central entry point to surface a fault (raise, or print and exit in shell mode).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: every message names the ordinal position of the
  offending token (“at second position”) so users can learn by trying.
- Short titles, one-sentence bodies, a single clear hint.

Integration
- The parser raises faults directly; it never prints and never exits.
- The shell entry point (python -m denoflags) catches CommandException and calls
  trigger(fault, shell=True, ...) to print it and exit with status 1.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping
    - malformed arguments (1111x/1112x)
      • OPTION_VALUE_REQUIRED, EMPTY_VALUE, FLAG_ASSIGNMENT, DUPLICATED_SWITCH,
        MISSING_CARDINALS, UNPARSED_TOKENS
    - unrecognized leading tokens (1113x)
      • UNKNOWN_SWITCH, MALFORMED_TOKEN

    normalize() lets the host remap codes to custom labels through a __codes__
    mapping in __main__.
    """
    # --- malformed arguments (111xx) ---
    OPTION_VALUE_REQUIRED       = 11111
    EMPTY_VALUE                 = 11112
    FLAG_ASSIGNMENT             = 11113
    DUPLICATED_SWITCH           = 11114
    MISSING_CARDINALS           = 11121
    UNPARSED_TOKENS             = 11122

    # --- unrecognized leading tokens (1113x) ---
    UNKNOWN_SWITCH              = 11131
    MALFORMED_TOKEN             = 11132

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    base for every parse failure.

    attributes
    - message: the human-readable, usage-describing sentence.
    - options: read-only mapping with rendering and context entries
      (title, code, hint, token, index, suggestions, shell, fancy, colorful, ...).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "deno")), styler("prog-name"))
        code = self.options.get("code")

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if code else "", styler("code")),
            " | ",
            text(str(self.options.get("title", "error")).title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint"), styler("hint")))

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell"):
            raise self from None
        console.print(self)
        if self.options.get("deferred"):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MalformedArgumentsError(CommandException): ...
class MissingOptionValueError(MalformedArgumentsError): ...
class EmptyValueError(MalformedArgumentsError): ...
class FlagAssignmentError(MalformedArgumentsError): ...
class DuplicatedSwitchError(MalformedArgumentsError): ...
class MissingCardinalsError(MalformedArgumentsError): ...
class UnparsedTokensError(MalformedArgumentsError): ...

class UnrecognizedLeadingTokenError(CommandException): ...
class MalformedTokenError(UnrecognizedLeadingTokenError): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see CommandException).
    - options are merged into the fault via copy.replace(...) before triggering.
    - with shell=True the fault is printed to stderr and the process exits with
      status 1 (unless deferred=True); otherwise the fault is raised.

    typical options
    - shell, fancy, colorful, deferred, prog, and any extra context.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "CommandException",
    "MalformedArgumentsError",
    "MissingOptionValueError",
    "EmptyValueError",
    "FlagAssignmentError",
    "DuplicatedSwitchError",
    "MissingCardinalsError",
    "UnparsedTokensError",
    "UnrecognizedLeadingTokenError",
    "MalformedTokenError",
    "FaultCode",
    "trigger",
    "getdoc",
)
