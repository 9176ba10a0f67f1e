"""
denoflags parser: classify raw invocation arguments.

What this module provides
- Selection variants (named tuples, usable in match statements):
  • Info(file), Eval(code), Fmt(files): the built-in subcommands.
  • RunScript(path, arguments): the default mode; arguments are the script's own
    tokens, captured verbatim.
  • NoSelection(): only global switches were given.
- ParseResult(switches, values, selection): the generic outcome of a parse.
- ArgumentParser: the token-by-token classifier over a Catalog.
- parse_args(args): convenience wrapper over the module-level CATALOG.

Phases
- tokenize: one raw token that starts with '-' is normalized into
  (switch, spelling, inline value) triples. "--name=value" is split at the first
  '=' and combined short switches ("-Dr") are expanded letter by letter.
- classify: a single loop decides, for each token, whether it is a switch,
  a subcommand, or the script path. Once a subcommand or a script is selected
  the loop stops: the remaining tokens are never matched against the catalog,
  so a script can accept flags spelled like ours ("gist.ts --title X").

Faults
- Every failure is raised as a CommandException subclass (see faults) whose
  message leads with the ordinal position of the offending token.
"""
import logging
from collections import deque, namedtuple
from types import MappingProxyType

from .catalog import CATALOG
from .faults import *
from .utils import ordinal

logger = logging.getLogger(__name__)


class _Variant:
    """
    Mixin for selection variants: equality also compares the variant type, so
    Info("x") != Eval("x") even though both are one-field tuples.
    """
    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))


class Info(_Variant, namedtuple("Info", ("file",))):
    """info FILE: show source file related info."""
    __slots__ = ()


class Eval(_Variant, namedtuple("Eval", ("code",))):
    """eval CODE: evaluate a code string."""
    __slots__ = ()


class Fmt(_Variant, namedtuple("Fmt", ("files",))):
    """fmt FILES...: format one or more files (files is a tuple, original order)."""
    __slots__ = ()


class RunScript(_Variant, namedtuple("RunScript", ("path", "arguments"))):
    """default mode: run the script at path with its own verbatim arguments (a tuple)."""
    __slots__ = ()


class NoSelection(_Variant, namedtuple("NoSelection", ())):
    """no subcommand and no script were given."""
    __slots__ = ()


class ParseResult(namedtuple("ParseResult", ("switches", "values", "selection"))):
    """
    Generic parse outcome.

    fields
    - switches: frozenset of canonical names that were present (e.g., {"reload", "log-debug"}).
    - values: read-only mapping canonical name → value for value-bearing switches.
    - selection: one of Info | Eval | Fmt | RunScript | NoSelection.
    """
    __slots__ = ()

    @property
    def passthrough(self):
        """Tokens captured after the script path (empty unless RunScript)."""
        match self.selection:
            case RunScript(_, arguments):
                return arguments
            case _:
                return ()


class ArgumentParser:
    """
    Token-by-token classifier for the deno command line.

    A parser is reusable: every call to parse() resets the per-run state
    (remaining tokens, current position, recorded switches and values).
    """

    def __init__(self, catalog=CATALOG):
        self.catalog = catalog
        self._tokens = deque()
        self._index = 0
        self._switches = {}
        self._values = {}

    def _unknown(self, spelling, token):
        suggestions = self.catalog.suggest(spelling)
        try:
            hint = "did you mean %r? flags are only recognized before the script path" % suggestions[0]
        except IndexError:
            hint = "check the usage for the accepted spellings; flags are only recognized before the script path"
        if spelling == token:
            message = "unknown option or flag %r at %s position" % (token, ordinal(self._index))
        else:
            message = "unknown flag %r in %r at %s position" % (spelling, token, ordinal(self._index))
        return UnrecognizedLeadingTokenError(
            message,
            title="unknown option or flag",
            code=FaultCode.UNKNOWN_SWITCH,
            hint=hint,
            token=token,
            index=self._index,
            suggestions=suggestions,
            docs=getdoc(FaultCode.UNKNOWN_SWITCH),
        )

    def _resolve_token(self, token):
        """
        normalize a raw switch token into (switch, spelling, value) triples.

        forms
        - '--name'        → [(switch, '--name', None)]
        - '--name=value'  → [(switch, '--name', 'value')]   (value may be '')
        - '-x'            → [(switch, '-x', None)]
        - '-x=value'      → [(switch, '-x', 'value')]
        - '-Dr'           → [(switch, '-D', None), (switch, '-r', None)]
          a value-bearing letter inside a group takes the rest of the token as its value.

        raises
        - UnrecognizedLeadingTokenError when a spelling (or any letter of a group)
          is not declared in the catalog.
        """
        if token.startswith("--"):
            spelling, separator, value = token.partition("=")
            if (switch := self.catalog.lookup(spelling)) is None:
                raise self._unknown(spelling, token)
            return [(switch, spelling, value if separator else None)]

        if token[2:3] == "=" or len(token) == 2:
            spelling, separator, value = token.partition("=")
            if (switch := self.catalog.lookup(spelling)) is None:
                raise self._unknown(spelling, token)
            return [(switch, spelling, value if separator else None)]

        resolved = []
        letters = token[1:]
        for offset, letter in enumerate(letters):
            spelling = "-" + letter
            if (switch := self.catalog.lookup(spelling)) is None:
                raise self._unknown(spelling, token)
            if switch.takes_value and (rest := letters[offset + 1:]):
                resolved.append((switch, spelling, rest.removeprefix("=")))
                break
            resolved.append((switch, spelling, None))
        return resolved

    def _record(self, switch, spelling, value):
        """
        store one resolved switch; value-bearing switches take the inline value
        or consume the following token.
        """
        if switch.canonical in self._switches:
            raise DuplicatedSwitchError(
                "%s %r at %s position was already provided as %r" % (
                    "option" if switch.takes_value else "flag",
                    spelling,
                    ordinal(self._index),
                    self._switches[switch.canonical],
                ),
                title="duplicated %s" % ("option" if switch.takes_value else "flag"),
                code=FaultCode.DUPLICATED_SWITCH,
                hint="keep a single %s; each one can be specified only once" % spelling,
                token=spelling,
                index=self._index,
                docs=getdoc(FaultCode.DUPLICATED_SWITCH),
            )

        if not switch.takes_value:
            if value is not None:
                raise FlagAssignmentError(
                    "flag %r at %s position cannot have an inline value" % (spelling, ordinal(self._index)),
                    title="flag cannot take a value",
                    code=FaultCode.FLAG_ASSIGNMENT,
                    hint="remove everything from '=' (for example: %s)" % spelling,
                    token=spelling,
                    index=self._index,
                    docs=getdoc(FaultCode.FLAG_ASSIGNMENT),
                )
            self._switches[switch.canonical] = spelling
            return

        if value is None:
            try:
                value = self._tokens.popleft()
            except IndexError:
                raise MissingOptionValueError(
                    "option %r at %s position requires a value" % (spelling, ordinal(self._index)),
                    title="option value required",
                    code=FaultCode.OPTION_VALUE_REQUIRED,
                    hint="pass the value inline (for example: %s=<value>)" % spelling,
                    token=spelling,
                    index=self._index,
                    docs=getdoc(FaultCode.OPTION_VALUE_REQUIRED),
                ) from None
            self._index += 1

        if not value:
            raise EmptyValueError(
                "option %r at %s position has an empty value" % (spelling, ordinal(self._index)),
                title="empty value",
                code=FaultCode.EMPTY_VALUE,
                hint="add a value after '=' (for example: %s=<value>)" % spelling,
                token=spelling,
                index=self._index,
                docs=getdoc(FaultCode.EMPTY_VALUE),
            )

        self._switches[switch.canonical] = spelling
        self._values[switch.canonical] = value

    def _select(self, subcommand):
        """
        consume the positional values declared by a subcommand and build its variant.
        """
        start = self._index
        if not self._tokens:
            raise MissingCardinalsError(
                "subcommand %r at %s position requires %s %s" % (
                    subcommand.name,
                    ordinal(start),
                    "at least one" if subcommand.nargs == "+" else "exactly one",
                    subcommand.metavar,
                ),
                title="missing cardinals",
                code=FaultCode.MISSING_CARDINALS,
                hint="usage: %s %s%s" % (subcommand.name, subcommand.metavar, "..." * (subcommand.nargs == "+")),
                token=subcommand.name,
                index=start,
                docs=getdoc(FaultCode.MISSING_CARDINALS),
            )

        if subcommand.nargs == "+":
            values = tuple(self._tokens)
            self._index += len(self._tokens)
            self._tokens.clear()
        else:
            values = (self._tokens.popleft(),)
            self._index += 1
            if self._tokens:
                raise UnparsedTokensError(
                    "unexpected %r at %s position after %s %s" % (
                        self._tokens[0], ordinal(self._index + 1), subcommand.name, subcommand.metavar
                    ),
                    title="unparsed input",
                    code=FaultCode.UNPARSED_TOKENS,
                    hint="%s takes exactly one %s; quote it if it contains spaces" % (
                        subcommand.name, subcommand.metavar
                    ),
                    token=self._tokens[0],
                    index=self._index + 1,
                    leftover=tuple(self._tokens),
                    docs=getdoc(FaultCode.UNPARSED_TOKENS),
                )

        match subcommand.name:
            case "info":
                return Info(*values)
            case "eval":
                return Eval(*values)
            case "fmt":
                return Fmt(values)
            case _:
                raise RuntimeError("unexpected subcommand")

    def parse(self, args, /):
        """
        classify the invocation's arguments (program name excluded).

        returns
        - ParseResult with the present switches, the switch values and the selection.

        raises
        - MalformedArgumentsError: missing/empty value, inline value on a flag,
          duplicated switch, missing or extra subcommand positionals.
        - UnrecognizedLeadingTokenError: a dash token that is not a declared switch,
          or an empty token, before any subcommand or script was selected.
        """
        if isinstance(args, str):
            raise TypeError("parse() argument must be an iterable of strings, not a string")

        self._tokens = deque(args)
        self._index = 0
        self._switches = {}
        self._values = {}

        selection = NoSelection()
        while self._tokens:
            token = self._tokens.popleft()
            self._index += 1

            if not isinstance(token, str):
                raise TypeError("parse() argument must be an iterable of strings")

            match token:
                case "--":
                    # end of switches: the next token is the script path, whatever it looks like
                    if self._tokens:
                        self._index += 1
                        selection = RunScript(self._tokens.popleft(), tuple(self._tokens))
                        self._tokens.clear()
                    break
                case "":
                    raise MalformedTokenError(
                        "empty argument at %s position" % ordinal(self._index),
                        title="malformed token",
                        code=FaultCode.MALFORMED_TOKEN,
                        hint="remove the empty argument or give a script path",
                        token=token,
                        index=self._index,
                        docs=getdoc(FaultCode.MALFORMED_TOKEN),
                    )
                case _ if token.startswith("-") and token != "-":
                    for switch, spelling, value in self._resolve_token(token):
                        logger.debug("switch %s (%s) at position %d", switch.canonical, spelling, self._index)
                        self._record(switch, spelling, value)
                case _ if (subcommand := self.catalog.subcommand(token)) is not None:
                    selection = self._select(subcommand)
                    break
                case _:
                    selection = RunScript(token, tuple(self._tokens))
                    self._tokens.clear()
                    break

        logger.debug("selected %r", selection)
        return ParseResult(frozenset(self._switches), MappingProxyType(dict(self._values)), selection)


def parse_args(args, /, *, catalog=CATALOG):
    """Parse with a fresh ArgumentParser over the given catalog."""
    return ArgumentParser(catalog).parse(args)


__all__ = (
    "Info",
    "Eval",
    "Fmt",
    "RunScript",
    "NoSelection",
    "ParseResult",
    "ArgumentParser",
    "parse_args",
)
