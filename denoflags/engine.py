"""
denoflags engine options: the boundary with the V8 configuration layer.

Instead of poking process-wide engine state while parsing, the parser result is
turned into an explicit EngineOptions object. The caller hands it to the engine
initialization code, which applies it once before any script runs.

EngineOptions
- help: True when --v8-options was given; the collaborator is asked to print its
  own option list and the caller is expected to stop afterwards.
- flags: the --v8-flags value split on commas (empty segments dropped).
- argv: (program, *flags), the shape the collaborator expects (argv[0] is skipped).
- apply(setter): forward to the collaborator at most once. setter(argv) follows
  the v8_set_flags convention: it receives a list of strings and returns the
  options it did not consume. The meaning of the options is never inspected here.
"""
import logging

from .catalog import PROGRAM

logger = logging.getLogger(__name__)

HELP_OPTION = "--v8-options"


class EngineOptions:
    __slots__ = ("_program", "_help", "_flags", "_applied")

    def __init__(self, *, help=False, flags=(), program=PROGRAM):
        if not all(isinstance(flag, str) for flag in flags):
            raise TypeError("EngineOptions() 'flags' must be strings")
        self._program = program
        self._help = bool(help)
        self._flags = tuple(flags)
        self._applied = False

    @property
    def help(self):
        return self._help

    @property
    def flags(self):
        return self._flags

    @property
    def argv(self):
        return (self._program, *self._flags)

    @property
    def applied(self):
        return self._applied

    def __bool__(self):
        return self._help or bool(self._flags)

    def __eq__(self, other):
        if not isinstance(other, EngineOptions):
            return NotImplemented
        return (self._program, self._help, self._flags) == (other._program, other._help, other._flags)

    def __hash__(self):
        return hash((self._program, self._help, self._flags))

    def __repr__(self):
        return "engine-options(help=%r, flags=%r)" % (self._help, self._flags)

    def __rich_repr__(self):
        yield "help", self._help
        yield "flags", self._flags

    def apply(self, setter, /):
        """
        forward the options to the engine collaborator.

        order
        - help request first: setter([program, "--v8-options"]).
        - then the tuning flags: setter([program, *flags]).

        returns
        - tuple with the value returned by each call made; () when nothing was
          forwarded or when this object was already applied.
        """
        if not callable(setter):
            raise TypeError("apply() argument must be callable")
        if self._applied:
            return ()
        self._applied = True

        results = ()
        if self._help:
            logger.debug("requesting engine option help")
            results += (setter([self._program, HELP_OPTION]),)
        if self._flags:
            logger.debug("forwarding engine flags %s", ",".join(self._flags))
            results += (setter(list(self.argv)),)
        return results


def engine_options(result, /, *, program=PROGRAM):
    """Extract the engine options from a ParseResult."""
    flags = ()
    if (value := result.values.get("v8-flags")) is not None:
        flags = tuple(flag for flag in value.split(",") if flag)
    return EngineOptions(help="v8-options" in result.switches, flags=flags, program=program)


__all__ = (
    "EngineOptions",
    "engine_options",
    "HELP_OPTION",
)
