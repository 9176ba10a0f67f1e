"""
denoflags invocation: one call from raw arguments to everything the runtime needs.

    >>> from denoflags import set_flags
    >>> flags, argv, engine = set_flags(["--allow-net", "gist.ts", "--title", "X"])
    >>> flags.allow_net, argv
    (True, ['deno', 'gist.ts', '--title', 'X'])

Faults raised by the parser propagate unchanged; nothing is printed and the
process is never terminated from here.
"""
from collections import namedtuple

from .catalog import CATALOG, PROGRAM
from .engine import engine_options
from .flags import build_flags
from .parser import ArgumentParser
from .passthrough import assemble_argv


class Invocation(namedtuple("Invocation", ("flags", "argv", "engine"))):
    """
    fields
    - flags: DenoFlags
    - argv: residual argv for the downstream engine (list, starts with the program name)
    - engine: EngineOptions to apply before any script runs
    """
    __slots__ = ()


def set_flags(args, /, *, program=PROGRAM, catalog=CATALOG):
    """
    Parse the invocation's arguments (program name excluded).

    raises
    - MalformedArgumentsError, UnrecognizedLeadingTokenError (see faults).
    """
    result = ArgumentParser(catalog).parse(args)
    return Invocation(
        build_flags(result),
        assemble_argv(result, program=program),
        engine_options(result, program=program),
    )


__all__ = (
    "Invocation",
    "set_flags",
)
