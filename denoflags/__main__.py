"""
python -m denoflags [ARGS...]

Inspection shell over set_flags(): prints the parsed runtime flags, the residual
argv and the engine options. On a parse fault the help screen and the fault are
printed to stderr and the process exits with status 1.

NO_COLOR disables colored output; -D/--log-debug turns on DEBUG logging for the
rest of the run (engine forwarding included).
"""
import logging
import os
import sys

from rich.console import Console
from rich.pretty import pprint

from . import helper
from .faults import CommandException, trigger
from .invocation import set_flags


def main(args=None, /):
    args = sys.argv[1:] if args is None else list(args)
    colorful = "NO_COLOR" not in os.environ

    try:
        flags, argv, engine = set_flags(args)
    except CommandException as fault:
        Console(stderr=True, no_color=not colorful).print(helper.render(colorful=colorful))
        trigger(fault, shell=True, colorful=colorful)
        return 1

    if flags.log_debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    # stand-in collaborator: show what would reach the engine, consume nothing
    engine.apply(lambda options: pprint(options) or [])
    if engine.help:
        return 0

    pprint(flags._asdict(), expand_all=True)
    pprint(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
