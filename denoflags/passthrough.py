"""
denoflags passthrough: rebuild the argv handed to the downstream engine.

The residual argv always starts with the program-name placeholder, then:
- Eval(code)              → [program, code]
- Info(file)              → [program, file]
- Fmt(files)              → [program, *files]
- RunScript(path, args)   → [program, path, *args]   (args untouched, original order)
- NoSelection()           → [program]

The result is opaque to this package: it is never re-parsed or validated here.
"""
from .catalog import PROGRAM
from .parser import Info, Eval, Fmt, RunScript, NoSelection


def assemble_argv(result, /, *, program=PROGRAM):
    argv = [program]
    match result.selection:
        case Eval(code):
            argv.append(code)
        case Info(file):
            argv.append(file)
        case Fmt(files):
            argv.extend(files)
        case RunScript(path, arguments):
            argv.append(path)
            argv.extend(arguments)
        case NoSelection():
            pass
        case _:
            raise RuntimeError("unexpected selection")
    return argv


__all__ = (
    "assemble_argv",
)
