"""
denoflags runtime flags: the typed, immutable outcome of an invocation.

DenoFlags is a named tuple of booleans (all False by default). It is assembled
once from a ParseResult and never mutated afterwards; use _replace() to derive
a modified copy.

Mapping rules
- each present switch sets the field of the same name (dashes → underscores),
  except "no-prompt" which sets no_prompts.
- "allow-all" additionally sets the six permission fields (union: a permission
  that is already set stays set).
- the selection sets info / eval / fmt; RunScript and NoSelection set none.
- "v8-options" and "v8-flags" have no field: they belong to the engine (see engine).
"""
from collections import namedtuple

from .catalog import PERMISSIONS
from .parser import Info, Eval, Fmt, RunScript, NoSelection

_FIELDS = (
    "log_debug",
    "version",
    "reload",
    "allow_read",
    "allow_write",
    "allow_net",
    "allow_env",
    "allow_run",
    "allow_high_precision",
    "no_prompts",
    "types",
    "prefetch",
    "info",
    "fmt",
    "eval",
)

# canonical switch name → field; switches missing here do not map to a field
_SWITCH_FIELDS = {
    "log-debug": "log_debug",
    "version": "version",
    "reload": "reload",
    "allow-read": "allow_read",
    "allow-write": "allow_write",
    "allow-net": "allow_net",
    "allow-env": "allow_env",
    "allow-run": "allow_run",
    "allow-high-precision": "allow_high_precision",
    "no-prompt": "no_prompts",
    "types": "types",
    "prefetch": "prefetch",
}


class DenoFlags(namedtuple("DenoFlags", _FIELDS, defaults=(False,) * len(_FIELDS))):
    """Immutable runtime permission and behavior switches."""
    __slots__ = ()

    @classmethod
    def from_result(cls, result, /):
        return build_flags(result)

    @property
    def permissions(self):
        """Names of the permission fields that are set, in declaration order."""
        return tuple(
            field for field in (name.replace("-", "_") for name in PERMISSIONS) if getattr(self, field)
        )


def build_flags(result, /):
    """
    Map a ParseResult onto DenoFlags.

    This step cannot fail for a result produced by the parser.
    """
    fields = {_SWITCH_FIELDS[name] for name in result.switches if name in _SWITCH_FIELDS}

    if "allow-all" in result.switches:
        fields.update(name.replace("-", "_") for name in PERMISSIONS)

    match result.selection:
        case Info():
            fields.add("info")
        case Eval():
            fields.add("eval")
        case Fmt():
            fields.add("fmt")
        case RunScript() | NoSelection():
            pass
        case _:
            raise RuntimeError("unexpected selection")

    return DenoFlags(**dict.fromkeys(fields, True))


__all__ = (
    "DenoFlags",
    "build_flags",
)
