"""
denoflags help rendering (rich).

render(catalog) builds the usage/help screen of the deno command line:
- usage line: deno [FLAGS] [SUBCOMMAND | SCRIPT [SCRIPT_ARGS]...]
- one section per switch group (flags, permissions, engine, ...)
- subcommands table, with the default <script> entry point last
- environment variables epilog (DENO_DIR, NO_COLOR)

Palette keys
- usage-label, program-name, group-label, flag-name, option-name, metavar,
  argument-description, children, children-description, environment-name,
  epilog-section, panel-title

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- When colorful is False, styling is suppressed.
"""
from collections import defaultdict

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .catalog import CATALOG, ENVIRONMENT, PROGRAM


def render(catalog=CATALOG, /, *, program=PROGRAM, colorful=True, fancy=False):
    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",
        "program-name": "bold #FF4D94",
        "group-label": "bold #FFFFFF",
        "flag-name": "bold #22C55E",
        "option-name": "bold #00E6FF",
        "metavar": "bold #FFD600",
        "argument-description": "#9CA3AF",
        "children": "bold #36C5F0",
        "children-description": "#9CA3AF",
        "environment-name": "bold #FFD600",
        "epilog-section": "#737373",
        "panel-title": "bold #FF4D94",
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def section(title, rows):
        table = Table.grid(padding=(0, 4))
        table.add_column(no_wrap=True)
        table.add_column()
        for left, right in rows:
            table.add_row(left, Text(right or "", styler("argument-description")))
        return Group(Text(title.upper() + ":", styler("group-label")), table, Text(""))

    usage = Text.assemble(
        ("usage", styler("usage-label")), ": ",
        (program, styler("program-name")),
        " [FLAGS] [SUBCOMMAND | SCRIPT [SCRIPT_ARGS]...]",
    )

    groups = {}
    for switch in catalog.switches:
        style = styler("option-name" if switch.takes_value else "flag-name")
        names = Text(", ").join(Text(name, style) for name in switch.names)
        if switch.takes_value:
            names = Text.assemble(names, "=<", (switch.canonical.upper().replace("-", "_"), styler("metavar")), ">")
        groups.setdefault(switch.group, []).append((names, switch.descr))

    subcommands = []
    for subcommand in catalog.subcommands:
        metavar = subcommand.metavar + "..." * (subcommand.nargs == "+")
        subcommands.append((
            Text.assemble((subcommand.name, styler("children")), " ", (metavar, styler("metavar"))),
            subcommand.descr,
        ))
    subcommands.append((Text("<script>", styler("children")), "Script to run"))

    environment = [(Text(name, styler("environment-name")), descr) for name, descr in ENVIRONMENT]

    renders = [usage, Text("")]
    renders.extend(section(group, rows) for group, rows in groups.items())
    renders.append(section("subcommands", subcommands))
    renders.append(section("environment variables", environment))

    if fancy:
        return Panel(Group(*renders), title=Text(program, styler("panel-title")), title_align="left")
    return Group(*renders)


__all__ = (
    "render",
)
