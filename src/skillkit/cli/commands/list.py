# topmark:header:start
#
#   project      : SkillKit
#   file         : list.py
#   file_relpath : src/skillkit/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `list` command.

Shows modules with the platforms they are linked into, or (``--by-platform``)
platforms in display order with the modules linked into each.
"""

from __future__ import annotations

import click

from skillkit.cli.cmd_common import build_context, echo_no_modules, get_console
from skillkit.cli_shared.render import render_module_projection, render_platform_projection


@click.command(
    name="list",
    help="List modules and their link status.",
)
@click.option(
    "--by-platform",
    "by_platform",
    is_flag=True,
    help="Group by platform (in persisted display order) instead of by module.",
)
@click.pass_context
def list_command(ctx: click.Context, *, by_platform: bool) -> None:
    """List modules and where they are linked."""
    console = get_console(ctx)
    cfg, catalog, registry = build_context(ctx)

    modules = catalog.list_all()
    platforms = registry.select()

    if by_platform:
        console.print()
        console.print(console.styled("📁 Platforms:", fg="blue"))
        console.print()
        render_platform_projection(console, modules, platforms)
        console.print()
        return

    if not modules:
        echo_no_modules(console, cfg)
        return

    console.print()
    console.print(console.styled("📁 Modules:", fg="blue"))
    console.print()
    render_module_projection(console, modules, platforms)
    console.print()
