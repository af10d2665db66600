# topmark:header:start
#
#   project      : SkillKit
#   file         : info.py
#   file_relpath : src/skillkit/cli/commands/info.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `info` command.

Shows one module's record and the live health of its link on every platform.
"""

from __future__ import annotations

import click

from skillkit.cli.cmd_common import build_context, get_console, translate_core_errors
from skillkit.cli_shared.render import (
    ICON_ERROR,
    ICON_LINK,
    ICON_MISSING,
    ICON_SUCCESS,
    ICON_WARNING,
)
from skillkit.core.reconcile import LinkHealth, link_status

_HEALTH_STYLE: dict[LinkHealth, tuple[str, str]] = {
    LinkHealth.HEALTHY: (ICON_SUCCESS, "green"),
    LinkHealth.BROKEN: (ICON_ERROR, "red"),
    LinkHealth.BLOCKED: (ICON_WARNING, "yellow"),
    LinkHealth.MISSING: (ICON_MISSING, "bright_black"),
    LinkHealth.UNREADABLE: (ICON_ERROR, "red"),
}


@click.command(
    name="info",
    help="Show details of a module.",
)
@click.argument("module_name", metavar="MODULE")
@click.pass_context
def info_command(ctx: click.Context, *, module_name: str) -> None:
    """Show the record of MODULE and its link on every platform."""
    console = get_console(ctx)
    _cfg, catalog, registry = build_context(ctx)

    with translate_core_errors():
        module = catalog.find(module_name)

    def label(text: str) -> str:
        return console.styled(text, fg="blue")

    console.print()
    console.print(f"  {label('Module:')} {console.styled(module.name, bold=True)}")
    console.print(f"  {label('Category:')} {module.category.value}")
    console.print(f"  {label('Path:')} {module.path}")
    if module.description:
        console.print(f"  {label('Description:')} {module.description}")
    if module.aliases:
        console.print(f"  {label('Aliases:')}")
        for key, alias in sorted(module.aliases.items()):
            console.print(f"    {key} {console.styled(ICON_LINK, fg='cyan')} {alias}")

    platforms = registry.select()
    if platforms:
        console.print(f"  {label('Links:')}")
    for key, platform in platforms.items():
        status = link_status(module, platform)
        icon, color = _HEALTH_STYLE[status.health]
        detail = status.health.value
        if status.health is LinkHealth.BROKEN:
            detail = f"broken (points to {status.actual})"
        elif status.health is LinkHealth.UNREADABLE:
            detail = f"unreadable ({status.actual})"
        console.print(
            f"    {console.styled(icon, fg=color)} {key}: {detail} "
            f"{console.styled(str(status.path), fg='bright_black')}"
        )
    console.print()
