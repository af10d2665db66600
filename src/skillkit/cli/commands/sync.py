# topmark:header:start
#
#   project      : SkillKit
#   file         : sync.py
#   file_relpath : src/skillkit/cli/commands/sync.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `sync` command.

Links every module into every configured platform (global scope).
"""

from __future__ import annotations

import click

from skillkit.cli.cmd_common import build_context, exit_for_report, get_console, result_printer
from skillkit.cli.options import dry_run_option
from skillkit.cli_shared.render import ICON_INFO, print_summary, render_table
from skillkit.core import reconcile


@click.command(
    name="sync",
    help="Link every module into every platform.",
)
@dry_run_option
@click.pass_context
def sync_command(ctx: click.Context, *, dry_run: bool) -> None:
    """Link every module into every platform, reporting each link as it is made."""
    console = get_console(ctx)
    _cfg, catalog, registry = build_context(ctx)

    modules = catalog.list_all()
    if not modules:
        console.print()
        console.print(console.styled("⚠ No modules to sync.", fg="yellow"))
        console.print()
        return
    platforms = registry.select()
    info = console.styled(ICON_INFO, fg="blue")

    if dry_run:
        console.print()
        console.print(
            f"{info} Preview: {len(modules)} modules → {len(platforms)} platforms = "
            f"{len(modules) * len(platforms)} symlinks"
        )
        console.print()
        rows = reconcile.preview_all(modules, platforms)
        render_table(
            console,
            ["Module", "Platform", "Target Path", "Action"],
            [[r.module.name, r.platform.key, str(r.path), r.action.value] for r in rows],
        )
        console.print()
        return

    console.print()
    console.print(f"{info} Syncing {len(modules)} modules to {len(platforms)} platforms...")
    console.print()
    report = reconcile.sync_all(modules, platforms, on_result=result_printer(ctx, console))
    print_summary(console, report)
    console.print()
    exit_for_report(ctx, report)

