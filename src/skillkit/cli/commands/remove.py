# topmark:header:start
#
#   project      : SkillKit
#   file         : remove.py
#   file_relpath : src/skillkit/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `remove` command.

Removes a module's links from one platform or from all platforms. A link that
does not exist counts as removed; a real file or directory is never touched.
"""

from __future__ import annotations

import click

from skillkit.cli.cmd_common import (
    build_context,
    exit_for_report,
    get_console,
    result_printer,
    translate_core_errors,
)
from skillkit.cli.options import scope_option
from skillkit.cli_shared.render import ICON_SUCCESS, print_summary
from skillkit.config.model import Scope
from skillkit.core import reconcile


@click.command(
    name="remove",
    help="Remove a module's links from a platform (or from all platforms).",
)
@click.argument("module_name", metavar="MODULE")
@click.argument("platform_key", metavar="[PLATFORM]", required=False)
@scope_option
@click.pass_context
def remove_command(
    ctx: click.Context,
    *,
    module_name: str,
    platform_key: str | None,
    scope: Scope,
) -> None:
    """Remove the links of MODULE from PLATFORM, or from every platform."""
    console = get_console(ctx)
    _cfg, catalog, registry = build_context(ctx)

    with translate_core_errors():
        module = catalog.find(module_name)
        platforms = registry.select(platform_key)

    console.print()
    if platform_key:
        with translate_core_errors():
            reconcile.remove_one(module, platforms[platform_key], scope)
        console.print(
            f"  {console.styled(ICON_SUCCESS, fg='green')} "
            f"Removed {module.name} from {platform_key}"
        )
        console.print()
        return

    report = reconcile.unlink_all(
        module, platforms, on_result=result_printer(ctx, console), scope=scope
    )
    print_summary(console, report)
    console.print()
    exit_for_report(ctx, report)
