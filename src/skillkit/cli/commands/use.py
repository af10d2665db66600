# topmark:header:start
#
#   project      : SkillKit
#   file         : use.py
#   file_relpath : src/skillkit/cli/commands/use.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `use` command.

Links one module into one platform, or into every configured platform.
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
from skillkit.cli.options import dry_run_option, scope_option
from skillkit.cli_shared.render import (
    ICON_INFO,
    ICON_LINK,
    ICON_SUCCESS,
    print_summary,
    render_table,
)
from skillkit.config.model import Scope
from skillkit.core import reconcile
from skillkit.core.reconcile import BatchReport, LinkOp


@click.command(
    name="use",
    help="Link a module into a platform (or into all platforms).",
)
@click.argument("module_name", metavar="MODULE")
@click.argument("platform_key", metavar="[PLATFORM]", required=False)
@scope_option
@click.option("--as", "link_name", metavar="NAME", default=None, help="Override the link name.")
@dry_run_option
@click.pass_context
def use_command(
    ctx: click.Context,
    *,
    module_name: str,
    platform_key: str | None,
    scope: Scope,
    link_name: str | None,
    dry_run: bool,
) -> None:
    """Link MODULE into PLATFORM, or into every platform when PLATFORM is omitted.

    A single-platform failure exits with the I/O error code; with several
    platforms every link is attempted and failures are tallied.
    """
    console = get_console(ctx)
    _cfg, catalog, registry = build_context(ctx)

    with translate_core_errors():
        module = catalog.find(module_name)
        platforms = registry.select(platform_key)

    if dry_run:
        rows = reconcile.preview_all([module], platforms, scope, link_name)
        console.print()
        console.print(
            f"{console.styled(ICON_INFO, fg='blue')} Preview: {module_name} → "
            f"{len(platforms)} platform(s)"
        )
        console.print()
        render_table(
            console,
            ["Module", "Platform", "Target Path", "Action"],
            [[module_name, r.platform.key, str(r.path), r.action.value] for r in rows],
        )
        console.print()
        return

    console.print()
    if platform_key:
        platform = platforms[platform_key]
        with translate_core_errors():
            path = reconcile.apply_one(module, platform, scope, link_name)
        console.print(
            f"  {console.styled(ICON_SUCCESS, fg='green')} {module_name} "
            f"{console.styled(ICON_LINK, fg='cyan')} {path} "
            f"({console.styled(platform.key, fg='bright_black')})"
        )
        console.print()
        return

    report = BatchReport()
    on_result = result_printer(ctx, console)
    for platform in platforms.values():
        result = reconcile.run_item(LinkOp.LINK, module, platform, scope, link_name)
        report.add(result)
        on_result(result)
    print_summary(console, report)
    console.print()
    exit_for_report(ctx, report)
