# topmark:header:start
#
#   project      : SkillKit
#   file         : status.py
#   file_relpath : src/skillkit/cli/commands/status.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `status` command.

Health check over every (module, platform) pair. Exits with ``FAILURE`` when a
link is broken or blocked.
"""

from __future__ import annotations

import click

from skillkit.cli.cmd_common import build_context, get_console
from skillkit.cli_shared.exit_codes import ExitCode
from skillkit.cli_shared.render import (
    ICON_ERROR,
    ICON_INFO,
    ICON_MISSING,
    ICON_SUCCESS,
    ICON_WARNING,
)
from skillkit.core.reconcile import LinkHealth, status_all


@click.command(
    name="status",
    help="Check the health of all module links.",
)
@click.pass_context
def status_command(ctx: click.Context) -> None:
    """Report broken, blocked and unreadable links and per-health counts."""
    console = get_console(ctx)
    _cfg, catalog, registry = build_context(ctx)

    modules = catalog.list_all()
    if not modules:
        console.print()
        console.print(console.styled("⚠ No modules found.", fg="yellow"))
        console.print()
        return

    console.print()
    console.print(f"{console.styled(ICON_INFO, fg='blue')} Health Check")
    console.print()

    report = status_all(modules, registry.select())
    for module, platform, status in report.problems:
        match status.health:
            case LinkHealth.BROKEN:
                icon, color, detail = ICON_ERROR, "red", f"broken (points to {status.actual})"
            case LinkHealth.UNREADABLE:
                icon, color, detail = ICON_ERROR, "red", f"unreadable ({status.actual})"
            case _:
                icon, color, detail = ICON_WARNING, "yellow", "blocked by real file/dir"
        console.print(
            f"  {console.styled(icon, fg=color)} {module.name} → {platform.key}: {detail}"
        )

    console.print()
    summary = (
        f"  {console.styled(ICON_SUCCESS, fg='green')} Healthy: {report.healthy}  "
        f"{console.styled(ICON_ERROR, fg='red')} Broken: {report.broken}  "
        f"{console.styled(ICON_WARNING, fg='yellow')} Blocked: {report.blocked}  "
        f"{console.styled(ICON_MISSING, fg='bright_black')} Not linked: {report.missing}"
    )
    if report.unreadable:
        summary += f"  {console.styled(ICON_ERROR, fg='red')} Unreadable: {report.unreadable}"
    console.print(summary)
    console.print()

    if report.broken:
        hint = "Run 'sk sync' to fix broken links."
        console.print(f"  {console.styled(ICON_INFO, fg='blue')} {hint}")
        console.print()
    if not report.ok:
        ctx.exit(ExitCode.FAILURE)
