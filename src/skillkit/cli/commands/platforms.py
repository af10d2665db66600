# topmark:header:start
#
#   project      : SkillKit
#   file         : platforms.py
#   file_relpath : src/skillkit/cli/commands/platforms.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `platforms` command.

Shows every configured platform in display order with its roots.
"""

from __future__ import annotations

import click

from skillkit.cli.cmd_common import build_context, get_console, get_effective_verbosity
from skillkit.cli_shared.render import render_platforms


@click.command(
    name="platforms",
    help="Show the configured platforms.",
)
@click.pass_context
def platforms_command(ctx: click.Context) -> None:
    """Show the configured platforms in display order."""
    console = get_console(ctx)
    _cfg, _catalog, registry = build_context(ctx)
    render_platforms(console, registry, verbose=get_effective_verbosity(ctx) > 0)
