# topmark:header:start
#
#   project      : SkillKit
#   file         : init.py
#   file_relpath : src/skillkit/cli/commands/init.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `init` command.

Creates the repository layout and seeds ``platforms.toml`` from the packaged
template.
"""

from __future__ import annotations

from pathlib import Path

import click

from skillkit.cli.cmd_common import get_console
from skillkit.cli_shared.exit_codes import ExitCode
from skillkit.cli_shared.render import render_init_steps
from skillkit.config.io import resolve_repo_path
from skillkit.core.repository import initialize


@click.command(
    name="init",
    help="Initialize the module repository.",
)
@click.pass_context
def init_command(ctx: click.Context) -> None:
    """Create ``skill/``, ``agent/`` and ``platforms.toml`` in the repository."""
    console = get_console(ctx)
    obj = ctx.find_root().obj or {}
    repo_path = resolve_repo_path(obj.get("repo_path"))
    config_path = obj.get("config_path")

    steps = initialize(repo_path, Path(config_path) if config_path else None)
    if not render_init_steps(console, repo_path, steps):
        ctx.exit(ExitCode.IO_ERROR)
