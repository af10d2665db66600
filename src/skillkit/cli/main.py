# topmark:header:start
#
#   project      : SkillKit
#   file         : main.py
#   file_relpath : src/skillkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit command-line entry point.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Without a subcommand on an interactive terminal, the navigation session
  starts; otherwise a hint and the help text are printed.
- Subcommands reuse the shared helpers in [`skillkit.cli.cmd_common`][].
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from skillkit.cli.cmd_common import build_context
from skillkit.cli.commands.info import info_command
from skillkit.cli.commands.init import init_command
from skillkit.cli.commands.list import list_command
from skillkit.cli.commands.platforms import platforms_command
from skillkit.cli.commands.remove import remove_command
from skillkit.cli.commands.status import status_command
from skillkit.cli.commands.sync import sync_command
from skillkit.cli.commands.use import use_command
from skillkit.cli.commands.version import version_command
from skillkit.cli.console import ClickConsole
from skillkit.cli.options import (
    common_color_options,
    common_location_options,
    common_verbose_options,
    resolve_verbosity,
)
from skillkit.cli_shared.color import ColorMode, resolve_color_mode
from skillkit.config.logging import get_logger, resolve_env_log_level, setup_logging
from skillkit.tui.controller import NavigationController
from skillkit.tui.terminal import ClickTerminal

if TYPE_CHECKING:
    from skillkit.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    repo_path: str | None,
    config_path: str | None,
) -> None:
    """Initialize shared state (verbosity, color, locations) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        repo_path (str | None): Value of ``--repo``.
        config_path (str | None): Value of ``--config``.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["repo_path"] = repo_path
    ctx.obj["config_path"] = config_path


def _is_interactive() -> bool:
    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except (OSError, ValueError):
        return False


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SkillKit: distribute AI skills and agents to every platform.",
)
@common_verbose_options
@common_color_options
@common_location_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    repo_path: str | None,
    config_path: str | None,
) -> None:
    """Entry point for the SkillKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        repo_path=repo_path,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is not None:
        return

    if not _is_interactive():
        console.print("Hint: run 'sk' in a terminal for the interactive menu.")
        console.print()
        console.print(ctx.get_help())
        return

    cfg, catalog, registry = build_context(ctx)
    controller = NavigationController(
        cfg,
        ClickTerminal(),
        console,
        catalog=catalog,
        registry=registry,
        config_path=Path(config_path) if config_path else None,
    )
    controller.run()


cli.add_command(use_command)

cli.add_command(sync_command)

cli.add_command(list_command)

cli.add_command(platforms_command)

cli.add_command(info_command)

cli.add_command(remove_command)

cli.add_command(status_command)

cli.add_command(init_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
