# topmark:header:start
#
#   project      : SkillKit
#   file         : options.py
#   file_relpath : src/skillkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Reusable click options and their resolution logic.

Commands stay thin by composing these decorators: verbosity, color, the
repository/configuration location, and the link scope.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from skillkit.cli.cli_types import EnumChoiceParam
from skillkit.cli.errors import SkillkitUsageError
from skillkit.cli_shared.color import ColorMode
from skillkit.config.logging import get_logger
from skillkit.config.model import Scope

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

# Program-output verbosity levels
VERBOSITY_QUIET = -1
VERBOSITY_DEFAULT = 0
VERBOSITY_VERBOSE = 1
VERBOSITY_DEBUG = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of ``-v`` flags.
        quiet_count: Number of ``-q`` flags.

    Returns:
        ``-1`` when quiet, ``0`` by default, ``1`` or ``2`` when verbose.

    Raises:
        SkillkitUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SkillkitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 2:
        return VERBOSITY_DEBUG
    if verbose_count == 1:
        return VERBOSITY_VERBOSE
    if quiet_count >= 1:
        return VERBOSITY_QUIET
    return VERBOSITY_DEFAULT


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counting, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color auto|always|never`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_location_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--repo DIR`` and ``--config FILE``.

    Both default to unset so that ``SKILLKIT_REPO`` / ``SKILLKIT_CONFIG`` and
    the built-in defaults apply (see [`skillkit.config.io`][]).
    """
    f = click.option(
        "--repo",
        "repo_path",
        metavar="DIR",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        help="Module repository root (default: $SKILLKIT_REPO or ~/.config/agent).",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(file_okay=True, dir_okay=False),
        default=None,
        help="Platform configuration file (default: $SKILLKIT_CONFIG or <repo>/platforms.toml).",
    )(f)
    return f


def _to_scope(_ctx: click.Context, _param: click.Parameter, value: bool) -> Scope:
    return Scope.PROJECT if value else Scope.GLOBAL


def scope_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--global`` (default) / ``--project`` as a single `Scope` value named ``scope``."""
    return click.option(
        "--project/--global",
        "scope",
        default=False,
        callback=_to_scope,
        help="Link under each platform's project root instead of its global root.",
    )(f)


def dry_run_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dry-run``."""
    return click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Show what would be linked without changing anything.",
    )(f)
