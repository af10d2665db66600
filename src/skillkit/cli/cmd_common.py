# topmark:header:start
#
#   project      : SkillKit
#   file         : cmd_common.py
#   file_relpath : src/skillkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Common command utilities for click-based commands.

Small helpers shared by several commands: loading the configuration from the
group options, translating core exceptions into CLI exceptions, printing batch
items according to the verbosity, and mapping batch outcomes to exit codes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from skillkit.cli.errors import (
    SkillkitConfigError,
    SkillkitIOError,
    SkillkitNotFoundError,
    SkillkitUsageError,
)
from skillkit.cli.options import VERBOSITY_QUIET
from skillkit.cli_shared.exit_codes import ExitCode
from skillkit.cli_shared.render import print_result
from skillkit.config.io import load_config
from skillkit.config.logging import get_logger
from skillkit.core.catalog import ModuleCatalog
from skillkit.core.errors import (
    ConfigUnavailableError,
    LinkError,
    UnknownModuleError,
    UnknownPlatformError,
)
from skillkit.core.registry import PlatformRegistry

if TYPE_CHECKING:
    from skillkit.cli_shared.console_api import ConsoleLike
    from skillkit.config.model import Config
    from skillkit.core.reconcile import BatchReport, LinkResult

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the command group (0 if unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored by the command group."""
    console: ConsoleLike = ctx.find_root().obj["console"]
    return console


@contextmanager
def translate_core_errors() -> Iterator[None]:
    """Re-raise core exceptions as CLI exceptions with the matching exit code.

    Mapping:
        UnknownModuleError → NOT_FOUND
        UnknownPlatformError → USAGE_ERROR
        ConfigUnavailableError → CONFIG_ERROR
        LinkError → IO_ERROR
    """
    try:
        yield
    except UnknownModuleError as exc:
        raise SkillkitNotFoundError(str(exc)) from exc
    except UnknownPlatformError as exc:
        raise SkillkitUsageError(str(exc)) from exc
    except ConfigUnavailableError as exc:
        raise SkillkitConfigError(str(exc)) from exc
    except LinkError as exc:
        raise SkillkitIOError(str(exc)) from exc


def load_config_from_click(ctx: click.Context) -> Config:
    """Load the configuration selected by ``--repo`` / ``--config`` and the environment.

    Raises:
        SkillkitConfigError: If the configuration is unavailable.
    """
    obj = ctx.find_root().obj or {}
    with translate_core_errors():
        return load_config(obj.get("repo_path"), obj.get("config_path"))


def build_context(ctx: click.Context) -> tuple[Config, ModuleCatalog, PlatformRegistry]:
    """Return the configuration with its catalog and registry."""
    cfg = load_config_from_click(ctx)
    return cfg, ModuleCatalog(cfg.repo_path), PlatformRegistry(cfg)


def result_printer(ctx: click.Context, console: ConsoleLike) -> Callable[[LinkResult], None]:
    """Return the per-item callback for batch commands.

    With ``-q`` only failed items are printed; the summary line is unaffected.
    """
    quiet = get_effective_verbosity(ctx) <= VERBOSITY_QUIET

    def on_result(result: LinkResult) -> None:
        if quiet and result.ok:
            return
        print_result(console, result)

    return on_result


def exit_for_report(ctx: click.Context, report: BatchReport) -> None:
    """Exit with ``FAILURE`` if any item of ``report`` failed."""
    if not report.ok:
        ctx.exit(ExitCode.FAILURE)


def echo_no_modules(console: ConsoleLike, cfg: Config) -> None:
    """Print the hint shown when the repository holds no modules."""
    console.print()
    console.print(console.styled(f"⚠ No modules found in {cfg.repo_path}", fg="yellow"))
    console.print("  Run 'sk init' to initialize the repository.")
    console.print()
