# topmark:header:start
#
#   project      : SkillKit
#   file         : errors.py
#   file_relpath : src/skillkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Exceptions for the ``sk`` CLI.

Raise these from commands to exit with a standardized message and exit code.
Core exceptions are translated into them by
[`skillkit.cli.cmd_common.translate_core_errors`][].
"""

from __future__ import annotations

from typing import IO, Any

import click

from skillkit.cli.console import StdConsole, get_console_safely
from skillkit.cli_shared.exit_codes import ExitCode


class SkillkitCliError(click.ClickException):
    """Base class for all ``sk`` CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the error on the project console, or on ``file`` when given."""
        console = get_console_safely() if file is None else StdConsole(err=file)
        console.error(console.styled(f"✖ {self.format_message()}", fg="bright_red"))


class SkillkitUsageError(SkillkitCliError):
    """Invalid invocation (bad flags, unknown platform)."""

    exit_code = ExitCode.USAGE_ERROR


class SkillkitNotFoundError(SkillkitCliError):
    """The named module does not exist."""

    exit_code = ExitCode.NOT_FOUND


class SkillkitConfigError(SkillkitCliError):
    """Platform configuration is missing, unreadable, or invalid."""

    exit_code = ExitCode.CONFIG_ERROR


class SkillkitIOError(SkillkitCliError):
    """A single link operation failed."""

    exit_code = ExitCode.IO_ERROR
