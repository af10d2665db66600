# topmark:header:start
#
#   project      : SkillKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""CLI test helpers for running ``sk`` against a temporary repository.

Every invocation goes through `click.testing.CliRunner`. Standard input is
never a terminal there, so the bare ``sk`` command prints its hint and the
help text instead of starting the interactive session.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from skillkit.cli.main import cli
from skillkit.cli_shared.exit_codes import ExitCode
from tests.conftest import write_platforms_toml

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from skillkit.config.model import Platform


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``argv`` and return the captured result.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["--repo", str(repo), "list"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), input=input_text)


def run_in_repo(repo: Path, *argv: str) -> Result:
    """Invoke the CLI on ``repo`` with color disabled."""
    return run_cli(["--no-color", "--repo", str(repo), *argv])


@pytest.fixture
def cli_repo(repo: Path, platforms: dict[str, Platform]) -> Path:
    """Return `repo` with a ``platforms.toml`` describing `platforms`."""
    write_platforms_toml(repo, platforms)
    return repo


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.NOT_FOUND, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
