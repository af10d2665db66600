# topmark:header:start
#
#   project      : SkillKit
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""CLI tests: `version`, `platforms`, `info` and the group options."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

import pytest

from skillkit.cli_shared.color import ColorMode, resolve_color_mode
from skillkit.constants import ENV_REPO, SKILLKIT_VERSION
from skillkit.core.catalog import ModuleCatalog
from skillkit.core.reconcile import apply_one
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_in_repo,
)
from tests.conftest import make_module, write_platforms_toml

if TYPE_CHECKING:
    from pathlib import Path

    from skillkit.config.model import Platform

pytestmark = pytest.mark.cli


def test_version_plain() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SKILLKIT_VERSION


def test_version_verbose_includes_tagline() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "Cross-Platform AI Skill Distribution Hub" in result.output


def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": SKILLKIT_VERSION}


def test_verbose_and_quiet_conflict() -> None:
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_bare_command_without_terminal_prints_help(cli_repo: Path) -> None:
    result = run_in_repo(cli_repo)

    assert_SUCCESS(result)
    assert "Hint: run 'sk' in a terminal for the interactive menu." in result.output
    assert "Commands:" in result.output
    assert "sync" in result.output


def test_platforms_lists_in_order_with_defaults(
    repo: Path, platforms: dict[str, Platform]
) -> None:
    write_platforms_toml(
        repo, platforms, default_platforms=["beta"], platform_order=["beta", "gamma"]
    )

    result = run_in_repo(repo, "platforms")

    assert_SUCCESS(result)
    assert "Registered Platforms (3):" in result.output
    lines = result.output.splitlines()
    names = [line.strip() for line in lines if line.startswith("  ▶ ")]
    assert names == ["▶ Beta (beta) ●", "▶ Gamma (gamma)", "▶ Alpha (alpha)"]
    assert "Agents:" not in result.output


def test_platforms_verbose_shows_agent_dir(cli_repo: Path) -> None:
    result = run_cli(["--no-color", "-v", "--repo", str(cli_repo), "platforms"])

    assert_SUCCESS(result)
    assert "Agents:  agents/" in result.output


def test_info_shows_module_and_links(cli_repo: Path, platforms: dict[str, Platform]) -> None:
    make_module(
        cli_repo,
        "demo",
        descriptor="---\ndescription: Demo skill\n---\n",
        overrides='[link.overrides]\nalpha = "demo-alpha"\n',
    )
    apply_one(ModuleCatalog(cli_repo).find("demo"), platforms["alpha"])

    result = run_in_repo(cli_repo, "info", "demo")

    assert_SUCCESS(result)
    assert "Module: demo" in result.output
    assert "Description: Demo skill" in result.output
    assert "alpha ⟶ demo-alpha" in result.output
    assert "alpha: healthy" in result.output
    assert "beta: missing" in result.output


def test_info_unknown_module(cli_repo: Path) -> None:
    result = run_in_repo(cli_repo, "info", "ghost")

    assert_NOT_FOUND(result)
    assert "module not found: ghost" in result.output


def test_missing_explicit_config(cli_repo: Path, tmp_path: Path) -> None:
    result = run_in_repo(cli_repo, "--config", str(tmp_path / "absent.toml"), "list")

    assert_CONFIG_ERROR(result)
    assert "absent.toml" in result.output


def test_invalid_config(repo: Path) -> None:
    (repo / "platforms.toml").write_text("platforms = [unclosed\n", encoding="utf-8")

    assert_CONFIG_ERROR(run_in_repo(repo, "list"))


def test_repo_from_environment(
    cli_repo: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    make_module(cli_repo, "demo")
    monkeypatch.setenv(ENV_REPO, os.fspath(cli_repo))

    result = run_cli(["--no-color", "list"])

    assert_SUCCESS(result)
    assert "▶ demo (skill)" in result.output


@pytest.mark.parametrize(
    ("override", "env", "isatty", "expected"),
    [
        (ColorMode.ALWAYS, {"NO_COLOR": "1"}, False, True),
        (ColorMode.NEVER, {"FORCE_COLOR": "1"}, True, False),
        (None, {"FORCE_COLOR": "1"}, False, True),
        (None, {"FORCE_COLOR": "0", "NO_COLOR": ""}, True, False),
        (None, {}, True, True),
        (None, {}, False, False),
    ],
)
def test_color_mode_precedence(
    monkeypatch: pytest.MonkeyPatch,
    override: ColorMode | None,
    env: dict[str, str],
    isatty: bool,
    expected: bool,
) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    assert resolve_color_mode(color_mode_override=override, stdout_isatty=isatty) is expected
