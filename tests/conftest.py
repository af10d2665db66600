# topmark:header:start
#
#   project      : SkillKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Pytest configuration for the SkillKit test suite.

Every test runs with ``HOME`` pointing into its own temporary directory and
with the ``SKILLKIT_*`` environment variables cleared, so nothing outside
``tmp_path`` is ever read or linked.

Notes:
    Platforms built by `make_platform` use absolute roots under
    ``tmp_path/platforms/<key>/``; link targets therefore resolve to
    ``.../<key>/global/skills/<module>`` (or ``project`` for project scope).
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from skillkit.config import logging
from skillkit.config.model import Config, Platform
from skillkit.constants import ENV_CONFIG, ENV_LOG_LEVEL, ENV_REPO, PLATFORMS_CONFIG_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Send SkillKit diagnostics to stderr at TRACE level for the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear SkillKit environment overrides and point ``HOME`` at a temp dir.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.
        monkeypatch (pytest.MonkeyPatch): Fixture used to edit the environment.

    Returns:
        Path: The temporary home directory.
    """
    for var in (ENV_REPO, ENV_CONFIG, ENV_LOG_LEVEL, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Return an empty repository root with ``skill/`` and ``agent/``."""
    root = tmp_path / "repo"
    (root / "skill").mkdir(parents=True)
    (root / "agent").mkdir()
    return root


def make_module(
    repo: Path,
    name: str,
    category: str = "skill",
    *,
    descriptor: str | None = None,
    overrides: str | None = None,
) -> Path:
    """Create a module directory and return its path.

    Args:
        repo (Path): Repository root.
        name (str): Module directory name.
        category (str): ``skill`` or ``agent``.
        descriptor (str | None): Contents of ``SKILL.md`` / ``AGENT.md``, if any.
        overrides (str | None): Contents of ``skillkit.toml``, if any.

    Returns:
        Path: The module directory.
    """
    path = repo / category / name
    path.mkdir(parents=True)
    if descriptor is not None:
        doc_name = "SKILL.md" if category == "skill" else "AGENT.md"
        (path / doc_name).write_text(descriptor, encoding="utf-8")
    if overrides is not None:
        (path / "skillkit.toml").write_text(overrides, encoding="utf-8")
    return path


def make_platform(base: Path, key: str, name: str | None = None, **kwargs: str) -> Platform:
    """Return a `Platform` rooted under ``base/platforms/<key>``."""
    root = base / "platforms" / key
    fields: dict[str, str] = {
        "project_root": f"{root / 'project'}/",
        "global_root": f"{root / 'global'}/",
    }
    fields.update(kwargs)
    return Platform(key=key, name=name or key.capitalize(), **fields)


def make_config(
    repo: Path,
    platforms: Iterable[Platform],
    *,
    default_platforms: Iterable[str] = (),
    platform_order: Iterable[str] = (),
    source_path: Path | None = None,
) -> Config:
    """Return a `Config` over ``platforms`` (in the given order)."""
    return Config(
        repo_path=repo,
        platforms={p.key: p for p in platforms},
        default_platforms=list(default_platforms),
        platform_order=list(platform_order),
        source_path=source_path,
    )


def skill_link(platform: Platform, name: str, *, scope: str = "global") -> Path:
    """Return the expected link path of skill ``name`` on ``platform``."""
    root = platform.global_root if scope == "global" else platform.project_root
    return Path(root) / platform.skill_dir / name


def make_uninspectable(directory: Path) -> None:
    """Replace ``directory`` with a symlink to itself so entries below it fail with ELOOP."""
    directory.parent.mkdir(parents=True, exist_ok=True)
    os.symlink(directory, directory)


def write_platforms_toml(
    repo: Path,
    platforms: Mapping[str, Platform],
    *,
    default_platforms: Iterable[str] = (),
    platform_order: Iterable[str] = (),
) -> Path:
    """Write ``<repo>/platforms.toml`` describing ``platforms`` and return its path."""

    def _array(values: Iterable[str]) -> str:
        return "[" + ", ".join(f'"{v}"' for v in values) + "]"

    lines = [
        "# test configuration",
        f"default_platforms = {_array(default_platforms)}",
        f"platform_order = {_array(platform_order)}",
        "",
    ]
    for key, p in platforms.items():
        lines += [
            f"[platforms.{key}]",
            f'name = "{p.name}"',
            f'project = "{p.project_root}"',
            f'global = "{p.global_root}"',
            f'skill_dir = "{p.skill_dir}"',
            f'agent_dir = "{p.agent_dir}"',
            "",
        ]
    path = repo / PLATFORMS_CONFIG_NAME
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def platforms(tmp_path: Path) -> dict[str, Platform]:
    """Return three platforms ``alpha``, ``beta``, ``gamma`` in that order."""
    return {key: make_platform(tmp_path, key) for key in ("alpha", "beta", "gamma")}


@pytest.fixture
def config(repo: Path, platforms: dict[str, Platform]) -> Config:
    """Return a configuration over `platforms` with no persisted order or defaults."""
    return make_config(repo, platforms.values())
