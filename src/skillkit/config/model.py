# topmark:header:start
#
#   project      : SkillKit
#   file         : model.py
#   file_relpath : src/skillkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Configuration records consumed by the SkillKit core.

- `Platform`: one consumer tool, with a project-scope root, a global-scope root,
  and the subdirectory names used for each module category.
- `Config`: the process-wide aggregate (repository root, platforms, persisted
  display order, persisted default subset).

These records are produced by [`skillkit.config.io.load_config`][] and are
intentionally free of I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from skillkit.constants import (
    DEFAULT_AGENT_DIR,
    DEFAULT_PLATFORMS_NAME,
    DEFAULT_SKILL_DIR,
    PLATFORMS_CONFIG_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path


class Scope(str, Enum):
    """Which platform root a link is placed under."""

    PROJECT = "project"
    GLOBAL = "global"


@dataclass(frozen=True)
class Platform:
    """A consumer target for distributed modules.

    Attributes:
        key (str): Stable identifier used for persistence and lookup.
        name (str): Display label.
        project_root (str): Base directory for project scope (may be relative or ``~``-prefixed).
        global_root (str): Base directory for global scope.
        skill_dir (str): Subdirectory under a root holding skill links.
        agent_dir (str): Subdirectory under a root holding agent links.
    """

    key: str
    name: str
    project_root: str = ""
    global_root: str = ""
    skill_dir: str = DEFAULT_SKILL_DIR
    agent_dir: str = DEFAULT_AGENT_DIR

    def __post_init__(self) -> None:
        # category_dir() must never yield an empty name
        if not self.skill_dir:
            object.__setattr__(self, "skill_dir", DEFAULT_SKILL_DIR)
        if not self.agent_dir:
            object.__setattr__(self, "agent_dir", DEFAULT_AGENT_DIR)

    def category_dir(self, category: str) -> str:
        """Return the subdirectory name for a module category (``skill`` or ``agent``)."""
        if category == "agent":
            return self.agent_dir
        return self.skill_dir

    def root(self, scope: Scope) -> str:
        """Return the base directory for ``scope``."""
        return self.project_root if scope is Scope.PROJECT else self.global_root


@dataclass
class Config:
    """Process-wide configuration aggregate.

    Attributes:
        repo_path (Path): Repository root containing ``skill/`` and ``agent/``.
        platforms (dict[str, Platform]): Platforms keyed by platform key, in
            discovery (document) order.
        default_platforms (list[str]): Persisted subset targeted by quick sync;
            empty means every platform.
        platform_order (list[str]): Persisted display order; may be stale or
            incomplete (see [`skillkit.core.registry.PlatformRegistry.ordered_keys`][]).
        source_path (Path | None): File the configuration was read from, if any.
    """

    repo_path: Path
    platforms: dict[str, Platform] = field(default_factory=dict)
    default_platforms: list[str] = field(default_factory=list)
    platform_order: list[str] = field(default_factory=list)
    source_path: Path | None = None

    @property
    def save_path(self) -> Path:
        """Return the file that ordering/default changes are written to.

        The packaged template is read-only, so a configuration loaded from it
        is saved into the repository instead.
        """
        if self.source_path is not None and self.source_path.name != DEFAULT_PLATFORMS_NAME:
            return self.source_path
        return self.repo_path / PLATFORMS_CONFIG_NAME
