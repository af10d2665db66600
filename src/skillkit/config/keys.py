# topmark:header:start
#
#   project      : SkillKit
#   file         : keys.py
#   file_relpath : src/skillkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Canonical TOML section and key names for SkillKit configuration.

Keys defined here are the external configuration API of ``platforms.toml`` and
of the per-module ``skillkit.toml``. Renaming or removing a key is a breaking
change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ``platforms.toml``.

    The ordering of constants mirrors ``platforms-default.toml``.
    """

    KEY_DEFAULT_PLATFORMS: Final[str] = "default_platforms"
    KEY_PLATFORM_ORDER: Final[str] = "platform_order"

    # [platforms.<key>]
    SECTION_PLATFORMS: Final[str] = "platforms"

    KEY_NAME: Final[str] = "name"
    KEY_PROJECT: Final[str] = "project"
    KEY_GLOBAL: Final[str] = "global"
    KEY_SKILL_DIR: Final[str] = "skill_dir"
    KEY_AGENT_DIR: Final[str] = "agent_dir"

    # Accepted spellings for the roots
    ALIASES_PROJECT: Final[tuple[str, ...]] = ("project", "project_root")
    ALIASES_GLOBAL: Final[tuple[str, ...]] = ("global", "global_root")


class ModuleToml:
    """TOML section names and keys used by a module-local ``skillkit.toml``."""

    # [link]
    SECTION_LINK: Final[str] = "link"

    KEY_DEFAULT: Final[str] = "default"

    # [link.overrides]
    SECTION_OVERRIDES: Final[str] = "overrides"
