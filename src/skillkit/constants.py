# topmark:header:start
#
#   project      : SkillKit
#   file         : constants.py
#   file_relpath : src/skillkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SKILLKIT_VERSION: str = get_version("skillkit")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    SKILLKIT_VERSION = "0.0.0+unknown"

SKILLKIT_TAGLINE: str = "Cross-Platform AI Skill Distribution Hub"

# Environment overrides
ENV_REPO: str = "SKILLKIT_REPO"
ENV_CONFIG: str = "SKILLKIT_CONFIG"
ENV_LOG_LEVEL: str = "SKILLKIT_LOG_LEVEL"

# Repository layout
DEFAULT_REPO_PATH: str = "~/.config/agent"
PLATFORMS_CONFIG_NAME: str = "platforms.toml"
MODULE_CONFIG_NAME: str = "skillkit.toml"

# Bundled platform template inside the package `skillkit.config`:
DEFAULT_PLATFORMS_PACKAGE: str = "skillkit.config"
DEFAULT_PLATFORMS_NAME: str = "platforms-default.toml"

# Fallback category directories when a platform leaves them empty
DEFAULT_SKILL_DIR: str = "skills"
DEFAULT_AGENT_DIR: str = "agents"

HOME_PLACEHOLDER: str = "~"
