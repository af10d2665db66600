# topmark:header:start
#
#   project      : SkillKit
#   file         : repository.py
#   file_relpath : src/skillkit/core/repository.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Repository bootstrap.

`initialize` creates the repository layout (root, ``skill/``, ``agent/``) and
seeds ``platforms.toml`` from the packaged template. Every step is attempted
and reported independently; existing entries are left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from skillkit.config.io import read_default_platforms_template
from skillkit.config.logging import get_logger
from skillkit.constants import PLATFORMS_CONFIG_NAME
from skillkit.core.catalog import CATEGORY_ORDER
from skillkit.core.errors import SkillkitError

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class InitOutcome(str, Enum):
    """Result of one bootstrap step."""

    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


@dataclass(frozen=True)
class InitStep:
    """One bootstrap step and its outcome."""

    path: Path
    outcome: InitOutcome
    detail: str = ""


def initialize(repo_path: Path, config_path: Path | None = None) -> list[InitStep]:
    """Create the repository layout under ``repo_path``.

    Args:
        repo_path (Path): Repository root to create.
        config_path (Path | None): Where to seed the platform configuration;
            defaults to ``<repo>/platforms.toml``.

    Returns:
        list[InitStep]: One entry per directory and one for the configuration
        file, in creation order.
    """
    steps: list[InitStep] = []

    for directory in (repo_path, *(repo_path / c.value for c in CATEGORY_ORDER)):
        existed = directory.is_dir()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug("mkdir %s failed: %s", directory, exc)
            steps.append(InitStep(directory, InitOutcome.FAILED, str(exc)))
            continue
        steps.append(InitStep(directory, InitOutcome.EXISTS if existed else InitOutcome.CREATED))

    target = config_path or repo_path / PLATFORMS_CONFIG_NAME
    if target.exists():
        steps.append(InitStep(target, InitOutcome.EXISTS))
        return steps

    try:
        template = read_default_platforms_template()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(template, encoding="utf-8")
    except (OSError, SkillkitError) as exc:
        steps.append(InitStep(target, InitOutcome.FAILED, str(exc)))
    else:
        logger.info("Seeded %s", target)
        steps.append(InitStep(target, InitOutcome.CREATED))
    return steps
