# topmark:header:start
#
#   project      : SkillKit
#   file         : color.py
#   file_relpath : src/skillkit/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Click-independent color mode resolution."""

from __future__ import annotations

import os
import sys
from enum import Enum

from skillkit.config.logging import get_logger

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output (``--color``)."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. ``--color always|never`` (``--no-color`` maps to ``never``).
        2. ``FORCE_COLOR`` (set and not ``"0"``) enables, ``NO_COLOR`` disables.
        3. Otherwise color is enabled only when stdout is a TTY.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value.
        stdout_isatty (bool | None): TTY override for tests; detected when None.

    Returns:
        bool: True if ANSI styling should be emitted.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detect: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
