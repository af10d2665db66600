# topmark:header:start
#
#   project      : SkillKit
#   file         : paths.py
#   file_relpath : src/skillkit/core/paths.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Pure helper for path normalization.

``resolve_path`` joins path segments, expands a leading ``~`` to the invoking
user's home directory, and returns an absolute, lexically cleaned path.

Symbolic links are **not** resolved: the returned path names the link itself,
which is exactly what the link primitives need to inspect.
"""

from __future__ import annotations

import os
from pathlib import Path

from skillkit.config.logging import get_logger
from skillkit.constants import HOME_PLACEHOLDER

logger = get_logger(__name__)


def _join(parts: tuple[str | os.PathLike[str], ...]) -> str:
    # Later absolute segments are appended, not substituted.
    segments = [os.fspath(p) for p in parts]
    if not segments:
        return ""
    head, *tail = segments
    return os.path.join(head, *(s.lstrip("/\\") for s in tail if s))


def resolve_path(*parts: str | os.PathLike[str]) -> Path:
    """Return the absolute path for the joined ``parts``.

    Args:
        *parts (str | os.PathLike[str]): Path segments, e.g. ``("~/.claude/", "skills")``.

    Returns:
        Path: Absolute, cleaned path. If the home directory cannot be
        determined, the joined (possibly relative) path is returned as-is.
    """
    joined = _join(parts)

    if joined.startswith(HOME_PLACEHOLDER):
        try:
            home = Path.home()
        except RuntimeError as exc:
            logger.warning("Cannot determine home directory for %r: %s", joined, exc)
            return Path(joined)
        joined = os.path.join(home, joined[len(HOME_PLACEHOLDER) :].lstrip("/\\"))

    try:
        return Path(os.path.abspath(joined))
    except OSError as exc:  # pragma: no cover - cwd vanished
        logger.warning("Cannot make %r absolute: %s", joined, exc)
        return Path(joined)
