# topmark:header:start
#
#   project      : SkillKit
#   file         : links.py
#   file_relpath : src/skillkit/core/links.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Safety-checked symbolic link primitives.

All functions take already-resolved absolute paths (see
[`skillkit.core.paths.resolve_path`][]).

Invariant:
    The only mutation performed at a link target is create, replace, or remove
    of a symbolic link. A real file or directory occupying the target is never
    deleted or overwritten; the operation fails with a `LinkError` subclass
    instead and leaves the entry untouched.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from skillkit.config.logging import get_logger
from skillkit.core.errors import (
    BlockedByDirectoryError,
    BlockedByFileError,
    LinkOperationError,
    NotASymlinkError,
    SourceMissingError,
)

logger = get_logger(__name__)


class LinkKind(str, Enum):
    """What currently occupies a link target path."""

    ABSENT = "absent"
    SYMLINK = "symlink"
    BLOCKED = "blocked"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class LinkState:
    """Observed filesystem fact for a link target.

    Attributes:
        kind (LinkKind): What occupies the path, or ``UNREADABLE`` if it could
            not be inspected.
        target (str): Raw link destination when ``kind`` is ``SYMLINK``
            (empty if the link could not be read), else empty.
        error (str): Operating system message when ``kind`` is ``UNREADABLE``.
    """

    kind: LinkKind
    target: str = ""
    error: str = ""

    @property
    def is_symlink(self) -> bool:
        """Return True if a symbolic link occupies the path."""
        return self.kind is LinkKind.SYMLINK

    def points_to(self, source: Path) -> bool:
        """Return True if this is a symlink whose destination equals ``source``."""
        return self.is_symlink and bool(self.target) and Path(self.target) == source


ABSENT = LinkState(LinkKind.ABSENT)
BLOCKED = LinkState(LinkKind.BLOCKED)


def query_link(path: Path) -> LinkState:
    """Inspect ``path`` without following a final symlink.

    Args:
        path (Path): Absolute link target path.

    Returns:
        LinkState: ``ABSENT`` if nothing is there, ``SYMLINK`` with its
        destination, ``BLOCKED`` for a real file or directory, or
        ``UNREADABLE`` if the operating system refuses to inspect the path.
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return ABSENT
    except OSError as exc:
        logger.debug("Cannot inspect %s: %s", path, exc)
        return LinkState(LinkKind.UNREADABLE, error=str(exc))

    if stat.S_ISLNK(st.st_mode):
        try:
            target = os.readlink(path)
        except OSError as exc:
            logger.debug("Cannot read symlink %s: %s", path, exc)
            target = ""
        return LinkState(LinkKind.SYMLINK, target)
    return BLOCKED


def create_link(source: Path, target: Path) -> None:
    """Create (or idempotently replace) a symlink at ``target`` pointing to ``source``.

    The checks run strictly before any mutation:

    1. ``source`` must exist.
    2. Parent directories of ``target`` are created.
    3. An existing symlink at ``target`` is removed, whatever it points to.
    4. A real directory at ``target`` is refused.
    5. A real file at ``target`` is refused.
    6. The new symlink is created.

    Args:
        source (Path): Canonical module directory.
        target (Path): Platform-side link path.

    Raises:
        SourceMissingError: If ``source`` does not exist.
        BlockedByDirectoryError: If a real directory occupies ``target``.
        BlockedByFileError: If a real file occupies ``target``.
        LinkOperationError: If the operating system refuses a step.
    """
    if not source.exists():
        raise SourceMissingError(source)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise LinkOperationError(target.parent, f"failed to create directory ({exc})") from exc

    try:
        st = os.lstat(target)
    except FileNotFoundError:
        st = None
    except OSError as exc:
        raise LinkOperationError(target, f"cannot inspect target ({exc})") from exc

    if st is not None:
        if stat.S_ISLNK(st.st_mode):
            logger.debug("Replacing existing symlink %s", target)
            try:
                target.unlink()
            except OSError as exc:
                raise LinkOperationError(
                    target, f"failed to remove existing symlink ({exc})"
                ) from exc
        elif stat.S_ISDIR(st.st_mode):
            raise BlockedByDirectoryError(target)
        else:
            raise BlockedByFileError(target)

    try:
        os.symlink(source, target, target_is_directory=source.is_dir())
    except OSError as exc:
        raise LinkOperationError(target, f"failed to create symlink ({exc})") from exc
    logger.info("Linked %s -> %s", target, source)


def remove_link(target: Path) -> None:
    """Remove the symlink at ``target`` if there is one.

    A missing target is a silent success. A real entry is never removed.

    Args:
        target (Path): Platform-side link path.

    Raises:
        NotASymlinkError: If a real file or directory occupies ``target``.
        LinkOperationError: If the operating system refuses the removal.
    """
    try:
        st = os.lstat(target)
    except (FileNotFoundError, NotADirectoryError):
        return
    except OSError as exc:
        raise LinkOperationError(target, f"cannot inspect target ({exc})") from exc

    if not stat.S_ISLNK(st.st_mode):
        raise NotASymlinkError(target)

    try:
        target.unlink()
    except OSError as exc:
        raise LinkOperationError(target, f"failed to remove symlink ({exc})") from exc
    logger.info("Unlinked %s", target)
