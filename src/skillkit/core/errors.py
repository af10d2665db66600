# topmark:header:start
#
#   project      : SkillKit
#   file         : errors.py
#   file_relpath : src/skillkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Exceptions raised by the SkillKit core.

Single-item operations raise these to their caller. Batch operations in
[`skillkit.core.reconcile`][] catch `SkillkitError` per item, record it in the
item's result, and continue with the next item.

Hierarchy:
    SkillkitError
    ├── LinkError (carries the offending ``path``)
    │   ├── SourceMissingError
    │   ├── BlockedByFileError
    │   ├── BlockedByDirectoryError
    │   ├── NotASymlinkError
    │   └── LinkOperationError
    ├── UnknownModuleError
    ├── UnknownPlatformError
    └── ConfigUnavailableError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class SkillkitError(Exception):
    """Base class for all SkillKit core errors."""


class LinkError(SkillkitError):
    """A link mutation could not be performed at ``path``."""

    reason: str = "link operation failed"

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        if reason is not None:
            self.reason = reason
        super().__init__(f"{self.reason}: {path}")


class SourceMissingError(LinkError):
    """The link source does not exist."""

    reason = "source not found"


class BlockedByFileError(LinkError):
    """A real file occupies the link target."""

    reason = "target is a real file (not symlink)"


class BlockedByDirectoryError(LinkError):
    """A real directory occupies the link target."""

    reason = "target is a real directory (not symlink)"


class NotASymlinkError(LinkError):
    """Removal was requested for an entry that is not a symbolic link."""

    reason = "target is not a symlink"


class LinkOperationError(LinkError):
    """The operating system refused a link operation (permissions, I/O)."""


class UnknownModuleError(SkillkitError):
    """No module with the given name exists in the repository."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"module not found: {name}")


class UnknownPlatformError(SkillkitError):
    """No platform with the given key is configured."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"unknown platform: {key}")


class ConfigUnavailableError(SkillkitError):
    """The platform configuration could not be located, read, or parsed."""

    def __init__(self, path: Path | None, detail: str) -> None:
        self.path = path
        self.detail = detail
        where = f" ({path})" if path is not None else ""
        super().__init__(f"configuration unavailable{where}: {detail}")
