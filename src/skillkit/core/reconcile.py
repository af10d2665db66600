# topmark:header:start
#
#   project      : SkillKit
#   file         : reconcile.py
#   file_relpath : src/skillkit/core/reconcile.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Reconciliation of desired module links against the filesystem.

This module computes, for a (module, platform) pair or for a whole repository:
- the link target path ([`link_target`][skillkit.core.reconcile.link_target]),
- the observed health of that target ([`link_status`][skillkit.core.reconcile.link_status]),
- the action a sync would take ([`preview_action`][skillkit.core.reconcile.preview_action]),
- the delta between a desired platform set and the current one
  ([`compute_diff`][skillkit.core.reconcile.compute_diff]).

Mutations go exclusively through [`skillkit.core.links`][]. Single-item
operations (`apply_one`, `remove_one`) raise to their caller. Batch operations
(`apply_diff`, `sync_all`, `status_all`) never stop early: each item's outcome
is reported through an optional callback as soon as it completes and counted in
the returned report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from skillkit.config.logging import get_logger
from skillkit.config.model import Scope
from skillkit.core.errors import SkillkitError
from skillkit.core.links import LinkKind, create_link, query_link, remove_link
from skillkit.core.paths import resolve_path

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence
    from pathlib import Path

    from skillkit.config.model import Platform
    from skillkit.core.catalog import Module

logger = get_logger(__name__)


class LinkHealth(str, Enum):
    """Health of one module link on one platform."""

    HEALTHY = "healthy"
    BROKEN = "broken"
    BLOCKED = "blocked"
    MISSING = "missing"
    UNREADABLE = "unreadable"


class LinkAction(str, Enum):
    """Action a sync would perform at a link target (dry-run only)."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"


class LinkOp(str, Enum):
    """Mutation performed for one batch item."""

    LINK = "link"
    UNLINK = "unlink"


@dataclass(frozen=True)
class LinkStatus:
    """Observed health at a link target.

    Attributes:
        health (LinkHealth): Classification of the target.
        path (Path): The link target path.
        actual (str): Destination of the existing symlink for ``BROKEN``, or
            the operating system message for ``UNREADABLE``.
    """

    health: LinkHealth
    path: Path
    actual: str = ""


@dataclass(frozen=True)
class LinkResult:
    """Outcome of one item in a batch.

    Attributes:
        module (Module): Module the item belongs to.
        platform (Platform): Platform the item targets.
        op (LinkOp): Whether a link was created or removed.
        path (Path): Link target path.
        error (SkillkitError | None): Failure, if the item did not succeed.
    """

    module: Module
    platform: Platform
    op: LinkOp
    path: Path
    error: SkillkitError | None = None

    @property
    def ok(self) -> bool:
        """Return True if the item succeeded."""
        return self.error is None


@dataclass(frozen=True)
class LinkDiff:
    """Platforms to link and to unlink for one module.

    Both tuples are in platform display order and are disjoint.
    """

    to_sync: tuple[str, ...] = ()
    to_remove: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Return True if there is nothing to apply."""
        return not self.to_sync and not self.to_remove


@dataclass
class BatchReport:
    """Aggregate outcome of a batch of link mutations."""

    results: list[LinkResult] = field(default_factory=list)

    @property
    def success(self) -> int:
        """Number of items that succeeded."""
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        """Number of items that failed."""
        return sum(1 for r in self.results if not r.ok)

    @property
    def ok(self) -> bool:
        """Return True if no item failed."""
        return self.failed == 0

    def add(self, result: LinkResult) -> None:
        """Record ``result``."""
        self.results.append(result)


@dataclass
class HealthReport:
    """Aggregate link health over a set of modules and platforms.

    Attributes:
        counts (dict[LinkHealth, int]): Number of targets per health value.
        problems (list[tuple[Module, Platform, LinkStatus]]): Broken, blocked
            and unreadable targets, in enumeration order.
    """

    counts: dict[LinkHealth, int] = field(
        default_factory=lambda: {health: 0 for health in LinkHealth}
    )
    problems: list[tuple[Module, Platform, LinkStatus]] = field(default_factory=list)

    @property
    def healthy(self) -> int:
        return self.counts[LinkHealth.HEALTHY]

    @property
    def broken(self) -> int:
        return self.counts[LinkHealth.BROKEN]

    @property
    def blocked(self) -> int:
        return self.counts[LinkHealth.BLOCKED]

    @property
    def missing(self) -> int:
        return self.counts[LinkHealth.MISSING]

    @property
    def unreadable(self) -> int:
        return self.counts[LinkHealth.UNREADABLE]

    @property
    def ok(self) -> bool:
        """Return True if nothing is broken, blocked or unreadable."""
        return not self.problems


@dataclass(frozen=True)
class PreviewRow:
    """One dry-run row: what a sync would do at a link target."""

    module: Module
    platform: Platform
    path: Path
    action: LinkAction


def link_target(
    module: Module,
    platform: Platform,
    scope: Scope = Scope.GLOBAL,
    link_name: str | None = None,
) -> Path:
    """Return the absolute link path for ``module`` on ``platform``.

    Args:
        module (Module): Module to link.
        platform (Platform): Target platform.
        scope (Scope): Which platform root to use.
        link_name (str | None): Explicit link name; defaults to the module's
            alias for this platform, or its name.

    Returns:
        Path: ``<root>/<category dir>/<link name>``, resolved.
    """
    name = link_name or module.link_name(platform.key)
    base = resolve_path(platform.root(scope), platform.category_dir(module.category.value))
    return base / name


def link_status(
    module: Module,
    platform: Platform,
    scope: Scope = Scope.GLOBAL,
) -> LinkStatus:
    """Classify the link target of ``module`` on ``platform``.

    A symlink pointing at the module directory is ``HEALTHY``; a symlink
    pointing anywhere else (or unreadable) is ``BROKEN``; a real entry is
    ``BLOCKED``; nothing is ``MISSING``. A target the operating system
    refuses to inspect is ``UNREADABLE``.
    """
    path = link_target(module, platform, scope)
    state = query_link(path)
    if state.kind is LinkKind.SYMLINK:
        if state.points_to(module.path):
            return LinkStatus(LinkHealth.HEALTHY, path)
        return LinkStatus(LinkHealth.BROKEN, path, state.target)
    if state.kind is LinkKind.BLOCKED:
        return LinkStatus(LinkHealth.BLOCKED, path)
    if state.kind is LinkKind.UNREADABLE:
        return LinkStatus(LinkHealth.UNREADABLE, path, state.error)
    return LinkStatus(LinkHealth.MISSING, path)


def preview_action(
    module: Module,
    platform: Platform,
    scope: Scope = Scope.GLOBAL,
    link_name: str | None = None,
) -> LinkAction:
    """Return ``UPDATE`` if any symlink occupies the target, else ``CREATE``."""
    state = query_link(link_target(module, platform, scope, link_name))
    return LinkAction.UPDATE if state.is_symlink else LinkAction.CREATE


def preview_all(
    modules: Iterable[Module],
    platforms: Mapping[str, Platform],
    scope: Scope = Scope.GLOBAL,
    link_name: str | None = None,
) -> list[PreviewRow]:
    """Return dry-run rows for every (module, platform) pair, in order."""
    return [
        PreviewRow(
            module,
            platform,
            link_target(module, platform, scope, link_name),
            preview_action(module, platform, scope, link_name),
        )
        for module in modules
        for platform in platforms.values()
    ]


def apply_one(
    module: Module,
    platform: Platform,
    scope: Scope = Scope.GLOBAL,
    link_name: str | None = None,
) -> Path:
    """Link ``module`` into ``platform``.

    Returns:
        Path: The link target path.

    Raises:
        LinkError: As raised by [`create_link`][skillkit.core.links.create_link].
    """
    path = link_target(module, platform, scope, link_name)
    create_link(module.path, path)
    return path


def remove_one(
    module: Module,
    platform: Platform,
    scope: Scope = Scope.GLOBAL,
) -> Path:
    """Remove the link of ``module`` from ``platform`` if present.

    Returns:
        Path: The link target path.

    Raises:
        LinkError: As raised by [`remove_link`][skillkit.core.links.remove_link].
    """
    path = link_target(module, platform, scope)
    remove_link(path)
    return path


def synced_keys(module: Module, platforms: Mapping[str, Platform]) -> list[str]:
    """Return the platform keys where any symlink occupies the module's target.

    Broken links count as synced so that they can be removed.
    """
    return [
        key
        for key, platform in platforms.items()
        if query_link(link_target(module, platform)).is_symlink
    ]


def compute_diff(
    module: Module,
    platforms: Mapping[str, Platform],
    desired: Iterable[str],
) -> LinkDiff:
    """Compute which platforms to link and unlink to reach ``desired``.

    Args:
        module (Module): Module being edited.
        platforms (Mapping[str, Platform]): Platforms in display order.
        desired (Iterable[str]): Platform keys that should carry a link.

    Returns:
        LinkDiff: ``to_sync`` holds desired platforms with no symlink present;
        ``to_remove`` holds platforms with any symlink present that are not
        desired.
    """
    wanted = set(desired)
    current = set(synced_keys(module, platforms))
    to_sync = tuple(k for k in platforms if k in wanted and k not in current)
    to_remove = tuple(k for k in platforms if k in current and k not in wanted)
    logger.debug("Diff for %s: sync=%s remove=%s", module.name, to_sync, to_remove)
    return LinkDiff(to_sync, to_remove)


def run_item(
    op: LinkOp,
    module: Module,
    platform: Platform,
    scope: Scope = Scope.GLOBAL,
    link_name: str | None = None,
) -> LinkResult:
    """Perform one link or unlink and capture its outcome instead of raising."""
    path = link_target(module, platform, scope, link_name)
    try:
        if op is LinkOp.LINK:
            create_link(module.path, path)
        else:
            remove_link(path)
    except SkillkitError as exc:
        logger.debug("%s %s on %s failed: %s", op.value, module.name, platform.key, exc)
        return LinkResult(module, platform, op, path, exc)
    return LinkResult(module, platform, op, path)


def apply_diff(
    module: Module,
    platforms: Mapping[str, Platform],
    diff: LinkDiff,
    on_result: Callable[[LinkResult], None] | None = None,
) -> BatchReport:
    """Apply ``diff`` for ``module``; every item is attempted.

    Args:
        module (Module): Module being edited.
        platforms (Mapping[str, Platform]): Platforms referenced by ``diff``.
        diff (LinkDiff): Output of [`compute_diff`][skillkit.core.reconcile.compute_diff].
        on_result (Callable[[LinkResult], None] | None): Called after each item.

    Returns:
        BatchReport: One result per key in ``diff``.
    """
    report = BatchReport()
    planned = [(LinkOp.LINK, k) for k in diff.to_sync] + [
        (LinkOp.UNLINK, k) for k in diff.to_remove
    ]
    for op, key in planned:
        result = run_item(op, module, platforms[key], Scope.GLOBAL)
        report.add(result)
        if on_result is not None:
            on_result(result)
    return report


def sync_all(
    modules: Sequence[Module],
    platforms: Mapping[str, Platform],
    on_result: Callable[[LinkResult], None] | None = None,
    scope: Scope = Scope.GLOBAL,
) -> BatchReport:
    """Link every module into every platform; never stops on a failure.

    Args:
        modules (Sequence[Module]): Modules to link, in order.
        platforms (Mapping[str, Platform]): Target platforms, in order.
        on_result (Callable[[LinkResult], None] | None): Called after each item.
        scope (Scope): Which platform root to use.

    Returns:
        BatchReport: One result per (module, platform) pair.
    """
    report = BatchReport()
    for module in modules:
        for platform in platforms.values():
            result = run_item(LinkOp.LINK, module, platform, scope)
            report.add(result)
            if on_result is not None:
                on_result(result)
    logger.info("Synced %d link(s), %d failed", report.success, report.failed)
    return report


def unlink_all(
    module: Module,
    platforms: Mapping[str, Platform],
    on_result: Callable[[LinkResult], None] | None = None,
    scope: Scope = Scope.GLOBAL,
) -> BatchReport:
    """Remove the links of ``module`` from every platform (remove-if-exists)."""
    report = BatchReport()
    for platform in platforms.values():
        result = run_item(LinkOp.UNLINK, module, platform, scope)
        report.add(result)
        if on_result is not None:
            on_result(result)
    return report


_PROBLEMS = frozenset({LinkHealth.BROKEN, LinkHealth.BLOCKED, LinkHealth.UNREADABLE})


def status_all(
    modules: Iterable[Module],
    platforms: Mapping[str, Platform],
) -> HealthReport:
    """Classify every (module, platform) link target.

    Returns:
        HealthReport: Per-health counts and the targets that need attention.
    """
    report = HealthReport()
    for module in modules:
        for platform in platforms.values():
            status = link_status(module, platform)
            report.counts[status.health] += 1
            if status.health in _PROBLEMS:
                report.problems.append((module, platform, status))
    return report
