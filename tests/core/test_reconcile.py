# topmark:header:start
#
#   project      : SkillKit
#   file         : test_reconcile.py
#   file_relpath : tests/core/test_reconcile.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Tests for link reconciliation in `skillkit.core.reconcile`.

Covers target computation, health classification, the desired-set diff used by
the detail page, and the never-stop-early behavior of batch operations.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from skillkit.config.model import Scope
from skillkit.core.catalog import ModuleCatalog
from skillkit.core.errors import BlockedByFileError, NotASymlinkError
from skillkit.core.reconcile import (
    LinkAction,
    LinkDiff,
    LinkHealth,
    LinkOp,
    LinkResult,
    apply_diff,
    apply_one,
    compute_diff,
    link_status,
    link_target,
    preview_action,
    preview_all,
    remove_one,
    run_item,
    status_all,
    sync_all,
    synced_keys,
    unlink_all,
)
from tests.conftest import make_module, make_platform, make_uninspectable, skill_link

if TYPE_CHECKING:
    from pathlib import Path

    from skillkit.config.model import Platform
    from skillkit.core.catalog import Module


@pytest.fixture
def demo(repo: Path) -> Module:
    make_module(repo, "demo", descriptor="---\ndescription: Demo skill\n---\n")
    return ModuleCatalog(repo).find("demo")


def _block(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("user data", encoding="utf-8")


def test_link_target_per_scope(demo: Module, platforms: dict[str, Platform]) -> None:
    alpha = platforms["alpha"]

    assert link_target(demo, alpha) == skill_link(alpha, "demo")
    assert link_target(demo, alpha, Scope.PROJECT) == skill_link(alpha, "demo", scope="project")
    assert link_target(demo, alpha, link_name="renamed") == skill_link(alpha, "renamed")


def test_link_target_uses_agent_dir_and_aliases(repo: Path, tmp_path: Path) -> None:
    make_module(
        repo, "reviewer", "agent", overrides='[link.overrides]\nopencode = "oc-reviewer"\n'
    )
    module = ModuleCatalog(repo).find("reviewer")
    opencode = make_platform(tmp_path, "opencode", skill_dir="skill", agent_dir="agent")
    other = make_platform(tmp_path, "other")

    assert link_target(module, opencode).parts[-2:] == ("agent", "oc-reviewer")
    assert link_target(module, other).parts[-2:] == ("agents", "reviewer")


def test_link_status_classification(
    demo: Module, tmp_path: Path, platforms: dict[str, Platform]
) -> None:
    alpha, beta, gamma = platforms["alpha"], platforms["beta"], platforms["gamma"]
    apply_one(demo, alpha)
    stray = tmp_path / "stray"
    stray.mkdir()
    skill_link(beta, "demo").parent.mkdir(parents=True)
    os.symlink(stray, skill_link(beta, "demo"))
    _block(skill_link(gamma, "demo"))

    assert link_status(demo, alpha).health is LinkHealth.HEALTHY
    broken = link_status(demo, beta)
    assert broken.health is LinkHealth.BROKEN
    assert broken.actual == str(stray)
    assert link_status(demo, gamma).health is LinkHealth.BLOCKED
    assert link_status(demo, alpha, Scope.PROJECT).health is LinkHealth.MISSING


def test_preview_reports_create_then_update(demo: Module, platforms: dict[str, Platform]) -> None:
    alpha = platforms["alpha"]
    assert preview_action(demo, alpha) is LinkAction.CREATE

    apply_one(demo, alpha)

    assert preview_action(demo, alpha) is LinkAction.UPDATE
    rows = preview_all([demo], platforms)
    assert [(r.platform.key, r.action) for r in rows] == [
        ("alpha", LinkAction.UPDATE),
        ("beta", LinkAction.CREATE),
        ("gamma", LinkAction.CREATE),
    ]
    assert not skill_link(platforms["beta"], "demo").exists()


def test_apply_one_twice_is_idempotent(demo: Module, platforms: dict[str, Platform]) -> None:
    alpha = platforms["alpha"]

    first = apply_one(demo, alpha)
    second = apply_one(demo, alpha)

    assert first == second
    assert link_status(demo, alpha).health is LinkHealth.HEALTHY


def test_apply_one_raises_when_blocked(demo: Module, platforms: dict[str, Platform]) -> None:
    target = skill_link(platforms["alpha"], "demo")
    _block(target)

    with pytest.raises(BlockedByFileError):
        apply_one(demo, platforms["alpha"])

    assert target.read_text(encoding="utf-8") == "user data"


def test_remove_one_refuses_real_entry(demo: Module, platforms: dict[str, Platform]) -> None:
    target = skill_link(platforms["alpha"], "demo")
    _block(target)

    with pytest.raises(NotASymlinkError):
        remove_one(demo, platforms["alpha"])

    assert target.is_file()


def test_compute_diff(demo: Module, platforms: dict[str, Platform]) -> None:
    apply_one(demo, platforms["alpha"])
    apply_one(demo, platforms["beta"])

    diff = compute_diff(demo, platforms, ["beta", "gamma"])

    assert diff == LinkDiff(to_sync=("gamma",), to_remove=("alpha",))
    assert compute_diff(demo, platforms, ["alpha", "beta"]).is_empty


def test_broken_link_counts_as_synced(
    demo: Module, tmp_path: Path, platforms: dict[str, Platform]
) -> None:
    target = skill_link(platforms["alpha"], "demo")
    target.parent.mkdir(parents=True)
    os.symlink(tmp_path / "gone", target)

    assert synced_keys(demo, platforms) == ["alpha"]
    assert compute_diff(demo, platforms, []).to_remove == ("alpha",)


def test_apply_diff_links_then_unlinks_and_reports_each(
    demo: Module, platforms: dict[str, Platform]
) -> None:
    apply_one(demo, platforms["alpha"])
    seen: list[LinkResult] = []

    report = apply_diff(
        demo, platforms, LinkDiff(("beta", "gamma"), ("alpha",)), on_result=seen.append
    )

    assert [(r.op, r.platform.key) for r in seen] == [
        (LinkOp.LINK, "beta"),
        (LinkOp.LINK, "gamma"),
        (LinkOp.UNLINK, "alpha"),
    ]
    assert (report.success, report.failed) == (3, 0)
    assert synced_keys(demo, platforms) == ["beta", "gamma"]


def test_sync_all_continues_past_failures(repo: Path, platforms: dict[str, Platform]) -> None:
    make_module(repo, "one")
    make_module(repo, "two")
    modules = ModuleCatalog(repo).list_all()
    blocked = skill_link(platforms["beta"], "one")
    _block(blocked)
    seen: list[LinkResult] = []

    report = sync_all(modules, platforms, on_result=seen.append)

    assert len(seen) == 6
    assert (report.success, report.failed) == (5, 1)
    assert not report.ok
    failure = next(r for r in seen if not r.ok)
    assert (failure.module.name, failure.platform.key) == ("one", "beta")
    assert isinstance(failure.error, BlockedByFileError)
    assert blocked.read_text(encoding="utf-8") == "user data"
    assert link_status(modules[1], platforms["beta"]).health is LinkHealth.HEALTHY


def test_unlink_all_removes_links_and_reports_blocked(
    demo: Module, platforms: dict[str, Platform]
) -> None:
    apply_one(demo, platforms["alpha"])
    _block(skill_link(platforms["gamma"], "demo"))

    report = unlink_all(demo, platforms)

    assert (report.success, report.failed) == (2, 1)
    assert synced_keys(demo, platforms) == []
    assert skill_link(platforms["gamma"], "demo").is_file()


def test_run_item_captures_errors(demo: Module, platforms: dict[str, Platform]) -> None:
    _block(skill_link(platforms["alpha"], "demo"))

    result = run_item(LinkOp.LINK, demo, platforms["alpha"])

    assert not result.ok
    assert result.path == skill_link(platforms["alpha"], "demo")


def test_status_all_counts(repo: Path, platforms: dict[str, Platform]) -> None:
    make_module(repo, "one")
    make_module(repo, "two", "agent")
    modules = ModuleCatalog(repo).list_all()
    apply_one(modules[0], platforms["alpha"])
    _block(skill_link(platforms["beta"], "one"))

    report = status_all(modules, platforms)

    assert (report.healthy, report.broken, report.blocked, report.missing) == (1, 0, 1, 4)
    assert not report.ok
    assert [(m.name, p.key) for m, p, _ in report.problems] == [("one", "beta")]


def test_status_all_reports_uninspectable_target_and_continues(
    demo: Module, platforms: dict[str, Platform]
) -> None:
    apply_one(demo, platforms["alpha"])
    make_uninspectable(skill_link(platforms["beta"], "demo").parent)

    report = status_all([demo], platforms)

    assert (report.healthy, report.unreadable, report.missing) == (1, 1, 1)
    assert not report.ok
    [(module, platform, status)] = report.problems
    assert (module.name, platform.key) == ("demo", "beta")
    assert status.health is LinkHealth.UNREADABLE
    assert status.actual


def test_uninspectable_target_is_not_synced(demo: Module, platforms: dict[str, Platform]) -> None:
    make_uninspectable(skill_link(platforms["alpha"], "demo").parent)

    assert synced_keys(demo, platforms) == []
    assert preview_action(demo, platforms["alpha"]) is LinkAction.CREATE
    result = run_item(LinkOp.LINK, demo, platforms["alpha"])
    assert not result.ok


@pytest.mark.parametrize(
    "desired",
    [
        (),
        ("alpha",),
        ("beta",),
        ("gamma",),
        ("alpha", "beta"),
        ("beta", "gamma"),
        ("alpha", "beta", "gamma"),
    ],
)
def test_applying_a_diff_reaches_the_desired_set(
    demo: Module, tmp_path: Path, platforms: dict[str, Platform], desired: tuple[str, ...]
) -> None:
    apply_one(demo, platforms["alpha"])
    broken = skill_link(platforms["beta"], "demo")
    broken.parent.mkdir(parents=True)
    os.symlink(tmp_path / "elsewhere", broken)

    diff = compute_diff(demo, platforms, desired)
    assert set(diff.to_sync).isdisjoint(diff.to_remove)

    report = apply_diff(demo, platforms, diff)

    assert report.ok
    assert compute_diff(demo, platforms, desired).is_empty
    assert synced_keys(demo, platforms) == list(desired)
