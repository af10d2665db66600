# topmark:header:start
#
#   project      : SkillKit
#   file         : render.py
#   file_relpath : src/skillkit/cli_shared/render.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Text rendering shared by the batch commands and the interactive session.

All helpers take a [`ConsoleLike`][skillkit.cli_shared.console_api.ConsoleLike]
and only use its ``print`` and ``styled`` methods, so color handling stays in
the console.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from skillkit.core.links import query_link
from skillkit.core.reconcile import LinkAction, LinkHealth, LinkOp, link_status, link_target
from skillkit.core.repository import InitOutcome

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from skillkit.cli_shared.console_api import ConsoleLike
    from skillkit.config.model import Platform
    from skillkit.core.catalog import Module
    from skillkit.core.reconcile import BatchReport, LinkResult
    from skillkit.core.registry import PlatformRegistry
    from skillkit.core.repository import InitStep

ICON_SUCCESS = "✓"
ICON_ERROR = "✗"
ICON_ARROW = "▶"
ICON_DOT = "●"
ICON_LINK = "⟶"
ICON_WARNING = "⚠"
ICON_INFO = "ℹ"
ICON_MISSING = "○"

_ACTION_COLORS: dict[str, str] = {
    LinkAction.CREATE.value: "green",
    LinkAction.UPDATE.value: "yellow",
}


def render_table(
    console: ConsoleLike,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Print an aligned table with a header rule.

    Cells equal to a `LinkAction` value are colored.
    """
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(cell))

    header = "".join(console.styled(h.ljust(w), fg="blue") + "  " for h, w in zip(headers, widths))
    console.print(f"  {header}".rstrip())
    console.print("  " + "  ".join("─" * w for w in widths))
    for row in rows:
        cells: list[str] = []
        for cell, width in zip(row, widths):
            padded = cell.ljust(width)
            color = _ACTION_COLORS.get(cell)
            cells.append(console.styled(padded, fg=color) if color else padded)
        console.print(("  " + "  ".join(cells)).rstrip())


def format_result(console: ConsoleLike, result: LinkResult) -> str:
    """Return the one-line report for a batch item."""
    module = result.module.name
    platform = result.platform
    ok_icon = console.styled(ICON_SUCCESS, fg="green")
    error_icon = console.styled(ICON_ERROR, fg="red")
    if result.op is LinkOp.LINK:
        if result.ok:
            return f"  {ok_icon} {module} {console.styled(ICON_LINK, fg='cyan')} {platform.name}"
        return f"  {error_icon} {module} → {platform.key}: {result.error}"
    if result.ok:
        return f"  {console.styled(ICON_WARNING, fg='yellow')} Removed {module} from {platform.key}"
    return f"  {error_icon} Remove {module} from {platform.key}: {result.error}"


def print_result(console: ConsoleLike, result: LinkResult) -> None:
    """Print the report line for ``result`` immediately."""
    console.print(format_result(console, result))


def print_summary(console: ConsoleLike, report: BatchReport) -> None:
    """Print the aggregate ``Success: N  Failed: M`` line of a batch."""
    console.print()
    console.print(
        f"  {console.styled('Success', fg='green')}: {report.success}  "
        f"{console.styled('Failed', fg='red')}: {report.failed}"
    )


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap ``text`` to ``width`` columns (at least 20)."""
    return textwrap.wrap(text, width=max(width, 20)) or [""]


def module_status_lines(
    console: ConsoleLike,
    module: Module,
    platforms: Mapping[str, Platform],
) -> list[str]:
    """Return one ``<key> ✓`` or ``<key> ✗ (<problem>)`` entry per linked platform.

    Targets that could not be inspected are listed as unreadable.
    """
    entries: list[str] = []
    for key, platform in platforms.items():
        status = link_status(module, platform)
        if status.health is LinkHealth.HEALTHY:
            entries.append(f"{key} {console.styled(ICON_SUCCESS, fg='green')}")
        elif status.health is LinkHealth.BROKEN:
            entries.append(f"{key} {console.styled(ICON_ERROR + ' (broken)', fg='red')}")
        elif status.health is LinkHealth.UNREADABLE:
            entries.append(f"{key} {console.styled(ICON_ERROR + ' (unreadable)', fg='red')}")
    return entries


def render_module_projection(
    console: ConsoleLike,
    modules: Sequence[Module],
    platforms: Mapping[str, Platform],
) -> None:
    """Print modules with the platforms each one is linked into, as a tree."""
    for module in modules:
        console.print(
            f"  {console.styled(ICON_ARROW, fg='cyan')} {console.styled(module.name, bold=True)} "
            f"{console.styled(f'({module.category.value})', fg='bright_black')}"
        )
        entries = module_status_lines(console, module, platforms)
        if not entries:
            console.print(
                f"  {console.styled('│   └──', fg='bright_black')} "
                f"{console.styled('(not linked)', fg='bright_black')}"
            )
            continue
        for i, entry in enumerate(entries):
            branch = "│   └──" if i == len(entries) - 1 else "│   ├──"
            console.print(f"  {console.styled(branch, fg='bright_black')} {entry}")


def render_platform_projection(
    console: ConsoleLike,
    modules: Sequence[Module],
    platforms: Mapping[str, Platform],
    selected: int | None = None,
) -> None:
    """Print platforms in order with the modules linked into each.

    Args:
        console (ConsoleLike): Output console.
        modules (Sequence[Module]): Modules to check.
        platforms (Mapping[str, Platform]): Platforms in display order.
        selected (int | None): Index of the highlighted platform, if any.
    """
    for i, (key, platform) in enumerate(platforms.items()):
        prefix = console.styled(ICON_ARROW, fg="cyan") + " " if i == selected else "  "
        console.print(
            f"{prefix}{console.styled(platform.name, bold=True)} "
            f"{console.styled(f'({key})', fg='bright_black')}"
        )
        linked = [m for m in modules if query_link(link_target(m, platform)).is_symlink]
        if not linked:
            console.print(f"      {console.styled('(no modules)', fg='bright_black')}")
            continue
        for module in linked:
            console.print(
                f"      {console.styled(ICON_SUCCESS, fg='green')} {module.name} "
                f"{console.styled(f'({module.category.value})', fg='bright_black')}"
            )


def render_platforms(
    console: ConsoleLike,
    registry: PlatformRegistry,
    *,
    verbose: bool,
) -> None:
    """Print the registered platforms; defaults are marked with ``●``."""
    platforms = registry.ordered()
    console.print()
    console.print(
        f"{console.styled(ICON_INFO, fg='blue')} Registered Platforms ({len(platforms)}):"
    )
    console.print()
    for platform in platforms:
        default = registry.is_default(platform.key)
        marker = console.styled(f" {ICON_DOT}", fg="green") if default else ""
        console.print(
            f"  {console.styled(ICON_ARROW, fg='cyan')} {console.styled(platform.name, bold=True)} "
            f"{console.styled(f'({platform.key})', fg='bright_black')}{marker}"
        )
        project = f"{platform.project_root}{platform.skill_dir}/"
        global_ = f"{platform.global_root}{platform.skill_dir}/"
        console.print(f"      Project: {console.styled(project, fg='bright_black')}")
        console.print(f"      Global:  {console.styled(global_, fg='bright_black')}")
        if verbose:
            agents = f"{platform.agent_dir}/"
            console.print(f"      Agents:  {console.styled(agents, fg='bright_black')}")
        console.print()


def render_init_steps(
    console: ConsoleLike,
    repo_path: Path,
    steps: Sequence[InitStep],
) -> bool:
    """Print one line per bootstrap step; return True if every step succeeded."""
    ok = True
    console.print()
    for step in steps:
        match step.outcome:
            case InitOutcome.CREATED:
                console.print(f"  {console.styled(ICON_SUCCESS, fg='green')} Created {step.path}")
            case InitOutcome.EXISTS:
                console.print(
                    f"  {console.styled(ICON_WARNING, fg='yellow')} {step.path} already exists"
                )
            case InitOutcome.FAILED:
                ok = False
                console.print(
                    f"  {console.styled(ICON_ERROR, fg='red')} Failed to create {step.path}: "
                    f"{step.detail}"
                )
    console.print()
    if ok:
        console.print(
            f"  {console.styled(ICON_SUCCESS, fg='green')} Repository initialized at {repo_path}"
        )
        console.print()
    return ok
