# topmark:header:start
#
#   project      : SkillKit
#   file         : test_screens.py
#   file_relpath : tests/tui/test_screens.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Tests for screen text produced by `skillkit.tui.screens`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillkit.core.catalog import ModuleCatalog
from skillkit.tui.screens import (
    DESC_INDENT,
    description_lines,
    render_defaults,
    render_detail,
    render_list,
    render_main_menu,
    render_module_list,
)
from skillkit.tui.state import (
    DefaultsFrame,
    DetailFrame,
    ListFrame,
    ListMode,
    MainMenuFrame,
    ModuleListFrame,
)
from tests.conftest import make_module
from tests.tui.conftest import RecordingConsole

if TYPE_CHECKING:
    from pathlib import Path

    from skillkit.config.model import Platform

LONG_DESCRIPTION = " ".join(["word"] * 40)


def test_main_menu_marks_the_cursor() -> None:
    console = RecordingConsole()

    render_main_menu(console, MainMenuFrame(1))

    assert any(line.strip().startswith("▶ 2. List") for line in console.lines)
    assert "    1. Use          Distribute skill to platforms" in console.lines
    assert "↑↓ Navigate  |  →/Enter Select  |  Q Quit  |  H Help" in console.output


def test_description_wraps_to_two_thirds_of_width() -> None:
    console = RecordingConsole()

    lines = description_lines(console, LONG_DESCRIPTION, 120)

    assert lines[0].startswith("  Desc: word")
    assert all(line.startswith(DESC_INDENT) for line in lines[1:])
    assert all(len(line) <= 80 + len(DESC_INDENT) for line in lines)
    words = " ".join(lines).split()
    assert words[0] == "Desc:"
    assert words[1:] == ["word"] * 40


def test_description_width_has_a_floor() -> None:
    lines = description_lines(RecordingConsole(), LONG_DESCRIPTION, 30)
    assert all(len(line.strip()) <= 40 + len("Desc: ") for line in lines)


def test_module_list_header_lines(repo: Path, platforms: dict[str, Platform]) -> None:
    make_module(repo, "demo", descriptor="---\ndescription: Short one\n---\n")
    modules = tuple(ModuleCatalog(repo).list_all())
    console = RecordingConsole()

    render_module_list(
        console, ModuleListFrame(modules), defaults=[], synced=[], term_width=90
    )

    assert "  Default: (all platforms)" in console.lines
    assert "  Synced: (none)" in console.lines
    assert "  Desc: Short one" in console.lines

    console = RecordingConsole()
    render_module_list(
        console,
        ModuleListFrame(modules, select_all=True),
        defaults=[platforms["beta"]],
        synced=[platforms["alpha"], platforms["gamma"]],
        term_width=90,
    )

    assert "  ▶ Select Module [ALL]" in console.lines
    assert "  Default: Beta" in console.lines
    assert "  Synced: Alpha, Gamma" in console.lines
    assert "✓ ▶ demo (skill)" in console.lines


def test_detail_shows_pending_changes(repo: Path, platforms: dict[str, Platform]) -> None:
    make_module(repo, "demo")
    module = ModuleCatalog(repo).find("demo")
    frame = DetailFrame(
        ("alpha", "beta", "gamma"), synced=(True, True, False), toggles=(True, False, True)
    )
    console = RecordingConsole()

    render_detail(console, module, frame, platforms)

    assert "  ▶ [✓] Alpha (synced)" in console.lines
    assert "    [ ] Beta (will remove)" in console.lines
    assert "    [✓] Gamma (will sync)" in console.lines


def test_defaults_selected_count(platforms: dict[str, Platform]) -> None:
    keys = tuple(platforms)
    console = RecordingConsole()

    render_defaults(console, DefaultsFrame(keys, (False, False, False)), platforms)
    assert "(press Enter to sync all)" in console.output
    assert "Set Default Platforms for Sync (used when pressing Enter on a module)" in console.output

    console = RecordingConsole()
    render_defaults(console, DefaultsFrame(keys, (True, False, True)), platforms)
    assert "  ℹ Selected: 2 platform(s)" in console.lines


def test_list_footers(platforms: dict[str, Platform]) -> None:
    keys = tuple(platforms)
    console = RecordingConsole()

    render_list(console, ListFrame(keys), [], platforms)
    assert "Tab Switch View  |  ← Back  |  Q Quit" in console.output
    assert "No modules found" in console.output

    console = RecordingConsole()
    render_list(console, ListFrame(keys, ListMode.PLATFORMS, cursor=1), [], platforms)
    assert "Tab Switch  |  ↑↓ Select  |  Shift+↑↓ Move  |  ← Back" in console.output
    assert "▶ Beta (beta)" in console.output
