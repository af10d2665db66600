# topmark:header:start
#
#   project      : SkillKit
#   file         : test_state.py
#   file_relpath : tests/tui/test_state.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Tests for the immutable session frames in `skillkit.tui.state`.

Frames are pure: each test feeds key presses and checks the next frame or the
outcome, without any terminal or filesystem.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from skillkit.core.catalog import Category, Module
from skillkit.tui.keys import Key, KeyPress
from skillkit.tui.state import (
    Back,
    Commit,
    DefaultsFrame,
    DetailFrame,
    ListFrame,
    ListMode,
    MainMenuFrame,
    MenuChoice,
    MenuEntry,
    ModuleListFrame,
    Quit,
    Reorder,
    SaveDefaults,
    ShowDetail,
    ShowHelp,
    SyncAllDefault,
    SyncDefault,
    confirm_decision,
)

UP = KeyPress(Key.UP)
DOWN = KeyPress(Key.DOWN)
LEFT = KeyPress(Key.LEFT)
RIGHT = KeyPress(Key.RIGHT)
ENTER = KeyPress(Key.ENTER)
SPACE = KeyPress(Key.SPACE)
ESC = KeyPress(Key.ESC)
QUIT = KeyPress(Key.QUIT)
TAB = KeyPress(Key.TAB)
SELECT_ALL = KeyPress(Key.SELECT_ALL)

MODULES = tuple(
    Module(name=name, category=Category.SKILL, path=Path("/repo/skill") / name)
    for name in ("one", "two", "three")
)
KEYS = ("alpha", "beta", "gamma")


# --- Main menu ---


def test_main_menu_cursor_is_clamped() -> None:
    frame = MainMenuFrame()
    assert frame.step(UP) == MainMenuFrame(0)

    for _ in range(10):
        frame = frame.step(DOWN)  # type: ignore[assignment]
    assert frame == MainMenuFrame(4)


def test_main_menu_select_and_digits() -> None:
    assert MainMenuFrame(1).step(ENTER) == MenuChoice(MenuEntry.LIST)
    assert MainMenuFrame(2).step(RIGHT) == MenuChoice(MenuEntry.PLATFORMS)
    assert MainMenuFrame().step(KeyPress(Key.DIGIT, 4)) == MenuChoice(MenuEntry.DEFAULTS)
    assert MainMenuFrame().step(KeyPress(Key.DIGIT, 9)) == MainMenuFrame()


def test_main_menu_help_and_quit() -> None:
    assert MainMenuFrame().step(KeyPress(Key.HELP)) == ShowHelp()
    assert MainMenuFrame().step(QUIT) == Quit()
    assert MainMenuFrame().step(LEFT) == MainMenuFrame()


def test_menu_entries_carry_labels() -> None:
    assert [e.label for e in MenuEntry] == ["Use", "List", "Platforms", "Defaults", "Init"]
    assert MenuEntry.USE.description == "Distribute skill to platforms"


# --- Module list ---


def test_module_list_select_all_toggles_and_syncs_everything() -> None:
    frame = ModuleListFrame(MODULES).step(SELECT_ALL)
    assert isinstance(frame, ModuleListFrame)
    assert frame.select_all

    assert frame.step(ENTER) == SyncAllDefault(MODULES)
    assert frame.step(SELECT_ALL) == ModuleListFrame(MODULES)


@pytest.mark.parametrize("press", [UP, DOWN, SPACE, ESC])
def test_module_list_navigation_clears_select_all(press: KeyPress) -> None:
    frame = ModuleListFrame(MODULES, cursor=1, select_all=True).step(press)

    assert isinstance(frame, ModuleListFrame)
    assert not frame.select_all


def test_module_list_single_module_actions() -> None:
    frame = ModuleListFrame(MODULES).step(DOWN)
    assert isinstance(frame, ModuleListFrame)

    assert frame.step(ENTER) == SyncDefault(MODULES[1])
    assert frame.step(RIGHT) == ShowDetail(MODULES[1])
    assert frame.step(LEFT) == Back()
    assert frame.step(QUIT) == Quit()


# --- Detail ---


def test_detail_toggles_and_commits_desired_keys() -> None:
    frame = DetailFrame.for_synced(KEYS, (True, False, False))

    frame = frame.step(SPACE)  # type: ignore[assignment]
    frame = frame.step(DOWN)  # type: ignore[assignment]
    frame = frame.step(ENTER)  # type: ignore[assignment]

    assert isinstance(frame, DetailFrame)
    assert frame.toggles == (False, True, False)
    assert frame.step(LEFT) == Commit(("beta",))
    assert frame.step(QUIT) == Quit()


def test_detail_annotations() -> None:
    frame = DetailFrame(KEYS, synced=(True, True, False), toggles=(True, False, True))

    assert [frame.annotation(i) for i in range(3)] == ["synced", "will remove", "will sync"]
    assert DetailFrame(("x",), (False,), (False,)).annotation(0) == ""


def test_detail_ignores_unbound_keys() -> None:
    frame = DetailFrame.for_synced(KEYS, (False, False, False))
    assert frame.step(TAB) == frame
    assert frame.step(ESC) == frame


# --- List ---


def test_list_tab_switches_projection() -> None:
    frame = ListFrame(KEYS).step(TAB)
    assert frame == ListFrame(KEYS, ListMode.PLATFORMS)
    assert frame.step(TAB) == ListFrame(KEYS, ListMode.MODULES)  # type: ignore[union-attr]


def test_list_moves_only_in_platform_projection() -> None:
    modules_view = ListFrame(KEYS, cursor=1)
    assert modules_view.step(KeyPress(Key.MOVE_UP)) == modules_view

    platforms_view = ListFrame(KEYS, ListMode.PLATFORMS, cursor=1)
    result = platforms_view.step(KeyPress(Key.MOVE_UP))

    assert isinstance(result, Reorder)
    assert result.keys == ("beta", "alpha", "gamma")
    assert result.frame.cursor == 0
    assert result.frame.keys == result.keys


def test_list_move_past_the_end_is_a_noop() -> None:
    frame = ListFrame(KEYS, ListMode.PLATFORMS, cursor=2)
    assert frame.step(KeyPress(Key.MOVE_DOWN)) == frame


@pytest.mark.parametrize("press", [LEFT, ESC, QUIT])
def test_list_back_keys(press: KeyPress) -> None:
    assert ListFrame(KEYS).step(press) == Back()


# --- Defaults ---


def test_defaults_save_and_quit() -> None:
    frame = DefaultsFrame(KEYS, (False, True, False))
    frame = frame.step(DOWN).step(DOWN).step(SPACE)  # type: ignore[union-attr]

    assert isinstance(frame, DefaultsFrame)
    assert frame.selected_keys == ("beta", "gamma")
    assert frame.step(LEFT) == SaveDefaults(("beta", "gamma"))
    assert frame.step(QUIT) == Quit()


# --- Confirm ---


@pytest.mark.parametrize(
    ("press", "expected"),
    [
        (ENTER, True),
        (KeyPress(Key.YES), True),
        (ESC, False),
        (KeyPress(Key.NO), False),
        (QUIT, False),
        (LEFT, False),
        (SPACE, None),
        (DOWN, None),
    ],
)
def test_confirm_decision(press: KeyPress, expected: bool | None) -> None:
    assert confirm_decision(press) is expected
