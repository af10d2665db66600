# topmark:header:start
#
#   project      : SkillKit
#   file         : state.py
#   file_relpath : src/skillkit/tui/state.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Immutable per-screen session state and closed outcome types.

Each screen of the interactive session is a frozen *frame*. Its ``step`` method
consumes one `KeyPress` and returns either the next frame of the same screen or
an *outcome* that ends the screen. Outcomes are small frozen dataclasses; each
screen has a closed union of them, so the controller can ``match`` exhaustively
instead of comparing strings.

Frames never perform I/O. The controller performs the effects an outcome
requests (linking, saving, prompting) and decides which frame comes next.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Union

from skillkit.tui.keys import Key, KeyPress

if TYPE_CHECKING:
    from skillkit.core.catalog import Module


class MenuEntry(Enum):
    """Main menu entries, in display order."""

    USE = ("Use", "Distribute skill to platforms")
    LIST = ("List", "Show all modules and status")
    PLATFORMS = ("Platforms", "View registered platforms")
    DEFAULTS = ("Defaults", "Set default platforms for sync")
    INIT = ("Init", "Initialize repository")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


MENU_ENTRIES: tuple[MenuEntry, ...] = tuple(MenuEntry)


class ListMode(str, Enum):
    """Projection shown by the List screen."""

    MODULES = "modules"
    PLATFORMS = "platforms"


# --- Outcomes ---


@dataclass(frozen=True)
class Back:
    """Return to the previous screen."""


@dataclass(frozen=True)
class Quit:
    """End the whole session immediately."""


@dataclass(frozen=True)
class ShowHelp:
    """Show the help page, then return to the main menu."""


@dataclass(frozen=True)
class MenuChoice:
    """A main menu entry was selected."""

    entry: MenuEntry


@dataclass(frozen=True)
class SyncDefault:
    """Link one module into the default platforms (after confirmation)."""

    module: Module


@dataclass(frozen=True)
class SyncAllDefault:
    """Link every module into the default platforms (after confirmation)."""

    modules: tuple[Module, ...]


@dataclass(frozen=True)
class ShowDetail:
    """Open the per-platform detail page for a module."""

    module: Module


@dataclass(frozen=True)
class Commit:
    """Leave the detail page; ``desired`` holds the toggled-on platform keys."""

    desired: tuple[str, ...]


@dataclass(frozen=True)
class SaveDefaults:
    """Leave the defaults page persisting ``keys`` as the default set."""

    keys: tuple[str, ...]


@dataclass(frozen=True)
class Reorder:
    """Persist ``keys`` as the platform display order, then continue."""

    keys: tuple[str, ...]
    frame: ListFrame


MainMenuOutcome = Union[MenuChoice, ShowHelp, Quit]
ModuleListOutcome = Union[Back, Quit, SyncDefault, SyncAllDefault, ShowDetail]
DetailOutcome = Union[Commit, Quit]
ListOutcome = Union[Back, Reorder]
DefaultsOutcome = Union[SaveDefaults, Quit]


def _move(cursor: int, press: KeyPress, count: int) -> int:
    if press.key is Key.UP:
        return max(cursor - 1, 0)
    if press.key is Key.DOWN:
        return min(cursor + 1, max(count - 1, 0))
    return cursor


def _toggled(toggles: tuple[bool, ...], index: int) -> tuple[bool, ...]:
    return toggles[:index] + (not toggles[index],) + toggles[index + 1 :]


# --- Frames ---


@dataclass(frozen=True)
class MainMenuFrame:
    """Main menu; ``cursor`` indexes `MENU_ENTRIES`."""

    cursor: int = 0

    def step(self, press: KeyPress) -> MainMenuFrame | MainMenuOutcome:
        """Apply one key press."""
        match press.key:
            case Key.UP | Key.DOWN:
                return replace(self, cursor=_move(self.cursor, press, len(MENU_ENTRIES)))
            case Key.RIGHT | Key.ENTER:
                return MenuChoice(MENU_ENTRIES[self.cursor])
            case Key.DIGIT if press.digit is not None and press.digit <= len(MENU_ENTRIES):
                return MenuChoice(MENU_ENTRIES[press.digit - 1])
            case Key.HELP:
                return ShowHelp()
            case Key.QUIT:
                return Quit()
        return self


@dataclass(frozen=True)
class ModuleListFrame:
    """Module selection list of the Use flow.

    Attributes:
        modules (tuple[Module, ...]): Listed modules (never empty).
        cursor (int): Index of the highlighted module.
        select_all (bool): When set, the primary action applies to every module.
    """

    modules: tuple[Module, ...]
    cursor: int = 0
    select_all: bool = False

    @property
    def current(self) -> Module:
        return self.modules[self.cursor]

    def step(self, press: KeyPress) -> ModuleListFrame | ModuleListOutcome:
        """Apply one key press.

        Navigation, Space and Esc clear the select-all flag; ``a`` toggles it.
        """
        match press.key:
            case Key.UP | Key.DOWN:
                return replace(
                    self, cursor=_move(self.cursor, press, len(self.modules)), select_all=False
                )
            case Key.SELECT_ALL:
                return replace(self, select_all=not self.select_all)
            case Key.ESC | Key.SPACE:
                return replace(self, select_all=False)
            case Key.ENTER:
                if self.select_all:
                    return SyncAllDefault(self.modules)
                return SyncDefault(self.current)
            case Key.RIGHT:
                return ShowDetail(self.current)
            case Key.LEFT:
                return Back()
            case Key.QUIT:
                return Quit()
        return self


@dataclass(frozen=True)
class DetailFrame:
    """Per-platform toggles for one module.

    Attributes:
        keys (tuple[str, ...]): Platform keys in display order.
        synced (tuple[bool, ...]): Whether a symlink was present on entry.
        toggles (tuple[bool, ...]): Desired state; initialized from ``synced``.
        cursor (int): Index of the highlighted platform.
    """

    keys: tuple[str, ...]
    synced: tuple[bool, ...]
    toggles: tuple[bool, ...]
    cursor: int = 0

    @classmethod
    def for_synced(cls, keys: tuple[str, ...], synced: tuple[bool, ...]) -> DetailFrame:
        """Return a frame whose toggles start at the live synced state."""
        return cls(keys=keys, synced=synced, toggles=synced)

    def annotation(self, index: int) -> str:
        """Return ``synced``, ``will sync``, ``will remove`` or ``""`` for a row."""
        synced, wanted = self.synced[index], self.toggles[index]
        if synced and wanted:
            return "synced"
        if wanted:
            return "will sync"
        if synced:
            return "will remove"
        return ""

    def step(self, press: KeyPress) -> DetailFrame | DetailOutcome:
        """Apply one key press; Left is the commit point."""
        match press.key:
            case Key.UP | Key.DOWN:
                return replace(self, cursor=_move(self.cursor, press, len(self.keys)))
            case Key.SPACE | Key.ENTER if self.keys:
                return replace(self, toggles=_toggled(self.toggles, self.cursor))
            case Key.LEFT:
                return Commit(tuple(k for k, on in zip(self.keys, self.toggles) if on))
            case Key.QUIT:
                return Quit()
        return self


@dataclass(frozen=True)
class ListFrame:
    """Display-only List screen.

    Attributes:
        keys (tuple[str, ...]): Platform keys in display order.
        mode (ListMode): Current projection.
        cursor (int): Highlighted platform (platform projection only).
    """

    keys: tuple[str, ...]
    mode: ListMode = ListMode.MODULES
    cursor: int = 0

    def _swap(self, offset: int) -> ListFrame | Reorder:
        target = self.cursor + offset
        if not 0 <= target < len(self.keys):
            return self
        keys = list(self.keys)
        keys[self.cursor], keys[target] = keys[target], keys[self.cursor]
        frame = replace(self, keys=tuple(keys), cursor=target)
        return Reorder(frame.keys, frame)

    def step(self, press: KeyPress) -> ListFrame | ListOutcome:
        """Apply one key press; moves in the platform projection request a save."""
        platform_mode = self.mode is ListMode.PLATFORMS
        match press.key:
            case Key.TAB:
                mode = ListMode.MODULES if platform_mode else ListMode.PLATFORMS
                return replace(self, mode=mode, cursor=0)
            case Key.UP | Key.DOWN if platform_mode:
                return replace(self, cursor=_move(self.cursor, press, len(self.keys)))
            case Key.MOVE_UP if platform_mode:
                return self._swap(-1)
            case Key.MOVE_DOWN if platform_mode:
                return self._swap(1)
            case Key.LEFT | Key.ESC | Key.QUIT:
                return Back()
        return self


@dataclass(frozen=True)
class DefaultsFrame:
    """Default platform set editor."""

    keys: tuple[str, ...]
    toggles: tuple[bool, ...]
    cursor: int = 0

    @property
    def selected_keys(self) -> tuple[str, ...]:
        return tuple(k for k, on in zip(self.keys, self.toggles) if on)

    def step(self, press: KeyPress) -> DefaultsFrame | DefaultsOutcome:
        """Apply one key press; Left saves, ``q`` quits without saving."""
        match press.key:
            case Key.UP | Key.DOWN:
                return replace(self, cursor=_move(self.cursor, press, len(self.keys)))
            case Key.SPACE | Key.ENTER if self.keys:
                return replace(self, toggles=_toggled(self.toggles, self.cursor))
            case Key.LEFT:
                return SaveDefaults(self.selected_keys)
            case Key.QUIT:
                return Quit()
        return self


def confirm_decision(press: KeyPress) -> bool | None:
    """Interpret a key in a confirmation prompt.

    Returns:
        bool | None: True for Enter/``y``; False for Esc/``n``/``q``/Left;
        None for any other key (keep waiting).
    """
    if press.key in (Key.ENTER, Key.YES):
        return True
    if press.key in (Key.ESC, Key.NO, Key.QUIT, Key.LEFT):
        return False
    return None
