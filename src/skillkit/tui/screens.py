# topmark:header:start
#
#   project      : SkillKit
#   file         : screens.py
#   file_relpath : src/skillkit/tui/screens.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Screen rendering for the interactive session.

Each function prints one full screen for a frame from
[`skillkit.tui.state`][]. Clearing the terminal is left to the controller, so
these functions only write through the console and stay easy to test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillkit.cli_shared.render import (
    ICON_ARROW,
    ICON_INFO,
    ICON_SUCCESS,
    ICON_WARNING,
    render_module_projection,
    render_platform_projection,
    wrap_text,
)
from skillkit.constants import SKILLKIT_TAGLINE, SKILLKIT_VERSION
from skillkit.tui.state import MENU_ENTRIES, ListMode

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from skillkit.cli_shared.console_api import ConsoleLike
    from skillkit.config.model import Platform
    from skillkit.core.catalog import Module
    from skillkit.tui.state import (
        DefaultsFrame,
        DetailFrame,
        ListFrame,
        MainMenuFrame,
        ModuleListFrame,
    )

BANNER = r"""
  ____  _    _ _ _ _  ___ _
 / ___|| | _(_) | | |/ (_) |_
 \___ \| |/ / | | | ' /| | __|
  ___) |   <| | | | . \| | |_
 |____/|_|\_\_|_|_|_|\_\_|\__|
"""

DESC_LABEL = "Desc:"
DESC_INDENT = " " * 8
MIN_DESC_WIDTH = 40

HELP_KEYS: tuple[tuple[str, str], ...] = (
    ("↑/↓  k/j", "Move the cursor"),
    ("→  l", "Open / select"),
    ("←", "Back (commits pending changes)"),
    ("Enter", "Select, or sync to the default platforms"),
    ("Space", "Toggle a platform"),
    ("A", "Select all modules"),
    ("Tab", "Switch between module and platform view"),
    ("Shift+↑/↓  K/J", "Move a platform in the display order"),
    ("1-5", "Jump to a main menu entry"),
    ("Q", "Quit"),
)

HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("sk", "Start the interactive menu"),
    ("sk use <module> [platform]", "Link a module to one or all platforms"),
    ("sk sync", "Link every module to every platform"),
    ("sk list", "Show all modules and status"),
    ("sk remove <module> [platform]", "Remove a module's links"),
    ("sk status", "Check link health"),
    ("sk init", "Initialize the repository"),
)


def _footer(console: ConsoleLike, text: str) -> None:
    console.print()
    console.print(f"  {console.styled(text, fg='bright_black')}")
    console.print()


def _cursor_prefix(console: ConsoleLike, active: bool) -> str:
    return f"  {console.styled(ICON_ARROW, fg='cyan')} " if active else "    "


def _checkbox(console: ConsoleLike, checked: bool) -> str:
    return console.styled(f"[{ICON_SUCCESS}]", fg="green") if checked else "[ ]"


def render_banner(console: ConsoleLike) -> None:
    """Print the banner with the version and tagline."""
    console.print(console.styled(BANNER, fg="cyan"), nl=False)
    console.print()
    console.print(
        f" {console.styled(SKILLKIT_TAGLINE, fg='bright_black')}  "
        f"{console.styled('v' + SKILLKIT_VERSION, fg='bright_black')}"
    )
    console.print()


def render_main_menu(console: ConsoleLike, frame: MainMenuFrame) -> None:
    """Print the main menu with the highlighted entry."""
    render_banner(console)
    for number, entry in enumerate(MENU_ENTRIES, start=1):
        label = f"{number}. {entry.label:<12}"
        if number - 1 == frame.cursor:
            marker = console.styled(f"{ICON_ARROW} {label}", fg="cyan")
            console.print(f"  {marker} {entry.description}")
        else:
            console.print(f"    {label} {entry.description}")
    _footer(console, "↑↓ Navigate  |  →/Enter Select  |  Q Quit  |  H Help")


def render_help(console: ConsoleLike) -> None:
    """Print the key bindings and the batch commands."""
    render_banner(console)
    console.print(console.styled("KEYS", fg="blue"))
    for keys, text in HELP_KEYS:
        console.print(f"  {console.styled(f'{keys:<20}', fg='green')} {text}")
    console.print()
    console.print(console.styled("COMMANDS", fg="blue"))
    for command, text in HELP_COMMANDS:
        console.print(f"  {console.styled(f'{command:<30}', fg='green')} {text}")
    console.print()


def description_lines(console: ConsoleLike, description: str, term_width: int) -> list[str]:
    """Return the ``Desc:`` lines wrapped to two thirds of the terminal width."""
    width = max(term_width * 2 // 3, MIN_DESC_WIDTH)
    wrapped = wrap_text(description, width)
    first = f"  {console.styled(DESC_LABEL, fg='bright_black')} {wrapped[0]}"
    return [first, *(DESC_INDENT + line for line in wrapped[1:])]


def render_module_list(
    console: ConsoleLike,
    frame: ModuleListFrame,
    *,
    defaults: Sequence[Platform],
    synced: Sequence[Platform],
    term_width: int,
) -> None:
    """Print the module selection list.

    Args:
        console (ConsoleLike): Output console.
        frame (ModuleListFrame): Current list state.
        defaults (Sequence[Platform]): Explicit default platforms (empty for all).
        synced (Sequence[Platform]): Platforms the highlighted module is linked into.
        term_width (int): Terminal width used to wrap the description.
    """
    title = f"{console.styled(ICON_ARROW, fg='blue')} Select Module"
    if frame.select_all:
        title += " " + console.styled("[ALL]", fg="magenta")
    console.print()
    console.print(f"  {title}")

    grey = "bright_black"
    if defaults:
        names = ", ".join(p.name for p in defaults)
        console.print(
            f"  {console.styled('Default:', fg=grey)} {console.styled(names, fg='yellow')}"
        )
    else:
        console.print(
            f"  {console.styled('Default:', fg=grey)} {console.styled('(all platforms)', fg=grey)}"
        )
    if synced:
        names = ", ".join(p.name for p in synced)
        console.print(f"  {console.styled('Synced:', fg=grey)} {console.styled(names, fg='cyan')}")
    else:
        console.print(f"  {console.styled('Synced:', fg=grey)} {console.styled('(none)', fg=grey)}")
    if frame.current.description:
        for line in description_lines(console, frame.current.description, term_width):
            console.print(line)
    console.print()

    mark = console.styled(f"{ICON_SUCCESS} ", fg="green") if frame.select_all else "  "
    for i, module in enumerate(frame.modules):
        category = console.styled(f"({module.category.value})", fg=grey)
        if i == frame.cursor:
            name = console.styled(module.name, bold=True)
            console.print(f"{mark}{console.styled(ICON_ARROW, fg='cyan')} {name} {category}")
        else:
            console.print(f"{mark}  {module.name} {category}")
    _footer(
        console,
        "↑↓ Navigate  |  Enter Sync to Default  |  A Select All  |  → Details  |  ← Back",
    )


def render_detail(
    console: ConsoleLike,
    module: Module,
    frame: DetailFrame,
    platforms: Mapping[str, Platform],
) -> None:
    """Print the per-platform toggle page of ``module``."""
    console.print()
    name = console.styled(module.name, bold=True)
    console.print(f"  {console.styled('Module:', fg='blue')} {name}")
    console.print(f"  {console.styled('Category:', fg='blue')} {module.category.value}")
    if module.description:
        console.print(
            f"  {console.styled('Desc:', fg='blue')} "
            f"{console.styled(module.description, fg='bright_black')}"
        )
    path = console.styled(str(module.path), fg="bright_black")
    console.print(f"  {console.styled('Path:', fg='blue')} {path}")
    console.print()
    console.print(f"  {console.styled('Platforms (✓=sync, ✗=remove):', fg='blue')}")
    console.print()

    colors = {"synced": "bright_black", "will sync": "green", "will remove": "yellow"}
    for i, key in enumerate(frame.keys):
        note = frame.annotation(i)
        status = " " + console.styled(f"({note})", fg=colors[note]) if note else ""
        name = platforms[key].name
        checkbox = _checkbox(console, frame.toggles[i])
        console.print(f"{_cursor_prefix(console, i == frame.cursor)}{checkbox} {name}{status}")
    _footer(console, "↑↓ Navigate  |  Space/Enter Toggle  |  ← Back & Apply  |  Q Quit")


def render_list(
    console: ConsoleLike,
    frame: ListFrame,
    modules: Sequence[Module],
    platforms: Mapping[str, Platform],
) -> None:
    """Print the List screen in the frame's projection.

    ``platforms`` must already follow ``frame.keys``.
    """
    grey = "bright_black"
    console.print()
    if frame.mode is ListMode.MODULES:
        hint = console.styled("[Tab: Platform view]", fg=grey)
        console.print(f"  {console.styled(ICON_INFO, fg='blue')} Modules {hint}")
        console.print()
        if not modules:
            console.print(f"  {console.styled(ICON_WARNING, fg='yellow')} No modules found")
        else:
            render_module_projection(console, modules, platforms)
        _footer(console, "Tab Switch View  |  ← Back  |  Q Quit")
        return

    hint = console.styled("[Tab: Module view]", fg=grey)
    console.print(f"  {console.styled(ICON_INFO, fg='blue')} Platforms {hint}")
    console.print()
    render_platform_projection(console, modules, platforms, selected=frame.cursor)
    _footer(console, "Tab Switch  |  ↑↓ Select  |  Shift+↑↓ Move  |  ← Back")


def render_defaults(
    console: ConsoleLike,
    frame: DefaultsFrame,
    platforms: Mapping[str, Platform],
) -> None:
    """Print the default platform editor."""
    console.print()
    console.print(
        f"  {console.styled('Set Default Platforms for Sync', fg='blue')} "
        f"{console.styled('(used when pressing Enter on a module)', bold=True)}"
    )
    console.print()
    count = len(frame.selected_keys)
    info = console.styled(ICON_INFO, fg="bright_black")
    if count:
        console.print(f"  {info} Selected: {count} platform(s)")
    else:
        console.print(
            f"  {info} Selected: {console.styled('(press Enter to sync all)', fg='bright_black')}"
        )
    console.print()
    for i, key in enumerate(frame.keys):
        checkbox = _checkbox(console, frame.toggles[i])
        prefix = _cursor_prefix(console, i == frame.cursor)
        console.print(f"{prefix}{checkbox} {platforms[key].name}")
    _footer(console, "↑↓ Navigate  |  Space/Enter Toggle  |  ← Save & Exit")


def render_confirm(console: ConsoleLike, message: str) -> None:
    """Print a confirmation prompt; the answer is read by the controller."""
    console.print()
    console.print(f"  {console.styled(ICON_WARNING, fg='yellow')} {message}")
    console.print(f"  {console.styled('[Enter] Confirm  |  [ESC] Cancel', fg='bright_black')}")


def render_continue(console: ConsoleLike) -> None:
    """Print the ``Press any key`` prompt shown after a batch or an info page."""
    console.print()
    console.print("Press any key to continue...", nl=False)
