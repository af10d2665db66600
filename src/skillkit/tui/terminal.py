# topmark:header:start
#
#   project      : SkillKit
#   file         : terminal.py
#   file_relpath : src/skillkit/tui/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Terminal collaborator of the interactive session.

The navigation controller only needs to read one logical key, clear the
screen, toggle the cursor, and know the width. `ClickTerminal` implements this
with click's raw-mode ``getchar``; tests substitute a scripted implementation.
"""

from __future__ import annotations

import shutil
from typing import Protocol

import click

from skillkit.config.logging import get_logger
from skillkit.tui.keys import Key, KeyPress, decode_key

logger = get_logger(__name__)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TerminalLike(Protocol):
    """Minimal terminal interface used by the navigation controller."""

    def read_key(self) -> KeyPress:
        """Block until one key is pressed and return it."""
        ...

    def clear(self) -> None:
        """Clear the screen."""
        ...

    def width(self) -> int:
        """Return the terminal width in columns."""
        ...

    def hide_cursor(self) -> None:
        """Hide the text cursor."""
        ...

    def show_cursor(self) -> None:
        """Show the text cursor."""
        ...


class ClickTerminal:
    """`TerminalLike` backed by click (raw single-key reads)."""

    def read_key(self) -> KeyPress:
        """Read one keystroke; Ctrl-C and end of input decode as `Key.QUIT`."""
        try:
            raw = click.getchar()
        except (KeyboardInterrupt, EOFError):
            return KeyPress(Key.QUIT)
        press = decode_key(raw)
        logger.trace("Key %r -> %s", raw, press)
        return press

    def clear(self) -> None:
        click.clear()

    def width(self) -> int:
        return shutil.get_terminal_size((80, 24)).columns

    def hide_cursor(self) -> None:
        click.echo(HIDE_CURSOR, nl=False)

    def show_cursor(self) -> None:
        click.echo(SHOW_CURSOR, nl=False)
