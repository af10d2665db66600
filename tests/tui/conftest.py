# topmark:header:start
#
#   project      : SkillKit
#   file         : conftest.py
#   file_relpath : tests/tui/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Test doubles for driving the interactive session without a real terminal.

`ScriptedTerminal` replays raw keystrokes (as ``click.getchar`` would return
them) through the real key decoder. `RecordingConsole` keeps every printed line
uncolored so tests can assert on screen text.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from skillkit.tui.controller import NavigationController
from skillkit.tui.keys import KeyPress, decode_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skillkit.config.model import Config


class ScriptExhaustedError(AssertionError):
    """The session asked for more keys than the test scripted."""


class ScriptedTerminal:
    """`TerminalLike` replaying a fixed list of raw keystrokes."""

    def __init__(self, keys: Iterable[str], *, width: int = 90) -> None:
        self.presses: deque[KeyPress] = deque(decode_key(k) for k in keys)
        self._width = width
        self.clears = 0
        self.cursor_visible = True
        self.cursor_toggles: list[bool] = []

    @property
    def remaining(self) -> int:
        return len(self.presses)

    def read_key(self) -> KeyPress:
        if not self.presses:
            raise ScriptExhaustedError("the session asked for another key")
        return self.presses.popleft()

    def clear(self) -> None:
        self.clears += 1

    def width(self) -> int:
        return self._width

    def hide_cursor(self) -> None:
        self.cursor_visible = False
        self.cursor_toggles.append(False)

    def show_cursor(self) -> None:
        self.cursor_visible = True
        self.cursor_toggles.append(True)


class RecordingConsole:
    """`ConsoleLike` collecting plain-text output."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.errors: list[str] = []

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.lines.append(text)

    def warn(self, text: str, *, nl: bool = True) -> None:
        self.errors.append(text)

    def error(self, text: str, *, nl: bool = True) -> None:
        self.errors.append(text)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        return text


def run_session(
    config: Config, keys: Iterable[str], **kwargs: Any
) -> tuple[ScriptedTerminal, RecordingConsole]:
    """Run a full interactive session over ``keys`` and return the doubles.

    Args:
        config (Config): Session configuration.
        keys (Iterable[str]): Raw keystrokes, e.g. ``["1", "\\r", "q"]``.
        **kwargs (Any): Extra keyword arguments for `NavigationController`.

    Returns:
        tuple[ScriptedTerminal, RecordingConsole]: The terminal and console used.
    """
    terminal = ScriptedTerminal(keys)
    console = RecordingConsole()
    NavigationController(config, terminal, console, **kwargs).run()
    return terminal, console
