# topmark:header:start
#
#   project      : SkillKit
#   file         : keys.py
#   file_relpath : src/skillkit/tui/keys.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Decoding of raw terminal input into logical key presses.

``click.getchar`` returns one keystroke, which for special keys is a whole
escape sequence (``"\\x1b[A"``) on POSIX or a two-character scan code
(``"\\xe0H"``) on Windows. `decode_key` maps these to `Key` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(str, Enum):
    """Logical keys understood by the interactive session."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    SPACE = "space"
    TAB = "tab"
    ESC = "esc"
    QUIT = "quit"
    HELP = "help"
    YES = "yes"
    NO = "no"
    SELECT_ALL = "select_all"
    DIGIT = "digit"
    OTHER = "other"


@dataclass(frozen=True)
class KeyPress:
    """A decoded key; ``digit`` is set (1-9) for `Key.DIGIT`."""

    key: Key
    digit: int | None = None


_CHAR_KEYS: dict[str, Key] = {
    "q": Key.QUIT,
    "Q": Key.QUIT,
    "h": Key.HELP,
    "H": Key.HELP,
    "j": Key.DOWN,
    "J": Key.MOVE_DOWN,
    "k": Key.UP,
    "K": Key.MOVE_UP,
    "l": Key.RIGHT,
    "L": Key.RIGHT,
    " ": Key.SPACE,
    "y": Key.YES,
    "Y": Key.YES,
    "n": Key.NO,
    "N": Key.NO,
    "a": Key.SELECT_ALL,
    "A": Key.SELECT_ALL,
    "\t": Key.TAB,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
}

# Final byte of a CSI / SS3 cursor sequence
_ARROWS: dict[str, Key] = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}

# Shift+Up / Shift+Down (xterm modifier 2)
_SHIFT_ARROWS: dict[str, Key] = {"\x1b[1;2A": Key.MOVE_UP, "\x1b[1;2B": Key.MOVE_DOWN}

# Second character of a Windows extended scan code
_WINDOWS_ARROWS: dict[str, Key] = {"H": Key.UP, "P": Key.DOWN, "M": Key.RIGHT, "K": Key.LEFT}


def decode_key(raw: str) -> KeyPress:
    """Map one raw keystroke to a `KeyPress`.

    Args:
        raw (str): Characters returned for one keystroke. An empty string
            (end of input) decodes as `Key.QUIT`.

    Returns:
        KeyPress: The decoded key; unknown input is `Key.OTHER`.
    """
    if not raw:
        return KeyPress(Key.QUIT)

    first = raw[0]
    if first == "\x1b":
        shifted = _SHIFT_ARROWS.get(raw[:6])
        if shifted is not None:
            return KeyPress(shifted)
        if len(raw) >= 3 and raw[1] in "[O":
            arrow = _ARROWS.get(raw[2])
            if arrow is not None:
                return KeyPress(arrow)
        return KeyPress(Key.ESC)

    if first in "\xe0\x00" and len(raw) >= 2:
        return KeyPress(_WINDOWS_ARROWS.get(raw[1], Key.OTHER))

    if "1" <= first <= "9":
        return KeyPress(Key.DIGIT, int(first))

    return KeyPress(_CHAR_KEYS.get(first, Key.OTHER))
