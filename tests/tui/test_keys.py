# topmark:header:start
#
#   project      : SkillKit
#   file         : test_keys.py
#   file_relpath : tests/tui/test_keys.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Tests for raw keystroke decoding (`skillkit.tui.keys.decode_key`)."""

from __future__ import annotations

import pytest

from skillkit.tui.keys import Key, KeyPress, decode_key


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("\x1b[A", Key.UP),
        ("\x1b[B", Key.DOWN),
        ("\x1b[C", Key.RIGHT),
        ("\x1b[D", Key.LEFT),
        ("\x1bOA", Key.UP),
        ("\x1b[1;2A", Key.MOVE_UP),
        ("\x1b[1;2B", Key.MOVE_DOWN),
        ("\x1b", Key.ESC),
        ("\x1b[Z", Key.ESC),
        ("\xe0H", Key.UP),
        ("\xe0K", Key.LEFT),
        ("k", Key.UP),
        ("j", Key.DOWN),
        ("K", Key.MOVE_UP),
        ("J", Key.MOVE_DOWN),
        ("l", Key.RIGHT),
        ("\r", Key.ENTER),
        ("\n", Key.ENTER),
        (" ", Key.SPACE),
        ("\t", Key.TAB),
        ("q", Key.QUIT),
        ("Q", Key.QUIT),
        ("h", Key.HELP),
        ("a", Key.SELECT_ALL),
        ("y", Key.YES),
        ("n", Key.NO),
        ("r", Key.OTHER),
        ("v", Key.OTHER),
        ("x", Key.OTHER),
        ("", Key.QUIT),
    ],
)
def test_decode_key(raw: str, expected: Key) -> None:
    assert decode_key(raw).key is expected


def test_digits_carry_their_value() -> None:
    assert decode_key("3") == KeyPress(Key.DIGIT, 3)
    assert decode_key("0").key is Key.OTHER
