# topmark:header:start
#
#   project      : SkillKit
#   file         : console.py
#   file_relpath : src/skillkit/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Console implementations for user-facing program output.

- `ClickConsole`: click-backed, color-aware; stored in ``ctx.obj["console"]``.
- `StdConsole`: plain stdlib streams, used when no click context is active.

Use these for messages intended for end users; `logging` is reserved for
diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from skillkit.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console backed by ``click.echo``.

    Args:
        enable_color (bool): If True, emit ANSI styling.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for warnings and errors. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with click.style (plain when color is off).

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments for click.style, e.g. ``fg`` or ``bold``.

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


class StdConsole(ConsoleLike):
    """Console without colors writing to stdlib streams."""

    def __init__(self, *, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.enable_color = False
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.out.write(text + ("\n" if nl else ""))

    def warn(self, text: str, *, nl: bool = True) -> None:
        self.err.write(text + ("\n" if nl else ""))

    def error(self, text: str, *, nl: bool = True) -> None:
        self.err.write(text + ("\n" if nl else ""))

    def styled(self, text: str, **style_kwargs: object) -> str:
        return text


def get_console_safely() -> ConsoleLike:
    """Return the console of the active click context, or a `StdConsole`.

    Avoids ``RuntimeError: There is no active click context`` when code is
    driven directly (e.g. from tests).
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return StdConsole()
