# topmark:header:start
#
#   project      : SkillKit
#   file         : version.py
#   file_relpath : src/skillkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit `version` command.

Prints the SkillKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum

import click

from skillkit.cli.cli_types import EnumChoiceParam
from skillkit.cli.cmd_common import get_console, get_effective_verbosity
from skillkit.constants import SKILLKIT_TAGLINE, SKILLKIT_VERSION


class OutputFormat(str, Enum):
    """Output formats of the `version` command."""

    DEFAULT = "default"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of SkillKit.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SkillKit."""
    console = get_console(ctx)
    fmt = output_format or OutputFormat.DEFAULT

    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": SKILLKIT_VERSION}))
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled(f"SkillKit - {SKILLKIT_TAGLINE}", bold=True, underline=True))
        console.print(f"    {console.styled(SKILLKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(SKILLKIT_VERSION, bold=True))
