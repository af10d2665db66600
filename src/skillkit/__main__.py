# topmark:header:start
#
#   project      : SkillKit
#   file         : __main__.py
#   file_relpath : src/skillkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Module entry point for running SkillKit via ``python -m skillkit``.

Delegates to :func:`skillkit.cli.main.cli`, the same entry point used by the
``sk`` console script.

Examples:
    Start the interactive session::

        python -m skillkit

    Link a skill to every configured platform::

        python -m skillkit use my-skill
"""

from __future__ import annotations

from skillkit.cli.main import cli

if __name__ == "__main__":
    cli()
