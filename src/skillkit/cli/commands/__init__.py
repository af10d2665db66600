# topmark:header:start
#
#   project      : SkillKit
#   file         : __init__.py
#   file_relpath : src/skillkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Subcommands of the ``sk`` command group."""
