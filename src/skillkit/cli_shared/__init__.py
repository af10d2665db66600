# topmark:header:start
#
#   project      : SkillKit
#   file         : __init__.py
#   file_relpath : src/skillkit/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Frontend-agnostic helpers shared by the CLI and the interactive session."""
