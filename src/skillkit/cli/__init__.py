# topmark:header:start
#
#   project      : SkillKit
#   file         : __init__.py
#   file_relpath : src/skillkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Click-based command-line interface for SkillKit (``sk``)."""
