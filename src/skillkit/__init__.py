# topmark:header:start
#
#   project      : SkillKit
#   file         : __init__.py
#   file_relpath : src/skillkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit package.

SkillKit distributes reusable AI skills and agents from one canonical
repository to the tool-specific directories of many platforms. Every
distributed copy is a symbolic link back to the canonical source, so a single
edit is visible everywhere. The package exposes a click CLI (``sk``) and an
interactive terminal session built on the same core operations.
"""

from __future__ import annotations
