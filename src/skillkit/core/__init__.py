# topmark:header:start
#
#   project      : SkillKit
#   file         : __init__.py
#   file_relpath : src/skillkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Core link model and reconciliation logic.

Modules in this package are framework-agnostic: they never import click and
never print. Batch operations report per-item outcomes through callbacks so
the caller decides how to present them.
"""

from __future__ import annotations
