# topmark:header:start
#
#   project      : SkillKit
#   file         : __init__.py
#   file_relpath : src/skillkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""SkillKit configuration: records, TOML I/O, and logging.

The platform configuration lives in ``platforms.toml`` at the repository root.
[`skillkit.config.io`][] turns it into a [`Config`][skillkit.config.model.Config]
record and writes ordering/default changes back without disturbing comments.
The bundled ``platforms-default.toml`` seeds new repositories.
"""

from __future__ import annotations

from skillkit.config.model import Config, Platform, Scope

__all__ = ["Config", "Platform", "Scope"]
