# topmark:header:start
#
#   project      : SkillKit
#   file         : catalog.py
#   file_relpath : src/skillkit/core/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Module discovery for a SkillKit repository.

A repository root contains two category directories, ``skill/`` and ``agent/``.
Every subdirectory of those is one module and the symlink source for all of its
platform links.

Each module directory may contain:
- ``skillkit.toml``: link-name overrides (``[link] default`` and
  ``[link.overrides]``), read by [`skillkit.config.io.load_module_overrides`][];
- ``SKILL.md`` / ``AGENT.md``: a descriptor document whose frontmatter
  ``description:`` field (or first prose line) becomes the module description.

Module records are derived fresh on every call; nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from skillkit.config.io import load_module_overrides
from skillkit.config.logging import get_logger
from skillkit.constants import MODULE_CONFIG_NAME
from skillkit.core.errors import UnknownModuleError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = get_logger(__name__)

FRONTMATTER_DELIMITER = "---"
DESCRIPTION_FIELD = "description:"


class Category(str, Enum):
    """Module category; the value is also the category directory name."""

    SKILL = "skill"
    AGENT = "agent"

    @property
    def descriptor_name(self) -> str:
        """File name of the descriptor document for this category."""
        return "SKILL.md" if self is Category.SKILL else "AGENT.md"


# Lookup and enumeration order; a name present in both resolves to SKILL.
CATEGORY_ORDER: tuple[Category, ...] = (Category.SKILL, Category.AGENT)


@dataclass(frozen=True)
class Module:
    """A named skill or agent backed by one canonical source directory.

    Attributes:
        name (str): Link name; the directory name unless ``[link] default``
            overrides it.
        category (Category): Category directory the module was found in.
        path (Path): Absolute path of the module directory (the link source).
        aliases (dict[str, str]): Platform key to link-name overrides.
        description (str): Advisory one-line description, possibly empty.
        dir_name (str): Directory name under the category directory.
    """

    name: str
    category: Category
    path: Path
    aliases: dict[str, str] = field(default_factory=dict, hash=False)
    description: str = ""
    dir_name: str = ""

    def link_name(self, platform_key: str) -> str:
        """Return the link name used on ``platform_key``."""
        return self.aliases.get(platform_key, self.name)


def _strip_quotes(value: str) -> str:
    value = value.strip(" \t")
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def extract_description(text: str) -> str:
    """Extract a one-line description from a descriptor document.

    The frontmatter block (between two ``---`` lines) is scanned for a
    ``description:`` field with a non-empty value first; the value is returned
    with surrounding quotes removed. Otherwise the first non-empty line that is
    neither a heading, a delimiter nor an empty ``description:`` field is
    returned, stripped. That line may come from the frontmatter itself.

    Args:
        text (str): Descriptor document contents.

    Returns:
        str: The description, or an empty string.
    """
    lines = text.splitlines()

    in_frontmatter = False
    for line in lines:
        if line == FRONTMATTER_DELIMITER:
            in_frontmatter = not in_frontmatter
            continue
        if in_frontmatter and line.startswith(DESCRIPTION_FIELD):
            value = _strip_quotes(line[len(DESCRIPTION_FIELD) :])
            if value:
                return value

    for line in lines:
        if line == FRONTMATTER_DELIMITER or not line.strip() or line.startswith("#"):
            continue
        if line.startswith(DESCRIPTION_FIELD):
            continue
        return line.strip()
    return ""


def load_module(dir_name: str, category: Category, path: Path) -> Module:
    """Build the `Module` record for a module directory.

    Args:
        dir_name (str): Directory name under the category directory.
        category (Category): Module category.
        path (Path): Absolute module directory.

    Returns:
        Module: The loaded record. A missing override file or descriptor is not
        an error.
    """
    default_name, overrides = load_module_overrides(path / MODULE_CONFIG_NAME)

    descriptor = path / category.descriptor_name
    try:
        description = extract_description(descriptor.read_text(encoding="utf-8"))
    except FileNotFoundError:
        description = ""
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", descriptor, exc)
        description = ""

    module = Module(
        name=default_name or dir_name,
        category=category,
        path=path,
        aliases=overrides,
        description=description,
        dir_name=dir_name,
    )
    logger.trace("Loaded module %s", module)
    return module


class ModuleCatalog:
    """Resolve and enumerate the modules of a repository.

    Args:
        repo_path (Path): Absolute repository root.
    """

    def __init__(self, repo_path: Path) -> None:
        self.repo_path = repo_path

    def category_path(self, category: Category) -> Path:
        """Return the directory holding modules of ``category``."""
        return self.repo_path / category.value

    def find(self, name: str) -> Module:
        """Look up a module by directory name, skills first.

        Args:
            name (str): Module directory name.

        Returns:
            Module: The first match.

        Raises:
            UnknownModuleError: If neither category contains ``name``.
        """
        if name and "/" not in name and name not in (".", ".."):
            for category in CATEGORY_ORDER:
                candidate = self.category_path(category) / name
                if candidate.is_dir():
                    return load_module(name, category, candidate)
        raise UnknownModuleError(name)

    def _iter_dirs(self, category: Category) -> Iterator[Path]:
        root = self.category_path(category)
        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Cannot list %s: %s", root, exc)
            return
        for entry in entries:
            if entry.is_dir():
                yield entry

    def list_all(self) -> list[Module]:
        """Return every module: all skills, then all agents, each sorted by name."""
        modules: list[Module] = []
        for category in CATEGORY_ORDER:
            for entry in self._iter_dirs(category):
                modules.append(load_module(entry.name, category, entry))
        logger.debug("Catalog %s: %d module(s)", self.repo_path, len(modules))
        return modules
