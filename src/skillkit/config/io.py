# topmark:header:start
#
#   project      : SkillKit
#   file         : io.py
#   file_relpath : src/skillkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Locate, load, and save SkillKit configuration.

This module is the configuration collaborator of the core. It reads:
- ``platforms.toml`` (from ``--config``, ``SKILLKIT_CONFIG``, the repository, or
  the packaged ``platforms-default.toml`` template), and
- the optional per-module ``skillkit.toml`` override file.

Parsing and writing use `tomlkit` so that saving the persisted platform order or
default set preserves comments and layout of a hand-edited ``platforms.toml``.
"""

from __future__ import annotations

import os
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from skillkit.config.keys import ModuleToml, Toml
from skillkit.config.logging import get_logger
from skillkit.config.model import Config, Platform
from skillkit.constants import (
    DEFAULT_PLATFORMS_NAME,
    DEFAULT_PLATFORMS_PACKAGE,
    DEFAULT_REPO_PATH,
    ENV_CONFIG,
    ENV_REPO,
    PLATFORMS_CONFIG_NAME,
)
from skillkit.core.errors import ConfigUnavailableError
from skillkit.core.paths import resolve_path

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tomlkit.items import Table

logger = get_logger(__name__)

TomlTable = dict[str, Any]


# --- Location ---


def resolve_repo_path(repo: str | os.PathLike[str] | None = None) -> Path:
    """Return the repository root.

    Precedence: explicit ``repo`` > ``SKILLKIT_REPO`` > ``~/.config/agent``.
    """
    if repo:
        return resolve_path(repo)
    env_repo = os.environ.get(ENV_REPO)
    if env_repo:
        return resolve_path(env_repo)
    return resolve_path(DEFAULT_REPO_PATH)


def locate_config(repo_path: Path, config: str | os.PathLike[str] | None = None) -> Path | None:
    """Return the ``platforms.toml`` to read, or None for the packaged template.

    Precedence: explicit ``config`` > ``SKILLKIT_CONFIG`` > ``<repo>/platforms.toml``.
    An explicit or environment-provided path is returned even if it does not
    exist, so that the caller reports it.
    """
    if config:
        return resolve_path(config)
    env_config = os.environ.get(ENV_CONFIG)
    if env_config:
        return resolve_path(env_config)
    candidate = repo_path / PLATFORMS_CONFIG_NAME
    if candidate.is_file():
        return candidate
    logger.debug("No %s in %s; using packaged template", PLATFORMS_CONFIG_NAME, repo_path)
    return None


def read_default_platforms_template() -> str:
    """Return the packaged ``platforms-default.toml`` as text.

    Raises:
        ConfigUnavailableError: If the packaged resource cannot be read.
    """
    resource = files(DEFAULT_PLATFORMS_PACKAGE).joinpath(DEFAULT_PLATFORMS_NAME)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigUnavailableError(None, f"cannot read packaged template ({exc})") from exc


# --- Parsing ---


def _parse_toml_text(text: str, path: Path | None) -> tomlkit.TOMLDocument:
    try:
        return tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigUnavailableError(path, f"invalid TOML ({exc})") from exc


def _string_list(data: TomlTable, key: str, path: Path | None) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list):
        logger.warning("%s: '%s' must be an array of strings; ignoring", path, key)
        return []
    result: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            result.append(item)
        else:
            logger.warning("%s: ignoring non-string entry %r in '%s'", path, item, key)
    return result


def _first_string(table: Mapping[str, Any], aliases: tuple[str, ...]) -> str:
    for alias in aliases:
        value = table.get(alias)
        if isinstance(value, str):
            return value
    return ""


def _platform_from_table(key: str, table: Mapping[str, Any]) -> Platform:
    name = table.get(Toml.KEY_NAME)
    skill_dir = table.get(Toml.KEY_SKILL_DIR)
    agent_dir = table.get(Toml.KEY_AGENT_DIR)
    return Platform(
        key=key,
        name=name if isinstance(name, str) and name else key,
        project_root=_first_string(table, Toml.ALIASES_PROJECT),
        global_root=_first_string(table, Toml.ALIASES_GLOBAL),
        skill_dir=skill_dir if isinstance(skill_dir, str) else "",
        agent_dir=agent_dir if isinstance(agent_dir, str) else "",
    )


def config_from_dict(data: TomlTable, repo_path: Path, source_path: Path | None = None) -> Config:
    """Build a `Config` from an already-parsed ``platforms.toml`` mapping.

    Invalid platform entries and non-string list items are dropped with a
    warning; they never abort loading.
    """
    platforms: dict[str, Platform] = {}
    raw_platforms = data.get(Toml.SECTION_PLATFORMS, {})
    if not isinstance(raw_platforms, dict):
        logger.warning("%s: [%s] must be a table; ignoring", source_path, Toml.SECTION_PLATFORMS)
        raw_platforms = {}

    for key, table in cast("TomlTable", raw_platforms).items():
        if not isinstance(table, dict):
            logger.warning("%s: platform '%s' is not a table; skipping", source_path, key)
            continue
        platforms[key] = _platform_from_table(key, cast("TomlTable", table))

    return Config(
        repo_path=repo_path,
        platforms=platforms,
        default_platforms=_string_list(data, Toml.KEY_DEFAULT_PLATFORMS, source_path),
        platform_order=_string_list(data, Toml.KEY_PLATFORM_ORDER, source_path),
        source_path=source_path,
    )


def load_config(
    repo_path: str | os.PathLike[str] | None = None,
    config_path: str | os.PathLike[str] | None = None,
) -> Config:
    """Load the platform configuration for a repository.

    Args:
        repo_path (str | os.PathLike[str] | None): Repository root; see
            [`resolve_repo_path`][skillkit.config.io.resolve_repo_path].
        config_path (str | os.PathLike[str] | None): Explicit ``platforms.toml``.

    Returns:
        Config: The loaded configuration. When no ``platforms.toml`` exists the
        packaged template is used and ``source_path`` points at it.

    Raises:
        ConfigUnavailableError: If the file is missing, unreadable, or not valid TOML.
    """
    repo = resolve_repo_path(repo_path)
    located = locate_config(repo, config_path)

    if located is None:
        text = read_default_platforms_template()
        source = Path(str(files(DEFAULT_PLATFORMS_PACKAGE).joinpath(DEFAULT_PLATFORMS_NAME)))
    else:
        try:
            text = located.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigUnavailableError(located, "file not found") from exc
        except OSError as exc:
            raise ConfigUnavailableError(located, f"cannot read ({exc})") from exc
        source = located

    data = cast("TomlTable", _parse_toml_text(text, located).unwrap())
    cfg = config_from_dict(data, repo, source)
    logger.debug(
        "Loaded %d platform(s) from %s (repo: %s)", len(cfg.platforms), source, cfg.repo_path
    )
    return cfg


# --- Saving ---


def _render_config(cfg: Config) -> tomlkit.TOMLDocument:
    doc = tomlkit.document()
    doc[Toml.KEY_DEFAULT_PLATFORMS] = list(cfg.default_platforms)
    doc[Toml.KEY_PLATFORM_ORDER] = list(cfg.platform_order)

    platforms: Table = tomlkit.table(is_super_table=True)
    for key, platform in cfg.platforms.items():
        tbl = tomlkit.table()
        tbl[Toml.KEY_NAME] = platform.name
        tbl[Toml.KEY_PROJECT] = platform.project_root
        tbl[Toml.KEY_GLOBAL] = platform.global_root
        tbl[Toml.KEY_SKILL_DIR] = platform.skill_dir
        tbl[Toml.KEY_AGENT_DIR] = platform.agent_dir
        platforms[key] = tbl
    doc[Toml.SECTION_PLATFORMS] = platforms
    return doc


def _base_document(cfg: Config, target: Path) -> tomlkit.TOMLDocument:
    # Prefer editing an existing document in place so comments survive.
    for candidate in (target, cfg.source_path):
        if candidate is None or not candidate.is_file():
            continue
        try:
            text = candidate.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot read %s for update: %s", candidate, exc)
            continue
        return _parse_toml_text(text, candidate)
    return _render_config(cfg)


def save_config(cfg: Config) -> Path:
    """Persist ``platform_order`` and ``default_platforms``.

    The two arrays are replaced in the existing document; everything else
    (platform tables, comments, layout) is left as written. A configuration
    loaded from the packaged template is saved to ``<repo>/platforms.toml``.

    Args:
        cfg (Config): Configuration to persist.

    Returns:
        Path: The file written.

    Raises:
        ConfigUnavailableError: If the target cannot be parsed or written.
    """
    target = cfg.save_path
    doc = _base_document(cfg, target)

    doc[Toml.KEY_DEFAULT_PLATFORMS] = list(cfg.default_platforms)
    doc[Toml.KEY_PLATFORM_ORDER] = list(cfg.platform_order)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(doc.as_string(), encoding="utf-8")
    except OSError as exc:
        raise ConfigUnavailableError(target, f"cannot write ({exc})") from exc

    cfg.source_path = target
    logger.info("Saved platform configuration to %s", target)
    return target


# --- Module-local overrides ---


def load_module_overrides(path: Path) -> tuple[str, dict[str, str]]:
    """Read a module-local ``skillkit.toml``.

    Args:
        path (Path): Path to the override file.

    Returns:
        tuple[str, dict[str, str]]: ``(default_link_name, overrides)``. The
        default is empty when not set. A missing or malformed file yields
        ``("", {})``; problems are logged, not raised.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return "", {}
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return "", {}

    try:
        data: Any = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        logger.warning("Error decoding TOML from %s: %s", path, exc)
        return "", {}

    link = data.get(ModuleToml.SECTION_LINK, {})
    if not isinstance(link, dict):
        logger.warning("%s: [%s] must be a table; ignoring", path, ModuleToml.SECTION_LINK)
        return "", {}

    default = link.get(ModuleToml.KEY_DEFAULT, "")
    if not isinstance(default, str):
        default = ""

    overrides: dict[str, str] = {}
    raw_overrides = link.get(ModuleToml.SECTION_OVERRIDES, {})
    if isinstance(raw_overrides, dict):
        for key, value in cast("TomlTable", raw_overrides).items():
            if isinstance(value, str) and value:
                overrides[key] = value
            else:
                logger.warning("%s: ignoring override for '%s' (not a string)", path, key)
    return default, overrides
