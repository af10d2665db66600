# topmark:header:start
#
#   project      : SkillKit
#   file         : registry.py
#   file_relpath : src/skillkit/core/registry.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Configured platforms with persisted display order and default subset.

The registry wraps a loaded [`Config`][skillkit.config.model.Config]. Reads are
projections recomputed on every call; the two mutations (`set_order`,
`set_defaults`) replace the stored list and persist it immediately through the
configured saver.

The "no defaults configured means every platform" rule is expressed as an
explicit policy value, `AllPlatforms` or `PlatformSubset`, resolved once per
operation by [`PlatformRegistry.default_policy`][].
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from skillkit.config.io import save_config
from skillkit.config.logging import get_logger
from skillkit.core.errors import UnknownPlatformError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from skillkit.config.model import Config, Platform

logger = get_logger(__name__)


@dataclass(frozen=True)
class AllPlatforms:
    """Default policy: every configured platform is a default target."""


@dataclass(frozen=True)
class PlatformSubset:
    """Default policy: only the listed platform keys are default targets."""

    keys: tuple[str, ...]


DefaultPolicy = Union[AllPlatforms, PlatformSubset]

ConfigSaver = Callable[["Config"], object]


class PlatformRegistry:
    """Ordered view over the configured platforms.

    Args:
        config (Config): Loaded configuration; mutated in place by `set_order`
            and `set_defaults`.
        saver (ConfigSaver): Persists the configuration after a mutation.
    """

    def __init__(self, config: Config, saver: ConfigSaver = save_config) -> None:
        self.config = config
        self._saver = saver

    def ordered_keys(self) -> list[str]:
        """Return every configured key in persisted display order.

        Persisted keys that are no longer configured are dropped, duplicates
        are collapsed, and keys missing from the persisted order are appended
        in configuration order.
        """
        platforms = self.config.platforms
        ordered: list[str] = []
        seen: set[str] = set()
        for key in self.config.platform_order:
            if key in platforms and key not in seen:
                ordered.append(key)
                seen.add(key)
        ordered.extend(key for key in platforms if key not in seen)
        return ordered

    def ordered(self) -> list[Platform]:
        """Return the configured platforms in display order."""
        return [self.config.platforms[key] for key in self.ordered_keys()]

    def get(self, key: str) -> Platform:
        """Return the platform for ``key``.

        Raises:
            UnknownPlatformError: If ``key`` is not configured.
        """
        try:
            return self.config.platforms[key]
        except KeyError:
            raise UnknownPlatformError(key) from None

    def select(self, key: str | None = None) -> dict[str, Platform]:
        """Return ``{key: platform}`` for one platform, or all platforms in order.

        Raises:
            UnknownPlatformError: If ``key`` is given but not configured.
        """
        if key:
            return {key: self.get(key)}
        return {k: self.config.platforms[k] for k in self.ordered_keys()}

    def default_policy(self) -> DefaultPolicy:
        """Return the default-target policy for the current configuration."""
        if self.config.default_platforms:
            return PlatformSubset(tuple(self.config.default_platforms))
        return AllPlatforms()

    def default_targets(self) -> dict[str, Platform]:
        """Return the platforms targeted by quick sync.

        With `PlatformSubset`, exactly the listed platforms are returned, in
        list order, silently skipping keys that are no longer configured. With
        `AllPlatforms`, every platform is returned in display order.
        """
        policy = self.default_policy()
        platforms = self.config.platforms
        match policy:
            case PlatformSubset(keys=keys):
                return {k: platforms[k] for k in keys if k in platforms}
            case AllPlatforms():
                return self.select()
        raise AssertionError(f"unhandled policy: {policy!r}")  # pragma: no cover

    def is_default(self, key: str) -> bool:
        """Return True if ``key`` is explicitly listed as a default platform."""
        return key in self.config.default_platforms

    def set_order(self, keys: Sequence[str]) -> None:
        """Replace the persisted display order and save."""
        self.config.platform_order = list(keys)
        logger.debug("Platform order: %s", self.config.platform_order)
        self._saver(self.config)

    def set_defaults(self, keys: Iterable[str]) -> None:
        """Replace the persisted default platform set and save."""
        self.config.default_platforms = list(keys)
        logger.debug("Default platforms: %s", self.config.default_platforms)
        self._saver(self.config)
