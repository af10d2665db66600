# topmark:header:start
#
#   project      : SkillKit
#   file         : controller.py
#   file_relpath : src/skillkit/tui/controller.py
#   license      : MIT
#   copyright    : (c) 2025 SkillKit contributors
#
# topmark:header:end

"""Navigation controller of the interactive session.

The controller owns the loop: draw the current frame, read one key, step the
frame, and perform whatever effect the resulting outcome requests. All state
lives in the frames from [`skillkit.tui.state`][]; the controller only keeps
the collaborators (configuration, catalog, registry, terminal and console).

Every screen flow returns either `Back` (resume the caller) or `Quit` (unwind
the whole session). Effects that can fail report on the console and keep the
session alive; configuration save errors are shown, never dropped.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Union

from skillkit.cli_shared.render import (
    print_result,
    print_summary,
    render_init_steps,
    render_platforms,
)
from skillkit.config.logging import get_logger
from skillkit.core.catalog import ModuleCatalog
from skillkit.core.errors import SkillkitError
from skillkit.core.reconcile import apply_diff, compute_diff, sync_all, synced_keys
from skillkit.core.registry import PlatformRegistry, PlatformSubset
from skillkit.core.repository import initialize
from skillkit.tui.screens import (
    render_confirm,
    render_continue,
    render_defaults,
    render_detail,
    render_help,
    render_list,
    render_main_menu,
    render_module_list,
)
from skillkit.tui.state import (
    Back,
    Commit,
    DefaultsFrame,
    DetailFrame,
    ListFrame,
    MainMenuFrame,
    MenuChoice,
    MenuEntry,
    ModuleListFrame,
    Quit,
    Reorder,
    SaveDefaults,
    ShowDetail,
    ShowHelp,
    SyncAllDefault,
    SyncDefault,
    confirm_decision,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from pathlib import Path

    from skillkit.cli_shared.console_api import ConsoleLike
    from skillkit.config.model import Config, Platform
    from skillkit.core.catalog import Module
    from skillkit.tui.terminal import TerminalLike

logger = get_logger(__name__)

FlowResult = Union[Back, Quit]


class NavigationController:
    """Drives the interactive session over a terminal and a console.

    Args:
        config (Config): Configuration loaded once for the whole session.
        terminal (TerminalLike): Key source and screen control.
        console (ConsoleLike): Program output.
        catalog (ModuleCatalog | None): Module catalog; built from ``config`` if None.
        registry (PlatformRegistry | None): Platform registry; built from ``config`` if None.
        config_path (Path | None): Where the Init entry seeds ``platforms.toml``.
    """

    def __init__(
        self,
        config: Config,
        terminal: TerminalLike,
        console: ConsoleLike,
        *,
        catalog: ModuleCatalog | None = None,
        registry: PlatformRegistry | None = None,
        config_path: Path | None = None,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.console = console
        self.catalog = catalog or ModuleCatalog(config.repo_path)
        self.registry = registry or PlatformRegistry(config)
        self.config_path = config_path

    def run(self) -> None:
        """Run the session until the user quits; the cursor is always restored."""
        self.terminal.hide_cursor()
        try:
            self._main_menu()
        finally:
            self.terminal.show_cursor()
            self.console.print()
        logger.debug("Interactive session ended")

    # --- Helpers ---

    def _draw(self, render: Callable[..., None], *args: object, **kwargs: object) -> None:
        self.terminal.clear()
        render(self.console, *args, **kwargs)

    def _wait(self) -> None:
        render_continue(self.console)
        self.terminal.read_key()

    def _page(self, render: Callable[..., None], *args: object, **kwargs: object) -> None:
        self._draw(render, *args, **kwargs)
        self._wait()

    def _confirm(self, message: str) -> bool:
        render_confirm(self.console, message)
        while True:
            decision = confirm_decision(self.terminal.read_key())
            if decision is not None:
                self.console.print()
                logger.debug("Confirm %r -> %s", message, decision)
                return decision

    def _save(self, action: Callable[[], None]) -> None:
        try:
            action()
        except SkillkitError as exc:
            logger.debug("Saving configuration failed: %s", exc)
            self.console.print()
            self.console.error(f"  Failed to save configuration: {exc}")
            self._wait()

    def _explicit_defaults(self) -> list[Platform]:
        if isinstance(self.registry.default_policy(), PlatformSubset):
            return list(self.registry.default_targets().values())
        return []

    # --- Flows ---

    def _main_menu(self) -> None:
        frame = MainMenuFrame()
        while True:
            self._draw(render_main_menu, frame)
            result = frame.step(self.terminal.read_key())
            match result:
                case MainMenuFrame():
                    frame = result
                case ShowHelp():
                    self._page(render_help)
                case MenuChoice(entry=entry):
                    logger.debug("Menu entry %s", entry.name)
                    if isinstance(self._open(entry), Quit):
                        return
                case Quit():
                    return

    def _open(self, entry: MenuEntry) -> FlowResult:
        match entry:
            case MenuEntry.USE:
                return self._use_flow()
            case MenuEntry.LIST:
                return self._list_flow()
            case MenuEntry.PLATFORMS:
                self._page(render_platforms, self.registry, verbose=False)
            case MenuEntry.DEFAULTS:
                return self._defaults_flow()
            case MenuEntry.INIT:
                repo_path = self.config.repo_path
                steps = initialize(repo_path, self.config_path)
                self._page(render_init_steps, repo_path, steps)
        return Back()

    def _use_flow(self) -> FlowResult:
        modules = tuple(self.catalog.list_all())
        if not modules:
            self.terminal.clear()
            self.console.print()
            self.console.warn(f"  No modules found in {self.config.repo_path}")
            self.console.print("  Select Init to create the repository layout.")
            self._wait()
            return Back()

        frame = ModuleListFrame(modules)
        while True:
            platforms = self.registry.select()
            synced = [platforms[k] for k in synced_keys(frame.current, platforms)]
            self._draw(
                render_module_list,
                frame,
                defaults=self._explicit_defaults(),
                synced=synced,
                term_width=self.terminal.width(),
            )
            result = frame.step(self.terminal.read_key())
            match result:
                case ModuleListFrame():
                    frame = result
                case SyncDefault(module=module):
                    targets = self.registry.default_targets()
                    message = f"Sync '{module.name}' to {len(targets)} default platform(s)?"
                    self._sync_defaults((module,), targets, message)
                case SyncAllDefault(modules=selected):
                    targets = self.registry.default_targets()
                    message = (
                        f"Sync ALL {len(selected)} modules to {len(targets)} default platform(s)?"
                    )
                    self._sync_defaults(selected, targets, message)
                case ShowDetail(module=module):
                    if isinstance(self._detail_flow(module), Quit):
                        return Quit()
                case Back():
                    return Back()
                case Quit():
                    return Quit()

    def _sync_defaults(
        self,
        modules: Sequence[Module],
        targets: Mapping[str, Platform],
        message: str,
    ) -> None:
        if not self._confirm(message):
            return
        report = sync_all(modules, targets, on_result=partial(print_result, self.console))
        print_summary(self.console, report)
        self._wait()

    def _detail_flow(self, module: Module) -> FlowResult:
        platforms = self.registry.select()
        keys = tuple(platforms)
        current = set(synced_keys(module, platforms))
        frame = DetailFrame.for_synced(keys, tuple(k in current for k in keys))
        while True:
            self._draw(render_detail, module, frame, platforms)
            result = frame.step(self.terminal.read_key())
            match result:
                case DetailFrame():
                    frame = result
                case Commit(desired=desired):
                    self._commit(module, platforms, desired)
                    return Back()
                case Quit():
                    return Quit()

    def _commit(
        self,
        module: Module,
        platforms: Mapping[str, Platform],
        desired: Sequence[str],
    ) -> None:
        diff = compute_diff(module, platforms, desired)
        if diff.is_empty:
            return
        message = f"Apply changes? (+{len(diff.to_sync)} sync, -{len(diff.to_remove)} remove)"
        if not self._confirm(message):
            return
        report = apply_diff(module, platforms, diff, on_result=partial(print_result, self.console))
        print_summary(self.console, report)
        self._wait()

    def _list_flow(self) -> FlowResult:
        modules = self.catalog.list_all()
        frame = ListFrame(tuple(self.registry.ordered_keys()))
        while True:
            platforms = {k: self.config.platforms[k] for k in frame.keys}
            self._draw(render_list, frame, modules, platforms)
            result = frame.step(self.terminal.read_key())
            match result:
                case ListFrame():
                    frame = result
                case Reorder(keys=keys, frame=moved):
                    self._save(partial(self.registry.set_order, keys))
                    frame = moved
                case Back():
                    return Back()

    def _defaults_flow(self) -> FlowResult:
        keys = tuple(self.registry.ordered_keys())
        frame = DefaultsFrame(keys, tuple(self.registry.is_default(k) for k in keys))
        while True:
            self._draw(render_defaults, frame, self.config.platforms)
            result = frame.step(self.terminal.read_key())
            match result:
                case DefaultsFrame():
                    frame = result
                case SaveDefaults(keys=selected):
                    self._save(partial(self.registry.set_defaults, selected))
                    return Back()
                case Quit():
                    return Quit()
