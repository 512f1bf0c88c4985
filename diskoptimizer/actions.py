#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Disk space actions and the dispatcher that runs them.
"""

from __future__ import annotations
import platform
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from rich.markup import escape

from diskoptimizer.config import Config
from diskoptimizer.constants import (
    DNF_HEADER_PREFIXES, KERNELS_PROMPT, PACKAGES_PROMPT, SENTINEL_KEY,
    SENTINEL_LABEL, SUDO
)
from diskoptimizer.errors import (
    Aborted, CommandFailed, NoSelection, OptimizerError, printable_command
)
from diskoptimizer.helpers import CommandRunner, confirm, is_root, read_line, which
from diskoptimizer.logging_setup import logger
from diskoptimizer.menu import Registry, SelectableItem, multi_select
from diskoptimizer.output import line_do, line_ok, line_skip, line_warn, p, section, table


# -----------------------------
# Actions
# -----------------------------
@dataclass(frozen=True)
class RemovePackage:
    """Removes a package; without a name, lets the user pick installed ones."""
    package_name: Optional[str] = None
    label = "Remove unnecessary packages"


@dataclass(frozen=True)
class CleanPackageCache:
    label = "Clean package cache"


@dataclass(frozen=True)
class UninstallUnusedApps:
    label = "Uninstall unused applications"


@dataclass(frozen=True)
class RemoveOldKernels:
    label = "Remove old kernel versions"


@dataclass(frozen=True)
class CleanUpLogFiles:
    """Vacuums the journal; ``days`` skips the retention prompt."""
    days: Optional[int] = None
    label = "Clean up log files"


Action = Union[RemovePackage, CleanPackageCache, UninstallUnusedApps, RemoveOldKernels, CleanUpLogFiles]


def build_action_table() -> Dict[int, Action]:
    """Menu key -> action. Key 0 (Exit) is deliberately absent."""
    return {
        1: RemovePackage(),
        2: CleanPackageCache(),
        3: UninstallUnusedApps(),
        4: RemoveOldKernels(),
        5: CleanUpLogFiles(),
    }


def key_to_action(key: int, table: Dict[int, Action]) -> Optional[Action]:
    return table.get(key)


# -----------------------------
# Output parsing
# -----------------------------
def parse_installed_packages(output: str) -> List[str]:
    """First column of each listing line, dnf headers dropped."""
    pkgs = []
    for line in output.splitlines():
        line = line.strip()
        if not line or line.startswith(DNF_HEADER_PREFIXES):
            continue
        pkgs.append(line.split()[0])
    return pkgs


def parse_kernels(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


def running_kernel_package() -> str:
    return f"kernel-{platform.release()}"


def parse_days(raw: str, default: int) -> int:
    """Parse a retention in days; anything unusable gives ``default``."""
    try:
        days = int(raw.strip())
    except ValueError:
        return default
    return days if days >= 0 else default


def selection_registry(names: List[str]) -> Registry:
    """Names keyed from 1, followed by the "None" opt-out entry."""
    registry = Registry()
    for i, name in enumerate(names, 1):
        registry.append(SelectableItem(i, name))
    return registry.append(SelectableItem(SENTINEL_KEY, SENTINEL_LABEL))


def chosen_labels(selected: List[SelectableItem], what: str) -> List[str]:
    """Labels of a secondary selection; empty or "None" raises NoSelection."""
    if not selected:
        p(f"No {what} selected. Please try again.")
        raise NoSelection(f"No {what} were selected")
    if any(item.key == SENTINEL_KEY for item in selected):
        raise NoSelection(f"No {what} were selected")
    return [item.label for item in selected]


# -----------------------------
# Dispatcher
# -----------------------------
class Dispatcher:
    """
    Executes actions against the configured package manager and journald.

    Collaborators are injected so the interactive parts can be replaced:

    Args:
        config: Runtime configuration
        runner: Object with ``run(command, args, mutating=False) -> str``
        select: Checkbox prompt, same signature as ``menu.multi_select``
        read: Line input, same signature as ``helpers.read_line``
        ask: Confirmation, same signature as ``helpers.confirm``
    """

    def __init__(self, config: Config, runner: Optional[CommandRunner] = None,
                 select: Callable[..., List[SelectableItem]] = multi_select,
                 read: Callable[[str], str] = read_line,
                 ask: Callable[..., bool] = confirm,
                 action_table: Optional[Dict[int, Action]] = None):
        self.config = config
        self.runner = runner if runner is not None else CommandRunner(dry_run=config.dry_run)
        self.select = select
        self.read = read
        self.ask = ask
        self.table = action_table if action_table is not None else build_action_table()

    def key_to_action(self, key: int) -> Optional[Action]:
        return key_to_action(key, self.table)

    # -- command helpers --------------------------------------------------
    def _privileged(self, command: str, args: List[str]) -> str:
        if self.config.use_sudo and not is_root():
            if which(SUDO):
                return self.runner.run(SUDO, [command, *args], mutating=True)
            line_warn(f"sudo is not available, running without it: {command}")
        return self.runner.run(command, args, mutating=True)

    def _pm(self, *args: str) -> str:
        return self._privileged(self.config.package_manager, list(args))

    # -- actions ----------------------------------------------------------
    def execute(self, action: Action) -> None:
        """
        Run one action to completion.

        Raises:
            OptimizerError: any failure, already carrying the attempted command
        """
        logger.info(f"Executing action: {action.label}")
        section(action.label)
        if isinstance(action, RemovePackage):
            if action.package_name:
                self.remove_named_package(action.package_name)
            else:
                self.remove_selected_packages()
        elif isinstance(action, CleanPackageCache):
            self._pm("clean", "all")
            line_ok("Package cache cleaned")
        elif isinstance(action, UninstallUnusedApps):
            self._pm("autoremove", "-y")
            line_ok("Unused packages removed")
        elif isinstance(action, RemoveOldKernels):
            self.remove_old_kernels()
        elif isinstance(action, CleanUpLogFiles):
            self.clean_up_log_files(action.days)
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def remove_named_package(self, package_name: str) -> None:
        entered = self.read(f"Enter package name to remove [{package_name}]: ").strip()
        target = entered or package_name.strip()
        self._pm("remove", "-y", target)
        line_ok(f"Package '{escape(target)}' removed")

    def remove_selected_packages(self) -> None:
        p("Select packages to remove, or pick 'None' to skip:")
        listing = self.runner.run(self.config.package_manager, ["list", "--installed"])
        installed = parse_installed_packages(listing)
        logger.debug(f"Found {len(installed)} installed packages")

        selected = self.select(selection_registry(installed), (), PACKAGES_PROMPT)
        pkgs = chosen_labels(selected, "packages")

        table("These packages will be removed", ["#", "Package"],
              [[str(i), escape(pkg)] for i, pkg in enumerate(pkgs, 1)])
        if not self.ask(f"Proceed to delete a total of {len(pkgs)} package(s)?", self.config.assume_yes):
            raise Aborted("Aborted deleting selected packages.")

        failed = []
        for pkg in pkgs:
            line_do(f"Removing {escape(pkg)}")
            try:
                self._pm("remove", "-y", pkg)
            except CommandFailed as e:
                line_warn(escape(str(e)))
                failed.append(pkg)
        if failed:
            raise OptimizerError(
                f"{len(failed)} of {len(pkgs)} package removal(s) failed: {', '.join(failed)}"
            )
        line_ok(f"Removed {len(pkgs)} package(s)")

    def remove_old_kernels(self) -> None:
        output = self.runner.run(self.config.package_query, ["-q", "kernel"])
        running = running_kernel_package()
        kernels = []
        for kernel in parse_kernels(output):
            if kernel == running:
                line_skip(f"Keeping running kernel {escape(kernel)}")
                continue
            kernels.append(kernel)

        selected = self.select(selection_registry(kernels), (), KERNELS_PROMPT)
        chosen = chosen_labels(selected, "kernels")

        p(f"Kernels to remove: {escape(' '.join(chosen))}")
        if not self.ask(f"Remove {len(chosen)} kernel package(s)?", self.config.assume_yes):
            raise Aborted("Aborted removing selected kernels.")
        self._pm("remove", "-y", *chosen)
        line_ok(f"Removed {len(chosen)} kernel package(s)")

    def clean_up_log_files(self, days: Optional[int] = None) -> None:
        default = self.config.default_vacuum_days
        if days is None:
            raw = self.read(f"Enter vacuum time (Default: {default}) as days: ")
            days = parse_days(raw, default)
        flag = f"--vacuum-time={days}d"
        logger.debug(f"Vacuuming journal: {printable_command(self.config.log_tool, [flag])}")
        self._privileged(self.config.log_tool, [flag])
        line_ok(f"Logs older than {days} day(s) vacuumed")
