#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line entry point for Disk Space Optimizer.

Without a subcommand an interactive checkbox menu is shown and every selected
action runs in menu order; a failing action is reported and the next one
still runs. A subcommand runs exactly one action.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from rich.markup import escape

from diskoptimizer.actions import (
    Action, CleanPackageCache, CleanUpLogFiles, Dispatcher, RemoveOldKernels,
    RemovePackage, UninstallUnusedApps
)
from diskoptimizer.config import load_config
from diskoptimizer.constants import PROG, PROJECT_NAME, TAGLINE, VERSION
from diskoptimizer.errors import InteractionError, OptimizerError
from diskoptimizer.logging_setup import logger, setup_logging
from diskoptimizer.menu import default_commands, default_indexes
from diskoptimizer.output import line_ok, line_warn, p, print_welcome


def non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days: {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"days must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=PROG,
        description=f"{PROJECT_NAME}: {TAGLINE}.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    ap.add_argument("-V", "--version", action="version", version=f"{PROJECT_NAME} {VERSION}")
    ap.add_argument("--dry-run", action="store_true", default=None,
                    help="Preview only, nothing is removed or cleaned.")
    ap.add_argument("--yes", action="store_true", default=None,
                    help="Assume 'yes' for confirmations.")
    ap.add_argument("--no-sudo", action="store_true",
                    help="Do not prefix privileged commands with sudo.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (DEBUG level).")
    ap.add_argument("--log-file", type=str, metavar="PATH", help="Write logs to specified file.")
    ap.add_argument("--config", type=str, metavar="PATH", help="Read settings from a TOML file.")

    sp = ap.add_subparsers(dest="cmd", metavar="COMMAND")

    sp_remove = sp.add_parser("remove-package", help="Remove a package (pick from installed ones if no name).")
    sp_remove.add_argument("package_name", nargs="?", metavar="PACKAGE_NAME",
                           help="Name of the package to remove.")
    sp.add_parser("clean-package-cache", help="Clean the package cache.")
    sp.add_parser("uninstall-unused-apps", help="Remove packages nothing depends on anymore.")
    sp.add_parser("remove-old-kernels", help="Pick installed kernels to remove.")
    sp_logs = sp.add_parser("clean-up-log-files", help="Vacuum journal logs older than N days.")
    sp_logs.add_argument("--days", type=non_negative_int, default=None,
                         help="Retention in days (prompted for when omitted).")
    return ap


def action_from_args(args: argparse.Namespace) -> Optional[Action]:
    if args.cmd == "remove-package":
        return RemovePackage(package_name=args.package_name)
    if args.cmd == "clean-package-cache":
        return CleanPackageCache()
    if args.cmd == "uninstall-unused-apps":
        return UninstallUnusedApps()
    if args.cmd == "remove-old-kernels":
        return RemoveOldKernels()
    if args.cmd == "clean-up-log-files":
        return CleanUpLogFiles(days=args.days)
    return None


def run_selected(dispatcher: Dispatcher) -> int:
    """Show the main menu and run every selected action."""
    commands = default_commands()
    try:
        selections = dispatcher.select(commands, default_indexes(commands))
    except InteractionError as e:
        logger.error(str(e))
        line_warn(f"Error: {escape(str(e))}")
        return 1

    failures = 0
    for selection in selections:
        action = dispatcher.key_to_action(selection.key)
        if action is None:
            logger.debug(f"No action for key {selection.key}")
            continue
        try:
            dispatcher.execute(action)
        except OptimizerError as e:
            failures += 1
            logger.warning(f"{action.label} failed: {e}")
            line_warn(f"Error: {escape(str(e))}")
    if selections and not failures:
        line_ok("Done")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    logger.debug(f"Command invoked: {' '.join(sys.argv)}")

    config = load_config(args.config).with_overrides(
        dry_run=args.dry_run,
        assume_yes=args.yes,
        use_sudo=False if args.no_sudo else None,
    )
    logger.debug(f"Configuration: {config}")
    dispatcher = Dispatcher(config)

    print_welcome()
    if config.dry_run:
        p("[yellow]Dry-run: nothing will be removed.[/yellow]")

    action = action_from_args(args)
    if action is None:
        return run_selected(dispatcher)

    try:
        dispatcher.execute(action)
    except OptimizerError as e:
        logger.error(f"{action.label} failed: {e}")
        line_warn(f"Error: {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
