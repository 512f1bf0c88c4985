#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Helper utility functions for Disk Space Optimizer.
"""

from __future__ import annotations
import os
import subprocess
import sys
from typing import Optional, Sequence

from rich.markup import escape

from diskoptimizer.constants import console
from diskoptimizer.errors import (
    CommandFailed, LineInputError, SpawnFailed, printable_command
)
from diskoptimizer.logging_setup import logger
from diskoptimizer.output import p


def which(cmd: str) -> Optional[str]:
    """Find the full path of a command."""
    from shutil import which as _which
    return _which(cmd)


def _decode(data: bytes) -> str:
    return (data or b"").decode("utf-8", errors="replace").strip()


class CommandRunner:
    """
    Runs external commands and captures their output.

    Args:
        dry_run: If True, commands flagged as mutating are only printed
    """

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run

    def run(self, command: str, args: Sequence[str], mutating: bool = False) -> str:
        """
        Execute ``command`` with ``args`` and return its stripped stdout.

        Raises:
            SpawnFailed: the executable could not be started
            CommandFailed: the command exited with a non-zero status
        """
        args = list(args)
        printable = printable_command(command, args)
        if mutating and self.dry_run:
            logger.debug(f"[DRY-RUN] Would execute: {printable}")
            p(escape(f"[dry-run] {printable}"))
            return ""

        logger.debug(f"Executing command: {printable}")
        p(escape(f"[run] {printable}"))
        try:
            result = subprocess.run(
                [command, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            logger.debug(f"Could not spawn {command}: {e}")
            raise SpawnFailed(command, args, e) from e
        logger.debug(f"Command completed with return code: {result.returncode}")

        if result.returncode != 0:
            raise CommandFailed(command, args, result.returncode, _decode(result.stderr))

        stdout = _decode(result.stdout)
        if stdout:
            p("Command output:")
            p(escape(stdout))
        logger.debug(f"Captured {len(stdout)} bytes")
        return stdout


def run_command(command: str, args: Sequence[str]) -> str:
    """Run a command once with a default runner."""
    return CommandRunner().run(command, args)


def read_line(prompt: str = "") -> str:
    """
    Read one line from standard input, trailing newline included.

    The prompt (and anything else pending on stdout) is flushed first so it is
    visible before the read blocks.

    Raises:
        LineInputError: stdin is closed or cannot be read
    """
    try:
        if prompt:
            console.print(escape(prompt), end="", highlight=False)
        console.file.flush()
        line = sys.stdin.readline()
    except (OSError, ValueError) as e:
        raise LineInputError(f"Failed to read input: {e}") from e
    if not line:
        raise LineInputError("Failed to read input: end of input")
    return line


def is_root() -> bool:
    """Check if running as root."""
    return os.geteuid() == 0


def confirm(msg: str, assume_yes: bool = False) -> bool:
    """
    Ask user for confirmation.

    Only ``y`` or ``yes`` (any case) confirm; everything else declines.
    """
    if assume_yes:
        return True
    ans = read_line(f"{msg} [y/N]: ").strip().lower()
    return ans in ("y", "yes")
