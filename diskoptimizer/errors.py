#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by Disk Space Optimizer.

Every failure an action can hit derives from :class:`OptimizerError`, so the
menu loop can report it and move on to the next selection.
"""

from __future__ import annotations
import shlex
from typing import Sequence


def printable_command(command: str, args: Sequence[str]) -> str:
    return " ".join(shlex.quote(x) for x in [command, *args])


class OptimizerError(Exception):
    """Base class for all errors reported to the user."""


class SpawnFailed(OptimizerError):
    """The executable could not be started (missing, not executable...)."""

    def __init__(self, command: str, args: Sequence[str], error: OSError):
        self.command = command
        self.args_list = list(args)
        self.error = error
        super().__init__(
            f"Failed to execute command: {printable_command(command, args)}: {error.strerror or error}"
        )


class CommandFailed(OptimizerError):
    """The command ran and exited with a non-zero status."""

    def __init__(self, command: str, args: Sequence[str], returncode: int, stderr: str):
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed with exit code {returncode}: {printable_command(command, args)}"
        if stderr:
            msg = f"{msg}: {stderr}"
        super().__init__(msg)


class LineInputError(OptimizerError):
    """Standard input is closed or unreadable."""


class InteractionError(OptimizerError):
    """The interactive prompt backend could not run (usually: no TTY)."""


class NoSelection(OptimizerError):
    """The user confirmed an empty selection or the "None" entry."""


class Aborted(OptimizerError):
    """The user declined a confirmation."""
