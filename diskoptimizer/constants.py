#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants and shared console for Disk Space Optimizer.
"""

from __future__ import annotations
from typing import List, Tuple

from rich.console import Console

console = Console(highlight=False)

PROG = "dso"
PROJECT_NAME = "Disk Space Optimizer"
TAGLINE = "A CLI tool for optimizing disk space"
VERSION = "0.1.1"

# -----------------------------
# Top-level menu (key, label); key 0 is always "Exit"
# -----------------------------
EXIT_KEY = 0
EXIT_LABEL = "Exit"
MENU_ENTRIES: List[Tuple[int, str]] = [
    (1, "Remove unnecessary packages"),
    (2, "Clean package cache"),
    (3, "Uninstall unused applications"),
    (4, "Remove old kernel versions"),
    (5, "Clean up log files"),
    (EXIT_KEY, EXIT_LABEL),
]

# Secondary menus get an explicit opt-out entry
SENTINEL_KEY = 0
SENTINEL_LABEL = "None"

MENU_PROMPT = "Please select an option: (space to select, enter to confirm)"
PACKAGES_PROMPT = "Select installed packages to remove:"
KERNELS_PROMPT = "Enter kernel versions to remove:"

# -----------------------------
# External tools
# -----------------------------
DEFAULT_PACKAGE_MANAGER = "dnf"
DEFAULT_PACKAGE_QUERY = "rpm"
DEFAULT_LOG_TOOL = "journalctl"
SUDO = "sudo"

DEFAULT_VACUUM_DAYS = 7

# Lines dnf prints around `list --installed` that are not packages
DNF_HEADER_PREFIXES = ("Installed Packages", "Last metadata expiration check")
