#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Terminal output helpers for Disk Space Optimizer.
"""

from __future__ import annotations
import platform
from typing import List

from rich import box
from rich.table import Table

from diskoptimizer.constants import console, PROJECT_NAME


def p(text: str = "") -> None:
    console.print(text, highlight=False)


def section(s: str) -> None:
    console.print(f"\n[bold cyan]➤ {s}[/bold cyan]")
    console.rule("", style="bold cyan")


def line_ok(s: str) -> None:
    console.print(f"[bold green]✓[/bold green] {s}", highlight=False)


def line_do(s: str) -> None:
    console.print(f"[cyan]→[/cyan] {s}", highlight=False)


def line_skip(s: str) -> None:
    console.print(f"[dim]○ {s}[/dim]", highlight=False)


def line_warn(s: str) -> None:
    console.print(f"[bold yellow]! {s}[/bold yellow]", highlight=False)


def table(title_str: str, headers: List[str], rows: List[List[str]]) -> None:
    t = Table(title=title_str, box=box.SIMPLE_HEAVY, header_style="bold", title_style="bold")
    for h in headers:
        t.add_column(h, overflow="fold")
    for r in rows:
        t.add_row(*r)
    console.print(t)


def current_os() -> str:
    """Lowercase OS name, e.g. ``linux``."""
    return platform.system().lower() or "unknown"


def print_welcome() -> None:
    console.print(f"Welcome to {PROJECT_NAME.lower()} CLI for {current_os()}!",
                  style="bold green", highlight=False)
