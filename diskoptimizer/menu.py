#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Selectable menu entries and the checkbox prompt used to pick them.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Set, Tuple

import questionary
from questionary import Choice

from diskoptimizer.constants import EXIT_KEY, MENU_ENTRIES, MENU_PROMPT
from diskoptimizer.errors import InteractionError
from diskoptimizer.logging_setup import logger


@dataclass(frozen=True)
class SelectableItem:
    key: int
    label: str


class Registry:
    """
    Ordered, append-only list of menu entries.

    ``append`` returns the registry itself so menus can be built fluently::

        Registry().append(SelectableItem(1, "Clean")).append(SelectableItem(0, "Exit"))
    """

    def __init__(self) -> None:
        self._items: List[SelectableItem] = []

    def append(self, item: SelectableItem) -> "Registry":
        self._items.append(item)
        return self

    @property
    def items(self) -> Tuple[SelectableItem, ...]:
        return tuple(self._items)

    def keys(self) -> List[int]:
        return [item.key for item in self._items]

    def __iter__(self) -> Iterator[SelectableItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> SelectableItem:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Registry({self._items!r})"


def format_prompt_items(registry: Registry) -> List[str]:
    """Render every entry as ``"{key}: {label}"``."""
    return [f"{item.key}: {item.label}" for item in registry]


def default_commands() -> Registry:
    """The top-level menu, ending with the Exit entry."""
    registry = Registry()
    for key, label in MENU_ENTRIES:
        registry.append(SelectableItem(key, label))
    return registry


def default_indexes(registry: Registry) -> Set[int]:
    """Pre-check a trailing Exit entry so confirming straight away exits."""
    if len(registry) and registry[-1].key == EXIT_KEY:
        return {len(registry) - 1}
    return set()


def multi_select(registry: Registry, defaults: Iterable[int] = (),
                 message: str = MENU_PROMPT) -> List[SelectableItem]:
    """
    Show a checkbox prompt (space toggles, enter confirms) over ``registry``.

    Args:
        registry: Entries to show; must not be empty
        defaults: Indexes into the registry that start checked
        message: Prompt shown above the entries

    Returns:
        The chosen entries in registry order. An empty selection (or Ctrl+C)
        gives an empty list.

    Raises:
        InteractionError: no terminal is attached or the prompt backend fails
    """
    if not len(registry):
        raise ValueError("cannot prompt over an empty registry")
    if not sys.stdin.isatty():
        raise InteractionError("Interactive menu requires a terminal (stdin is not a TTY)")

    checked = set(defaults)
    labels = format_prompt_items(registry)
    choices = [Choice(label, value=i, checked=i in checked) for i, label in enumerate(labels)]
    try:
        result = questionary.checkbox(message, choices=choices).ask()
    except Exception as e:
        raise InteractionError(f"Failed to run interactive menu: {e}") from e

    if not result:
        logger.debug("Nothing selected")
        return []
    selected = [registry[i] for i in sorted(set(result))]
    logger.debug(f"Selected: {[item.key for item in selected]}")
    return selected
