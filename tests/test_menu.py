# -*- coding: utf-8 -*-
"""Tests for the menu registry and checkbox prompt."""

import pytest

from diskoptimizer import menu
from diskoptimizer.errors import InteractionError
from diskoptimizer.menu import Registry, SelectableItem


@pytest.fixture
def tty(mocker):
    stdin = mocker.patch("diskoptimizer.menu.sys.stdin")
    stdin.isatty.return_value = True
    return stdin


@pytest.fixture
def checkbox(mocker, tty):
    """Patch questionary.checkbox; set ``checkbox.return_value.ask.return_value``."""
    return mocker.patch("diskoptimizer.menu.questionary.checkbox")


def three_items():
    return (Registry()
            .append(SelectableItem(1, "one"))
            .append(SelectableItem(2, "two"))
            .append(SelectableItem(3, "three")))


class TestRegistry:
    def test_append_chains_and_keeps_order(self):
        registry = three_items()
        assert registry.keys() == [1, 2, 3]
        assert [item.label for item in registry] == ["one", "two", "three"]

    def test_rendered_labels_match_items(self):
        registry = three_items()
        labels = menu.format_prompt_items(registry)
        assert len(labels) == len(registry)
        assert labels == ["1: one", "2: two", "3: three"]

    def test_empty_registry_renders_empty_list(self):
        assert menu.format_prompt_items(Registry()) == []

    def test_items_are_immutable(self):
        item = SelectableItem(1, "one")
        with pytest.raises(AttributeError):
            item.label = "changed"

    def test_default_commands(self):
        commands = menu.default_commands()
        assert commands.keys() == [1, 2, 3, 4, 5, 0]
        assert commands[-1].label == "Exit"

    def test_exit_is_checked_by_default(self):
        assert menu.default_indexes(menu.default_commands()) == {5}

    def test_no_default_without_trailing_exit(self):
        assert menu.default_indexes(three_items()) == set()


class TestMultiSelect:
    def test_returns_registry_order_not_toggle_order(self, checkbox):
        checkbox.return_value.ask.return_value = [2, 0]
        selected = menu.multi_select(three_items())
        assert [item.key for item in selected] == [1, 3]

    def test_empty_selection_is_not_an_error(self, checkbox):
        checkbox.return_value.ask.return_value = []
        assert menu.multi_select(three_items()) == []

    def test_cancel_yields_empty_selection(self, checkbox):
        checkbox.return_value.ask.return_value = None
        assert menu.multi_select(three_items()) == []

    def test_defaults_start_checked(self, checkbox):
        checkbox.return_value.ask.return_value = [5]
        commands = menu.default_commands()
        selected = menu.multi_select(commands, menu.default_indexes(commands))
        assert [item.key for item in selected] == [0]
        choices = checkbox.call_args.kwargs["choices"]
        assert [c.checked for c in choices] == [False] * 5 + [True]
        assert choices[0].title == "1: Remove unnecessary packages"

    def test_no_tty_raises_interaction_error(self, mocker):
        mocker.patch("diskoptimizer.menu.sys.stdin").isatty.return_value = False
        checkbox = mocker.patch("diskoptimizer.menu.questionary.checkbox")
        with pytest.raises(InteractionError):
            menu.multi_select(three_items())
        checkbox.assert_not_called()

    def test_backend_failure_raises_interaction_error(self, checkbox):
        checkbox.return_value.ask.side_effect = OSError("no terminal")
        with pytest.raises(InteractionError) as exc:
            menu.multi_select(three_items())
        assert isinstance(exc.value.__cause__, OSError)

    def test_empty_registry_is_rejected(self, tty):
        with pytest.raises(ValueError):
            menu.multi_select(Registry())
