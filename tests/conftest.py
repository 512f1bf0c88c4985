# -*- coding: utf-8 -*-
"""Shared fixtures for Disk Space Optimizer tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from diskoptimizer.config import Config


class FakeRunner:
    """Records invocations and answers from a canned output table."""

    def __init__(self, outputs=None, failures=None):
        self.calls = []
        self.outputs = outputs or {}
        self.failures = failures or {}

    def run(self, command, args, mutating=False):
        args = list(args)
        self.calls.append((command, args))
        key = (command, tuple(args))
        if key in self.failures:
            raise self.failures[key]
        return self.outputs.get(key, "")

    @property
    def mutating_calls(self):
        return [c for c in self.calls if c[1] and c[1][0] not in ("list", "-q")]


class Answers:
    """Scripted replacement for read_line."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        return self.lines.pop(0)


@pytest.fixture
def config():
    """Configuration without sudo so commands are recorded unprefixed."""
    return Config(use_sudo=False)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def answers():
    """Factory for scripted line input."""
    return Answers
