"""Shared fixtures for action console tests."""

import random

import pytest

from action_console.actions import ActionManager, ConfirmationGate
from action_console.config import Settings

import example_actions


@pytest.fixture
def manager():
    """Manager loaded with the example actions and a seeded code generator."""
    manager = ActionManager(confirmation=ConfirmationGate(rng=random.Random(1234)))
    manager.load(example_actions.actions)
    return manager


@pytest.fixture
def settings():
    """Settings with a fixed session secret."""
    return Settings(session_secret="test-secret", actions=None)
