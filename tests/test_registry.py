"""Tests for ActionRegistry."""

import pytest

from action_console.actions import Action, ActionRegistry


def noop() -> None:
    pass


class TestActionRegistry:
    """Test suite for ActionRegistry."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = ActionRegistry()
        self.first = Action(noop, name="first")
        self.second = Action(noop, name="second")

    def test_resolve_returns_registered_action(self):
        """resolve returns the same reference that was registered."""
        self.registry.register(self.first)
        assert self.registry.resolve("first") is self.first

    def test_resolve_unknown_returns_none(self):
        """Unknown names resolve to None without raising."""
        assert self.registry.resolve("missing") is None

    def test_register_chains(self):
        """register returns the registry."""
        result = self.registry.register(self.first).register(self.second)
        assert result is self.registry
        assert len(self.registry) == 2

    def test_resolve_all_in_insertion_order(self):
        """resolve_all keeps registration order."""
        self.registry.register(self.second).register(self.first)
        assert self.registry.resolve_all() == [self.second, self.first]
        assert self.registry.list_action_names() == ["second", "first"]

    def test_resolve_last(self):
        """resolve_last returns the last registered action."""
        assert self.registry.resolve_last() is None

        self.registry.register(self.first).register(self.second)
        assert self.registry.resolve_last() is self.second

    def test_last_write_wins(self):
        """A later registration under the same name replaces the earlier one."""
        replacement = Action(noop, name="first")

        self.registry.register(self.first).register(self.second).register(replacement)

        assert self.registry.resolve("first") is replacement
        assert len(self.registry) == 2
        # Replacement keeps the original position
        assert self.registry.list_action_names() == ["first", "second"]

    def test_register_unnamed_raises(self):
        """Actions must be named before registration."""
        with pytest.raises(ValueError):
            self.registry.register(Action(noop))

    def test_contains(self):
        """Membership checks use action names."""
        self.registry.register(self.first)
        assert "first" in self.registry
        assert "second" not in self.registry
