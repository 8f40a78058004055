"""Tests for action loading and import targets."""

import pytest

from action_console.actions import (
    Action,
    ActionLoadError,
    ActionManager,
    ActionRegistry,
    load_actions,
    load_target,
)

import example_actions


def greet(name: str) -> str:
    return f"hello {name}"


class TestLoadActions:
    """Tests for load_actions naming and classification rules."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = ActionRegistry()

    def test_callable_with_string_key(self):
        """A callable under a string key is a named, risky action."""
        load_actions(self.registry, {"greet": greet})

        action = self.registry.resolve("greet")
        assert action is not None
        assert action.anonymous is False
        assert action.risky is True
        assert action.just_value is False

    def test_value_with_integer_key(self):
        """A bare value under an integer key is anonymous and value-only."""
        load_actions(self.registry, {0: 42})

        action = self.registry.resolve("anonymous-0")
        assert action is not None
        assert action.anonymous is True
        assert action.just_value is True
        assert action.risky is False
        assert action.invoke() == 42

    def test_value_returned_verbatim(self):
        """Value-only actions return the very same object."""
        payload = {"a": [1, 2]}
        load_actions(self.registry, {"payload": payload})

        assert self.registry.resolve("payload").invoke() is payload

    def test_list_uses_indexes(self):
        """List entries are named by index."""
        load_actions(self.registry, [greet, "text"])

        assert self.registry.list_action_names() == ["anonymous-0", "anonymous-1"]
        assert self.registry.resolve("anonymous-0").risky is True
        assert self.registry.resolve("anonymous-1").just_value is True

    def test_prebuilt_action_keeps_explicit_name(self):
        """An explicitly named action ignores its key."""
        action = Action(greet, name="explicit")
        load_actions(self.registry, {"key": action})

        assert self.registry.resolve("explicit") is action
        assert self.registry.resolve("key") is None
        assert action.anonymous is False

    def test_prebuilt_action_named_by_key(self):
        """An unnamed pre-built action takes its string key."""
        action = Action(greet, risky=False)
        load_actions(self.registry, {"greet": action})

        assert self.registry.resolve("greet") is action
        assert action.anonymous is False
        assert action.risky is False

    def test_prebuilt_action_with_integer_key(self):
        """An unnamed pre-built action under an integer key stays anonymous."""
        action = Action(greet)
        load_actions(self.registry, {3: action})

        assert action.name == "anonymous-3"
        assert action.anonymous is True

    def test_action_named_by_setter_is_not_anonymous(self):
        """A name assigned before loading counts as given by the user."""
        action = Action(greet)
        action.name = "purge"

        load_actions(self.registry, {0: action})

        assert self.registry.resolve("purge") is action
        assert action.anonymous is False
        assert action.name_synthesized is False

    def test_synthesized_name_stays_anonymous_on_reload(self):
        """Reloading keeps a generated name anonymous."""
        action = Action(greet)

        load_actions(self.registry, [action])
        load_actions(self.registry, {"other": action})

        assert action.name == "anonymous-0"
        assert action.name_synthesized is True
        assert action.anonymous is True

    def test_idempotent(self):
        """Loading the same definition twice yields the same contents."""
        prebuilt = Action(greet)
        definition = {"greet": greet, 0: 42, 1: prebuilt}

        load_actions(self.registry, definition)
        first = [(a.name, a.anonymous, a.risky, a.just_value) for a in self.registry.resolve_all()]

        load_actions(self.registry, definition)
        second = [(a.name, a.anonymous, a.risky, a.just_value) for a in self.registry.resolve_all()]

        assert first == second
        assert len(self.registry) == 3

    def test_rejects_other_containers(self):
        """Only mappings and lists are accepted."""
        with pytest.raises(TypeError):
            load_actions(self.registry, "greet")


class TestLoadTarget:
    """Tests for import target resolution."""

    def test_default_attribute(self):
        """The attribute defaults to 'actions'."""
        assert load_target("example_actions") is example_actions.actions

    def test_explicit_attribute(self):
        """A dotted attribute path is followed."""
        assert load_target("example_actions:greet.__name__") == "greet"

    def test_missing_module(self):
        """Unknown modules raise ActionLoadError."""
        with pytest.raises(ActionLoadError, match="cannot import"):
            load_target("no_such_module_here:actions")

    def test_missing_attribute(self):
        """Unknown attributes raise ActionLoadError."""
        with pytest.raises(ActionLoadError, match="no attribute"):
            load_target("example_actions:missing")

    def test_manager_from_definition(self):
        """A definition target is loaded into a new manager."""
        manager = ActionManager.from_target("example_actions:actions")

        assert "greet" in manager.registry
        assert "anonymous-0" in manager.registry

    def test_manager_from_manager(self, monkeypatch):
        """A manager target is used as-is."""
        existing = ActionManager()
        monkeypatch.setattr(example_actions, "manager", existing, raising=False)

        assert ActionManager.from_target("example_actions:manager") is existing

    def test_manager_from_invalid_definition(self):
        """A target that is not a definition raises ActionLoadError."""
        with pytest.raises(ActionLoadError):
            ActionManager.from_target("example_actions:not_a_definition")
