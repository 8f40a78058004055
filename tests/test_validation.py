"""Tests for signature validation and flags."""

from action_console.actions import Action, ActionValidator, FlagClassifier, ValidationStatus
from action_console.actions.loader import to_action


def supported(text: str, count: int, ratio: float, enabled: bool) -> None:
    pass


def missing_type(name: str, value) -> None:
    pass


def unsupported_type(items: list[int]) -> None:
    pass


class TestValidationStatus:
    """Tests for ValidationStatus constructors."""

    def test_valid(self):
        status = ValidationStatus.valid()
        assert status.is_valid is True
        assert status.is_invalid is False
        assert status.message == "OK"

    def test_invalid(self):
        status = ValidationStatus.invalid("nope")
        assert status.is_valid is False
        assert status.is_invalid is True
        assert status.message == "nope"


class TestActionValidator:
    """Test suite for ActionValidator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = ActionValidator()

    def test_supported_types_are_valid(self):
        """str/int/float/bool parameters pass."""
        assert self.validator.validate(Action(supported)).is_valid

    def test_no_parameters_is_valid(self):
        """Parameterless actions pass."""
        assert self.validator.validate(to_action(42)).is_valid

    def test_missing_type_declaration(self):
        """An unannotated parameter is reported by name."""
        status = self.validator.validate(Action(missing_type))

        assert status.is_invalid
        assert status.message == "Parameter type declaration is missing: value"

    def test_unsupported_type(self):
        """An unsupported annotation is reported with its name."""
        status = self.validator.validate(Action(unsupported_type))

        assert status.is_invalid
        assert status.message.startswith("Invalid parameter type: ")
        assert "list" in status.message


class TestFlagClassifier:
    """Tests for display flags."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = FlagClassifier(ActionValidator())

    def test_anonymous_value_action(self):
        """An anonymous value action is flagged anonymous and value-only."""
        action = to_action(42)

        keys = [flag.key for flag in self.classifier.resolve_all(action)]
        assert keys == ["anonymous", "just_value"]

    def test_risky_invalid_action(self):
        """Risky actions with bad signatures get both flags."""
        action = Action(missing_type, name="missing_type")

        keys = [flag.key for flag in self.classifier.resolve_all(action)]
        assert keys == ["risky", "invalid"]

    def test_no_flags(self):
        """A named, safe, valid action has no flags."""
        action = Action(supported, risky=False, name="supported")

        assert self.classifier.resolve_all(action) == []
        assert self.classifier.has_any(action) is False
