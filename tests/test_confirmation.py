"""Tests for confirmation codes."""

import random
import string

from action_console.actions import Action, ConfirmationGate


def drop_tables() -> None:
    pass


class TestConfirmationGate:
    """Test suite for ConfirmationGate."""

    def setup_method(self):
        """Set up test fixtures."""
        self.gate = ConfirmationGate(rng=random.Random(42))
        self.risky = Action(drop_tables, name="drop_tables")
        self.safe = Action(drop_tables, risky=False, name="safe")

    def test_code_format(self):
        """Codes are four lowercase letters."""
        code = self.gate.code_for(self.risky)

        assert len(code) == 4
        assert all(char in string.ascii_lowercase for char in code)

    def test_code_is_memoized(self):
        """The same action gets the same code on every request."""
        assert self.gate.code_for(self.risky) == self.gate.code_for(self.risky)

    def test_code_keyed_by_name(self):
        """Codes are cached by action name."""
        same_name = Action(drop_tables, name="drop_tables")
        assert self.gate.code_for(same_name) == self.gate.code_for(self.risky)

    def test_codes_per_gate(self):
        """Each gate (process) keeps its own cache."""
        other = ConfirmationGate(rng=random.Random(7))
        first = self.gate.code_for(self.risky)

        assert other.code_for(self.risky) == other.code_for(self.risky)
        assert self.gate.code_for(self.risky) == first

    def test_safe_action_always_confirmed(self):
        """Non-risky actions need no code."""
        assert self.gate.is_confirmed(self.safe, None) is True
        assert self.gate.is_confirmed(self.safe, "wrong") is True

    def test_matching_code_confirms(self):
        """The exact code confirms a risky action, repeatedly."""
        code = self.gate.code_for(self.risky)

        assert self.gate.is_confirmed(self.risky, code) is True
        assert self.gate.is_confirmed(self.risky, code) is True

    def test_wrong_code_rejected(self):
        """Missing, wrong and differently-cased codes are rejected."""
        code = self.gate.code_for(self.risky)

        assert self.gate.is_confirmed(self.risky, None) is False
        assert self.gate.is_confirmed(self.risky, "") is False
        assert self.gate.is_confirmed(self.risky, code.upper()) is False
        assert self.gate.is_confirmed(self.risky, code + " ") is False

    def test_check_generates_code_lazily(self):
        """Checking before display still compares against a stable code."""
        assert self.gate.is_confirmed(self.risky, "????") is False
        code = self.gate.code_for(self.risky)
        assert self.gate.is_confirmed(self.risky, code) is True
