"""Tests for cancellation tokens and scopes."""

import unittest

from clickup_client.cancellation import (
    CancellationToken,
    cancellation_scope,
    get_current_token,
    resolve_token,
)
from clickup_client.exceptions import ClickUpError, OperationCancelledError


class TestCancellationToken(unittest.TestCase):
    """Tests for CancellationToken."""

    def test_new_token_is_not_cancelled(self) -> None:
        """Test that a fresh token does not raise."""
        token = CancellationToken()

        self.assertFalse(token.is_cancelled)
        token.raise_if_cancelled()

    def test_cancel_sets_state_and_reason(self) -> None:
        """Test that cancel records the reason."""
        token = CancellationToken()
        token.cancel("timeout")

        self.assertTrue(token.is_cancelled)
        self.assertEqual(token.reason, "timeout")

    def test_cancel_is_idempotent(self) -> None:
        """Test that a second cancel keeps the first reason."""
        token = CancellationToken()
        token.cancel("first")
        token.cancel("second")

        self.assertEqual(token.reason, "first")

    def test_raise_if_cancelled(self) -> None:
        """Test that a cancelled token raises OperationCancelledError."""
        token = CancellationToken()
        token.cancel()

        with self.assertRaises(OperationCancelledError) as context:
            token.raise_if_cancelled()

        self.assertIsInstance(context.exception, ClickUpError)
        self.assertEqual(str(context.exception), "Operation was cancelled")


class TestCancellationScope(unittest.TestCase):
    """Tests for cancellation_scope and token resolution."""

    def test_no_ambient_token_by_default(self) -> None:
        """Test that there is no ambient token outside a scope."""
        self.assertIsNone(get_current_token())

    def test_scope_installs_and_restores_token(self) -> None:
        """Test that the scope installs a token and removes it on exit."""
        with cancellation_scope() as token:
            self.assertIs(get_current_token(), token)

        self.assertIsNone(get_current_token())

    def test_nested_scopes(self) -> None:
        """Test that the innermost scope wins and the outer one is restored."""
        outer = CancellationToken()
        inner = CancellationToken()

        with cancellation_scope(outer):
            with cancellation_scope(inner):
                self.assertIs(get_current_token(), inner)
            self.assertIs(get_current_token(), outer)

    def test_scope_restored_after_exception(self) -> None:
        """Test that the previous token is restored when the block raises."""
        with self.assertRaises(RuntimeError), cancellation_scope():
            raise RuntimeError("boom")

        self.assertIsNone(get_current_token())

    def test_explicit_token_wins_over_ambient(self) -> None:
        """Test that resolve_token prefers an explicitly passed token."""
        explicit = CancellationToken()

        with cancellation_scope() as ambient:
            self.assertIs(resolve_token(explicit), explicit)
            self.assertIs(resolve_token(None), ambient)


if __name__ == "__main__":
    unittest.main()
