"""Exceptions raised by move checks and card classification."""


class MoveError(Exception):
    """A proposed move breaks a syntax or game rule.

    The message is shown to the player as-is, so its wording is stable.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOperationError(RuntimeError):
    """An operation was called with input it is not defined for (e.g. a Joker)."""
