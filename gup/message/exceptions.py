"""Commit message exception classes.

Contains all exception classes raised while parsing messages and branches:
- MessageError: Base exception for message parsing errors
- InvalidKindError: Raised when a kind token is not recognized
- InvalidCommitMessageError: Raised when text does not match the grammar
- GrammarError: Raised when a grammar pattern fails to compile
"""

import re


class MessageError(Exception):
    """Base exception for message parsing errors."""

    pass


class InvalidKindError(MessageError):
    """Raised when a kind token is not one of feat, fix or chore."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid message kind '{token}' (chore, fix, feat)")


class InvalidCommitMessageError(MessageError):
    """Raised when text lacks a complete team-id story reference."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid commit message: '{text}'")


class GrammarError(MessageError):
    """Raised when one of the static grammar patterns fails to compile."""

    def __init__(self, pattern: str, error: re.error) -> None:
        self.pattern = pattern
        super().__init__(f"Could not compile grammar pattern {pattern!r}: {error}")
