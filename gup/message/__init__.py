"""Ticket reference parsing for gup.

This package provides the commit message core with:
- exceptions: MessageError, InvalidKindError, InvalidCommitMessageError, GrammarError
- kind: MessageKind, resolve_kind
- story: StoryId
- models: Message
- grammar: parse_message, parse_branch, MESSAGE_PATTERN, BRANCH_PATTERN
- composer: parse
"""

# Exceptions
from gup.message.exceptions import (
    GrammarError,
    InvalidCommitMessageError,
    InvalidKindError,
    MessageError,
)

# Value types
from gup.message.kind import MessageKind, resolve_kind
from gup.message.story import StoryId
from gup.message.models import Message

# Grammars
from gup.message.grammar import (
    BRANCH_PATTERN,
    MESSAGE_PATTERN,
    parse_branch,
    parse_message,
)

# Composer
from gup.message.composer import parse


__all__ = [
    # Exceptions
    "MessageError",
    "InvalidKindError",
    "InvalidCommitMessageError",
    "GrammarError",
    # Value types
    "MessageKind",
    "resolve_kind",
    "StoryId",
    "Message",
    # Grammars
    "MESSAGE_PATTERN",
    "BRANCH_PATTERN",
    "parse_message",
    "parse_branch",
    # Composer
    "parse",
]
