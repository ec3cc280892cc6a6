"""Work-item kinds and token resolution."""

from enum import Enum

from gup.message.exceptions import InvalidKindError


class MessageKind(str, Enum):
    """Work-item category of a change."""

    FEATURE = "feat"
    FIX = "fix"
    CHORE = "chore"

    def __str__(self) -> str:
        return self.value


def resolve_kind(token: str) -> MessageKind:
    """Resolve a kind token to a MessageKind.

    Matching is exact and case-sensitive.

    Args:
        token: The kind token, e.g. "feat".

    Returns:
        The matching MessageKind.

    Raises:
        InvalidKindError: If the token is not a recognized kind.
    """
    try:
        return MessageKind(token)
    except ValueError:
        raise InvalidKindError(token)
