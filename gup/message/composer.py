"""Compose a commit message from the typed message and the branch name."""

from dataclasses import replace
from typing import Optional

from gup.message.exceptions import MessageError
from gup.message.grammar import parse_branch, parse_message
from gup.message.kind import MessageKind
from gup.message.models import Message


def parse(message: str, branch: str, kind: Optional[MessageKind] = None) -> Message:
    """Parse a commit message, falling back to the branch name.

    The message grammar is tried first and its result is returned untouched.
    When it fails, the branch supplies kind and story and the raw message
    becomes the body, so ``"correct off-by-one"`` typed on ``fix/team-12-x``
    yields ``"fix: team-12 correct off-by-one"``.

    Args:
        message: The raw (trimmed) commit message.
        branch: The current branch name.
        kind: Default kind for the message, forced kind for the branch.

    Returns:
        The composed Message.

    Raises:
        MessageError: If neither the message nor the branch can be parsed.
            The branch error is the one raised.
    """
    try:
        return parse_message(message, kind)
    except MessageError:
        pass

    return replace(parse_branch(branch, kind), body=message)
