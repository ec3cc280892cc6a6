"""Message and branch grammars.

Contains:
- MESSAGE_PATTERN: ``[kind: ][team-id ]body``
- BRANCH_PATTERN: ``[kind/|kind-]team-id[-trailing-words]``
- parse_message: Parse free-text commit messages (lenient on the kind prefix)
- parse_branch: Parse branch names (strict on the kind prefix)
"""

import re
from functools import lru_cache
from typing import Optional

from gup.message.exceptions import GrammarError, InvalidCommitMessageError, MessageError
from gup.message.kind import MessageKind, resolve_kind
from gup.message.models import Message
from gup.message.story import StoryId

MESSAGE_PATTERN = r"(?:(?P<kind>\w+): *)?(?:(?P<team>\w+)-(?P<id>\d+) +)?(?P<body>.*)"
BRANCH_PATTERN = r"(?:(?P<kind>\w+)[/-])?(?P<team>\w+)-(?P<id>\d+).*"


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    """Compile a grammar pattern once per process."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise GrammarError(pattern, e)


def parse_message(message: str, default_kind: Optional[MessageKind] = None) -> Message:
    """Parse a commit message of the form ``[kind: ][team-id ]body``.

    An unrecognized or missing kind token falls back to ``default_kind``
    (or FEATURE) instead of failing.

    Args:
        message: The raw commit message.
        default_kind: Kind used when the message does not name a valid one.

    Returns:
        The parsed Message.

    Raises:
        InvalidCommitMessageError: If no complete team-id pair follows the
            optional kind prefix.
    """
    match = _compile(MESSAGE_PATTERN).fullmatch(message)
    if match is None:
        raise InvalidCommitMessageError(message)

    team = match.group("team")
    story_id = match.group("id")
    body = match.group("body")
    if team is None or story_id is None or body is None:
        raise InvalidCommitMessageError(message)

    fallback = default_kind or MessageKind.FEATURE
    token = match.group("kind")
    if token is None:
        kind = fallback
    else:
        try:
            kind = resolve_kind(token)
        except MessageError:
            kind = fallback

    return Message(kind=kind, story=StoryId(team, int(story_id)), body=body)


def parse_branch(branch: str, force_kind: Optional[MessageKind] = None) -> Message:
    """Parse a branch name of the form ``[kind/|kind-]team-id[-words]``.

    ``force_kind`` replaces a kind token present in the branch name but never
    supplies one when the branch has none; such branches are FEATURE. Words
    after the id are discarded and the body is always empty.

    Args:
        branch: The branch name.
        force_kind: Kind overriding the one encoded in the branch.

    Returns:
        The parsed Message with an empty body.

    Raises:
        InvalidCommitMessageError: If the branch does not start with a
            team-id pair (after the optional kind prefix).
        InvalidKindError: If the branch carries an unrecognized kind token
            and no kind is forced.
    """
    match = _compile(BRANCH_PATTERN).fullmatch(branch)
    if match is None:
        raise InvalidCommitMessageError(branch)

    token = match.group("kind")
    if token is None:
        kind = MessageKind.FEATURE
    elif force_kind is not None:
        kind = force_kind
    else:
        kind = resolve_kind(token)

    story = StoryId(match.group("team"), int(match.group("id")))
    return Message(kind=kind, story=story, body="")
