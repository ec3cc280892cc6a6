"""Structured commit message model."""

from dataclasses import dataclass

from gup.message.kind import MessageKind
from gup.message.story import StoryId


@dataclass(frozen=True)
class Message:
    """A ticket-linked commit message.

    Attributes:
        kind: Work-item kind of the change.
        story: Ticket the change belongs to.
        body: Free-text description, possibly empty.
    """

    kind: MessageKind
    story: StoryId
    body: str = ""

    def __str__(self) -> str:
        # The separator before the body is kept even when the body is empty
        return f"{self.kind.value}: {self.story} {self.body}"
