"""Story identifiers (team code plus numeric ticket id)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoryId:
    """Reference to a ticket in an external tracker, e.g. ``team-123``."""

    team: str
    id: int

    def __str__(self) -> str:
        return f"{self.team}-{self.id}"
