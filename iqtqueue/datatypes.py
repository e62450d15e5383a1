"""Core value types: gameplay tags, queue modes and queue items."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GameplayTag:
    """A dotted hierarchical tag such as ``Ability.Attack.Melee``.

    An empty name stands for the invalid (unset) tag.
    """

    name: str = ""

    def is_valid(self) -> bool:
        """Return True if the tag has a name."""
        return bool(self.name)

    def matches_tag_exact(self, other: GameplayTag) -> bool:
        """Return True if both tags are valid and identical."""
        return other.is_valid() and self.name == other.name

    def matches_tag(self, other: GameplayTag) -> bool:
        """Return True if this tag equals ``other`` or is nested beneath it."""
        if not other.is_valid() or not self.is_valid():
            return False
        return self.name == other.name or self.name.startswith(other.name + ".")

    def __str__(self) -> str:
        return self.name if self.name else "None"


class QueueMode(enum.Enum):
    """How a queue assigns priorities on enqueue."""

    PRIORITY_ORDER = "Order By Priority"
    FIFO = "First In, First Out"
    FILO = "First In, Last Out"


@dataclass(eq=False)
class QueueItem:
    """An entry in the queue describing an agent's task.

    Two items are equal when their name, trigger tag (matched exactly) and
    open state agree; ordering compares priorities only.
    """

    name: str = ""
    ability_trigger_tag: GameplayTag = field(default_factory=GameplayTag)
    ability_end_tag: GameplayTag = field(default_factory=GameplayTag)
    ability_fail_tag: GameplayTag = field(default_factory=GameplayTag)
    is_open: bool = False
    priority: int = 0
    task_id: uuid.UUID = field(default_factory=uuid.uuid4)
    is_enqueued: bool = False
    is_stacked: bool = False
    user_payload: Any = None

    def key(self) -> tuple[str, str, bool]:
        """Return the identity key: name, trigger tag name and open state."""
        return (self.name, self.ability_trigger_tag.name, self.is_open)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueueItem):
            return NotImplemented
        return (
            self.name == other.name
            and self.ability_trigger_tag.matches_tag_exact(other.ability_trigger_tag)
            and self.is_open == other.is_open
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QueueItem):
            return NotImplemented
        return self.priority < other.priority

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, QueueItem):
            return NotImplemented
        return self.priority > other.priority

    __hash__ = None  # type: ignore[assignment]