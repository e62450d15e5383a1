"""Thread-safe priority queue holding shared queue items."""

from __future__ import annotations

import bisect
import logging
import threading
import uuid
from collections.abc import Iterator
from operator import attrgetter

from .datatypes import GameplayTag, QueueItem

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 300

_priority_of = attrgetter("priority")


class InvalidItemError(ValueError):
    """Raised when an item lacks a name or a valid trigger tag."""


class CapacityError(RuntimeError):
    """Raised when the queue has reached its maximum size."""


def validate_data(item: QueueItem) -> bool:
    """Return True if the item has a name and a valid trigger tag."""
    return bool(item.name) and item.ability_trigger_tag.is_valid()


class PriorityQueueInternal:
    """Priority queue ordered by ascending priority.

    A new item is placed before any existing items of equal priority.
    All operations are guarded by a re-entrant lock.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        self._lock = threading.RLock()
        self._items: list[QueueItem] = []
        self._max_size = DEFAULT_MAX_SIZE
        self.max_size = max_size

    @property
    def max_size(self) -> int:
        """Maximum number of items; non-positive assignments are ignored."""
        with self._lock:
            return self._max_size

    @max_size.setter
    def max_size(self, value: int) -> None:
        with self._lock:
            if value > 0:
                self._max_size = value

    def clear(self) -> None:
        """Remove all items."""
        with self._lock:
            self._items.clear()

    def enqueue(self, item: QueueItem) -> None:
        """Insert ``item`` according to its priority."""
        with self._lock:
            if not validate_data(item):
                raise InvalidItemError("item has no name or no valid trigger tag")
            if len(self._items) >= self._max_size:
                raise CapacityError(
                    f"queue reached its maximum size ({self._max_size}); "
                    f"item '{item.name}' not enqueued"
                )
            index = bisect.bisect_left(self._items, item.priority, key=_priority_of)
            self._items.insert(index, item)

    def dequeue(self) -> QueueItem:
        """Remove and return the item with the lowest priority value."""
        with self._lock:
            if not self._items:
                raise IndexError("dequeue from an empty queue")
            return self._items.pop(0)

    def contains(self, item: QueueItem) -> bool:
        """Return True if an equal item is queued."""
        with self._lock:
            return any(existing == item for existing in self._items)

    def remove(self, item: QueueItem) -> None:
        """Remove the first queued item equal to ``item``."""
        with self._lock:
            for index, existing in enumerate(self._items):
                if existing == item:
                    del self._items[index]
                    return
        raise ValueError(f"item '{item.name}' is not in the queue")

    def find_by_task_id(self, task_id: uuid.UUID) -> QueueItem | None:
        """Return the first item with the given task id, or None."""
        with self._lock:
            return next((i for i in self._items if i.task_id == task_id), None)

    def find_by_hash_key(
        self, name: str, tag: GameplayTag, is_open: bool
    ) -> QueueItem | None:
        """Return the first item matching name, exact trigger tag and open state."""
        with self._lock:
            return next(
                (
                    i
                    for i in self._items
                    if i.name == name
                    and i.ability_trigger_tag.matches_tag_exact(tag)
                    and i.is_open == is_open
                ),
                None,
            )

    def count_open(self) -> int:
        """Return the number of open items."""
        with self._lock:
            return sum(1 for i in self._items if i.is_open)

    def count_closed(self) -> int:
        """Return the number of closed items."""
        with self._lock:
            return sum(1 for i in self._items if not i.is_open)

    def is_empty(self) -> bool:
        """Return True if no items are queued."""
        with self._lock:
            return not self._items

    def dump_contents(self) -> list[str]:
        """Describe every queued item, one line each, and log the listing."""
        with self._lock:
            lines = []
            for index, item in enumerate(self._items):
                if validate_data(item):
                    lines.append(
                        f"Item {index}: Name={item.name} | "
                        f"Tag={item.ability_trigger_tag} | "
                        f"IsOpen={'true' if item.is_open else 'false'} | "
                        f"Priority={item.priority} | TaskID={item.task_id}"
                    )
                else:
                    lines.append(f"Item {index}: invalid data in node.")
        logger.info("Current queue contents")
        for line in lines:
            logger.info(line)
        return lines

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[QueueItem]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)