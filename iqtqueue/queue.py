"""Configurable item queue with priority, FIFO and FILO ordering."""

from __future__ import annotations

import dataclasses
import logging
import uuid

from .datatypes import GameplayTag, QueueItem, QueueMode
from .internal import CapacityError, PriorityQueueInternal, validate_data

logger = logging.getLogger(__name__)

_INT32_MAX = 2**31 - 1


class QueueFullError(CapacityError):
    """Raised when the configured maximum queue size has been reached."""


class DuplicateItemError(ValueError):
    """Raised when an equal item is already queued and duplicates are ignored."""


class ItemQueue:
    """A queue of :class:`QueueItem` objects.

    In ``PRIORITY_ORDER`` mode items are ordered by their own priority
    (lowest first). In ``FIFO`` and ``FILO`` modes the queue overwrites each
    item's priority with a running counter so that items come out in arrival
    order or in reverse arrival order. A ``max_size`` of 0 means no limit
    beyond the internal queue's own capacity.
    """

    def __init__(
        self,
        mode: QueueMode = QueueMode.PRIORITY_ORDER,
        ignore_duplicates: bool = True,
        max_size: int = 0,
    ) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.mode = mode
        self.ignore_duplicates = ignore_duplicates
        self.max_size = max_size
        self._queue = PriorityQueueInternal()
        self._next_fifo = 0
        self._next_filo = _INT32_MAX

    def _reset_counters(self) -> None:
        self._next_fifo = 0
        self._next_filo = _INT32_MAX

    def reset(self) -> None:
        """Empty the queue and restart the FIFO/FILO counters."""
        self._queue.clear()
        self._reset_counters()
        logger.info("Queue initialised and counters reset.")

    def enqueue(self, item: QueueItem) -> None:
        """Add a copy of ``item`` to the queue.

        In FIFO and FILO modes the priority of ``item`` itself is updated to
        the value assigned by the queue.

        Raises :class:`QueueFullError` when ``max_size`` is reached,
        :class:`DuplicateItemError` when an equal item is queued and
        duplicates are ignored, and the internal queue's errors for invalid
        items or exhausted capacity.
        """
        if self.max_size > 0 and len(self._queue) >= self.max_size:
            raise QueueFullError(
                f"queue is full (max {self.max_size}); item '{item.name}' not enqueued"
            )
        if self.ignore_duplicates and self.contains(item):
            raise DuplicateItemError(
                f"item '{item.name}' is already queued and duplicates are ignored"
            )

        if self.mode is QueueMode.FIFO:
            item.priority = self._next_fifo
            self._next_fifo += 1
        elif self.mode is QueueMode.FILO:
            item.priority = self._next_filo
            self._next_filo -= 1

        stored = dataclasses.replace(item, is_enqueued=True)
        self._queue.enqueue(stored)
        logger.info(
            "Enqueued item '%s' with priority %d. Mode: %s.",
            item.name,
            item.priority,
            self.mode.name,
        )

    def dequeue(self) -> QueueItem:
        """Remove and return the next item; raise IndexError if empty."""
        item = self._queue.dequeue()
        result = dataclasses.replace(item, is_enqueued=False)
        logger.info(
            "Dequeued item '%s' with priority %d.", result.name, result.priority
        )
        return result

    def remove(self, item: QueueItem) -> None:
        """Remove the queued item equal to ``item``; raise ValueError if absent."""
        self._queue.remove(item)
        logger.info("Item '%s' removed from the queue.", item.name)

    def contains(self, item: QueueItem) -> bool:
        """Return True if an item equal to ``item`` is queued."""
        return self._queue.contains(item)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, QueueItem) and self.contains(item)

    def __len__(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        """Return True if no items are queued."""
        return self._queue.is_empty()

    def clear(self) -> None:
        """Remove all items and restart the FIFO/FILO counters."""
        self._queue.clear()
        self._reset_counters()
        logger.info("Queue emptied.")

    def num_open(self) -> int:
        """Return the number of queued items marked open."""
        return self._queue.count_open()

    def num_closed(self) -> int:
        """Return the number of queued items marked closed."""
        return self._queue.count_closed()

    def validate(self, item: QueueItem) -> bool:
        """Return True if ``item`` has a name and a valid trigger tag."""
        return validate_data(item)

    def find_by_task_id(self, task_id: uuid.UUID) -> QueueItem | None:
        """Return a copy of the item with ``task_id``, or None."""
        found = self._queue.find_by_task_id(task_id)
        return dataclasses.replace(found) if found is not None else None

    def find_by_hash_key(
        self, name: str, tag: GameplayTag, is_open: bool
    ) -> QueueItem | None:
        """Return a copy of the item matching name, tag and open state, or None."""
        found = self._queue.find_by_hash_key(name, tag, is_open)
        return dataclasses.replace(found) if found is not None else None