# The queue holds work waiting to be served, highest priority first.
# Larger priority values are served before smaller ones; equal priorities
# are served in arrival order.

import logging
from heapq import heappop, heappush
from typing import Any


class EmptyQueueError(IndexError):
    """Raised when reading from a queue that holds no entries."""

    def __init__(self, message: str = "The queue is empty."):
        super().__init__(message)


class PriorityQueue:
    """Max-priority queue with FIFO tie-breaking.

    ``enqueue(value, priority)`` never fails. ``dequeue()`` returns the value
    with the largest priority; among equal priorities the earliest enqueued
    value wins. Dequeue on an empty queue raises ``EmptyQueueError``.
    """

    def __init__(self):
        # Initialize the heap as an empty list
        self.heap = []
        # Initialize the sequence as 0
        self._sequence = 0
        # Tuple layout: [0]=negated priority, [1]=sequence, [2]=priority, [3]=value

    # Main Methods
    def enqueue(self, value: Any, priority: int | float = 0) -> None:
        self._sequence += 1
        # Negate so the min-heap surfaces the largest priority
        heappush(self.heap, (-priority, self._sequence, priority, value))
        logging.debug(f"Enqueued {value!r} with priority={priority} seq={self._sequence}")

    def dequeue(self) -> Any:
        if not self.heap:
            raise EmptyQueueError("Cannot dequeue from an empty queue.")
        _, sequence, priority, value = heappop(self.heap)
        logging.debug(f"Dequeued {value!r} with priority={priority} seq={sequence}")
        return value

    def peek(self) -> Any:
        # Returns the next value without removing it
        if not self.heap:
            raise EmptyQueueError("Cannot peek into an empty queue.")
        return self.heap[0][3]

    def peek_next_priority(self) -> int | float | None:
        return None if not self.heap else self.heap[0][2]

    # Observers
    def is_empty(self) -> bool:
        return not self.heap

    @property
    def length(self) -> int:
        return len(self.heap)

    def __len__(self) -> int:
        return len(self.heap)

    def __str__(self) -> str:
        # Arrival order, not service order
        entries = sorted(self.heap, key=lambda entry: entry[1])
        return "[" + ", ".join(f"{value} (Pri:{priority})" for _, _, priority, value in entries) + "]"
