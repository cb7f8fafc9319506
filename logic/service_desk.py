"""
Service desk module: a bounded customer queue served by priority.
Urgent customers are served first; customers of equal priority are served in arrival order.
"""

import logging

from data.models.customer import Customer
from flow.queue import EmptyQueueError, PriorityQueue

DEFAULT_MAX_SIZE = 10


class ServiceDesk:
    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        if max_size <= 0:
            logging.debug(f"Invalid desk size {max_size}; using default {DEFAULT_MAX_SIZE}")
            max_size = DEFAULT_MAX_SIZE
        self._max_size = max_size
        self._queue = PriorityQueue()

    @property
    def max_size(self) -> int:
        return self._max_size

    def add_new_customer(self, customer: Customer) -> bool:
        # Verify there is room in the service queue
        if len(self._queue) >= self._max_size:
            logging.error("Maximum Number of Customers in Queue.")
            return False
        self._queue.enqueue(customer, customer.priority)
        logging.info(f"Customer queued: {customer} - Priority: {customer.priority} - Size: {len(self._queue)}")
        return True

    def serve_customer(self) -> Customer | None:
        """Dequeue the next customer and log it; ``None`` when nobody is waiting."""
        try:
            customer = self._queue.dequeue()
        except EmptyQueueError:
            logging.error("No Customers in the queue")
            return None
        logging.info(f"Serving customer: {customer}")
        return customer

    def next_priority(self) -> int | float | None:
        return self._queue.peek_next_priority()

    def is_empty(self) -> bool:
        return self._queue.is_empty()

    def __len__(self) -> int:
        return len(self._queue)

    def __str__(self) -> str:
        return f"[size={len(self._queue)} max_size={self._max_size} => {self._queue}]"
