"""Bounded ring buffer that carries detection alerts to the decision stage."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

_UINT32_MAX = 0xFFFFFFFF
MIN_QUEUE_SIZE = 16384


@dataclass
class Alert:
    """A detection raised against one actor in one guild."""

    guild_id: int = 0
    actor_id: int = 0
    target_id: int = 0
    event_type: int = 0
    severity: int = 0
    panic_mode: int = 0
    flags: int = 0
    timestamp: int = 0


def next_power_of_two(n: int) -> int:
    """Round ``n`` up to a power of two with 32-bit wrap-around.

    Zero and values above 2**31 wrap to zero, as 32-bit arithmetic does.
    """
    if not 0 <= n <= _UINT32_MAX:
        raise ValueError(f"value out of 32-bit range: {n}")
    if n == 0:
        return 0
    return (1 << (n - 1).bit_length()) & _UINT32_MAX


class AlertQueue:
    """Fixed-capacity FIFO of alerts; one slot is always kept free."""

    def __init__(self, size: int) -> None:
        if not 0 <= size <= _UINT32_MAX:
            raise ValueError(f"queue size out of range: {size}")
        if size & (size - 1) & _UINT32_MAX:
            size = next_power_of_two(size)
        if size < MIN_QUEUE_SIZE:
            size = MIN_QUEUE_SIZE
        self._slots: list[Alert | None] = [None] * size
        self._mask = size - 1
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Number of slots; at most ``capacity - 1`` alerts fit at once."""
        return self._mask + 1

    def get(self) -> Alert:
        """Return a fresh, zeroed alert to be filled in and enqueued."""
        return Alert()

    def enqueue(self, alert: Alert) -> bool:
        """Store a copy of ``alert``; return False if the queue is full."""
        with self._lock:
            next_head = (self._head + 1) & self._mask
            if next_head == self._tail:
                return False
            self._slots[self._head] = replace(alert)
            self._head = next_head
            return True

    def dequeue(self) -> Alert | None:
        """Remove and return the oldest alert, or None if the queue is empty."""
        with self._lock:
            if self._tail == self._head:
                return None
            alert = self._slots[self._tail]
            self._slots[self._tail] = None
            self._tail = (self._tail + 1) & self._mask
            return alert

    def is_empty(self) -> bool:
        with self._lock:
            return self._head == self._tail

    def size(self) -> int:
        """Number of alerts waiting in the queue."""
        with self._lock:
            if self._head >= self._tail:
                return self._head - self._tail
            return self.capacity - (self._tail - self._head)

    def __len__(self) -> int:
        return self.size()