"""
Ready queue — the ordered collection of table indices a policy may schedule.

Backed by collections.deque:
- extend:       push to right  → O(1) per index
- pop_head:     pop from left  → O(1)
- rotate_head:  head to tail   → O(1)
- swap_to_front: index swap    → O(n) worst case (deque indexing)

peek() is total: an empty queue returns None instead of raising. Every
policy inspects the head before it knows whether anything has arrived
yet, so "nothing at the head" has to be an ordinary answer.
"""

from collections import deque
from typing import Iterator, Optional


class ReadyQueue:

    def __init__(self):
        self._queue: deque[int] = deque()

    def extend(self, indices: list[int]) -> None:
        self._queue.extend(indices)

    def peek(self) -> Optional[int]:
        return self._queue[0] if self._queue else None

    def pop_head(self) -> Optional[int]:
        return self._queue.popleft() if self._queue else None

    def rotate_head(self) -> Optional[int]:
        """Move the head to the tail. Returns the moved index, or None if empty."""
        if not self._queue:
            return None
        self._queue.rotate(-1)
        return self._queue[-1]

    def swap_to_front(self, position: int) -> None:
        """Swap the entry at `position` with the head (the rest keep their places)."""
        if position:
            q = self._queue
            q[0], q[position] = q[position], q[0]

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __iter__(self) -> Iterator[int]:
        return iter(self._queue)

    def __repr__(self) -> str:
        return f"ReadyQueue({list(self._queue)})"
