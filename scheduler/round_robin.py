"""
Round Robin scheduler.

Each process gets a fixed time quantum (e.g., 2 ticks). When the slice
runs out and the process isn't done, it moves to the back of the queue
and the next process runs.

Data structure: ReadyQueue (deque)
- arrival:  append to tail        → O(1)
- rotation: head moves to tail    → O(1)  ← this is the key difference from FCFS
- finish:   head is popped        → O(1)

State carried between ticks:
- the ready queue itself
- a countdown of ticks left in the current slice

Tradeoff: the quantum controls fairness vs. switching:
- Small quantum (1 tick): very fair, switches every tick
- Large quantum: approaches FCFS behavior
"""

import logging
from typing import Optional

from config.settings import settings
from models.process import Process
from scheduler.base import AbstractScheduler
from scheduler.ready_queue import ReadyQueue

logger = logging.getLogger(__name__)


class RoundRobinScheduler(AbstractScheduler):

    def __init__(self, time_quantum: Optional[int] = None):
        if time_quantum is None:
            time_quantum = settings.ROUND_ROBIN_TIME_QUANTUM
        if time_quantum <= 0:
            raise ValueError(f"time_quantum must be positive, got {time_quantum}")
        self.time_quantum = time_quantum
        self._ready = ReadyQueue()
        self._ticks_left: int = time_quantum

    def select(self, current_time: int, processes: list[Process]) -> Optional[int]:
        self._ready.extend(self.arrivals(current_time, processes))

        head = self._ready.peek()
        if self._ticks_left == 0 or (head is not None and processes[head].is_done):
            # Take the head off the processor. An empty queue has nothing to retire.
            if head is not None:
                if processes[head].is_done:
                    self._ready.pop_head()
                else:
                    self._ready.rotate_head()
                    logger.debug(f"t={current_time}: quantum expired, P{head} rotated to tail")
            self._ticks_left = self.time_quantum

        head = self._ready.peek()
        if head is None:
            # Idle: force a re-check on the very next tick
            self._ticks_left = 0
            return None

        self._ticks_left -= 1
        return head

    @property
    def policy_name(self) -> str:
        return "round_robin"
