"""
Shortest Remaining Time (SRT) scheduler — preemptive SPN.

Every tick, the ready process with the least remaining service
(total_time_needed - time_scheduled) is moved to the head of the ready
queue and runs. A newly arrived short process therefore preempts the
current one on the tick it arrives.

Tie-break: the smaller TABLE index wins, never the earlier queue
position — queue order gets shuffled by the swaps, table order doesn't.
"""

import logging
from typing import Optional

from models.process import Process
from scheduler.base import AbstractScheduler
from scheduler.metrics import remaining_time
from scheduler.ready_queue import ReadyQueue

logger = logging.getLogger(__name__)


class SRTScheduler(AbstractScheduler):

    def __init__(self):
        self._ready = ReadyQueue()

    def select(self, current_time: int, processes: list[Process]) -> Optional[int]:
        self._ready.extend(self.arrivals(current_time, processes))

        head = self._ready.peek()
        if head is not None and processes[head].is_done:
            self._ready.pop_head()

        if not self._ready:
            return None

        candidates = list(self._ready)
        best_pos = min(
            range(len(candidates)),
            key=lambda pos: (remaining_time(processes[candidates[pos]]), candidates[pos]),
        )
        self._ready.swap_to_front(best_pos)

        chosen = self._ready.peek()
        if chosen != head:
            logger.debug(f"t={current_time}: SRT switches to P{chosen}")
        return chosen

    @property
    def policy_name(self) -> str:
        return "srt"
