"""
Highest Response Ratio Next (HRRN) scheduler — non-preemptive.

Response ratio = (waiting + service) / service

A process that has waited as long as its own service time has ratio 2.0,
so long processes age upward while they wait and can't starve the way
they can under SPN — but short processes still get a head start.

The ranking only happens when the running process finishes. Between
completions the head of the ready queue keeps the CPU, regardless of
what arrives.

Tie-break: equal ratios go to the smaller TABLE index.
"""

import logging
from typing import Optional

from models.process import Process
from scheduler.base import AbstractScheduler
from scheduler.metrics import response_ratio
from scheduler.ready_queue import ReadyQueue

logger = logging.getLogger(__name__)


class HRRNScheduler(AbstractScheduler):

    def __init__(self):
        self._ready = ReadyQueue()

    def select(self, current_time: int, processes: list[Process]) -> Optional[int]:
        self._ready.extend(self.arrivals(current_time, processes))

        head = self._ready.peek()
        if head is not None and processes[head].is_done:
            self._ready.pop_head()
            if self._ready:
                self._promote_highest_ratio(current_time, processes)

        return self._ready.peek()

    def _promote_highest_ratio(self, current_time: int, processes: list[Process]) -> None:
        candidates = list(self._ready)
        best_pos = min(
            range(len(candidates)),
            key=lambda pos: (-response_ratio(processes[candidates[pos]], current_time), candidates[pos]),
        )
        self._ready.swap_to_front(best_pos)
        logger.debug(f"t={current_time}: HRRN dispatches P{candidates[best_pos]}")

    @property
    def policy_name(self) -> str:
        return "hrrn"
