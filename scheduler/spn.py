"""
Shortest Process Next (SPN) scheduler — non-preemptive.

Whenever the CPU frees up, pick the arrived, unfinished process with the
smallest total_time_needed. Once picked, it runs to completion even if a
shorter process arrives in the meantime.

No ready queue is kept: a decision only happens when the current process
finishes, and at that moment a forward scan of the table is enough.
The scan uses strict `<`, so on equal service time the process earlier
in the table wins.

Downside: starvation — a long process may never run if short ones keep
arriving.
"""

import logging
from typing import Optional

from models.process import Process
from scheduler.base import AbstractScheduler

logger = logging.getLogger(__name__)


class SPNScheduler(AbstractScheduler):

    def __init__(self):
        self._running: Optional[int] = None

    def select(self, current_time: int, processes: list[Process]) -> Optional[int]:
        if self._running is None or processes[self._running].is_done:
            shortest: Optional[int] = None
            for i, p in enumerate(processes):
                if p.start_time > current_time or p.is_done:
                    continue
                if shortest is None or p.total_time_needed < processes[shortest].total_time_needed:
                    shortest = i

            if shortest is not None:
                logger.debug(f"t={current_time}: SPN dispatches P{shortest}")
                self._running = shortest

        # Keeps answering with the last process if nothing else qualifies;
        # the driver sees it is done and treats the tick as idle.
        return self._running

    @property
    def policy_name(self) -> str:
        return "spn"
