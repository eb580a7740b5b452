"""
Simulation engine — the tick-by-tick driver.

The policies only DECIDE. This loop does everything around them:

    1. Ask the policy: which process runs during tick t?
    2. Credit the tick: time_scheduled += 1 on the chosen process
    3. Flip is_done exactly when time_scheduled reaches total_time_needed
    4. Record the decision in the timeline, advance t

It stops as soon as every process is done. The engine never hands the
caller's Process objects to the policy — it works on deep copies, so the
same workload can be run under every policy.

           process table              policy               timeline
    ┌───────────────────┐     ┌──────────────────┐     ┌─────────────┐
    │ start / need /    │────>│ RR / SPN / SRT / │────>│ t0 → 0      │
    │ scheduled / done  │<────│ HRRN .select()   │     │ t1 → None   │
    └───────────────────┘creds└──────────────────┘     └─────────────┘
"""

import copy
import logging
from typing import Optional

from config.settings import settings
from models.process import Process
from models.result import SimulationResult
from scheduler.base import AbstractScheduler

logger = logging.getLogger(__name__)


class SimulationLimitExceeded(RuntimeError):
    """The run needed more ticks than the engine is allowed to spend."""


class SimulationEngine:

    def __init__(
        self,
        scheduler: AbstractScheduler,
        processes: list[Process],
        max_ticks: Optional[int] = None,
    ):
        self._scheduler = scheduler
        self._processes = [copy.deepcopy(p) for p in processes]
        self._max_ticks = max_ticks if max_ticks is not None else settings.MAX_SIMULATION_TICKS

    def run(self) -> SimulationResult:
        """Drive the policy until every process is done."""
        processes = self._processes
        for p in processes:
            if p.total_time_needed <= 0:
                p.is_done = True

        logger.info(
            f"Simulation started: policy={self._scheduler.policy_name}, "
            f"processes={len(processes)}"
        )

        timeline: list[Optional[int]] = []
        current_time = 0
        while not all(p.is_done for p in processes):
            if current_time >= self._max_ticks:
                raise SimulationLimitExceeded(
                    f"{self._scheduler.policy_name} did not finish within {self._max_ticks} ticks"
                )
            timeline.append(self._tick(current_time))
            current_time += 1

        logger.info(
            f"Simulation finished: policy={self._scheduler.policy_name}, "
            f"ticks={len(timeline)}"
        )
        return SimulationResult(
            policy=self._scheduler.policy_name,
            timeline=timeline,
            processes=processes,
            time_quantum=getattr(self._scheduler, "time_quantum", None),
        )

    def _tick(self, current_time: int) -> Optional[int]:
        """One decision + one tick of service. Returns what actually ran."""
        processes = self._processes
        idx = self._scheduler.select(current_time, processes)

        # A policy may keep naming a finished process (SPN does between
        # completions and arrivals); nothing runs in that case.
        if idx is None or processes[idx].is_done:
            return None

        process = processes[idx]
        process.time_scheduled += 1
        if process.time_scheduled == process.total_time_needed:
            process.is_done = True
            logger.debug(f"t={current_time}: {process.label(idx)} completed")
        return idx
