"""
Result objects produced by a finished simulation run.

SimulationResult is what SimulationEngine.run() returns. It keeps the raw
per-tick timeline so reports can be computed (and recomputed) later
without re-running the policy.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.process import Process


@dataclass
class SimulationResult:
    policy: str
    timeline: list[Optional[int]]          # timeline[t] = table index that ran at tick t, None = idle
    processes: list[Process]               # final state of the table (all done)
    time_quantum: Optional[int] = None     # only set for Round Robin

    @property
    def total_ticks(self) -> int:
        return len(self.timeline)

    @property
    def busy_ticks(self) -> int:
        return sum(1 for idx in self.timeline if idx is not None)


@dataclass
class ProcessStats:
    index: int
    name: str
    start_time: int
    service_time: int
    finish_time: int
    turnaround_time: int
    waiting_time: int
    normalized_turnaround: float


@dataclass
class RunSummary:
    policy: str
    process_stats: list[ProcessStats] = field(default_factory=list)
    total_ticks: int = 0
    busy_ticks: int = 0
    avg_turnaround_time: float = 0.0
    avg_waiting_time: float = 0.0
    avg_normalized_turnaround: float = 0.0

    @property
    def utilization(self) -> float:
        return self.busy_ticks / self.total_ticks if self.total_ticks else 0.0
