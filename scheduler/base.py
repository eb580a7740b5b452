"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code
that uses them. The SimulationEngine only knows about AbstractScheduler —
it calls select() once per tick without caring whether it's Round Robin,
SRT, etc.

To add a new scheduling policy:
1. Create a new class that inherits AbstractScheduler
2. Implement select() and policy_name
3. Register it in scheduler/registry.py

Every policy instance owns its own tick-persistent state (a ready queue,
a slice countdown, the currently running index). That state must survive
across select() calls for one run, and must NOT be shared between runs —
so create a fresh instance per simulation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.process import Process


class AbstractScheduler(ABC):
    """
    Interface that all scheduling policies implement.

    The whole contract is one decision per tick:
    - select: which table index runs during `current_time`, or None for idle

    The driver guarantees:
    - current_time strictly increases by one between calls
    - time_scheduled / is_done are up to date before each call
    """

    @abstractmethod
    def select(self, current_time: int, processes: list[Process]) -> Optional[int]:
        """Return the index of the process to run this tick, or None if the CPU idles."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'round_robin', 'srt')."""
        ...

    @staticmethod
    def arrivals(current_time: int, processes: list[Process]) -> list[int]:
        """Indices of processes whose start_time is exactly this tick, in table order."""
        return [i for i, p in enumerate(processes) if p.start_time == current_time]
