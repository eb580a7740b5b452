"""
Process — one row of the process table.

The table is a plain list[Process]. A process has no ID of its own:
its index in the table is its identity everywhere (timelines, ready
queues, tie-breaks). Earlier in the table wins a tie.

Ownership:
- The driver (scheduler/engine.py) creates the table and is the ONLY
  writer of time_scheduled and is_done. It updates both after every tick.
- Schedulers only read. They never mutate a Process.
"""

from dataclasses import dataclass


@dataclass
class Process:
    start_time: int            # arrival tick
    total_time_needed: int     # service ticks required
    time_scheduled: int = 0    # ticks serviced so far
    is_done: bool = False      # set by the driver once time_scheduled == total_time_needed
    name: str = ""             # display label only, never used for ordering

    def label(self, index: int) -> str:
        """Name used in reports — falls back to P<index>."""
        return self.name or f"P{index}"
