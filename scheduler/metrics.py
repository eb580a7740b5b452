"""
Pure per-process computations shared by the policies.

- remaining_time:  SRT ranks by this
- waiting_time:    ticks spent arrived-but-not-running so far
- response_ratio:  HRRN ranks by this; 1.0 for a process that has not waited

None of these touch scheduler state, so they are safe to call from
anywhere (reports, tests, the API).
"""

from models.process import Process


def remaining_time(process: Process) -> int:
    return process.total_time_needed - process.time_scheduled


def waiting_time(process: Process, current_time: int) -> int:
    return current_time - process.start_time - process.time_scheduled


def response_ratio(process: Process, current_time: int) -> float:
    """(waiting + service) / service, as a float."""
    waiting = waiting_time(process, current_time)
    return (waiting + process.total_time_needed) / process.total_time_needed
