"""Helpers shared by the scheduler tests."""

from models.process import Process


def make_table(*specs) -> list[Process]:
    """make_table((0, 4), (1, 2)) → [P0(start=0, need=4), P1(start=1, need=2)]"""
    return [Process(start_time=start, total_time_needed=need) for start, need in specs]


def step(scheduler, processes, current_time):
    """
    One tick the way the driver does it: ask, then credit the tick.

    Returns what select() answered (even if it named a finished process).
    """
    idx = scheduler.select(current_time, processes)
    if idx is not None and not processes[idx].is_done:
        p = processes[idx]
        p.time_scheduled += 1
        if p.time_scheduled == p.total_time_needed:
            p.is_done = True
    return idx


def drive(scheduler, processes, ticks):
    """Run `ticks` ticks starting at 0 and return every select() answer."""
    return [step(scheduler, processes, t) for t in range(ticks)]
