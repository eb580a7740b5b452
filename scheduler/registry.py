"""
Scheduler factory — maps policy names to scheduler classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
you have ONE place that knows how to create schedulers.

Every call returns a NEW instance. Policies keep per-run state, so two
simulations must never share one.
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.round_robin import RoundRobinScheduler
from scheduler.spn import SPNScheduler
from scheduler.srt import SRTScheduler
from scheduler.hrrn import HRRNScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.ROUND_ROBIN: RoundRobinScheduler,
    SchedulingPolicy.SPN: SPNScheduler,
    SchedulingPolicy.SRT: SRTScheduler,
    SchedulingPolicy.HRRN: HRRNScheduler,
}


def create_scheduler(policy: SchedulingPolicy, **kwargs) -> AbstractScheduler:
    """
    Create a scheduler instance for the given policy.

    For Round Robin, you can pass time_quantum as a kwarg:
        create_scheduler(SchedulingPolicy.ROUND_ROBIN, time_quantum=4)

    Other policies take no arguments; a time_quantum passed to them is ignored.
    """
    try:
        policy = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown scheduling policy: {policy}") from None

    cls = _REGISTRY[policy]

    if policy == SchedulingPolicy.ROUND_ROBIN:
        return cls(**kwargs)
    return cls()


def available_policies() -> list[str]:
    return [policy.value for policy in _REGISTRY]
