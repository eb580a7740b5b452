"""Tests for the scheduler factory."""

import pytest

from models.enums import SchedulingPolicy
from scheduler.hrrn import HRRNScheduler
from scheduler.registry import available_policies, create_scheduler
from scheduler.round_robin import RoundRobinScheduler
from scheduler.spn import SPNScheduler
from scheduler.srt import SRTScheduler


@pytest.mark.parametrize("policy, cls", [
    (SchedulingPolicy.ROUND_ROBIN, RoundRobinScheduler),
    (SchedulingPolicy.SPN, SPNScheduler),
    (SchedulingPolicy.SRT, SRTScheduler),
    (SchedulingPolicy.HRRN, HRRNScheduler),
])
def test_creates_matching_class(policy, cls):
    scheduler = create_scheduler(policy)
    assert isinstance(scheduler, cls)
    assert scheduler.policy_name == policy.value


def test_round_robin_receives_quantum():
    scheduler = create_scheduler(SchedulingPolicy.ROUND_ROBIN, time_quantum=5)
    assert scheduler.time_quantum == 5


def test_quantum_is_ignored_by_other_policies():
    assert isinstance(create_scheduler(SchedulingPolicy.SRT, time_quantum=5), SRTScheduler)


def test_accepts_plain_string():
    assert isinstance(create_scheduler("hrrn"), HRRNScheduler)


def test_unknown_policy_raises():
    with pytest.raises(ValueError, match="Unknown scheduling policy"):
        create_scheduler("lottery")


def test_every_call_returns_a_fresh_instance():
    assert create_scheduler(SchedulingPolicy.SRT) is not create_scheduler(SchedulingPolicy.SRT)


def test_available_policies():
    assert available_policies() == ["round_robin", "spn", "srt", "hrrn"]
