"""
Tests for SPN (Shortest Process Next) scheduler.

SPN picks the shortest total service when the CPU frees up and then
never preempts. Ties go to the process earlier in the table.
"""

from scheduler.spn import SPNScheduler
from tests.helpers import drive, make_table, step


def test_non_preemptive_even_when_shorter_arrives():
    """P0(0,5) keeps the CPU although P1(1,1) is shorter."""
    scheduler = SPNScheduler()
    processes = make_table((0, 5), (1, 1))

    assert drive(scheduler, processes, 6) == [0, 0, 0, 0, 0, 1]


def test_picks_shortest_among_waiting():
    scheduler = SPNScheduler()
    processes = make_table((0, 3), (1, 5), (2, 1))

    assert drive(scheduler, processes, 9) == [0, 0, 0, 2, 1, 1, 1, 1, 1]


def test_equal_service_goes_to_earlier_table_entry():
    scheduler = SPNScheduler()
    processes = make_table((0, 2), (0, 2))

    assert drive(scheduler, processes, 4) == [0, 0, 1, 1]


def test_textbook_workload(textbook_workload):
    scheduler = SPNScheduler()
    timeline = drive(scheduler, textbook_workload, 20)

    # A 0-3, B 3-9, E 9-11, C 11-15, D 15-20
    assert timeline == [0] * 3 + [1] * 6 + [4] * 2 + [2] * 4 + [3] * 5


def test_idle_before_first_arrival():
    scheduler = SPNScheduler()
    processes = make_table((2, 1))

    assert scheduler.select(0, processes) is None
    assert scheduler.select(1, processes) is None
    assert scheduler.select(2, processes) == 0


def test_keeps_naming_finished_process_until_another_qualifies():
    """The driver treats this as an idle tick."""
    scheduler = SPNScheduler()
    processes = make_table((0, 1), (3, 1))

    assert step(scheduler, processes, 0) == 0
    assert processes[0].is_done
    assert scheduler.select(1, processes) == 0
    assert scheduler.select(3, processes) == 1


def test_policy_name():
    assert SPNScheduler().policy_name == "spn"
