"""Tests for the workload file parser."""

import pytest

from simulation.workload import WorkloadError, load_workload, parse_workload


def test_parses_whitespace_and_commas():
    processes = parse_workload("0 3 A\n2,6,B\n4\t4\n")

    assert [(p.start_time, p.total_time_needed, p.name) for p in processes] == [
        (0, 3, "A"), (2, 6, "B"), (4, 4, ""),
    ]


def test_skips_comments_and_blank_lines():
    processes = parse_workload("# start need\n\n0 1\n   \n# trailing\n")
    assert len(processes) == 1


def test_fresh_processes_are_not_started():
    p = parse_workload("0 2")[0]
    assert p.time_scheduled == 0
    assert p.is_done is False


@pytest.mark.parametrize("text, message", [
    ("0", "expected"),
    ("0 1 a b", "expected"),
    ("x 1", "integers"),
    ("-1 2", "start time"),
    ("0 0", "service time"),
])
def test_rejects_malformed_lines(text, message):
    with pytest.raises(WorkloadError, match=message):
        parse_workload(text)


def test_error_names_the_line():
    with pytest.raises(WorkloadError, match="line 3"):
        parse_workload("0 1\n# ok\nbad line here too\n")


def test_load_workload_reads_file(tmp_path):
    path = tmp_path / "workload.txt"
    path.write_text("0 4\n1 2\n", encoding="utf-8")

    processes = load_workload(path)
    assert [p.total_time_needed for p in processes] == [4, 2]


def test_load_workload_rejects_non_utf8(tmp_path):
    path = tmp_path / "workload.txt"
    path.write_bytes(b"\xff 1\n")

    with pytest.raises(WorkloadError, match="not valid UTF-8"):
        load_workload(path)
