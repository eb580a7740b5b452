"""
Run statistics — turns a SimulationResult into per-process and averaged numbers.

Per process:
- finish_time:            tick AFTER the last tick it ran (so a process running
                          only at tick 0 finishes at 1)
- turnaround_time:        finish_time - start_time
- waiting_time:           turnaround_time - service_time
- normalized_turnaround:  turnaround_time / service_time (1.0 = never waited)

Run level: the averages of the above, plus utilization = busy / total ticks.
"""

from models.result import ProcessStats, RunSummary, SimulationResult


def summarize(result: SimulationResult) -> RunSummary:
    last_tick: dict[int, int] = {}
    for t, idx in enumerate(result.timeline):
        if idx is not None:
            last_tick[idx] = t

    stats = []
    for i, p in enumerate(result.processes):
        if p.total_time_needed <= 0:
            continue  # never needed the CPU, nothing to report
        finish = last_tick[i] + 1
        turnaround = finish - p.start_time
        stats.append(ProcessStats(
            index=i,
            name=p.label(i),
            start_time=p.start_time,
            service_time=p.total_time_needed,
            finish_time=finish,
            turnaround_time=turnaround,
            waiting_time=turnaround - p.total_time_needed,
            normalized_turnaround=turnaround / p.total_time_needed,
        ))

    summary = RunSummary(
        policy=result.policy,
        process_stats=stats,
        total_ticks=result.total_ticks,
        busy_ticks=result.busy_ticks,
    )
    if stats:
        n = len(stats)
        summary.avg_turnaround_time = sum(s.turnaround_time for s in stats) / n
        summary.avg_waiting_time = sum(s.waiting_time for s in stats) / n
        summary.avg_normalized_turnaround = sum(s.normalized_turnaround for s in stats) / n
    return summary


def format_schedule(result: SimulationResult) -> str:
    """One line per tick, e.g. 't3: P1' or 't4: idle'."""
    lines = []
    for t, idx in enumerate(result.timeline):
        who = result.processes[idx].label(idx) if idx is not None else "idle"
        lines.append(f"t{t}: {who}")
    return "\n".join(lines)


def format_stats_table(summary: RunSummary) -> str:
    header = "{:<8} {:>6} {:>8} {:>7} {:>11} {:>8} {:>7}".format(
        "Process", "Start", "Service", "Finish", "Turnaround", "Waiting", "Tr/Ts",
    )
    lines = [f"=== {summary.policy} ===", header, "-" * len(header)]
    for s in summary.process_stats:
        lines.append("{:<8} {:>6} {:>8} {:>7} {:>11} {:>8} {:>7.2f}".format(
            s.name, s.start_time, s.service_time, s.finish_time,
            s.turnaround_time, s.waiting_time, s.normalized_turnaround,
        ))
    lines.append("-" * len(header))
    lines.append(
        f"avg turnaround {summary.avg_turnaround_time:.2f} | "
        f"avg waiting {summary.avg_waiting_time:.2f} | "
        f"avg Tr/Ts {summary.avg_normalized_turnaround:.2f} | "
        f"utilization {summary.utilization:.1%}"
    )
    return "\n".join(lines)
