"""
CLI entry point for running a workload through one or all policies.

Usage:
    python -m scripts.run_simulation --input workloads/textbook.txt          # default policy
    python -m scripts.run_simulation --input workload.txt --policy srt
    python -m scripts.run_simulation --input workload.txt --policy all --quantum 4
    python -m scripts.run_simulation --input workload.txt --show-timeline

Workload format: see simulation/workload.py.
"""

import argparse
import logging
import sys

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.engine import SimulationEngine, SimulationLimitExceeded
from scheduler.registry import available_policies, create_scheduler
from simulation.report import format_schedule, format_stats_table, summarize
from simulation.workload import WorkloadError, load_workload

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Tick-driven CPU scheduling simulator")
    parser.add_argument(
        "--input", type=str, required=True,
        help="Workload file: one 'start need [name]' per line",
    )
    parser.add_argument(
        "--policy", type=str, default=settings.DEFAULT_SCHEDULING_POLICY,
        choices=available_policies() + ["all"],
        help=f"Which policy to run (default: {settings.DEFAULT_SCHEDULING_POLICY})",
    )
    parser.add_argument(
        "--quantum", type=int, default=settings.ROUND_ROBIN_TIME_QUANTUM,
        help=f"Round Robin time quantum in ticks (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--show-timeline", action="store_true",
        help="Print which process ran at every tick",
    )
    args = parser.parse_args(argv)

    try:
        processes = load_workload(args.input)
    except (OSError, WorkloadError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    policies = available_policies() if args.policy == "all" else [args.policy]

    summaries = []
    for name in policies:
        try:
            scheduler = create_scheduler(SchedulingPolicy(name), time_quantum=args.quantum)
            result = SimulationEngine(scheduler, processes).run()
        except (ValueError, SimulationLimitExceeded) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

        summary = summarize(result)
        summaries.append(summary)
        print(format_stats_table(summary))
        if args.show_timeline:
            print(format_schedule(result))
        print()

    # Summary table
    print("{:<12} {:>12} {:>10} {:>8} {:>12}".format(
        "Policy", "Turnaround", "Waiting", "Tr/Ts", "Utilization",
    ))
    print("-" * 58)
    for s in summaries:
        print("{:<12} {:>12.2f} {:>10.2f} {:>8.2f} {:>11.1%}".format(
            s.policy, s.avg_turnaround_time, s.avg_waiting_time,
            s.avg_normalized_turnaround, s.utilization,
        ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
