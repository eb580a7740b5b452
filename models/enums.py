"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("srt", not "SchedulingPolicy.SRT")
- They work as FastAPI request fields and argparse choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingPolicy(str, enum.Enum):
    ROUND_ROBIN = "round_robin"  # Round Robin — FIFO rotation every quantum
    SPN = "spn"                  # Shortest Process Next — non-preemptive, by total service
    SRT = "srt"                  # Shortest Remaining Time — preemptive, by remaining service
    HRRN = "hrrn"                # Highest Response Ratio Next — non-preemptive, by (wait + service) / service
