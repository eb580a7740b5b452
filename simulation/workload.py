"""
Workload files — plain-text process tables.

Format, one process per line, in table order:

    # start  need  [name]
    0 3 A
    2,6,B
    4 4

Fields are separated by whitespace or commas. Blank lines and lines
starting with '#' are skipped. The order of lines is the order of the
table, and therefore the tie-break order.
"""

import logging
import re
from pathlib import Path
from typing import Union

from models.process import Process

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[,\s]+")


class WorkloadError(ValueError):
    """A workload line could not be turned into a Process."""


def parse_workload(text: str) -> list[Process]:
    processes = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        processes.append(_parse_line(line, line_no))
    return processes


def load_workload(path: Union[str, Path]) -> list[Process]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise WorkloadError(f"{path}: not valid UTF-8") from None
    processes = parse_workload(text)
    logger.info(f"Loaded {len(processes)} processes from {path}")
    return processes


def _parse_line(line: str, line_no: int) -> Process:
    parts = [part for part in _SEPARATOR.split(line) if part]
    if len(parts) not in (2, 3):
        raise WorkloadError(
            f"line {line_no}: expected 'start need [name]', got {line!r}"
        )

    try:
        start_time, total_time_needed = int(parts[0]), int(parts[1])
    except ValueError:
        raise WorkloadError(f"line {line_no}: start and need must be integers") from None

    if start_time < 0:
        raise WorkloadError(f"line {line_no}: start time must be >= 0, got {start_time}")
    if total_time_needed <= 0:
        raise WorkloadError(f"line {line_no}: service time must be > 0, got {total_time_needed}")

    name = parts[2] if len(parts) == 3 else ""
    return Process(start_time=start_time, total_time_needed=total_time_needed, name=name)
