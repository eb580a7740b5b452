"""
Pydantic schemas for the /simulations endpoints.

These define the HTTP API contract, not the simulator's internal types:
- ProcessIn: one row of the submitted process table
- SimulationRequest: what the user sends (policy + table)
- SimulationResponse: timeline, per-process stats and run averages

FastAPI validates incoming data against these automatically.
If someone sends total_time_needed=0, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import SchedulingPolicy


class ProcessIn(BaseModel):
    """One process. Its position in the list is its identity and tie-break order."""

    start_time: int = Field(..., ge=0, description="Arrival tick")
    total_time_needed: int = Field(..., gt=0, description="Service ticks required")
    name: str = Field(default="", max_length=64)


class SimulationRequest(BaseModel):
    """Request body for POST /simulations/."""

    policy: SchedulingPolicy  # must be one of: round_robin, spn, srt, hrrn
    time_quantum: Optional[int] = Field(
        default=None,
        gt=0,
        description="Round Robin slice in ticks; ignored by other policies",
    )
    processes: list[ProcessIn] = Field(..., min_length=1)


class ProcessStatsOut(BaseModel):
    index: int
    name: str
    start_time: int
    service_time: int
    finish_time: int
    turnaround_time: int
    waiting_time: int
    normalized_turnaround: float

    model_config = {"from_attributes": True}


class SimulationResponse(BaseModel):
    """Response body for POST /simulations/."""

    policy: str
    time_quantum: Optional[int] = None
    timeline: list[Optional[int]]      # timeline[t] = index that ran at tick t, null = idle
    processes: list[ProcessStatsOut]
    total_ticks: int
    busy_ticks: int
    utilization: float
    avg_turnaround_time: float
    avg_waiting_time: float
    avg_normalized_turnaround: float
