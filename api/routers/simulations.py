"""
Simulation endpoint.

POST /simulations/ → run one policy over the submitted process table

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Build a fresh scheduler + engine for this request
- Summarize the result and return it

Each request gets its own scheduler instance, so concurrent requests
never see each other's ready queues.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_settings
from api.schemas.simulation import ProcessStatsOut, SimulationRequest, SimulationResponse
from config.settings import Settings
from models.process import Process
from scheduler.engine import SimulationEngine, SimulationLimitExceeded
from scheduler.registry import create_scheduler
from simulation.report import summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResponse)
def run_simulation(
    request: SimulationRequest,
    settings: Settings = Depends(get_settings),
) -> SimulationResponse:
    """
    Run a whole simulation synchronously and return its statistics.

    Plain `def`: FastAPI runs it in the threadpool, off the event loop.
    """
    processes = [
        Process(start_time=p.start_time, total_time_needed=p.total_time_needed, name=p.name)
        for p in request.processes
    ]
    scheduler = create_scheduler(
        request.policy,
        time_quantum=request.time_quantum or settings.ROUND_ROBIN_TIME_QUANTUM,
    )
    engine = SimulationEngine(scheduler, processes, max_ticks=settings.MAX_SIMULATION_TICKS)

    try:
        result = engine.run()
    except SimulationLimitExceeded as e:
        logger.warning(f"Simulation rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    summary = summarize(result)
    return SimulationResponse(
        policy=result.policy,
        time_quantum=result.time_quantum,
        timeline=result.timeline,
        processes=[ProcessStatsOut.model_validate(s) for s in summary.process_stats],
        total_ticks=summary.total_ticks,
        busy_ticks=summary.busy_ticks,
        utilization=summary.utilization,
        avg_turnaround_time=summary.avg_turnaround_time,
        avg_waiting_time=summary.avg_waiting_time,
        avg_normalized_turnaround=summary.avg_normalized_turnaround,
    )
