"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Logs the active configuration on startup
3. Registers all routers (simulations, scheduler, health)

The simulator is stateless between requests — every POST /simulations/
builds its own scheduler instance — so there is nothing to connect to
on startup and nothing to close on shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
   or:  python -m api.main   (host/port from settings)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from api.routers import simulations, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs on startup (before yield) and shutdown (after yield)."""
    logger.info(
        f"API ready — default policy: {settings.DEFAULT_SCHEDULING_POLICY}, "
        f"quantum: {settings.ROUND_ROBIN_TIME_QUANTUM}"
    )

    yield

    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="CPU Scheduling Simulator",
        description="Tick-driven CPU scheduling simulator (Round Robin, SPN, SRT, HRRN)",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(scheduler.router)
    app.include_router(simulations.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
