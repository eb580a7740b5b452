"""
Health check endpoint.

In production, load balancers and container orchestrators (k8s) use
health endpoints to decide if a service is ready to receive traffic.
The simulator has no backing services, so being able to answer is the check.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
