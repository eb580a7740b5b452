"""
Scheduler discovery endpoint.

GET /scheduler/policies → which policies exist and what the defaults are

Clients use this to build a policy picker without hardcoding names.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from api.schemas.scheduler import PolicyList
from config.settings import Settings
from scheduler.registry import available_policies

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/policies", response_model=PolicyList)
async def list_policies(settings: Settings = Depends(get_settings)) -> PolicyList:
    return PolicyList(
        policies=available_policies(),
        default_policy=settings.DEFAULT_SCHEDULING_POLICY,
        default_time_quantum=settings.ROUND_ROBIN_TIME_QUANTUM,
    )
