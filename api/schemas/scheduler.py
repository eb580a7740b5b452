"""
Pydantic schemas for the /scheduler endpoints.

PolicyList: response listing every registered policy and the configured defaults.
"""

from pydantic import BaseModel


class PolicyList(BaseModel):
    """Response body for GET /scheduler/policies."""

    policies: list[str]
    default_policy: str
    default_time_quantum: int   # ticks per slice, used when a Round Robin request omits it
