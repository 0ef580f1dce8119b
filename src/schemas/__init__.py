"""Pydantic schemas package."""
from src.schemas.access import (
    AccessCheckResponse,
    CurrentAccessSchema,
    GateRequest,
    GateResponse,
    GuardRequest,
    GuardResult,
    PermissionCheckRequest,
    PolicySchema,
    RoleInfoSchema,
    RouteCheckRequest,
)
from src.schemas.common import HealthResponse

__all__ = [
    "AccessCheckResponse",
    "CurrentAccessSchema",
    "GateRequest",
    "GateResponse",
    "GuardRequest",
    "GuardResult",
    "HealthResponse",
    "PermissionCheckRequest",
    "PolicySchema",
    "RoleInfoSchema",
    "RouteCheckRequest",
]
