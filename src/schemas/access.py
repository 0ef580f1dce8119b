# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access control schemas for request/response validation."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import GateOutcome, GuardDecision, Role


class GuardResult(BaseModel):
    """Decision of a route guard."""

    model_config = ConfigDict(frozen=True)

    decision: GuardDecision
    redirect_target: str | None = None
    # Original path, so login can send the user back afterwards
    from_path: str | None = None


class PermissionCheckRequest(BaseModel):
    """Schema for checking a role/module/action triple."""

    # Plain strings: unknown values are denied, not rejected
    role: str | None = None
    module: str
    action: str


class RouteCheckRequest(BaseModel):
    """Schema for checking route access for a role."""

    role: str | None = None
    path: str


class AccessCheckResponse(BaseModel):
    """Yes/no access decision."""

    allowed: bool


class GuardRequest(BaseModel):
    """Schema for evaluating the route guard for the current identity."""

    path: str
    required_roles: list[str] = Field(default_factory=list)
    require_auth: bool = True


class GateRequest(BaseModel):
    """Schema for evaluating a permission gate for the current identity."""

    module: str | None = None
    action: str | None = None
    roles: list[str] = Field(default_factory=list)
    show_fallback: bool = True


class GateResponse(BaseModel):
    """What the gate renders."""

    outcome: GateOutcome


class RoleInfoSchema(BaseModel):
    """Schema representing a role and its landing page."""

    role: Role
    display_name: str
    default_route: str


class CurrentAccessSchema(BaseModel):
    """Access summary of the current identity."""

    user_id: str | None
    role: Role | None
    department: str | None = None
    display_name: str
    default_route: str
    permissions: dict[str, list[str]]
    routes: list[str]


class PolicySchema(BaseModel):
    """Full permission matrix and route table."""

    modules: dict[str, list[str]]
    matrix: dict[str, dict[str, dict[str, bool]]]
    routes: dict[str, list[str]]
