# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access control decision endpoints."""

from fastapi import APIRouter, Depends

from src.api.deps import (
    get_current_identity,
    get_current_user_identity,
    get_policy,
    require_permission,
)
from src.models.enums import Module, Role
from src.models.identity import Identity
from src.rbac.policy import AccessPolicy
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
from src.services import authorization_service

router = APIRouter()


@router.get("/me", response_model=CurrentAccessSchema, summary="Access summary of the current user")
def get_my_access(
    policy: AccessPolicy = Depends(get_policy),
    identity: Identity = Depends(get_current_user_identity),
):
    """Return role, landing page, granted permissions and reachable routes."""
    return CurrentAccessSchema(
        user_id=identity.user_id,
        role=identity.role,
        department=identity.department,
        display_name=authorization_service.get_role_display_name(identity.role),
        default_route=authorization_service.get_default_route(identity.role),
        permissions=authorization_service.get_role_permissions(policy, identity.role),
        routes=authorization_service.get_accessible_routes(policy, identity.role),
    )


@router.get("/roles", response_model=list[RoleInfoSchema], summary="List roles")
def list_roles():
    """List all roles with their display names and landing pages."""
    return [
        RoleInfoSchema(
            role=role,
            display_name=authorization_service.get_role_display_name(role),
            default_route=authorization_service.get_default_route(role),
        )
        for role in Role
    ]


@router.post("/permission-check", response_model=AccessCheckResponse, summary="Check a permission")
def check_permission(
    data: PermissionCheckRequest,
    policy: AccessPolicy = Depends(get_policy),
):
    """Check whether a role may perform an action on a module."""
    allowed = authorization_service.has_permission(
        policy, data.role, data.module, data.action
    )
    return AccessCheckResponse(allowed=allowed)


@router.post("/route-check", response_model=AccessCheckResponse, summary="Check route access")
def check_route(
    data: RouteCheckRequest,
    policy: AccessPolicy = Depends(get_policy),
):
    """Check whether a role may open a route."""
    allowed = authorization_service.can_access_route(policy, data.role, data.path)
    return AccessCheckResponse(allowed=allowed)


@router.post("/guard", response_model=GuardResult, summary="Evaluate the route guard")
def evaluate_guard(
    data: GuardRequest,
    policy: AccessPolicy = Depends(get_policy),
    identity: Identity = Depends(get_current_identity),
):
    """Evaluate the route guard for the current caller.

    Anonymous callers are allowed here; the decision tells them to log in.
    """
    return authorization_service.evaluate_route_guard(
        policy,
        identity,
        data.path,
        required_roles=data.required_roles,
        require_auth=data.require_auth,
    )


@router.post("/gate", response_model=GateResponse, summary="Evaluate a permission gate")
def evaluate_gate(
    data: GateRequest,
    policy: AccessPolicy = Depends(get_policy),
    identity: Identity = Depends(get_current_identity),
):
    """Decide whether a UI fragment renders for the current caller."""
    outcome = authorization_service.evaluate_permission_gate(
        policy,
        identity.role,
        module=data.module,
        action=data.action,
        roles=data.roles,
        show_fallback=data.show_fallback,
    )
    return GateResponse(outcome=outcome)


@router.get("/matrix", response_model=PolicySchema, summary="Get the full access policy")
def get_matrix(
    policy: AccessPolicy = Depends(get_policy),
    identity: Identity = Depends(require_permission(Module.SYSTEM, "settings")),
):
    """Return the permission matrix and route table.
    Requires system.settings permission.
    """
    return PolicySchema(
        modules={module: list(actions) for module, actions in policy.module_actions.items()},
        matrix={
            role.value: {
                module: dict(actions) for module, actions in modules.items()
            }
            for role, modules in policy.matrix.items()
        },
        routes={
            path: sorted(role.value for role in roles)
            for path, roles in policy.route_access.items()
        },
    )
