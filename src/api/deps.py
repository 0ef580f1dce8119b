# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status

from src.config import Settings, settings
from src.models.enums import Module, Role, parse_role
from src.models.identity import Identity
from src.rbac.policy import AccessPolicy
from src.services import authorization_service, identity_service


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def get_policy(request: Request) -> AccessPolicy:
    """Get the access policy loaded at startup."""
    policy = getattr(request.app.state, "access_policy", None)
    if policy is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Access policy not loaded",
        )
    return policy


def get_current_identity(
    request: Request,
    app_settings: Settings = Depends(get_settings),
) -> Identity:
    """Get the identity of the caller, anonymous if not logged in."""
    return identity_service.get_current_identity(request, app_settings)


def get_current_user_identity(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """Get the caller identity and verify it is authenticated with a known role."""
    if not identity.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    if identity.role is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown role",
        )
    return identity


def require_roles(*roles: Role | str):
    """Dependency that only lets the listed roles through."""
    allowed = {role for role in (parse_role(r) for r in roles) if role is not None}

    def dependency(
        identity: Identity = Depends(get_current_user_identity),
    ) -> Identity:
        if identity.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"User role '{identity.role.value}' is not authorized to access this route",
            )
        return identity

    return dependency


def require_admin(
    identity: Identity = Depends(require_roles(Role.ADMIN)),
) -> Identity:
    """Get current identity and verify it is an administrator."""
    return identity


def require_permission(module: Module | str, action: str):
    """Dependency for permission-based authorization."""
    module_name = module.value if isinstance(module, Module) else module

    def dependency(
        policy: AccessPolicy = Depends(get_policy),
        identity: Identity = Depends(get_current_user_identity),
    ) -> Identity:
        if not authorization_service.has_permission(
            policy, identity.role, module_name, action
        ):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {module_name}.{action}",
            )
        return identity

    return dependency


def require_resource_access(
    owner_param: str = "user_id",
    owner_department: Callable[[str], str | None] | None = None,
):
    """Dependency for access to a record owned by one employee.

    The owner id is read from the path parameters. The owner's department is
    looked up server-side through ``owner_department``; without a lookup,
    managers only reach their own records.
    """

    def dependency(
        request: Request,
        identity: Identity = Depends(get_current_user_identity),
    ) -> Identity:
        owner_id = request.path_params.get(owner_param)
        department = None
        if owner_department is not None and owner_id is not None:
            department = owner_department(str(owner_id))

        if not authorization_service.can_access_resource(
            identity, owner_id, department
        ):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized to access this resource",
            )
        return identity

    return dependency
