# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization decisions: permissions, route access, guards and gates.

Every function here is pure with respect to the policy it is given and never
raises on bad input. Anything that cannot be resolved is denied.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from src.models.enums import GateOutcome, GuardDecision, Role, parse_role
from src.models.identity import Identity
from src.rbac.policy import AccessPolicy
from src.rbac.routes import (
    DEFAULT_ROUTES,
    LOGIN_ROUTE,
    ROLE_DISPLAY_NAMES,
    normalize_path,
)
from src.schemas.access import GuardResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _name(value: object) -> str | None:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    return None


def _role_list(roles: Iterable[Role | str] | Role | str | None) -> list[object]:
    if roles is None:
        return []
    if isinstance(roles, str):
        return [roles]
    return list(roles)


def _parse_roles(roles: Iterable[object] | None) -> set[Role]:
    if not roles:
        return set()
    return {role for role in (parse_role(r) for r in roles) if role is not None}


def has_permission(
    policy: AccessPolicy, role: Role | str | None, module: object, action: object
) -> bool:
    """Check whether a role may perform an action on a module."""
    parsed_role = parse_role(role)
    module_key = _name(module)
    action_key = _name(action)
    if parsed_role is None or module_key is None or action_key is None:
        return False

    actions = policy.matrix.get(parsed_role, {}).get(module_key)
    if actions is None or action_key not in actions:
        if policy.report_gaps:
            logger.warning(
                f"Permission matrix has no entry for "
                f"{parsed_role.value}.{module_key}.{action_key}"
            )
        return False

    return actions[action_key] is True


def can_access_route(
    policy: AccessPolicy, role: Role | str | None, path: object
) -> bool:
    """Check route access using the longest matching route prefix.

    The full path is tried first, then one trailing segment is dropped at a
    time. The first prefix with a table entry decides.
    """
    parsed_role = parse_role(role)
    if parsed_role is None:
        return False

    normalized = normalize_path(path)
    if normalized is None:
        return False

    segments = normalized.strip("/").split("/")
    for length in range(len(segments), 0, -1):
        prefix = "/" + "/".join(segments[:length])
        allowed = policy.route_access.get(prefix)
        if allowed is not None:
            return parsed_role in allowed

    return False


def get_default_route(role: Role | str | None) -> str:
    """Landing page for a role, or the login page for none/unknown."""
    parsed_role = parse_role(role)
    if parsed_role is None:
        return LOGIN_ROUTE
    return DEFAULT_ROUTES.get(parsed_role, LOGIN_ROUTE)


def get_role_display_name(role: Role | str | None) -> str:
    """Human readable name for a role."""
    parsed_role = parse_role(role)
    if parsed_role is None:
        return "Unknown"
    return ROLE_DISPLAY_NAMES.get(parsed_role, "Unknown")


def is_admin(role: Role | str | None) -> bool:
    return parse_role(role) is Role.ADMIN


def is_hr(role: Role | str | None) -> bool:
    return parse_role(role) is Role.HR


def is_manager(role: Role | str | None) -> bool:
    return parse_role(role) is Role.MANAGER


def is_employee(role: Role | str | None) -> bool:
    return parse_role(role) is Role.EMPLOYEE


def evaluate_route_guard(
    policy: AccessPolicy,
    identity: Identity | None,
    current_path: str,
    required_roles: Iterable[Role | str] | Role | str | None = None,
    require_auth: bool = True,
) -> GuardResult:
    """Decide whether a protected view may render.

    Checks run in a fixed order and the first failing one wins:
    authentication, then the required roles, then the route table.
    Nothing is cached between calls.
    """
    if identity is None:
        identity = Identity.anonymous()
    role = parse_role(identity.role)

    if require_auth and not identity.is_authenticated:
        logger.debug(f"Guard: unauthenticated access to {current_path!r}")
        return GuardResult(
            decision=GuardDecision.REDIRECT_LOGIN,
            redirect_target=LOGIN_ROUTE,
            from_path=current_path if isinstance(current_path, str) else None,
        )

    required = _role_list(required_roles)
    if required and (role is None or role not in _parse_roles(required)):
        target = get_default_route(role)
        logger.debug(f"Guard: role {role} not in required roles, redirecting to {target}")
        return GuardResult(
            decision=GuardDecision.REDIRECT_ROLE_HOME, redirect_target=target
        )

    if identity.is_authenticated and not can_access_route(policy, role, current_path):
        target = get_default_route(role)
        logger.debug(f"Guard: role {role} denied {current_path!r}, redirecting to {target}")
        return GuardResult(
            decision=GuardDecision.REDIRECT_ROLE_HOME, redirect_target=target
        )

    return GuardResult(decision=GuardDecision.AUTHORIZED)


def evaluate_permission_gate(
    policy: AccessPolicy,
    role: Role | str | None,
    module: object = None,
    action: object = None,
    roles: Iterable[Role | str] | Role | str | None = None,
    show_fallback: bool = True,
) -> GateOutcome:
    """Decide what a permission gate renders.

    A non-empty roles allow-list is checked first and short-circuits. The
    module/action check only applies when both are given.
    """
    denied = GateOutcome.FALLBACK if show_fallback else GateOutcome.NOTHING

    allow_list = _role_list(roles)
    if allow_list:
        parsed_role = parse_role(role)
        if parsed_role is None or parsed_role not in _parse_roles(allow_list):
            return denied

    if module and action:
        if not has_permission(policy, role, module, action):
            return denied

    return GateOutcome.CHILDREN


def permission_gate(
    policy: AccessPolicy,
    role: Role | str | None,
    children: T,
    *,
    module: object = None,
    action: object = None,
    roles: Iterable[Role | str] | Role | str | None = None,
    fallback: T | None = None,
    show_fallback: bool = True,
) -> T | None:
    """Return children, the fallback, or None according to the gate."""
    outcome = evaluate_permission_gate(
        policy, role, module=module, action=action, roles=roles, show_fallback=show_fallback
    )
    if outcome is GateOutcome.CHILDREN:
        return children
    if outcome is GateOutcome.FALLBACK:
        return fallback
    return None


def get_role_permissions(
    policy: AccessPolicy, role: Role | str | None
) -> dict[str, list[str]]:
    """Granted actions of a role, grouped by module."""
    parsed_role = parse_role(role)
    if parsed_role is None:
        return {}

    result: dict[str, list[str]] = {}
    for module, actions in policy.matrix.get(parsed_role, {}).items():
        order = policy.module_actions.get(module, ())
        granted = [action for action, allowed in actions.items() if allowed is True]
        granted.sort(key=lambda a: order.index(a) if a in order else len(order))
        result[module] = granted
    return result


def get_accessible_routes(policy: AccessPolicy, role: Role | str | None) -> list[str]:
    """Route table entries a role may open, sorted."""
    parsed_role = parse_role(role)
    if parsed_role is None:
        return []
    return sorted(
        path for path, allowed in policy.route_access.items() if parsed_role in allowed
    )


def can_access_resource(
    identity: Identity | None,
    owner_id: object,
    owner_department: str | None = None,
) -> bool:
    """Check access to a record owned by a single employee.

    Admin and HR see every record, a manager sees records of their own
    department, everyone sees their own record.
    """
    if identity is None or not identity.is_authenticated:
        return False

    role = parse_role(identity.role)
    if role is None:
        return False

    if role in (Role.ADMIN, Role.HR):
        return True

    if (
        role is Role.MANAGER
        and owner_department
        and identity.department
        and owner_department == identity.department
    ):
        return True

    if identity.user_id is None or owner_id is None:
        return False
    return str(owner_id) == identity.user_id
