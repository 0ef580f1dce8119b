# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Immutable access policy built from the permission matrix and route table."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from src.models.enums import Role, parse_role
from src.rbac.permissions import MODULE_ACTIONS, PERMISSION_MATRIX
from src.rbac.routes import ROUTE_ACCESS, normalize_path


class AccessPolicyError(Exception):
    """Raised when policy configuration is structurally invalid."""


@dataclass(frozen=True)
class ConfigurationIssue:
    """A problem found while validating a policy."""

    kind: str
    message: str


def _key(value: object) -> str:
    if isinstance(value, Enum):
        return value.value
    return str(value)


@dataclass(frozen=True)
class AccessPolicy:
    """Role/module/action matrix plus route access table.

    Built once at startup and shared by reference. All nested containers are
    read-only proxies or frozensets, so a policy cannot be changed after
    construction.
    """

    matrix: Mapping[Role, Mapping[str, Mapping[str, bool]]]
    route_access: Mapping[str, frozenset[Role]]
    module_actions: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MODULE_ACTIONS
    )
    report_gaps: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", _freeze_matrix(self.matrix))
        object.__setattr__(self, "route_access", _freeze_routes(self.route_access))
        object.__setattr__(
            self,
            "module_actions",
            MappingProxyType(
                {_key(m): tuple(actions) for m, actions in self.module_actions.items()}
            ),
        )

    @classmethod
    def default(cls, report_gaps: bool = False) -> "AccessPolicy":
        """Build the hospital access policy."""
        return cls(
            matrix=PERMISSION_MATRIX,
            route_access=ROUTE_ACCESS,
            module_actions=MODULE_ACTIONS,
            report_gaps=report_gaps,
        )

    def validate(self) -> list[ConfigurationIssue]:
        """Report gaps and inconsistencies without raising.

        Every role must define every action of every module; anything the
        matrix defines beyond the known modules and actions, and any route
        entry that has no roles or can never match, is reported as well.
        """
        issues: list[ConfigurationIssue] = []

        for role in Role:
            modules = self.matrix.get(role)
            if modules is None:
                issues.append(
                    ConfigurationIssue("missing_role", f"No permissions for role '{role.value}'")
                )
                continue

            for module, actions in self.module_actions.items():
                granted = modules.get(module)
                if granted is None:
                    issues.append(
                        ConfigurationIssue(
                            "missing_module",
                            f"Role '{role.value}' has no entry for module '{module}'",
                        )
                    )
                    continue
                for action in actions:
                    if action not in granted:
                        issues.append(
                            ConfigurationIssue(
                                "missing_permission",
                                f"Missing {role.value}.{module}.{action}",
                            )
                        )
                for action in granted:
                    if action not in actions:
                        issues.append(
                            ConfigurationIssue(
                                "unknown_action",
                                f"Role '{role.value}' grants undefined action '{module}.{action}'",
                            )
                        )

            for module in modules:
                if module not in self.module_actions:
                    issues.append(
                        ConfigurationIssue(
                            "unknown_module",
                            f"Role '{role.value}' references undefined module '{module}'",
                        )
                    )

        for path, roles in self.route_access.items():
            if not path.startswith("/"):
                issues.append(
                    ConfigurationIssue("invalid_route", f"Route '{path}' is not an absolute path")
                )
            elif normalize_path(path) != path:
                issues.append(
                    ConfigurationIssue(
                        "unreachable_route",
                        f"Route '{path}' can never match a normalized path",
                    )
                )
            if not roles:
                issues.append(
                    ConfigurationIssue("empty_route", f"Route '{path}' allows no roles")
                )

        return issues


def _freeze_matrix(
    matrix: Mapping[object, Mapping[object, Mapping[str, object]]],
) -> Mapping[Role, Mapping[str, Mapping[str, bool]]]:
    frozen: dict[Role, Mapping[str, Mapping[str, bool]]] = {}
    for raw_role, modules in matrix.items():
        role = parse_role(raw_role)
        if role is None:
            raise AccessPolicyError(f"Unknown role in permission matrix: {raw_role!r}")

        frozen_modules: dict[str, Mapping[str, bool]] = {}
        for module, actions in modules.items():
            frozen_actions: dict[str, bool] = {}
            for action, allowed in actions.items():
                if not isinstance(allowed, bool):
                    raise AccessPolicyError(
                        f"Permission {role.value}.{_key(module)}.{action} must be a boolean, "
                        f"got {type(allowed).__name__}"
                    )
                frozen_actions[str(action)] = allowed
            frozen_modules[_key(module)] = MappingProxyType(frozen_actions)
        frozen[role] = MappingProxyType(frozen_modules)
    return MappingProxyType(frozen)


def _freeze_routes(
    routes: Mapping[str, Iterable[object]],
) -> Mapping[str, frozenset[Role]]:
    frozen: dict[str, frozenset[Role]] = {}
    for path, raw_roles in routes.items():
        roles = set()
        for raw_role in raw_roles:
            role = parse_role(raw_role)
            if role is None:
                raise AccessPolicyError(f"Unknown role {raw_role!r} for route '{path}'")
            roles.add(role)
        frozen[str(path)] = frozenset(roles)
    return MappingProxyType(frozen)
