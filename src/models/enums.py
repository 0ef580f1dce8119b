# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for the access control model."""

from enum import Enum


class Role(str, Enum):
    """Access level of an authenticated identity."""

    ADMIN = "admin"
    HR = "hr"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class Module(str, Enum):
    """Resource category subject to permission checks."""

    EMPLOYEES = "employees"
    USERS = "users"
    ATTENDANCE = "attendance"
    LEAVES = "leaves"
    PAYROLL = "payroll"
    REPORTS = "reports"
    SYSTEM = "system"


class GuardDecision(str, Enum):
    """Outcome of a route guard evaluation.

    Evaluation order:
        not authenticated       → REDIRECT_LOGIN
        role not in required    → REDIRECT_ROLE_HOME
        route table denies      → REDIRECT_ROLE_HOME
        otherwise               → AUTHORIZED
    """

    AUTHORIZED = "authorized"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_ROLE_HOME = "redirect_role_home"


class GateOutcome(str, Enum):
    """What a permission gate renders."""

    CHILDREN = "children"
    FALLBACK = "fallback"
    NOTHING = "nothing"


def parse_role(value: object) -> Role | None:
    """Coerce a raw role value into a Role.

    Unknown values, non-strings and None all map to None so that a corrupted
    role is treated exactly like a missing one.
    """
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Role(value.strip().lower())
    except ValueError:
        return None
