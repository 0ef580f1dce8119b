# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access control models package."""

from src.models.enums import GateOutcome, GuardDecision, Module, Role, parse_role
from src.models.identity import Identity

__all__ = [
    "GateOutcome",
    "GuardDecision",
    "Identity",
    "Module",
    "Role",
    "parse_role",
]
