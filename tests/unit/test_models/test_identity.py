# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for role parsing and identities."""

import dataclasses

import pytest

from src.models import Identity, Role, parse_role


class TestParseRole:
    """Tests for parse_role."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("admin", Role.ADMIN),
            ("HR", Role.HR),
            ("  manager ", Role.MANAGER),
            (Role.EMPLOYEE, Role.EMPLOYEE),
        ],
    )
    def test_known_roles(self, raw, expected):
        assert parse_role(raw) is expected

    @pytest.mark.parametrize("raw", ["superadmin", "", None, 1, ["admin"]])
    def test_unknown_roles_map_to_none(self, raw):
        assert parse_role(raw) is None


class TestIdentity:
    """Tests for the Identity value object."""

    def test_anonymous(self):
        identity = Identity.anonymous()
        assert identity.is_authenticated is False
        assert identity.role is None
        assert identity.user_id is None

    def test_from_claims(self):
        identity = Identity.from_claims("EMP042", "manager", "Radiology")
        assert identity == Identity(
            role=Role.MANAGER,
            is_authenticated=True,
            user_id="EMP042",
            department="Radiology",
        )

    def test_from_claims_unknown_role_keeps_authentication(self):
        identity = Identity.from_claims("EMP042", "janitor")
        assert identity.is_authenticated is True
        assert identity.role is None

    def test_from_claims_without_user_is_anonymous(self):
        assert Identity.from_claims(None, "admin") == Identity.anonymous()
        assert Identity.from_claims("", "admin") == Identity.anonymous()

    def test_identity_is_immutable(self):
        identity = Identity.from_claims("EMP042", "employee")
        with pytest.raises(dataclasses.FrozenInstanceError):
            identity.role = Role.ADMIN
