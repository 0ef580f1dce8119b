# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for identity_service."""

from starlette.requests import Request

from src.config import Settings
from src.models import Identity, Role
from src.services import identity_service


def make_request(headers: dict | None = None) -> Request:
    """Build a bare ASGI request with the given headers."""
    raw_headers = [
        (key.lower().encode("latin-1"), value.encode("latin-1"))
        for key, value in (headers or {}).items()
    ]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw_headers})


def test_headers_build_identity():
    request = make_request(
        {"X-User-Id": "EMP007", "X-User-Role": "Manager", "X-User-Department": "ICU"}
    )
    identity = identity_service.get_current_identity(request, Settings())
    assert identity == Identity(
        role=Role.MANAGER, is_authenticated=True, user_id="EMP007", department="ICU"
    )


def test_missing_headers_are_anonymous():
    identity = identity_service.get_current_identity(make_request(), Settings())
    assert identity == Identity.anonymous()


def test_role_without_user_is_anonymous():
    request = make_request({"X-User-Role": "admin"})
    assert identity_service.get_current_identity(request, Settings()).is_authenticated is False


def test_unknown_role_is_logged(caplog):
    request = make_request({"X-User-Id": "EMP007", "X-User-Role": "superuser"})
    identity = identity_service.get_current_identity(request, Settings())
    assert identity.is_authenticated is True
    assert identity.role is None
    assert "superuser" in caplog.text


def test_custom_header_names():
    settings = Settings(identity_user_header="X-Auth-Sub", identity_role_header="X-Auth-Role")
    request = make_request({"X-Auth-Sub": "HR002", "X-Auth-Role": "hr"})
    identity = identity_service.get_current_identity(request, settings)
    assert identity.role is Role.HR
    assert identity.user_id == "HR002"


def test_request_state_identity_takes_precedence():
    request = make_request({"X-User-Id": "EMP007", "X-User-Role": "employee"})
    request.state.identity = Identity(role=Role.ADMIN, is_authenticated=True, user_id="ADM001")
    identity = identity_service.get_current_identity(request, Settings())
    assert identity.role is Role.ADMIN


def test_headers_ignored_when_untrusted():
    request = make_request({"X-User-Id": "anyone", "X-User-Role": "admin"})
    identity = identity_service.get_current_identity(
        request, Settings(trust_identity_headers=False)
    )
    assert identity == Identity.anonymous()


def test_request_state_identity_used_when_headers_untrusted():
    request = make_request()
    request.state.identity = Identity(role=Role.HR, is_authenticated=True, user_id="HR001")
    identity = identity_service.get_current_identity(
        request, Settings(trust_identity_headers=False)
    )
    assert identity.role is Role.HR
