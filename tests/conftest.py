# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "production"
os.environ["STRICT_POLICY"] = "true"
os.environ["TRUST_IDENTITY_HEADERS"] = "true"

from src.main import app
from src.models import Identity, Role
from src.rbac.policy import AccessPolicy


def identity_headers(role: str, user_id: str = "EMP001", department: str | None = None) -> dict:
    """Headers the authentication layer sets for a logged-in user."""
    headers = {"X-User-Id": user_id, "X-User-Role": role}
    if department:
        headers["X-User-Department"] = department
    return headers


@pytest.fixture
def policy() -> AccessPolicy:
    """The default hospital access policy."""
    return AccessPolicy.default()


@pytest.fixture
def admin_identity() -> Identity:
    return Identity(role=Role.ADMIN, is_authenticated=True, user_id="ADM001")


@pytest.fixture
def hr_identity() -> Identity:
    return Identity(role=Role.HR, is_authenticated=True, user_id="HR001")


@pytest.fixture
def manager_identity() -> Identity:
    return Identity(
        role=Role.MANAGER, is_authenticated=True, user_id="MGR001", department="Cardiology"
    )


@pytest.fixture
def employee_identity() -> Identity:
    return Identity(
        role=Role.EMPLOYEE, is_authenticated=True, user_id="EMP001", department="Cardiology"
    )


@pytest.fixture(scope="function")
def client():
    """Create a test client with the startup lifespan run."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """Test client whose requests carry an admin identity."""
    client.headers.update(identity_headers("admin", user_id="ADM001"))
    return client


@pytest.fixture
def hr_client(client):
    """Test client whose requests carry an HR identity."""
    client.headers.update(identity_headers("hr", user_id="HR001"))
    return client


@pytest.fixture
def employee_client(client):
    """Test client whose requests carry an employee identity."""
    client.headers.update(identity_headers("employee", user_id="EMP001", department="Cardiology"))
    return client
