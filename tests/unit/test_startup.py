# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for policy loading at startup and the related settings."""

import logging

import pytest

from src import main
from src.config import Settings
from src.rbac.policy import AccessPolicy, AccessPolicyError


@pytest.fixture
def gappy_policy(monkeypatch) -> AccessPolicy:
    """Replace the default policy with one missing most of its entries."""
    policy = AccessPolicy(
        matrix={"admin": {"reports": {"view": True}}},
        route_access={"/admin": ["admin"]},
    )
    monkeypatch.setattr(AccessPolicy, "default", lambda report_gaps=False: policy)
    return policy


class TestLoadAccessPolicy:
    """Tests for load_access_policy."""

    def test_strict_policy_refuses_gaps(self, monkeypatch, gappy_policy):
        monkeypatch.setattr(main.settings, "strict_policy", True)
        with pytest.raises(AccessPolicyError, match="configuration issue"):
            main.load_access_policy()

    def test_lenient_policy_logs_gaps(self, monkeypatch, gappy_policy, caplog):
        monkeypatch.setattr(main.settings, "strict_policy", False)
        with caplog.at_level(logging.WARNING, logger=main.__name__):
            policy = main.load_access_policy()
        assert policy is gappy_policy
        assert "Missing admin.reports.generate" in caplog.text

    def test_default_policy_loads_in_strict_mode(self, monkeypatch):
        monkeypatch.setattr(main.settings, "strict_policy", True)
        policy = main.load_access_policy()
        assert policy.validate() == []

    def test_gap_reporting_follows_settings(self, monkeypatch):
        monkeypatch.setattr(main.settings, "report_policy_gaps", True)
        assert main.load_access_policy().report_gaps is True
        monkeypatch.setattr(main.settings, "report_policy_gaps", False)
        assert main.load_access_policy().report_gaps is False


class TestGapReportingSetting:
    """Tests for Settings.should_report_policy_gaps."""

    @pytest.mark.parametrize(
        ("environment", "debug", "override", "expected"),
        [
            ("development", False, None, True),
            ("Development", False, None, True),
            ("production", False, None, False),
            ("production", True, None, True),
            ("production", False, True, True),
            ("development", False, False, False),
            ("development", True, False, False),
        ],
    )
    def test_should_report_policy_gaps(self, environment, debug, override, expected):
        app_settings = Settings(
            environment=environment, debug=debug, report_policy_gaps=override
        )
        assert app_settings.should_report_policy_gaps is expected
