# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Hospital EMS Access Control"
    environment: str = "development"  # "development" or "production"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: list[str] = ["http://localhost:5173"]

    # Refuse to start when the access policy has gaps
    strict_policy: bool = False
    # Log lookups that miss the permission matrix; defaults on in development
    report_policy_gaps: bool | None = None

    # Only trust identity headers behind an authenticating proxy
    trust_identity_headers: bool = False
    # Headers set by the upstream authentication layer
    identity_user_header: str = "X-User-Id"
    identity_role_header: str = "X-User-Role"
    identity_department_header: str = "X-User-Department"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def should_report_policy_gaps(self) -> bool:
        if self.report_policy_gaps is None:
            return self.is_development or self.debug
        return self.report_policy_gaps


settings = Settings()
