# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import settings
from src.rbac.policy import AccessPolicy, AccessPolicyError
from src.schemas.common import HealthResponse

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


def load_access_policy() -> AccessPolicy:
    """Build the access policy and report configuration issues."""
    policy = AccessPolicy.default(report_gaps=settings.should_report_policy_gaps)

    issues = policy.validate()
    for issue in issues:
        logger.warning(f"Access policy {issue.kind}: {issue.message}")

    if issues and settings.strict_policy:
        raise AccessPolicyError(f"Access policy has {len(issues)} configuration issue(s)")

    logger.info(
        f"Loaded access policy: {len(policy.matrix)} roles, "
        f"{len(policy.route_access)} routes"
    )
    return policy


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    app.state.access_policy = load_access_policy()

    yield

    logger.info("Shutting down access control service...")

app = FastAPI(
    title=settings.app_name,
    description="Role-based access decisions for the hospital employee management system",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include API router after it's created
from src.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
