# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read the caller identity placed on a request by the authentication layer."""

import logging

from starlette.requests import Request

from src.config import Settings
from src.models.identity import Identity

logger = logging.getLogger(__name__)


def identity_from_headers(headers, settings: Settings) -> Identity:
    """Build an identity from the trusted identity headers.

    Missing user id or role header means the caller is anonymous.
    """
    user_id = headers.get(settings.identity_user_header)
    role = headers.get(settings.identity_role_header)
    if not user_id or not role:
        return Identity.anonymous()

    identity = Identity.from_claims(
        user_id=user_id,
        role=role,
        department=headers.get(settings.identity_department_header),
    )
    if identity.role is None:
        logger.warning(f"Unknown role {role!r} for user {user_id}; treating as no role")
    return identity


def get_current_identity(request: Request, settings: Settings) -> Identity:
    """Identity of the current request.

    An identity attached to ``request.state`` by authentication middleware
    takes precedence. The identity headers are only read when
    ``trust_identity_headers`` is enabled; otherwise the caller is anonymous.
    """
    identity = getattr(request.state, "identity", None)
    if isinstance(identity, Identity):
        return identity
    if not settings.trust_identity_headers:
        return Identity.anonymous()
    return identity_from_headers(request.headers, settings)
