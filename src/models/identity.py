# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Identity of the caller as supplied by the authentication layer."""

from dataclasses import dataclass

from src.models.enums import Role, parse_role


@dataclass(frozen=True)
class Identity:
    """Read-only view of the current user.

    Created by the external authentication layer on login and discarded on
    logout or session expiry. Access checks only ever read it.
    """

    role: Role | None
    is_authenticated: bool
    user_id: str | None = None
    department: str | None = None

    @classmethod
    def anonymous(cls) -> "Identity":
        """Identity of a caller that has not logged in."""
        return cls(role=None, is_authenticated=False)

    @classmethod
    def from_claims(
        cls,
        user_id: str | None,
        role: object,
        department: str | None = None,
    ) -> "Identity":
        """Build an identity from raw claims.

        A claim set without a user id is anonymous. An unknown role keeps the
        identity authenticated but without a role.
        """
        if not user_id:
            return cls.anonymous()
        return cls(
            role=parse_role(role),
            is_authenticated=True,
            user_id=str(user_id),
            department=department or None,
        )
