"""Services package."""
from src.services import (
    authorization_service,
    identity_service,
)

__all__ = [
    "authorization_service",
    "identity_service",
]
