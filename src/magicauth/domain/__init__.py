"""Domain layer - core models and ports."""

from magicauth.domain.models import (
    ClientContext,
    MagicAuthError,
    ParsedUserAgent,
    Session,
    User,
)
from magicauth.domain.ports import CredentialRepository

__all__ = [
    "ClientContext",
    "CredentialRepository",
    "MagicAuthError",
    "ParsedUserAgent",
    "Session",
    "User",
]
