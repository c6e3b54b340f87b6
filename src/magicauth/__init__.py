"""Python client for the MagicAuth credential and session service."""

from magicauth.adapters.config import DEFAULT_API_URL, AppConfig
from magicauth.adapters.magicauth_api import Collection
from magicauth.application import (
    SessionValidationService,
    client_contexts_match,
    ip_addresses_match,
    is_private_address,
    parse_user_agent,
    user_agents_match,
)
from magicauth.domain.models import (
    ClientContext,
    CollectionDetails,
    ErrorDetails,
    MagicAuthError,
    ParsedUserAgent,
    Session,
    SessionContextMismatchError,
    User,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_API_URL",
    "AppConfig",
    "ClientContext",
    "Collection",
    "CollectionDetails",
    "ErrorDetails",
    "MagicAuthError",
    "ParsedUserAgent",
    "Session",
    "SessionContextMismatchError",
    "SessionValidationService",
    "User",
    "client_contexts_match",
    "ip_addresses_match",
    "is_private_address",
    "parse_user_agent",
    "user_agents_match",
]
