"""Domain models for the MagicAuth client."""

from magicauth.domain.models.client_context import ClientContext
from magicauth.domain.models.collection_details import AccessKey, CollectionDetails, RateLimiting
from magicauth.domain.models.error_details import ErrorDetails
from magicauth.domain.models.errors import MagicAuthError, SessionContextMismatchError
from magicauth.domain.models.parsed_user_agent import ParsedUserAgent
from magicauth.domain.models.session import Session, SessionCredential
from magicauth.domain.models.user import User

__all__ = [
    "AccessKey",
    "ClientContext",
    "CollectionDetails",
    "ErrorDetails",
    "MagicAuthError",
    "ParsedUserAgent",
    "RateLimiting",
    "Session",
    "SessionContextMismatchError",
    "SessionCredential",
    "User",
]
