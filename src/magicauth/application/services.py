"""Application services (use cases) for session validation."""

import logging
from typing import TYPE_CHECKING

from magicauth.application.context_comparison import client_contexts_match
from magicauth.domain.models import (
    ClientContext,
    ErrorDetails,
    Session,
    SessionContextMismatchError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from magicauth.domain.ports import CredentialRepository


class SessionValidationService:
    """Service for validating sessions against the current client context."""

    def __init__(self, credential_repository: "CredentialRepository") -> None:
        """Initialize with a credential repository."""
        self._credential_repository = credential_repository

    @staticmethod
    def context_matches(request_context: ClientContext, session_context: ClientContext) -> bool:
        """Check whether a request context matches a session's recorded context."""
        return client_contexts_match(request_context, session_context)

    async def validate(self, session_id: str, request_context: ClientContext) -> Session:
        """Validate a session for the given request context.

        The service performs its own context check. When the returned session
        also carries the context it was created with, that context is checked
        again locally.

        Raises:
            MagicAuthError: If the service rejects the session.
            SessionContextMismatchError: If the recorded context does not match.
        """
        session = await self._credential_repository.validate(
            session_id, request_context.ip_address, request_context.user_agent
        )

        session_context = session.context()
        if session_context is None:
            logger.debug(f"Session {session_id} has no recorded context, skipping local check")
            return session

        if not self.context_matches(request_context, session_context):
            logger.warning(
                f"Session {session_id} context mismatch: request from "
                f"{request_context.ip_address}, session bound to {session_context.ip_address}"
            )
            raise SessionContextMismatchError(
                ErrorDetails(
                    status_code=401,
                    error="SessionContextMismatch",
                    message="Request context does not match the session context",
                )
            )

        return session
