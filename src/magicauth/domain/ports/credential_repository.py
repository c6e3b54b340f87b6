"""Credential repository port."""

from typing import Protocol

from magicauth.domain.models.session import Session
from magicauth.domain.models.user import User


class CredentialRepository(Protocol):
    """Port for managing credentials and sessions in a MagicAuth collection."""

    async def user(self, password: str) -> User:
        """Create a new credential with the given password."""
        ...

    async def update_password(
        self, credential_id: str, current_password: str, password: str
    ) -> User:
        """Change the password of an existing credential."""
        ...

    async def session(
        self, credential_id: str, password: str, ip_address: str, user_agent: str
    ) -> Session:
        """Create a session bound to the given client context."""
        ...

    async def validate(self, session_id: str, ip_address: str, user_agent: str) -> Session:
        """Validate a session against the current client context."""
        ...
