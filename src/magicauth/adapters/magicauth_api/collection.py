"""MagicAuth collection client implementing CredentialRepository."""

import logging
from types import TracebackType
from typing import TYPE_CHECKING

import aiohttp

from magicauth.adapters.config import AppConfig
from magicauth.adapters.magicauth_api.constants import (
    COLLECTION_CREDENTIALS_PATH,
    COLLECTIONS_PATH,
    CREDENTIAL_PATH,
    CREDENTIAL_SESSIONS_PATH,
    SESSION_PATH,
)
from magicauth.adapters.magicauth_api.http_client import MagicAuthHttpClient
from magicauth.domain.models import CollectionDetails, Session, User

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class Collection:
    """Client for the credentials and sessions of one MagicAuth collection.

    Can be used as an async context manager, in which case it owns an aiohttp
    session for its lifetime unless one was passed in.
    """

    @classmethod
    async def create(
        cls, config: AppConfig | None = None, session: "ClientSession | None" = None
    ) -> CollectionDetails:
        """Create a new collection.

        Args:
            config: Client configuration. Read from the environment when omitted.
            session: Optional shared aiohttp session.

        Returns:
            Collection details including its id and access key.
        """
        config = config or AppConfig()
        anonymous = MagicAuthHttpClient(config.api_url, session=session, timeout=config.api_timeout)
        collection = await anonymous.post(COLLECTIONS_PATH)
        logger.debug(f"POST collections response: {collection}")
        return CollectionDetails.model_validate(collection)

    def __init__(
        self,
        collection_id: str,
        access_key: str,
        config: AppConfig | None = None,
        session: "ClientSession | None" = None,
    ) -> None:
        """Initialize a collection client.

        Args:
            collection_id: The collection identifier.
            access_key: Access key authorizing requests for the collection.
            config: Client configuration. Read from the environment when omitted.
            session: Optional shared aiohttp session.
        """
        self.collection_id = collection_id
        self.access_key = access_key
        self._config = config or AppConfig()
        self._session = session
        self._owns_session = False
        self.api = self._create_client()

    def _create_client(self) -> MagicAuthHttpClient:
        return MagicAuthHttpClient(
            self._config.api_url,
            access_key=self.access_key,
            session=self._session,
            timeout=self._config.api_timeout,
        )

    async def __aenter__(self) -> "Collection":
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
            self.api = self._create_client()
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._owns_session = False
            self.api = self._create_client()

    async def user(self, password: str) -> User:
        """Create a new credential.

        Args:
            password: Password for the new credential.

        Returns:
            User with the credential id (``Auth_U1-...``).
        """
        path = COLLECTION_CREDENTIALS_PATH.format(collection_id=self.collection_id)
        user = await self.api.post(path, {"password": password})
        logger.debug(f"POST credentials response: {user}")
        return User.model_validate(user)

    async def update_password(
        self, credential_id: str, current_password: str, password: str
    ) -> User:
        """Change the password of an existing credential.

        Args:
            credential_id: The credential id to update.
            current_password: Current password, for verification.
            password: New password.

        Returns:
            The updated user.
        """
        path = CREDENTIAL_PATH.format(credential_id=credential_id)
        credential = await self.api.put(
            path, {"current_password": current_password, "password": password}
        )
        logger.debug(f"PUT credentials response: {credential}")
        return User.model_validate(credential)

    async def session(
        self, credential_id: str, password: str, ip_address: str, user_agent: str
    ) -> Session:
        """Create a session bound to the client's IP address and user agent.

        Args:
            credential_id: The credential id.
            password: Credential password.
            ip_address: Client IP address the session is bound to.
            user_agent: Client user agent the session is bound to.

        Returns:
            The new session.
        """
        path = CREDENTIAL_SESSIONS_PATH.format(credential_id=credential_id)
        session = await self.api.post(
            path, {"password": password, "ip_address": ip_address, "user_agent": user_agent}
        )
        logger.debug(f"POST sessions response: {session}")
        return Session.model_validate(session)

    async def validate(self, session_id: str, ip_address: str, user_agent: str) -> Session:
        """Validate an existing session against the current client context.

        Args:
            session_id: The session id.
            ip_address: Current client IP address.
            user_agent: Current client user agent.

        Returns:
            The session, including its credential.

        Raises:
            MagicAuthError: If the session expired, was not found or the
                context does not match.
        """
        path = SESSION_PATH.format(session_id=session_id)
        session = await self.api.get(path, {"ip_address": ip_address, "user_agent": user_agent})
        logger.debug(f"GET session response: {session}")
        return Session.model_validate(session)
