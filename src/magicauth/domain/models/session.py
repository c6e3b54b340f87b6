"""Session domain model."""

from pydantic import BaseModel, ConfigDict

from magicauth.domain.models.client_context import ClientContext


class SessionCredential(BaseModel):
    """Reference to the credential a session belongs to."""

    model_config = ConfigDict(extra="allow")

    id: str


class Session(BaseModel):
    """Session record returned by the MagicAuth service."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    credential: SessionCredential | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    def context(self) -> ClientContext | None:
        """Return the context recorded at session creation, if the service echoed it."""
        if self.ip_address is None or self.user_agent is None:
            return None
        return ClientContext(ip_address=self.ip_address, user_agent=self.user_agent)
