"""User (credential) domain model."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """Credential record returned by the MagicAuth service.

    Fields the service adds beyond ``id`` are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
