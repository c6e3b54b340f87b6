"""Collection domain models."""

from pydantic import BaseModel, ConfigDict, Field


class AccessKey(BaseModel):
    """Access key issued for a collection."""

    model_config = ConfigDict(extra="allow")

    id: str
    key: str
    created: str | None = None


class RateLimiting(BaseModel):
    """Per-collection usage counters."""

    model_config = ConfigDict(extra="allow")

    credentials_created: int = 0
    credentials_updated: int = 0
    sessions_created: int = 0


class CollectionDetails(BaseModel):
    """Collection returned when a new collection is created."""

    model_config = ConfigDict(extra="allow")

    id: str
    access_key: AccessKey
    created: str | None = None
    rate_limiting: RateLimiting = Field(default_factory=RateLimiting)
