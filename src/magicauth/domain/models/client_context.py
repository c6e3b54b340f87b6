"""Client context domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientContext:
    """IP address and user agent a session is bound to."""

    ip_address: str
    user_agent: str
