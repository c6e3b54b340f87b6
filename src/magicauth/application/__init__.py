"""Application layer - session context policy and use cases."""

from magicauth.application.context_comparison import (
    client_contexts_match,
    ip_addresses_match,
    is_private_address,
    user_agents_match,
)
from magicauth.application.services import SessionValidationService
from magicauth.application.user_agent_parser import parse_user_agent

__all__ = [
    "SessionValidationService",
    "client_contexts_match",
    "ip_addresses_match",
    "is_private_address",
    "parse_user_agent",
    "user_agents_match",
]
