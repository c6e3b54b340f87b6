"""Client context comparison used when validating sessions.

Both matchers are pure functions. They never raise on malformed input:
unparseable user agents compare on empty attributes and malformed IP
addresses are treated as public and unequal.
"""

import ipaddress
import logging
import re

from magicauth.application.user_agent_parser import parse_user_agent
from magicauth.domain.models import ClientContext

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_DOTTED_DECIMAL = re.compile(r"^[0-9]{1,3}(?:\.[0-9]{1,3}){3}$")

# RFC1918, loopback and link-local blocks, and their IPv6 equivalents.
# Unspecified, documentation, reserved and tunnel prefixes are public.
PRIVATE_NETWORKS: tuple[ipaddress.IPv4Network | ipaddress.IPv6Network, ...] = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("169.254.0.0/16"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
)


def user_agents_match(request_user_agent: str, session_user_agent: str) -> bool:
    """Compare two user agents on CPU architecture, OS name and browser name.

    Versions are ignored so that browser and OS updates keep a session valid,
    while a change of device, OS family or browser family does not.

    Args:
        request_user_agent: User agent of the current request.
        session_user_agent: User agent recorded when the session was created.

    Returns:
        True if all three attributes are equal.
    """
    request_ua = parse_user_agent(request_user_agent)
    session_ua = parse_user_agent(session_user_agent)

    logger.debug(
        "Comparing user agents\n"
        f"    {request_user_agent}\n"
        f"    {session_user_agent}\n"
        f"    {request_ua.cpu_architecture:>20.20} = {session_ua.cpu_architecture}\n"
        f"    {request_ua.os_name:>20.20} = {session_ua.os_name}\n"
        f"    {request_ua.browser_name:>20.20} = {session_ua.browser_name}"
    )

    return (
        request_ua.cpu_architecture == session_ua.cpu_architecture
        and request_ua.os_name == session_ua.os_name
        and request_ua.browser_name == session_ua.browser_name
    )


def _parse_address(address: str) -> IPAddress | None:
    """Parse an address into its canonical form, or None if malformed."""
    if not isinstance(address, str):
        return None

    text = address.strip()
    # ipaddress rejects leading zeros in IPv4 octets; read them as decimal
    if _DOTTED_DECIMAL.match(text):
        text = ".".join(str(int(octet)) for octet in text.split("."))

    try:
        parsed = ipaddress.ip_address(text)
    except ValueError:
        return None

    if isinstance(parsed, ipaddress.IPv6Address) and parsed.ipv4_mapped is not None:
        return parsed.ipv4_mapped
    return parsed


def _is_private(address: IPAddress) -> bool:
    return any(address in network for network in PRIVATE_NETWORKS)


def is_private_address(address: str) -> bool:
    """Check if an address is in a private, loopback or link-local range.

    Malformed addresses are not private.
    """
    parsed = _parse_address(address)
    return parsed is not None and _is_private(parsed)


def ip_addresses_match(request_ip_address: str, session_ip_address: str) -> bool:
    """Compare the request IP address with the one recorded for the session.

    The comparison is asymmetric: a session created from a private address
    matches any request address. Otherwise both addresses must be the same
    after normalization.

    Args:
        request_ip_address: IP address of the current request.
        session_ip_address: IP address recorded when the session was created.

    Returns:
        True if the session address is private or both addresses are equal.
    """
    logger.debug(f"Comparing user IPs\n    {request_ip_address!s:>20.20} = {session_ip_address}")

    session_ip = _parse_address(session_ip_address)
    if session_ip is None:
        return False
    if _is_private(session_ip):
        return True

    request_ip = _parse_address(request_ip_address)
    return request_ip is not None and request_ip == session_ip


def client_contexts_match(request_context: ClientContext, session_context: ClientContext) -> bool:
    """Check a request context against the context recorded for a session."""
    return ip_addresses_match(
        request_context.ip_address, session_context.ip_address
    ) and user_agents_match(request_context.user_agent, session_context.user_agent)
