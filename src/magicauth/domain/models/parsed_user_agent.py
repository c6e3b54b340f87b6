"""Parsed user agent domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedUserAgent:
    """Structured attributes extracted from a raw user agent string.

    Unknown attributes are empty strings. Only ``cpu_architecture``, ``os_name``
    and ``browser_name`` take part in session context matching.
    """

    cpu_architecture: str = ""
    os_name: str = ""
    os_version: str = ""
    browser_name: str = ""
    browser_version: str = ""
    device: str = ""
