"""Best-effort parsing of raw user agent strings.

Browser and operating system families come from the ``user-agents`` library.
That library does not report a CPU architecture, so it is derived from the raw
string with the architecture rules used by the common UA parser family.
"""

import re
from collections.abc import Callable

from user_agents import parse

from magicauth.domain.models import ParsedUserAgent

# Family reported by ua-parser when nothing matched
_UNKNOWN_FAMILY = "Other"


def _lower(token: str) -> str:
    return token.lower()


def _fixed(name: str) -> Callable[[str], str]:
    return lambda _token: name


def _powerpc(token: str) -> str:
    return token.lower().replace("ower", "")


# Checked in order, first match wins
_CPU_RULES: list[tuple[re.Pattern[str], Callable[[str], str]]] = [
    (re.compile(r"(?:(amd|x(?:(?:86|64)[-_])?|wow|win)64)[;)]", re.IGNORECASE), _fixed("amd64")),
    (re.compile(r"(ia32(?=;))", re.IGNORECASE), _fixed("ia32")),
    (re.compile(r"((?:i[346]|x)86)[;)]", re.IGNORECASE), _fixed("ia32")),
    (re.compile(r"\b(aarch64|arm(?:v?8e?l?|_?64))\b", re.IGNORECASE), _fixed("arm64")),
    (re.compile(r"\b(arm(?:v[67])?ht?n?[fl]p?)\b", re.IGNORECASE), _fixed("armhf")),
    (re.compile(r"windows (?:ce|mobile); ppc;", re.IGNORECASE), _fixed("arm")),
    (re.compile(r"((?:ppc|powerpc)(?:64)?)(?: mac|;|\))", re.IGNORECASE), _powerpc),
    (re.compile(r"(sun4\w)[;)]", re.IGNORECASE), _fixed("sparc")),
    (
        re.compile(
            r"((?:avr32|ia64(?=;))|68k(?=\))|\barm(?=v(?:[1-7]|[5-7]1)l?|;|eabi)"
            r"|(?:irix|mips|sparc)(?:64)?\b|pa-risc)",
            re.IGNORECASE,
        ),
        _lower,
    ),
]


def detect_cpu_architecture(user_agent: str) -> str:
    """Return the CPU architecture named in a user agent, or an empty string."""
    for pattern, normalize in _CPU_RULES:
        match = pattern.search(user_agent)
        if match:
            token = match.group(1) if match.groups() else match.group(0)
            return normalize(token)
    return ""


def _known(family: str | None) -> str:
    """Map the parser's catch-all family to an empty string."""
    if not family or family == _UNKNOWN_FAMILY:
        return ""
    return family


def parse_user_agent(user_agent: str | None) -> ParsedUserAgent:
    """Parse a raw user agent string.

    Never raises: empty, missing or unrecognised input produces empty fields.
    """
    if not user_agent:
        return ParsedUserAgent()

    parsed = parse(user_agent)
    os_name = _known(parsed.os.family)
    browser_name = _known(parsed.browser.family)

    return ParsedUserAgent(
        cpu_architecture=detect_cpu_architecture(user_agent),
        os_name=os_name,
        os_version=parsed.os.version_string if os_name else "",
        browser_name=browser_name,
        browser_version=parsed.browser.version_string if browser_name else "",
        device=_known(parsed.device.family),
    )
