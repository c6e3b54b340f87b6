"""Opt-in logging of outgoing MagicAuth API requests.

Enabled with ``MAGICAUTH_LOG_REQUESTS=true``. Access keys and passwords never
reach the log: credential headers and password fields are redacted, while the
client context (IP address, user agent) stays readable.
"""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_SENSITIVE_FIELDS = frozenset({"password", "current_password"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via MAGICAUTH_LOG_REQUESTS environment variable."""
    return os.getenv("MAGICAUTH_LOG_REQUESTS", "").lower() == "true"


def _request_line(method: str, url: str, params: dict[str, Any] | None) -> str:
    """Render ``METHOD url?query`` with the query parameters in a stable order."""
    if not params:
        return f"{method} {url}"
    separator = "&" if "?" in url else "?"
    return f"{method} {url}{separator}{urlencode(sorted(params.items()))}"


def _redact(
    values: dict[str, Any], sensitive: frozenset[str], *, fold_case: bool
) -> dict[str, Any]:
    """Replace the values of sensitive keys."""
    return {
        key: REDACTED if (key.lower() if fold_case else key) in sensitive else value
        for key, value in values.items()
    }


def _describe_body(payload: Any) -> str:
    """Render a request body, redacting passwords in JSON objects."""
    if not isinstance(payload, dict):
        return str(payload)
    safe_payload = _redact(payload, _SENSITIVE_FIELDS, fold_case=False)
    try:
        return json.dumps(safe_payload, indent=2, sort_keys=True)
    except (TypeError, ValueError):
        return str(safe_payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an outgoing request if MAGICAUTH_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, PUT).
        url: Request URL.
        params: Query parameters, e.g. the client context sent when validating.
        headers: Request headers. The Authentic access key is redacted.
        payload: JSON body. Password fields are redacted.
    """
    if not should_log_requests():
        return

    lines = [_request_line(method, url, params)]
    if headers:
        safe_headers = _redact(headers, _SENSITIVE_HEADERS, fold_case=True)
        lines.append(f"Headers: {json.dumps(safe_headers, indent=2)}")
    if payload is not None:
        lines.append(f"Payload: {_describe_body(payload)}")

    logger.info("API Request:\n" + "\n".join(lines))
