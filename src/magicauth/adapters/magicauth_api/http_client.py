"""HTTP client for MagicAuth API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any, NoReturn

import aiohttp

from magicauth.adapters.api_request_logger import log_api_request
from magicauth.adapters.magicauth_api.constants import AUTHORIZATION_SCHEME, DEFAULT_HEADERS
from magicauth.domain.models import ErrorDetails, MagicAuthError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_TIMEOUT_SECONDS = 10.0


def _status_code(value: Any) -> int | None:
    """Coerce a status field from a response body into an int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def error_check(response: dict[str, Any]) -> None:
    """Raise if an API response body reports an error.

    Raises:
        MagicAuthError: If the body carries a ``status`` or ``error`` field.
    """
    status = response.get("status")
    error = response.get("error")
    if status or error:
        raise MagicAuthError(
            ErrorDetails(
                status_code=_status_code(status),
                error=str(error) if error is not None else None,
                message=str(response["message"]) if response.get("message") is not None else None,
            )
        )


class MagicAuthHttpClient:
    """JSON HTTP client bound to one MagicAuth API base URL."""

    def __init__(
        self,
        base_url: str,
        access_key: str | None = None,
        session: "ClientSession | None" = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: MagicAuth API base URL, without trailing slash.
            access_key: Collection access key. Anonymous requests when omitted.
            session: Shared aiohttp session. A short-lived session is opened
                per request when omitted.
            timeout: Total request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = dict(DEFAULT_HEADERS)
        if access_key:
            self._headers["Authorization"] = f"{AUTHORIZATION_SCHEME} {access_key}"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    async def post(self, path: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send a POST request with a JSON body."""
        return await self._request("POST", path, data=data)

    async def put(self, path: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send a PUT request with a JSON body."""
        return await self._request("PUT", path, data=data)

    async def get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request with query parameters."""
        return await self._request("GET", path, params=params)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        log_api_request(method, url, params=params, headers=self._headers, payload=data)

        try:
            if self._session is not None:
                return await self._send(self._session, method, url, params, data)
            async with aiohttp.ClientSession() as session:
                return await self._send(session, method, url, params, data)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error calling MagicAuth API {method} {url}: {e!r}")
            raise MagicAuthError(
                ErrorDetails(error="ConnectionError", message=str(e) or type(e).__name__)
            ) from e

    async def _send(
        self,
        session: "ClientSession",
        method: str,
        url: str,
        params: dict[str, str] | None,
        data: dict[str, Any] | None,
    ) -> dict[str, Any]:
        async with session.request(
            method,
            url,
            params=params,
            json=data,
            headers=self._headers,
            timeout=self._timeout,
        ) as response:
            return await self._handle_response(response, url)

    async def _handle_response(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        """Decode a JSON object response and check it for errors."""
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None

        if not isinstance(body, dict):
            await self._raise_for_unexpected_body(response, url)

        error_check(body)

        if response.status >= 400:
            raise MagicAuthError(
                ErrorDetails(
                    status_code=response.status,
                    error=response.reason,
                    message=str(body.get("message", "")) or None,
                )
            )
        return body

    async def _raise_for_unexpected_body(self, response: "ClientResponse", url: str) -> NoReturn:
        """Log and raise for a response that is not a JSON object."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"MagicAuth API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )
        raise MagicAuthError(
            ErrorDetails(status_code=response.status, error=response.reason, message=error_body)
        )
