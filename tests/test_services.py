"""Tests for application services."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from magicauth.application.services import SessionValidationService
from magicauth.domain.models import (
    ClientContext,
    ErrorDetails,
    MagicAuthError,
    Session,
    SessionContextMismatchError,
)

CHROME_LINUX_UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/81.0.4044.129 Safari/537.36"
)
FIREFOX_LINUX_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:75.0) Gecko/20100101 Firefox/75.0"


def _repository_returning(session: Session) -> MagicMock:
    repository = MagicMock()
    repository.validate = AsyncMock(return_value=session)
    return repository


@pytest.mark.asyncio
async def test_validate_passes_request_context_to_repository() -> None:
    """Given a request context, when validating, then the repository receives it."""
    repository = _repository_returning(Session(id="sess-1"))
    service = SessionValidationService(repository)
    context = ClientContext(ip_address="95.107.167.200", user_agent=CHROME_LINUX_UA)

    await service.validate("sess-1", context)

    repository.validate.assert_awaited_once_with("sess-1", "95.107.167.200", CHROME_LINUX_UA)


@pytest.mark.asyncio
async def test_validate_returns_session_without_recorded_context() -> None:
    """Given a session without recorded context, when validating, then it is returned as-is."""
    session = Session.model_validate({"id": "sess-1", "credential": {"id": "Auth_U1-abc"}})
    service = SessionValidationService(_repository_returning(session))
    context = ClientContext(ip_address="8.8.8.8", user_agent=FIREFOX_LINUX_UA)

    result = await service.validate("sess-1", context)

    assert result is session
    assert result.credential is not None
    assert result.credential.id == "Auth_U1-abc"


@pytest.mark.asyncio
async def test_validate_accepts_matching_recorded_context() -> None:
    """Given a recorded context matching the request, when validating, then succeeds."""
    session = Session(id="sess-1", ip_address="95.107.167.200", user_agent=CHROME_LINUX_UA)
    service = SessionValidationService(_repository_returning(session))
    context = ClientContext(ip_address="95.107.167.200", user_agent=CHROME_LINUX_UA)

    assert await service.validate("sess-1", context) is session


@pytest.mark.asyncio
async def test_validate_rejects_mismatching_recorded_context() -> None:
    """Given a recorded context from another browser, when validating, then raises."""
    session = Session(id="sess-1", ip_address="95.107.167.200", user_agent=CHROME_LINUX_UA)
    service = SessionValidationService(_repository_returning(session))
    context = ClientContext(ip_address="95.107.167.200", user_agent=FIREFOX_LINUX_UA)

    with pytest.raises(SessionContextMismatchError) as exc_info:
        await service.validate("sess-1", context)

    assert exc_info.value.status_code == 401
    assert exc_info.value.details.error == "SessionContextMismatch"


@pytest.mark.asyncio
async def test_validate_propagates_repository_errors() -> None:
    """Given the service rejects the session, when validating, then the error propagates."""
    repository = MagicMock()
    repository.validate = AsyncMock(
        side_effect=MagicAuthError(
            ErrorDetails(status_code=404, error="Not Found", message="Session not found")
        )
    )
    service = SessionValidationService(repository)
    context = ClientContext(ip_address="95.107.167.200", user_agent=CHROME_LINUX_UA)

    with pytest.raises(MagicAuthError, match="404 Not Found: Session not found"):
        await service.validate("missing", context)


def test_context_matches_uses_asymmetric_ip_rule() -> None:
    """Given a private session IP, when checking contexts, then any request IP matches."""
    request_context = ClientContext(ip_address="8.8.8.8", user_agent=CHROME_LINUX_UA)
    session_context = ClientContext(ip_address="192.168.1.1", user_agent=CHROME_LINUX_UA)

    assert SessionValidationService.context_matches(request_context, session_context) is True
    assert SessionValidationService.context_matches(session_context, request_context) is False
