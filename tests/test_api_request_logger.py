"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from magicauth.adapters.api_request_logger import (
    REDACTED,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given MAGICAUTH_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("MAGICAUTH_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given MAGICAUTH_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("MAGICAUTH_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given MAGICAUTH_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("MAGICAUTH_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://example.com/sessions/abc")

        mock_logger.info.assert_not_called()

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_params_then_logs_full_url(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled with params, when calling, then logs URL with sorted params."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://example.com/sessions/abc",
            params={"user_agent": "UA", "ip_address": "1.2.3.4"},
        )

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "GET https://example.com/sessions/abc?ip_address=1.2.3.4&user_agent=UA" in message

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_url_has_existing_params_then_appends_params(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given URL with existing params, when adding more params, then appends with &."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api?existing=1", params={"new": 2})

        message = mock_logger.info.call_args[0][0]
        assert "https://example.com/api?existing=1&new=2" in message

    @pytest.mark.parametrize(
        ("header", "value"),
        [
            ("Authorization", "Authentic secret-key"),
            ("Cookie", "session=secret-key"),
            ("X-API-Key", "secret-key"),
        ],
    )
    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_logging_sensitive_header_then_redacts_it(
        self, mock_logger: MagicMock, mock_should_log: MagicMock, header: str, value: str
    ) -> None:
        """Given a credential header, when logging, then its value is redacted."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api", headers={header: value})

        message = mock_logger.info.call_args[0][0]
        assert header in message
        assert REDACTED in message
        assert "secret-key" not in message

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_logging_password_payload_then_redacts_passwords(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a payload with passwords, when logging, then passwords are redacted."""
        mock_should_log.return_value = True

        log_api_request(
            "PUT",
            "https://example.com/credentials/Auth_U1-abc",
            payload={"current_password": "old-secret", "password": "new-secret"},
        )

        message = mock_logger.info.call_args[0][0]
        assert "Payload:" in message
        assert "current_password" in message
        assert "old-secret" not in message
        assert "new-secret" not in message

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_logging_context_payload_then_keeps_context(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a session payload, when logging, then the client context stays readable."""
        mock_should_log.return_value = True

        log_api_request(
            "POST",
            "https://example.com/credentials/Auth_U1-abc/sessions",
            payload={"password": "pw", "ip_address": "95.107.167.200", "user_agent": "UA"},
        )

        message = mock_logger.info.call_args[0][0]
        assert "95.107.167.200" in message
        assert '"password": "***REDACTED***"' in message

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_logging_with_string_payload_then_logs_as_string(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given string payload, when logging, then logs as string."""
        mock_should_log.return_value = True

        log_api_request("POST", "https://example.com/api", payload="simple string")

        message = mock_logger.info.call_args[0][0]
        assert "Payload: simple string" in message

    @patch("magicauth.adapters.api_request_logger.should_log_requests")
    @patch("magicauth.adapters.api_request_logger.logger")
    def test_when_user_agent_param_has_spaces_then_query_is_encoded(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a user agent query param, when logging, then it is URL-encoded on one line."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://example.com/sessions/abc",
            params={"user_agent": "Mozilla/5.0 (X11; Linux x86_64)"},
        )

        first_line = mock_logger.info.call_args[0][0].splitlines()[1]
        assert first_line == (
            "GET https://example.com/sessions/abc"
            "?user_agent=Mozilla%2F5.0+%28X11%3B+Linux+x86_64%29"
        )
