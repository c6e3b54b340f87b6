"""Shared fixtures for MagicAuth client tests."""

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MAGICAUTH_* settings from the developer's environment out of unit tests."""
    for name in (
        "MAGICAUTH_API_URL",
        "MAGICAUTH_API_TIMEOUT",
        "MAGICAUTH_LOG_LEVEL",
        "MAGICAUTH_CONFIG_FILE",
        "MAGICAUTH_LOG_REQUESTS",
    ):
        monkeypatch.delenv(name, raising=False)
