"""Exceptions raised by the MagicAuth client."""

from magicauth.domain.models.error_details import ErrorDetails


class MagicAuthError(Exception):
    """Error response or transport failure when talking to the MagicAuth service."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(str(details))
        self.details = details

    @property
    def status_code(self) -> int | None:
        return self.details.status_code


class SessionContextMismatchError(MagicAuthError):
    """The request context does not match the context recorded for the session."""
