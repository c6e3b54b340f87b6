"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error reported by the MagicAuth service."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    error: str | None = None
    message: str | None = None

    def __str__(self) -> str:
        return f"{self.status_code} {self.error}: {self.message}"
