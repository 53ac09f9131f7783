"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a provider fault, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @property
    def is_authorization_failure(self) -> bool:
        """Whether the provider rejected the request's credentials."""
        return self.status_code in (401, 403)
