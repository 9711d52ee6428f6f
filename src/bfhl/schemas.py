"""Pydantic schemas for the BFHL request and response envelopes."""

from enum import Enum
from typing import Any, NamedTuple

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.config import get_settings


class OperationKey(str, Enum):
    """Top-level keys accepted by POST /bfhl."""

    fibonacci = "fibonacci"
    prime = "prime"
    lcm = "lcm"
    hcf = "hcf"
    ai = "AI"


class ValidatedRequest(NamedTuple):
    """A request body that passed validation.

    Attributes:
        key: The single operation key present in the body.
        payload: The typed payload (int, list[int] or str).
    """

    key: OperationKey
    payload: Any


class BfhlResponse(BaseModel):
    """Uniform envelope returned by every endpoint.

    ``data`` is only present on success; ``error`` (and optionally
    ``details``) only on failure. ``official_email`` is always present and
    is null when the service is not configured.

    Attributes:
        is_success: Success discriminant.
        official_email: Configured service identity.
        data: Operation result on success.
        error: Human-readable reason on failure.
        details: Optional diagnostic attached to upstream AI failures.
    """

    is_success: bool = Field(..., description="Whether the request succeeded")
    official_email: str | None = Field(default=None, description="Service identity")
    data: Any | None = Field(default=None, description="Result on success")
    error: str | None = Field(default=None, description="Error message on failure")
    details: str | None = Field(default=None, description="Upstream diagnostic")

    @classmethod
    def success(cls, official_email: str | None, data: Any = None) -> "BfhlResponse":
        """Create a successful envelope."""
        return cls(is_success=True, official_email=official_email, data=data)

    @classmethod
    def failure(
        cls,
        official_email: str | None,
        error: str,
        details: str | None = None,
    ) -> "BfhlResponse":
        """Create a failure envelope."""
        return cls(is_success=False, official_email=official_email, error=error, details=details)

    def render(self) -> dict[str, Any]:
        """Serialize, omitting optional fields that are unset.

        ``official_email`` is kept even when null.
        """
        exclude = {
            name for name in ("data", "error", "details")
            if getattr(self, name) is None
        }
        return self.model_dump(exclude=exclude)


def current_official_email() -> str | None:
    """Configured identity, or None when unset."""
    return get_settings().OFFICIAL_EMAIL or None


def create_error_response(
    status_code: int,
    message: str,
    details: str | None = None,
) -> JSONResponse:
    """Create a JSON failure response with the standard envelope."""
    body = BfhlResponse.failure(
        official_email=current_official_email(),
        error=message,
        details=details,
    )
    return JSONResponse(status_code=status_code, content=body.render())
