"""Exceptions raised by the AI delegate."""

from src.exceptions import BfhlError


class AIServiceError(BfhlError):
    """Base exception for AI delegate errors."""
    pass


class AIUnavailableError(AIServiceError):
    """Raised when no provider credential is configured.

    Attributes:
        provider: Name of the selected provider, if known.
    """

    def __init__(self, provider: str | None = None):
        super().__init__(
            message="AI service not configured",
            code="AI_UNAVAILABLE"
        )
        self.provider = provider


class AIProviderError(AIServiceError):
    """Raised when the provider call fails or returns an unusable response.

    Attributes:
        provider: Name of the provider that failed.
        status_code: HTTP status returned by the provider, if any.
        detail: Credential-free diagnostic for logs and the error envelope.
    """

    def __init__(
        self,
        provider: str,
        detail: str = "",
        status_code: int | None = None,
        message: str = "AI service error",
        code: str = "AI_PROVIDER_ERROR",
    ):
        super().__init__(message=message, code=code)
        self.provider = provider
        self.detail = detail
        self.status_code = status_code


class AINoAnswerError(AIProviderError):
    """Raised when the provider answered with no usable text."""

    def __init__(self, provider: str, detail: str = "Empty completion"):
        super().__init__(
            provider=provider,
            detail=detail,
            message="AI service returned no answer",
            code="AI_NO_ANSWER",
        )
