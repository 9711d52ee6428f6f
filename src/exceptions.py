"""Base exceptions for the BFHL API."""


class BfhlError(Exception):
    """Base exception for all BFHL API errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ConfigurationError(BfhlError):
    """Raised when required service configuration is missing.

    Attributes:
        setting: Name of the missing setting.
    """

    def __init__(self, setting: str):
        super().__init__(
            message=f"Server not configured: {setting} missing",
            code="CONFIGURATION_ERROR"
        )
        self.setting = setting


class PayloadTooLargeError(BfhlError):
    """Raised when a request body exceeds the size limit.

    Attributes:
        size_bytes: Bytes received (or declared) so far.
        max_bytes: Maximum allowed size.
    """

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(
            message="Request body too large",
            code="PAYLOAD_TOO_LARGE"
        )
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class InvalidRequestError(BfhlError):
    """Raised when a request body fails validation or computation."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_REQUEST")
