"""BFHL module - Request validation, dispatch and the /bfhl route."""

from .schemas import (
    OperationKey,
    ValidatedRequest,
    BfhlResponse,
    create_error_response,
)
from .validation import validate_request
from .service import dispatch
from .router import router


__all__ = [
    # Schemas
    "OperationKey",
    "ValidatedRequest",
    "BfhlResponse",
    "create_error_response",
    # Validation
    "validate_request",
    # Service
    "dispatch",
    # Router
    "router",
]
