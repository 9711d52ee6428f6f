"""Validation of POST /bfhl request bodies."""

from typing import Any

from src.exceptions import InvalidRequestError

from .schemas import OperationKey, ValidatedRequest


MAX_FIBONACCI_TERMS = 1000
# Largest integer a JSON number can carry without precision loss in most clients
MAX_SAFE_INTEGER = 2**53 - 1

ALLOWED_KEYS = frozenset(key.value for key in OperationKey)


def as_integer(value: Any) -> int | None:
    """Return ``value`` as an int if it is an integral JSON number.

    Booleans are rejected. Integral floats such as ``5.0`` are accepted
    because JSON does not distinguish them from ``5``.

    Args:
        value: Decoded JSON value.

    Returns:
        The integer, or None when ``value`` is not an integer.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_fibonacci(value: Any) -> int:
    """Validate the term count for the fibonacci operation.

    Raises:
        InvalidRequestError: If not an integer in 1..1000.
    """
    n = as_integer(value)
    if n is None or n <= 0 or n > MAX_FIBONACCI_TERMS:
        raise InvalidRequestError(
            f"fibonacci must be an integer in range 1..{MAX_FIBONACCI_TERMS}"
        )
    return n


def validate_integer_list(key: str, value: Any) -> list[int]:
    """Validate a non-empty array of safe-range integers.

    Args:
        key: Operation key, used in error messages.
        value: Decoded JSON value.

    Returns:
        The values as ints.

    Raises:
        InvalidRequestError: If not a non-empty list of integers.
    """
    if not isinstance(value, list) or not value:
        raise InvalidRequestError(f"{key} must be a non-empty array")

    numbers: list[int] = []
    for item in value:
        number = as_integer(item)
        if number is None or abs(number) > MAX_SAFE_INTEGER:
            raise InvalidRequestError(f"{key} array must contain integers")
        numbers.append(number)
    return numbers


def validate_question(value: Any) -> str:
    """Validate the question for the AI operation.

    Raises:
        InvalidRequestError: If not a string with non-blank content.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError("AI must be a non-empty string")
    return value


def validate_request(body: Any) -> ValidatedRequest:
    """Check the single-key envelope rule and the payload for that key.

    Key-level checks run before the payload is looked at, so an unknown key
    is rejected regardless of its value.

    Args:
        body: Decoded JSON body.

    Returns:
        ValidatedRequest with the operation key and typed payload.

    Raises:
        InvalidRequestError: On any shape, type or range violation.
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Invalid JSON body")
    if len(body) != 1:
        raise InvalidRequestError("Request must contain exactly one top-level key")

    (raw_key, value), = body.items()
    if raw_key not in ALLOWED_KEYS:
        raise InvalidRequestError("Unsupported key provided")

    key = OperationKey(raw_key)
    if key is OperationKey.fibonacci:
        payload: Any = validate_fibonacci(value)
    elif key is OperationKey.ai:
        payload = validate_question(value)
    else:
        payload = validate_integer_list(key.value, value)

    return ValidatedRequest(key=key, payload=payload)
