"""Dispatch of validated /bfhl requests to the kernel or the AI delegate."""

from typing import Any, Callable

from anyio.to_thread import run_sync

from src.ai import AIProvider, answer_question
from src.exceptions import BfhlError, InvalidRequestError
from src.kernel import fibonacci, filter_primes, gcd_all, lcm_all

from .schemas import OperationKey, ValidatedRequest


KERNEL_HANDLERS: dict[OperationKey, Callable[[Any], Any]] = {
    OperationKey.fibonacci: fibonacci,
    OperationKey.prime: filter_primes,
    OperationKey.hcf: gcd_all,
    OperationKey.lcm: lcm_all,
}


async def run_kernel(key: OperationKey, payload: Any) -> Any:
    """Run a number-theory operation off the event loop.

    Raises:
        InvalidRequestError: If the computation fails for any reason.
    """
    handler = KERNEL_HANDLERS[key]
    try:
        return await run_sync(handler, payload)
    except BfhlError:
        raise
    except Exception as exc:
        raise InvalidRequestError(str(exc) or "Server error")


async def dispatch(request: ValidatedRequest, provider: AIProvider | None) -> Any:
    """Route a validated request to exactly one handler.

    Args:
        request: Output of ``validate_request``.
        provider: AI provider, or None when AI is not configured.

    Returns:
        The operation result (list of ints, int, or a single word).

    Raises:
        InvalidRequestError: For keys with no handler or failed computations.
        AIServiceError: For AI configuration or provider failures.
    """
    if request.key in KERNEL_HANDLERS:
        return await run_kernel(request.key, request.payload)
    if request.key is OperationKey.ai:
        return await answer_question(provider, request.payload)
    raise InvalidRequestError("Unhandled key")
