"""FastAPI router for the /bfhl endpoint."""

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.ai import AIProvider
from src.dependencies import get_ai_provider, require_official_email
from src.exceptions import InvalidRequestError

from .schemas import BfhlResponse
from .service import dispatch
from .validation import validate_request

logger = structlog.get_logger("bfhl")


router = APIRouter(tags=["bfhl"])


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON.

    Raises:
        InvalidRequestError: If the body is empty, not valid JSON, or nested
            too deeply for the decoder.
    """
    try:
        return await request.json()
    except (ValueError, RecursionError):
        raise InvalidRequestError("Invalid JSON body")


@router.post("/bfhl")
async def bfhl_endpoint(
    request: Request,
    official_email: Annotated[str, Depends(require_official_email)],
    provider: Annotated[AIProvider | None, Depends(get_ai_provider)],
) -> JSONResponse:
    """Run the single operation named by the request body.

    The body must hold exactly one of ``fibonacci``, ``prime``, ``lcm``,
    ``hcf`` or ``AI``. Failures are raised as BfhlError subclasses and
    rendered by the handlers registered in main.py.

    Args:
        request: Raw request, parsed here so malformed JSON maps to 400.
        official_email: Configured identity (500 when missing).
        provider: AI provider, or None when no key is configured.

    Returns:
        Success envelope with the operation result in ``data``.
    """
    body = await read_json_body(request)
    validated = validate_request(body)
    data = await dispatch(validated, provider)

    logger.info("bfhl_request", operation=validated.key.value)
    return JSONResponse(content=BfhlResponse.success(official_email, data).render())
