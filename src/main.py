from contextlib import asynccontextmanager
from typing import Annotated

import httpx
import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .dependencies import require_official_email
from .exceptions import (
    BfhlError,
    ConfigurationError,
    InvalidRequestError,
    PayloadTooLargeError,
)
from .middleware import MaxBodySizeMiddleware
from .observability import configure_logging
from src.ai import AIProviderError, AIUnavailableError
from src.bfhl import BfhlResponse, create_error_response
from src.bfhl import router as bfhl_router
from src.ratelimit import RateLimitMiddleware

settings = get_settings()
configure_logging(settings.LOG_LEVEL, json_output=not settings.DEBUG)

logger = structlog.get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Keep serving when misconfigured so /health can report it
    current = get_settings()
    if not current.OFFICIAL_EMAIL:
        logger.error("missing_official_email", detail="Set OFFICIAL_EMAIL and restart")
    logger.info(
        "startup",
        app=current.APP_NAME,
        ai_provider=current.AI_PROVIDER,
        openai_key_set=bool(current.OPENAI_API_KEY),
        gemini_key_set=bool(current.GEMINI_API_KEY),
    )

    # Initialize global HTTP client for connection pooling
    # timeouts=None removes global default timeout, allowing per-request timeouts
    app.state.http_client = httpx.AsyncClient(timeout=None)

    yield

    await app.state.http_client.aclose()

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Last added runs first: CORS, rate limit, then body size cap
app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.MAX_BODY_BYTES)
app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    return create_error_response(status_code=500, message=exc.message)

@app.exception_handler(PayloadTooLargeError)
async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    return create_error_response(status_code=413, message=exc.message)

@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    return create_error_response(status_code=400, message=exc.message)

@app.exception_handler(AIUnavailableError)
async def ai_unavailable_handler(request: Request, exc: AIUnavailableError):
    return create_error_response(status_code=503, message=exc.message)

@app.exception_handler(AIProviderError)
async def ai_provider_error_handler(request: Request, exc: AIProviderError):
    return create_error_response(
        status_code=502,
        message=exc.message,
        details=exc.detail or None,
    )

@app.exception_handler(BfhlError)
async def bfhl_exception_handler(request: Request, exc: BfhlError):
    return create_error_response(status_code=500, message=exc.message)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return create_error_response(status_code=400, message="Invalid request")

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Wrong method on a known path is reported like any unmatched route
    if exc.status_code in (404, 405):
        return create_error_response(status_code=404, message="Not Found")
    return create_error_response(status_code=exc.status_code, message=str(exc.detail))

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", path=request.url.path)
    return create_error_response(status_code=500, message="Internal server error")


@app.get("/health")
async def health_check(
    official_email: Annotated[str, Depends(require_official_email)],
) -> JSONResponse:
    return JSONResponse(content=BfhlResponse.success(official_email).render())

# Include routers
app.include_router(bfhl_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.HOST, port=settings.PORT)
