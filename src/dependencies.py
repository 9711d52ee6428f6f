"""Global dependencies for the application."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from src.ai import AIProvider, build_ai_provider
from src.config import Settings, get_settings
from src.exceptions import ConfigurationError


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency to get the global shared HTTP client.

    This client is initialized in main.py lifespan and shared across requests
    to enable connection pooling (keep-alive).

    Args:
        request: The FastAPI request object.

    Returns:
        The global httpx.AsyncClient instance.
    """
    return request.app.state.http_client


async def require_official_email(
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Dependency that fails closed when the service identity is missing.

    Raises:
        ConfigurationError: If OFFICIAL_EMAIL is not set.
    """
    if not settings.OFFICIAL_EMAIL:
        raise ConfigurationError("OFFICIAL_EMAIL")
    return settings.OFFICIAL_EMAIL


async def get_ai_provider(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> AIProvider | None:
    """Dependency returning the configured AI provider, or None without a key."""
    return build_ai_provider(settings, client)
