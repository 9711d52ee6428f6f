"""Shared HTTP plumbing for provider calls."""

from typing import Any

import httpx

from .exceptions import AIProviderError


REDACTED = "***"


def redact(text: str, secret: str) -> str:
    """Remove ``secret`` from ``text`` so diagnostics never carry credentials."""
    if secret:
        return text.replace(secret, REDACTED)
    return text


async def post_json(
    client: httpx.AsyncClient,
    provider: str,
    url: str,
    payload: dict[str, Any],
    headers: dict[str, str],
    timeout: float,
    secret: str = "",
) -> dict[str, Any]:
    """POST a JSON payload to a provider and decode the JSON reply.

    Args:
        client: Shared HTTP client.
        provider: Provider name for error reporting.
        url: Endpoint URL.
        payload: JSON request body.
        headers: Request headers (including credentials).
        timeout: Request timeout in seconds.
        secret: Credential to scrub from any diagnostic text.

    Returns:
        Decoded JSON object.

    Raises:
        AIProviderError: On timeout, transport failure, HTTP error status,
            or a body that is not a JSON object.
    """
    try:
        response = await client.post(
            url,
            json=payload,
            headers=headers,
            timeout=timeout,
        )
    except httpx.TimeoutException:
        raise AIProviderError(
            provider=provider,
            detail=f"Request timed out after {timeout}s",
        )
    except httpx.RequestError as e:
        raise AIProviderError(
            provider=provider,
            detail=redact(f"Request failed: {e}", secret),
        )

    if response.status_code >= 400:
        raise AIProviderError(
            provider=provider,
            status_code=response.status_code,
            detail=redact(response.text[:200], secret),  # Truncate for safety
        )

    try:
        data = response.json()
    except ValueError:
        raise AIProviderError(
            provider=provider,
            status_code=response.status_code,
            detail="Provider returned malformed JSON",
        )
    if not isinstance(data, dict):
        raise AIProviderError(
            provider=provider,
            status_code=response.status_code,
            detail="Provider returned an unexpected payload",
        )
    return data
