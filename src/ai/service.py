"""Single-word question answering on top of a pluggable provider."""

import re

import httpx
import structlog

from src.config import Settings

from .exceptions import AINoAnswerError, AIProviderError, AIServiceError, AIUnavailableError
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider
from .protocols import AIProvider

logger = structlog.get_logger("ai")


SYSTEM_PROMPT = (
    "You are a concise assistant. Answer with a single word "
    "(the single-word factual answer) only, no punctuation."
)

# Removed anywhere in the first token, not only at its edges
STRIPPED_PUNCTUATION = re.compile(r"[\"'.,?!;:–—-]")


def normalize_answer(text: str) -> str:
    """Reduce provider output to its first token without punctuation.

    Args:
        text: Raw generated text.

    Returns:
        The first whitespace-delimited token with quotes, periods, commas,
        question/exclamation marks, colons, semicolons and dashes removed.
        Empty when nothing remains.
    """
    tokens = text.strip().split()
    if not tokens:
        return ""
    return STRIPPED_PUNCTUATION.sub("", tokens[0])


def build_ai_provider(settings: Settings, client: httpx.AsyncClient) -> AIProvider | None:
    """Create the configured provider, or None when its key is missing.

    Args:
        settings: Application settings.
        client: Shared HTTP client.

    Returns:
        The provider selected by ``AI_PROVIDER``, or None without a credential.
    """
    if settings.AI_PROVIDER == "openai":
        if not settings.OPENAI_API_KEY:
            return None
        return OpenAIProvider(
            client=client,
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            api_base=settings.OPENAI_API_BASE,
            max_output_tokens=settings.AI_MAX_OUTPUT_TOKENS,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    if not settings.GEMINI_API_KEY:
        return None
    return GeminiProvider(
        client=client,
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        api_base=settings.GEMINI_API_BASE,
        max_output_tokens=settings.AI_MAX_OUTPUT_TOKENS,
        timeout=settings.AI_TIMEOUT_SECONDS,
    )


async def answer_question(provider: AIProvider | None, question: str) -> str:
    """Ask ``provider`` for a single-word answer to ``question``.

    One call, no retry, no caching.

    Args:
        provider: Configured provider, or None when AI is disabled.
        question: Validated, non-blank question.

    Returns:
        A single punctuation-free word.

    Raises:
        AIUnavailableError: If no provider is configured.
        AIProviderError: If the call fails or yields no usable answer.
    """
    if provider is None:
        raise AIUnavailableError()

    try:
        raw = await provider.generate(SYSTEM_PROMPT, question)
    except AIServiceError as exc:
        if isinstance(exc, AIProviderError):
            logger.warning(
                "ai_provider_error",
                provider=exc.provider,
                status_code=exc.status_code,
                detail=exc.detail,
            )
        raise
    except Exception as exc:
        logger.exception("ai_provider_failed", provider=provider.name)
        raise AIProviderError(provider=provider.name, detail=f"{type(exc).__name__}: {exc}")

    if not raw or not raw.strip():
        raise AINoAnswerError(provider=provider.name)

    # A punctuation-only reply normalises to "" and is still a success
    answer = normalize_answer(raw)

    logger.info("ai_answer", provider=provider.name, answer=answer)
    return answer
