"""AI module - Single-word answers from an external text-generation provider."""

from .protocols import AIProvider
from .exceptions import (
    AIServiceError,
    AIUnavailableError,
    AIProviderError,
    AINoAnswerError,
)
from .openai_provider import OpenAIProvider
from .gemini_provider import GeminiProvider
from .service import (
    SYSTEM_PROMPT,
    answer_question,
    build_ai_provider,
    normalize_answer,
)


__all__ = [
    # Protocol
    "AIProvider",
    # Exceptions
    "AIServiceError",
    "AIUnavailableError",
    "AIProviderError",
    "AINoAnswerError",
    # Providers
    "OpenAIProvider",
    "GeminiProvider",
    # Service
    "SYSTEM_PROMPT",
    "answer_question",
    "build_ai_provider",
    "normalize_answer",
]
