"""Provider protocol for the AI delegate."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AIProvider(Protocol):
    """A text-generation backend that answers one question per call."""

    name: str

    async def generate(self, system_prompt: str, question: str) -> str | None:
        """Return the raw generated text, or None when the provider produced none.

        Raises:
            AIProviderError: On transport, authentication or provider-side failures.
        """
        ...
