"""OpenAI chat-completions provider."""

from typing import Any

import httpx

from .client import post_json


class OpenAIProvider:
    """Answers questions through the OpenAI chat completions API."""

    name = "openai"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        api_base: str = "https://api.openai.com/v1",
        max_output_tokens: int = 16,
        timeout: float = 10.0,
    ):
        self.client = client
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout

    def build_payload(self, system_prompt: str, question: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": question},
            ],
            "max_tokens": self.max_output_tokens,
            "temperature": 0.0,
        }

    async def generate(self, system_prompt: str, question: str) -> str | None:
        data = await post_json(
            client=self.client,
            provider=self.name,
            url=f"{self.api_base}/chat/completions",
            payload=self.build_payload(system_prompt, question),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
            secret=self.api_key,
        )
        return extract_text(data)


def extract_text(data: dict[str, Any]) -> str | None:
    """Pull ``choices[0].message.content`` out of a completion response."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None
