"""Google Gemini generateContent provider."""

from typing import Any

import httpx

from .client import post_json


class GeminiProvider:
    """Answers questions through the Gemini ``generateContent`` REST API.

    The key travels in the ``x-goog-api-key`` header rather than the query
    string so it cannot leak through URLs in transport error messages.
    """

    name = "gemini"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = "gemini-2.5-flash",
        api_base: str = "https://generativelanguage.googleapis.com/v1beta",
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
            "contents": [{"role": "user", "parts": [{"text": question}]}],
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "generationConfig": {
                "temperature": 0.0,
                "maxOutputTokens": self.max_output_tokens,
                "candidateCount": 1,
                # Thinking tokens count against maxOutputTokens on 2.5 models
                "thinkingConfig": {"thinkingBudget": 0},
            },
        }

    async def generate(self, system_prompt: str, question: str) -> str | None:
        data = await post_json(
            client=self.client,
            provider=self.name,
            url=f"{self.api_base}/models/{self.model}:generateContent",
            payload=self.build_payload(system_prompt, question),
            headers={
                "x-goog-api-key": self.api_key,
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
            secret=self.api_key,
        )
        return extract_text(data)


def extract_text(data: dict[str, Any]) -> str | None:
    """Concatenate the text parts of the first candidate."""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    if not isinstance(first, dict):
        return None
    content = first.get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list):
        return None

    texts = [
        part["text"]
        for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str) and not part.get("thought")
    ]
    return "".join(texts) or None
