"""OpenAI Chat Completions backend for Samwise.

Used for bare `gpt-*` models.

Documentation: https://platform.openai.com/docs/api-reference/chat
"""

from __future__ import annotations

from typing import Any

from ..core.types import UnifiedRequest
from .base import RestBackend, chat_messages, first_string

MAX_TOKENS = 4096
TEMPERATURE = 0.7


class OpenAIBackend(RestBackend):
    """OpenAI backend.

    Request:  {"model", "messages": [system?, user], "max_tokens", "temperature"}
    Response: `choices[0].message.content`, or the Responses API shape
              `output[0].content[0].text`.
    """

    endpoint = "https://api.openai.com/v1/chat/completions"

    @property
    def name(self) -> str:
        return "OpenAI"

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def build_payload(self, request: UnifiedRequest, model: str) -> dict[str, Any]:
        return {
            "model": model,
            "messages": chat_messages(request),
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
        }

    def extract_text(self, data: Any) -> str | None:
        return first_string(
            data,
            ("choices", 0, "message", "content"),
            ("output", 0, "content", 0, "text"),
        )
