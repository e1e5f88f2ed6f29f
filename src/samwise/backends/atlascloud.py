"""AtlasCloud gateway backend for Samwise.

AtlasCloud fronts several vendors (OpenAI, Anthropic, DeepSeek, Google)
behind one OpenAI-style chat completions endpoint and a single Bearer key.

Documentation: https://atlascloud.ai
"""

from __future__ import annotations

from typing import Any

from ..core.types import UnifiedRequest
from .base import RestBackend, chat_messages, first_string

DEFAULT_PARAMS = {"max_tokens": 2048, "temperature": 0.7}

# Sampling parameters required by specific gateway models
MODEL_PARAMS: dict[str, dict[str, Any]] = {
    "openai/gpt-5.1": {"max_tokens": 128000, "temperature": 1.0, "repetition_penalty": 1.1},
}


class AtlasCloudBackend(RestBackend):
    """Gateway backend.

    Request:  {"model", "messages": [system?, user], "max_tokens", "temperature"}
    Response: OpenAI-style `choices[0].message.content`; some models answer
              with the `output[0].content[0].text` shape instead.
    """

    endpoint = "https://api.atlascloud.ai/v1/chat/completions"

    # Catalog ids are already AtlasCloud ids
    MODEL_ALIASES: dict[str, str] = {}

    @property
    def name(self) -> str:
        return "AtlasCloud"

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def build_payload(self, request: UnifiedRequest, model: str) -> dict[str, Any]:
        return {
            "model": model,
            "messages": chat_messages(request),
            **MODEL_PARAMS.get(model, DEFAULT_PARAMS),
        }

    def extract_text(self, data: Any) -> str | None:
        return first_string(
            data,
            ("choices", 0, "message", "content"),
            ("output", 0, "content", 0, "text"),
        )

    def error_hint(self, status: int, body: str, model: str) -> str:
        lowered = body.lower()
        if status == 404 or "not found" in lowered or "bad request" in lowered:
            return (
                f"Model: {model} may not be available on AtlasCloud. "
                "Try a different model such as 'anthropic/claude-3-haiku' or "
                "'google/gemini-2.5-flash'."
            )
        return ""
