"""Anthropic Messages API backend for Samwise.

Used for bare `claude-*` models when the Claude CLI is disabled.

Documentation: https://docs.anthropic.com/en/api/messages
"""

from __future__ import annotations

from typing import Any

from ..core.types import UnifiedRequest
from .base import RestBackend, dig

ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 4096


class AnthropicBackend(RestBackend):
    """Anthropic backend.

    Request:  {"model", "system"?, "messages": [user], "max_tokens"}
              The instruction is a top-level field, not a message.
    Response: text blocks in `content[]`; legacy completions answer with a
              top-level `completion` string.
    """

    endpoint = "https://api.anthropic.com/v1/messages"

    # Short catalog names -> dated API model ids
    MODEL_ALIASES = {
        "claude-3-5-sonnet": "claude-3-5-sonnet-20241022",
        "claude-3-opus": "claude-3-opus-20240229",
        "claude-3-haiku": "claude-3-haiku-20240307",
    }

    @property
    def name(self) -> str:
        return "Anthropic"

    def auth_headers(self) -> dict[str, str]:
        return {"x-api-key": self.api_key, "anthropic-version": ANTHROPIC_VERSION}

    def build_payload(self, request: UnifiedRequest, model: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": model,
            "messages": [{"role": "user", "content": request.user_content}],
            "max_tokens": MAX_TOKENS,
        }
        if request.system_prompt:
            payload["system"] = request.system_prompt
        return payload

    def extract_text(self, data: Any) -> str | None:
        blocks = dig(data, "content")
        if isinstance(blocks, list):
            for block in blocks:
                if isinstance(block, dict) and isinstance(block.get("text"), str):
                    return block["text"]

        completion = dig(data, "completion")
        if isinstance(completion, str):
            return completion
        return None
