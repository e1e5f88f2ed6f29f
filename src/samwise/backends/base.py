"""REST backend base class for Samwise.

Every HTTP backend owns its endpoint, its auth headers and its own
request/response envelope; only the transport and the error mapping are
shared here. One POST per call with a bounded timeout, no retries.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import requests

from ..core.errors import NonSuccessStatus, TransportFailed, UnparsableResponse
from ..core.types import UnifiedRequest

logger = logging.getLogger(__name__)


class RestBackend(ABC):
    """Abstract base class for JSON-over-HTTP chat backends.

    Subclasses provide:
        endpoint: URL receiving the POST
        auth_headers(): provider-specific credential headers
        build_payload(): unified request -> provider JSON body
        extract_text(): provider JSON body -> text, or None if unknown shape

    Usage:
        backend = OpenAIBackend(api_key="sk-...")
        text = backend.send(UnifiedRequest("Fix grammar", "teh text"), "gpt-4")
    """

    endpoint: str = ""

    # Caller model id -> id accepted by the provider (identity when absent)
    MODEL_ALIASES: dict[str, str] = {}

    def __init__(self, api_key: str, timeout: float = 60.0):
        self.api_key = api_key
        self.timeout = timeout

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name (e.g. 'OpenAI', 'AtlasCloud')."""

    @abstractmethod
    def auth_headers(self) -> dict[str, str]:
        """Credential headers for this provider."""

    @abstractmethod
    def build_payload(self, request: UnifiedRequest, model: str) -> dict[str, Any]:
        """Encode the unified request in this provider's schema."""

    @abstractmethod
    def extract_text(self, data: Any) -> str | None:
        """Pull the generated text out of a success body, or return None."""

    def map_model(self, model_id: str) -> str:
        return self.MODEL_ALIASES.get(model_id, model_id)

    def error_hint(self, status: int, body: str, model: str) -> str:
        """Extra guidance appended to non-2xx errors. Override per provider."""
        return ""

    def headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", **self.auth_headers()}

    def send(self, request: UnifiedRequest, model_id: str) -> str:
        model = self.map_model(model_id)
        logger.info(
            "📤 Calling %s API: model=%s (mapped from %s), system prompt %d chars, content %d chars",
            self.name,
            model,
            model_id,
            len(request.system_prompt),
            len(request.user_content),
        )
        payload = self.build_payload(request, model)

        try:
            response = requests.post(
                self.endpoint,
                headers=self.headers(),
                json=payload,
                timeout=self.timeout,
            )
        except (requests.RequestException, UnicodeEncodeError) as e:
            # UnicodeEncodeError: header values (the API key) must be latin-1
            logger.warning("%s request failed: %s", self.name, e)
            raise TransportFailed(self.name, str(e)) from e

        body = response.text
        if not 200 <= response.status_code < 300:
            logger.warning("%s error response (%s): %s", self.name, response.status_code, body)
            raise NonSuccessStatus(
                self.name,
                response.status_code,
                body,
                hint=self.error_hint(response.status_code, body, model),
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UnparsableResponse(self.name, body) from e

        text = self.extract_text(data)
        if text is None:
            raise UnparsableResponse(self.name, body)

        logger.info("📥 %s response received (%d chars)", self.name, len(text))
        return text


def chat_messages(request: UnifiedRequest) -> list[dict[str, str]]:
    """System message (only when there is an instruction) followed by the user text."""
    messages = []
    if request.system_prompt:
        messages.append({"role": "system", "content": request.system_prompt})
    messages.append({"role": "user", "content": request.user_content})
    return messages


def dig(data: Any, *path: str | int) -> Any:
    """Follow dict keys / list indexes, returning None on any mismatch."""
    node = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or len(node) <= step:
                return None
        elif not isinstance(node, dict) or step not in node:
            return None
        node = node[step]
    return node


def first_string(data: Any, *paths: tuple[str | int, ...]) -> str | None:
    """Return the first path that resolves to a string."""
    for path in paths:
        value = dig(data, *path)
        if isinstance(value, str):
            return value
    return None
