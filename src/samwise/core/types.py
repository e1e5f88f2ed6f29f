"""Core value types for Samwise (structured view).

All of these are built fresh for one call and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import BackendError


class BackendKind(Enum):
    """Backend integrations a model identifier can be routed to."""

    CLAUDE_CLI = "claude_cli"  # Local `claude` executable
    ATLASCLOUD = "atlascloud"  # Aggregation gateway
    ANTHROPIC = "anthropic"  # First-party Messages API
    OPENAI = "openai"  # First-party Chat Completions API


@dataclass(frozen=True)
class UnifiedRequest:
    """Instruction + text pair handed to every backend.

    Attributes:
        system_prompt: Instruction for the model. Empty string means raw
            passthrough: no instruction is sent at all.
        user_content: Text to transform. Never altered by the client.
    """

    system_prompt: str
    user_content: str


@dataclass(frozen=True)
class RoutingPolicy:
    """User policy flags and credentials, supplied on every call."""

    prefer_local_cli: bool = True
    force_remote_for_local_provider: bool = False
    local_provider_api_key: str | None = None
    remote_gateway_api_key: str | None = None
    openai_api_key: str | None = None
    empty_response_is_error: bool = False


@dataclass(frozen=True)
class Route:
    """Routing decision: which backend handles a model, with which key."""

    backend: BackendKind
    model_id: str
    api_key: str | None = None


@dataclass(frozen=True)
class ProcessResult:
    """Normalized outcome of one call, either transformed text or an error."""

    text: str | None = None
    error: BackendError | None = None
    backend: BackendKind | None = None
    model_id: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Transformed text on success, human-readable error otherwise."""
        if self.error is not None:
            return str(self.error)
        return self.text or ""
