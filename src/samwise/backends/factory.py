"""Backend factory for Samwise.

Turns a routing decision into a ready-to-use backend. Backends are built
fresh for every call; nothing is cached between calls.

Usage:
    route = resolve_route("gpt-4", policy)
    backend = build_backend(route)
    text = backend.send(request, route.model_id)
"""

from __future__ import annotations

from ..config import config
from ..core.errors import MissingCredential
from ..core.ports import Backend
from ..core.types import BackendKind, Route
from .anthropic import AnthropicBackend
from .atlascloud import AtlasCloudBackend
from .claude_cli import ClaudeCLIBackend
from .openai import OpenAIBackend

_REST_BACKENDS = {
    BackendKind.ATLASCLOUD: (AtlasCloudBackend, "atlascloud_api_key"),
    BackendKind.ANTHROPIC: (AnthropicBackend, "anthropic_api_key"),
    BackendKind.OPENAI: (OpenAIBackend, "openai_api_key"),
}


def build_backend(route: Route) -> Backend:
    """Create the backend a route points at.

    Args:
        route: Decision returned by `resolve_route`.

    Returns:
        Backend instance configured with the route's credential and the
        configured timeouts.
    """
    if route.backend is BackendKind.CLAUDE_CLI:
        return ClaudeCLIBackend(command=config.CLAUDE_CLI_COMMAND, timeout=config.CLI_TIMEOUT)

    backend_cls, key_name = _REST_BACKENDS[route.backend]
    if not route.api_key:
        raise MissingCredential(key_name)
    return backend_cls(api_key=route.api_key, timeout=config.LLM_TIMEOUT)
