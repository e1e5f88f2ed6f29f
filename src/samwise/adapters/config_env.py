"""Env configuration adapter producing a structured RoutingPolicy."""

from __future__ import annotations

from ..config import config
from ..core.types import RoutingPolicy


def load_routing_policy() -> RoutingPolicy:
    return RoutingPolicy(
        prefer_local_cli=config.USE_CLAUDE_CLI,
        force_remote_for_local_provider=config.FORCE_ATLASCLOUD_FOR_CLAUDE,
        local_provider_api_key=config.ANTHROPIC_API_KEY,
        remote_gateway_api_key=config.ATLASCLOUD_API_KEY,
        openai_api_key=config.OPENAI_API_KEY,
        empty_response_is_error=config.EMPTY_RESPONSE_IS_ERROR,
    )


def selected_model() -> str:
    return config.SELECTED_MODEL
