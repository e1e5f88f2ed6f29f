"""Model routing for Samwise.

Maps a model identifier plus the user's routing policy to exactly one
backend. Pure function: no I/O, no state, safe to call from any thread.

Rules are evaluated in order and the first match wins, because identifier
shapes overlap (`anthropic/claude-3-opus` is both namespaced and Claude):

1. Namespaced (`vendor/model`) or allow-listed gateway ids -> AtlasCloud,
   except `anthropic/...` ids go to the local Claude CLI when the CLI is
   preferred and AtlasCloud is not forced.
2. Bare `claude*` ids -> Claude CLI if preferred, else Anthropic API.
3. Bare `gpt*` ids -> OpenAI API.
4. Anything else is unsupported.

The priority of the CLI over the gateway for `anthropic/...` ids is a user
preference that has changed several times; keep it in this table.
"""

from __future__ import annotations

from typing import Callable

from .errors import MissingCredential, UnsupportedModel
from .types import BackendKind, Route, RoutingPolicy

NAMESPACE_SEPARATOR = "/"
LOCAL_PROVIDER_NAMESPACE = "anthropic/"
LOCAL_PROVIDER_PREFIX = "claude"
OPENAI_PREFIX = "gpt"

# Fully-qualified model names served by AtlasCloud
GATEWAY_MODELS = frozenset(
    {
        "openai/gpt-5.1",
        "openai/gpt-5-mini-developer",
        "deepseek-ai/deepseek-v3.2-speciale",
        "google/gemini-2.5-flash",
    }
)


def is_gateway_model(model_id: str) -> bool:
    return NAMESPACE_SEPARATOR in model_id or model_id in GATEWAY_MODELS


def is_local_provider_model(model_id: str) -> bool:
    return model_id.startswith(LOCAL_PROVIDER_PREFIX)


def is_openai_model(model_id: str) -> bool:
    return model_id.startswith(OPENAI_PREFIX)


def _route_gateway(model_id: str, policy: RoutingPolicy) -> Route:
    if (
        model_id.startswith(LOCAL_PROVIDER_NAMESPACE)
        and policy.prefer_local_cli
        and not policy.force_remote_for_local_provider
    ):
        return Route(BackendKind.CLAUDE_CLI, model_id)

    if not policy.remote_gateway_api_key:
        if policy.force_remote_for_local_provider and model_id.startswith(LOCAL_PROVIDER_NAMESPACE):
            raise MissingCredential(
                "atlascloud_api_key", "AtlasCloud is forced for Claude models"
            )
        raise MissingCredential("atlascloud_api_key")
    return Route(BackendKind.ATLASCLOUD, model_id, policy.remote_gateway_api_key)


def _route_local_provider(model_id: str, policy: RoutingPolicy) -> Route:
    if policy.prefer_local_cli:
        return Route(BackendKind.CLAUDE_CLI, model_id)
    if policy.local_provider_api_key:
        return Route(BackendKind.ANTHROPIC, model_id, policy.local_provider_api_key)
    raise MissingCredential("anthropic_api_key", "Claude CLI is disabled")


def _route_openai(model_id: str, policy: RoutingPolicy) -> Route:
    if policy.openai_api_key:
        return Route(BackendKind.OPENAI, model_id, policy.openai_api_key)
    raise MissingCredential("openai_api_key")


_RULES: tuple[tuple[Callable[[str], bool], Callable[[str, RoutingPolicy], Route]], ...] = (
    (is_gateway_model, _route_gateway),
    (is_local_provider_model, _route_local_provider),
    (is_openai_model, _route_openai),
)


def resolve_route(model_id: str, policy: RoutingPolicy) -> Route:
    """Pick the backend for a model.

    Args:
        model_id: Identifier chosen from the model catalog.
        policy: Current routing policy (CLI preference and API keys).

    Returns:
        Route naming the backend and the credential it must use.

    Raises:
        MissingCredential: The matching route needs a key that is absent.
        UnsupportedModel: No rule matches the identifier.
    """
    for matches, route in _RULES:
        if matches(model_id):
            return route(model_id, policy)
    raise UnsupportedModel(model_id)
