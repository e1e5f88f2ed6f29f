"""Core orchestration for Samwise.

Keeps the route -> build backend -> send pipeline in one place, decoupled
from the vendor-specific backends via ports. One call is one synchronous
subprocess run or HTTP round-trip; run it off the UI thread.
"""

from __future__ import annotations

import logging

from .cancel_token import CancelToken
from .errors import BackendError, EmptyResponse
from .ports import BackendFactory
from .router import resolve_route
from .types import BackendKind, ProcessResult, RoutingPolicy, UnifiedRequest

logger = logging.getLogger(__name__)


class RoutingClient:
    """Single entry point used by the surrounding application.

    Holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(self, backend_factory: BackendFactory | None = None):
        if backend_factory is None:
            from ..backends.factory import build_backend

            backend_factory = build_backend
        self._build_backend = backend_factory

    def process(
        self,
        system_prompt: str,
        user_content: str,
        model_id: str,
        policy: RoutingPolicy,
        cancel_token: CancelToken | None = None,
    ) -> ProcessResult:
        """Transform text with the backend the model routes to.

        Args:
            system_prompt: Instruction; empty string for raw passthrough.
            user_content: Text to transform, passed through untouched.
            model_id: Identifier from the model catalog.
            policy: Routing flags and credentials for this call.
            cancel_token: Optional token; a cancelled call returns `Cancelled`
                instead of the backend result.

        Returns:
            ProcessResult with the backend text unchanged, or the error.
        """
        request = UnifiedRequest(system_prompt=system_prompt, user_content=user_content)
        backend_kind: BackendKind | None = None

        try:
            route = resolve_route(model_id, policy)
            backend_kind = route.backend
            backend = self._build_backend(route)

            if cancel_token is not None:
                cancel_token.raise_if_cancelled()

            text = backend.send(request, route.model_id)

            if cancel_token is not None:
                cancel_token.raise_if_cancelled()

            if text == "" and policy.empty_response_is_error:
                raise EmptyResponse(backend.name)

        except BackendError as e:
            logger.warning("✗ %s failed (%s): %s", model_id, type(e).__name__, e)
            return ProcessResult(error=e, backend=backend_kind, model_id=model_id)

        logger.info("✓ %s succeeded via %s (%d chars)", model_id, backend_kind.value, len(text))
        return ProcessResult(text=text, backend=backend_kind, model_id=model_id)


def process_text(
    system_prompt: str,
    user_content: str,
    model_id: str,
    policy: RoutingPolicy,
    cancel_token: CancelToken | None = None,
) -> ProcessResult:
    """Module-level shortcut for `RoutingClient().process(...)`."""
    return RoutingClient().process(system_prompt, user_content, model_id, policy, cancel_token)
