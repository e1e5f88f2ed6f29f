"""Core ports (interfaces) for Samwise.

These protocols define the boundary between the routing core and the
vendor-specific backends. They are intentionally small so that a backend can
be swapped for a fake in tests.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from .types import Route, UnifiedRequest


@runtime_checkable
class Backend(Protocol):
    """One backend integration (local process or REST endpoint)."""

    name: str

    def send(self, request: UnifiedRequest, model_id: str) -> str:
        """Send the request and return the transformed text.

        Raises:
            BackendError: on any failure; never retried.
        """


BackendFactory = Callable[[Route], Backend]
