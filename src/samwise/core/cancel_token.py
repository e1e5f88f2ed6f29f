"""Cancellation token for in-flight requests.

Cancelling does not kill a running process or HTTP request; the client only
checks the token before dispatch and discards the result afterwards.
"""

from __future__ import annotations

import threading

from .errors import Cancelled


class CancelToken:
    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise Cancelled()
