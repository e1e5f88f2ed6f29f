"""Backend error taxonomy.

Adapters raise these; `RoutingClient.process` turns them into a
`ProcessResult`. None of them trigger a retry or a fallback backend.
"""

from __future__ import annotations


class BackendError(RuntimeError):
    """Base class for every failure a backend call can end with."""


class MissingCredential(BackendError):
    """The selected route needs an API key that is not configured."""

    def __init__(self, which: str, detail: str = ""):
        self.which = which
        message = f"No {which} configured"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnsupportedModel(BackendError):
    def __init__(self, model_id: str):
        self.model_id = model_id
        super().__init__(f"Unsupported model: {model_id!r}")


class ProcessLaunchFailed(BackendError):
    """The local executable could not be started at all."""

    def __init__(self, command: str, cause: str, hint: str):
        self.command = command
        self.cause = cause
        self.hint = hint
        super().__init__(f"Failed to execute {command}: {cause}. {hint}")


class ProcessExitedNonZero(BackendError):
    def __init__(self, command: str, stderr: str, returncode: int | None = None):
        self.command = command
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(
            f"{command} exited with status {returncode}: {stderr.strip()}\n\n"
            f"Make sure {command} is installed and authenticated."
        )


class ProcessTimedOut(BackendError):
    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command} did not finish within {timeout:g}s")


class TransportFailed(BackendError):
    """The HTTP request never produced a response (DNS, TLS, timeout...)."""

    def __init__(self, backend: str, cause: str):
        self.backend = backend
        self.cause = cause
        super().__init__(f"{backend} request failed: {cause}")


class NonSuccessStatus(BackendError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, backend: str, code: int, body: str, hint: str = ""):
        self.backend = backend
        self.code = code
        self.body = body
        message = f"{backend} API error ({code}): {body}"
        if hint:
            message = f"{message}\n{hint}"
        super().__init__(message)


class UnparsableResponse(BackendError):
    """2xx response whose body matches none of the known success shapes."""

    def __init__(self, backend: str, body: str):
        self.backend = backend
        self.body = body
        super().__init__(f"Unexpected {backend} response format. Response: {body}")


class EmptyResponse(BackendError):
    """Backend succeeded with empty text while the policy rejects that."""

    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"{backend} returned an empty response")


class Cancelled(BackendError):
    def __init__(self):
        super().__init__("Request was cancelled")
