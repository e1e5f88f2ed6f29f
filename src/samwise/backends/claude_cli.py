"""Claude CLI backend for Samwise.

Runs the locally installed `claude` executable in print mode:

    claude -p <user_content> [--system-prompt <instruction>]

The instruction argument is left out entirely for raw passthrough (empty
system prompt).
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..core.errors import ProcessExitedNonZero, ProcessLaunchFailed, ProcessTimedOut
from ..core.types import UnifiedRequest
from ..platform_utils import cli_install_hint

logger = logging.getLogger(__name__)

OUTPUT_ONLY_SUFFIX = (
    "IMPORTANT: Return ONLY the processed text. Do not include any explanations, "
    "meta-commentary, questions, or conversational text. Just return the result directly."
)

CODE_FENCE = "```"


def build_system_prompt(system_prompt: str) -> str:
    """Append the output-only instruction; empty stays empty."""
    if not system_prompt:
        return ""
    return f"{system_prompt}\n\n{OUTPUT_ONLY_SUFFIX}"


def strip_code_fence(text: str) -> str:
    """Trim whitespace and a wrapping ``` fence the model may add.

    Repeats until nothing changes, so the result is stable under a second
    call.
    """
    previous = None
    cleaned = text.strip()
    while cleaned != previous:
        previous = cleaned
        if cleaned.startswith(CODE_FENCE):
            cleaned = cleaned[len(CODE_FENCE) :]
        if cleaned.endswith(CODE_FENCE):
            cleaned = cleaned[: -len(CODE_FENCE)]
        cleaned = cleaned.strip()
    return cleaned


class ClaudeCLIBackend:
    """Local process backend wrapping the Claude command-line tool."""

    name = "Claude CLI"

    def __init__(self, command: str = "claude", timeout: float = 120.0):
        self.command = command
        self.timeout = timeout

    def build_args(self, request: UnifiedRequest) -> list[str]:
        args = [self.command, "-p", request.user_content]
        instruction = build_system_prompt(request.system_prompt)
        if instruction:
            args += ["--system-prompt", instruction]
        return args

    def send(self, request: UnifiedRequest, model_id: str) -> str:
        logger.info(
            "📤 Calling Claude CLI for %s (system prompt: %d chars, content: %d chars)",
            model_id,
            len(request.system_prompt),
            len(request.user_content),
        )
        try:
            result = subprocess.run(
                self.build_args(request),
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessTimedOut(self.command, self.timeout) from e
        except (OSError, ValueError) as e:
            # ValueError: arguments containing a NUL byte cannot be passed to exec
            raise ProcessLaunchFailed(self.command, str(e), cli_install_hint(self.command)) from e

        if result.returncode != 0:
            logger.warning("Claude CLI exited with %s: %s", result.returncode, result.stderr)
            raise ProcessExitedNonZero(self.command, result.stderr or "", result.returncode)

        cleaned = strip_code_fence(result.stdout or "")
        logger.info("📥 Claude CLI response received (%d chars)", len(cleaned))
        return cleaned


def check_cli_available(command: str = "claude", timeout: float = 5.0) -> bool:
    """Return True if `<command> --version` can be launched and succeeds."""
    if shutil.which(command) is None:
        return False
    try:
        result = subprocess.run(
            [command, "--version"], capture_output=True, encoding="utf-8", errors="replace", timeout=timeout
        )
    except (OSError, ValueError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0
