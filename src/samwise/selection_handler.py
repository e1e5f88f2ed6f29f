"""Selection and clipboard access for Samwise (X11, via xclip).

Lets the CLI take its input from the highlighted text (PRIMARY selection)
and put the transformed text back on the CLIPBOARD.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from .platform_utils import IS_LINUX, clipboard_install_hint

logger = logging.getLogger(__name__)

XCLIP_TIMEOUT = 2.0


def _xclip_available() -> bool:
    return IS_LINUX and shutil.which("xclip") is not None


def _read(selection: str) -> str | None:
    if not _xclip_available():
        logger.debug(clipboard_install_hint())
        return None
    try:
        result = subprocess.run(
            ["xclip", "-selection", selection, "-o"],
            capture_output=True,
            text=True,
            timeout=XCLIP_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("xclip could not read %s selection: %s", selection, e)
        return None

    if result.returncode == 0 and result.stdout:
        return result.stdout
    return None


def get_primary_selection() -> str | None:
    """Return the currently highlighted text, or None if there is none."""
    return _read("primary")


def get_clipboard() -> str | None:
    """Return the Ctrl+C clipboard contents, or None."""
    return _read("clipboard")


def set_clipboard(text: str) -> bool:
    """Copy text to the clipboard. Returns True on success."""
    if not text or not _xclip_available():
        return False
    try:
        result = subprocess.run(
            ["xclip", "-selection", "clipboard"],
            input=text,
            # xclip keeps serving the selection in the background; don't wait on its output
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=XCLIP_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("xclip could not write clipboard: %s", e)
        return False
    return result.returncode == 0
