"""Platform detection and cross-platform helpers for Samwise"""

import sys

# Platform detection
IS_LINUX = sys.platform.startswith("linux")
IS_MACOS = sys.platform == "darwin"


def cli_install_hint(command: str = "claude") -> str:
    """Remediation text shown when the local Claude executable is missing."""
    if IS_MACOS:
        how = "brew install claude, or npm install -g @anthropic-ai/claude-code"
    else:
        how = "npm install -g @anthropic-ai/claude-code"
    return f"Make sure the {command} CLI is installed and on your PATH ({how})"


def clipboard_install_hint() -> str:
    if IS_LINUX:
        return "xclip not installed. Install with: sudo apt install xclip"
    return "Clipboard access is only supported on Linux/X11"
