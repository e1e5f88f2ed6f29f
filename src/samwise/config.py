"""Configuration for Samwise"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_key(name: str) -> str | None:
    # Empty values count as "not configured"
    return os.getenv(name, "").strip() or None


class Config:
    """Environment-backed configuration"""

    # Paths
    CONFIG_DIR = Path(os.getenv("SAMWISE_CONFIG_DIR", str(Path.home() / ".config" / "samwise")))
    PROMPTS_FILE = CONFIG_DIR / "prompts.json"

    # Model selected in the app menu
    SELECTED_MODEL = os.getenv("SAMWISE_MODEL", "claude-3-5-sonnet")

    # Routing preferences
    USE_CLAUDE_CLI = _get_bool("USE_CLAUDE_CLI", True)
    FORCE_ATLASCLOUD_FOR_CLAUDE = _get_bool("FORCE_ATLASCLOUD_FOR_CLAUDE", False)

    # API keys
    ANTHROPIC_API_KEY = _get_key("ANTHROPIC_API_KEY")
    ATLASCLOUD_API_KEY = _get_key("ATLASCLOUD_API_KEY")
    OPENAI_API_KEY = _get_key("OPENAI_API_KEY")

    # Local executable
    CLAUDE_CLI_COMMAND = os.getenv("CLAUDE_CLI_COMMAND", "claude")

    # Timeouts (seconds)
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))
    CLI_TIMEOUT = float(os.getenv("CLI_TIMEOUT", "120"))

    # Treat a successful but empty model answer as a failure
    EMPTY_RESPONSE_IS_ERROR = _get_bool("EMPTY_RESPONSE_IS_ERROR", False)

    DEBUG = _get_bool("DEBUG", False)


config = Config()
