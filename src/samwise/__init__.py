"""Samwise - Transform text with interchangeable LLM backends"""

__version__ = "0.1.0"
__description__ = "Transform text with interchangeable LLM backends (Claude CLI, AtlasCloud, Anthropic, OpenAI)"

__all__ = ["RoutingClient", "process_text", "app", "__version__"]


def __getattr__(name: str):
    """Lazy import so `import samwise.config` does not pull in typer or requests."""
    if name == "RoutingClient":
        from .core.client import RoutingClient

        return RoutingClient
    if name == "process_text":
        from .core.client import process_text

        return process_text
    if name == "app":
        from .main import app

        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
