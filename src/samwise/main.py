#!/usr/bin/env python3
"""Samwise: transform text with a prompt and your selected LLM backend"""

import logging
import sys

import typer

from .adapters.config_env import load_routing_policy, selected_model
from .backends.claude_cli import check_cli_available
from .config import config
from .core.client import RoutingClient
from .core.errors import BackendError
from .core.router import resolve_route
from .models import MODEL_NAMES
from .platform_utils import cli_install_hint
from .prompt_catalog import PromptCatalog, UnknownPrompt
from .selection_handler import get_primary_selection, set_clipboard

app = typer.Typer(add_completion=False, help="Samwise: transform text with an LLM")


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Verbose logging")) -> None:
    _setup_logging(debug or config.DEBUG)


@app.command()
def apply(
    text: str = typer.Argument(None, help="Text to transform (default: stdin)"),
    prompt_id: str = typer.Option("improve_text", "--prompt", "-p", help="Prompt id"),
    model: str = typer.Option(None, "--model", "-m", help="Model id (default: SAMWISE_MODEL)"),
    selection: bool = typer.Option(False, "--selection", help="Read the highlighted text"),
    copy: bool = typer.Option(False, "--copy", help="Copy the result to the clipboard"),
) -> None:
    """Apply a prompt to some text and print the result."""
    try:
        prompt = PromptCatalog().get(prompt_id)
    except UnknownPrompt:
        typer.echo(f"❌ Unknown prompt: {prompt_id} (see `samwise prompts`)", err=True)
        raise typer.Exit(code=2)

    if text is None:
        if selection:
            text = get_primary_selection()
            if text is None:
                typer.echo("⚠ No text selected", err=True)
                raise typer.Exit(code=2)
        else:
            text = sys.stdin.read()

    model_id = model or selected_model()
    result = RoutingClient().process(prompt.system_prompt, text, model_id, load_routing_policy())

    if not result.ok:
        typer.echo(f"❌ {result.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result.text)
    if copy and not set_clipboard(result.text):
        typer.echo("⚠ Could not copy the result to the clipboard", err=True)


@app.command()
def prompts() -> None:
    """List the available prompts."""
    for prompt in PromptCatalog().all():
        typer.echo(f"{prompt.icon or ' '} {prompt.id:<14} {prompt.name} - {prompt.description}")


@app.command()
def models() -> None:
    """List models and the backend each one routes to."""
    policy = load_routing_policy()
    current = selected_model()
    for model_id, name in MODEL_NAMES.items():
        marker = "*" if model_id == current else " "
        try:
            target = resolve_route(model_id, policy).backend.value
        except BackendError as e:
            target = f"✗ {e}"
        typer.echo(f"{marker} {model_id:<36} {name:<38} -> {target}")


@app.command("check-cli")
def check_cli() -> None:
    """Check that the local Claude CLI can be launched."""
    command = config.CLAUDE_CLI_COMMAND
    if check_cli_available(command):
        typer.echo(f"✓ {command} CLI available")
        return
    typer.echo(f"✗ {command} CLI not available. {cli_install_hint(command)}", err=True)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
