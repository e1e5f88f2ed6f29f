import pytest
from typer.testing import CliRunner

from samwise import main as cli
from samwise.core.errors import MissingCredential
from samwise.core.types import BackendKind, ProcessResult, RoutingPolicy
from samwise.prompt_catalog import PromptCatalog


class _Client:
    calls: list = []
    result = ProcessResult(text="Fixed text", backend=BackendKind.OPENAI, model_id="gpt-4")

    def process(self, system_prompt, user_content, model_id, policy, cancel_token=None):
        _Client.calls.append((system_prompt, user_content, model_id, policy))
        return _Client.result


@pytest.fixture
def fake_cli(monkeypatch, tmp_path):
    _Client.calls = []
    _Client.result = ProcessResult(text="Fixed text", backend=BackendKind.OPENAI, model_id="gpt-4")
    monkeypatch.setattr(cli, "RoutingClient", _Client)
    monkeypatch.setattr(cli, "PromptCatalog", lambda: PromptCatalog(tmp_path / "prompts.json"))
    monkeypatch.setattr(cli, "load_routing_policy", lambda: RoutingPolicy(openai_api_key="sk"))
    monkeypatch.setattr(cli, "selected_model", lambda: "claude-3-5-sonnet")
    return _Client


def test_apply_prints_result(fake_cli):
    result = CliRunner().invoke(cli.app, ["apply", "teh text", "-p", "fix_grammar", "-m", "gpt-4"])

    assert result.exit_code == 0
    assert "Fixed text" in result.output
    system_prompt, user_content, model_id, _ = fake_cli.calls[0]
    assert system_prompt.startswith("Please correct the grammar")
    assert user_content == "teh text"
    assert model_id == "gpt-4"


def test_apply_reads_stdin_and_uses_selected_model(fake_cli):
    result = CliRunner().invoke(cli.app, ["apply", "-p", "raw"], input="from stdin\n")

    assert result.exit_code == 0
    system_prompt, user_content, model_id, _ = fake_cli.calls[0]
    assert system_prompt == ""
    assert user_content == "from stdin\n"
    assert model_id == "claude-3-5-sonnet"


def test_apply_reads_selection(fake_cli, monkeypatch):
    monkeypatch.setattr(cli, "get_primary_selection", lambda: "highlighted")

    result = CliRunner().invoke(cli.app, ["apply", "--selection"])

    assert result.exit_code == 0
    assert fake_cli.calls[0][1] == "highlighted"


def test_apply_without_selection(fake_cli, monkeypatch):
    monkeypatch.setattr(cli, "get_primary_selection", lambda: None)

    result = CliRunner().invoke(cli.app, ["apply", "--selection"])

    assert result.exit_code == 2
    assert fake_cli.calls == []


def test_apply_copies_result(fake_cli, monkeypatch):
    copied = []
    monkeypatch.setattr(cli, "set_clipboard", lambda text: copied.append(text) or True)

    result = CliRunner().invoke(cli.app, ["apply", "text", "--copy"])

    assert result.exit_code == 0
    assert copied == ["Fixed text"]


def test_apply_failure_exits_non_zero(fake_cli):
    fake_cli.result = ProcessResult(error=MissingCredential("openai_api_key"), model_id="gpt-4")

    result = CliRunner().invoke(cli.app, ["apply", "text", "-m", "gpt-4"])

    assert result.exit_code == 1
    assert "openai_api_key" in result.output


def test_apply_unknown_prompt(fake_cli):
    result = CliRunner().invoke(cli.app, ["apply", "text", "-p", "nope"])

    assert result.exit_code == 2
    assert fake_cli.calls == []


def test_prompts_lists_catalog(fake_cli):
    result = CliRunner().invoke(cli.app, ["prompts"])

    assert result.exit_code == 0
    assert "fix_grammar" in result.output
    assert "raw" in result.output


def test_models_shows_routes(fake_cli):
    result = CliRunner().invoke(cli.app, ["models"])

    assert result.exit_code == 0
    lines = {line[2:].split()[0]: line for line in result.output.splitlines() if line.strip()}
    assert lines["gpt-4"].endswith("-> openai")
    assert "atlascloud_api_key" in lines["openai/gpt-5.1"]
    assert lines["claude-3-5-sonnet"].startswith("*")


def test_check_cli(monkeypatch):
    monkeypatch.setattr(cli, "check_cli_available", lambda command: True)
    assert CliRunner().invoke(cli.app, ["check-cli"]).exit_code == 0

    monkeypatch.setattr(cli, "check_cli_available", lambda command: False)
    result = CliRunner().invoke(cli.app, ["check-cli"])
    assert result.exit_code == 1
    assert "install" in result.output
