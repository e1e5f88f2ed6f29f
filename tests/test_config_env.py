from samwise.adapters.config_env import load_routing_policy, selected_model
from samwise.config import config


def test_policy_reflects_config(monkeypatch):
    monkeypatch.setattr(config, "USE_CLAUDE_CLI", False)
    monkeypatch.setattr(config, "FORCE_ATLASCLOUD_FOR_CLAUDE", True)
    monkeypatch.setattr(config, "ANTHROPIC_API_KEY", "sk-ant")
    monkeypatch.setattr(config, "ATLASCLOUD_API_KEY", None)
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-openai")
    monkeypatch.setattr(config, "EMPTY_RESPONSE_IS_ERROR", True)
    monkeypatch.setattr(config, "SELECTED_MODEL", "gpt-4")

    policy = load_routing_policy()

    assert policy.prefer_local_cli is False
    assert policy.force_remote_for_local_provider is True
    assert policy.local_provider_api_key == "sk-ant"
    assert policy.remote_gateway_api_key is None
    assert policy.openai_api_key == "sk-openai"
    assert policy.empty_response_is_error is True
    assert selected_model() == "gpt-4"


def test_policy_is_built_fresh_each_call(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "first")
    first = load_routing_policy()
    monkeypatch.setattr(config, "OPENAI_API_KEY", "second")

    assert first.openai_api_key == "first"
    assert load_routing_policy().openai_api_key == "second"
