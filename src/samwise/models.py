"""Model catalog shown in the Samwise model menu."""

MODEL_NAMES: dict[str, str] = {
    "gpt-4": "GPT-4",
    "gpt-3.5-turbo": "GPT-3.5 Turbo",
    "claude-3-5-sonnet": "Claude 3.5 Sonnet",
    "claude-3-opus": "Claude 3 Opus",
    "claude-3-haiku": "Claude 3 Haiku",
    "openai/gpt-5.1": "GPT-5.1 (AtlasCloud)",
    "deepseek-ai/deepseek-v3.2-speciale": "DeepSeek V3.2 Speciale (AtlasCloud)",
    "openai/gpt-5-mini-developer": "GPT-5 Mini Developer (AtlasCloud)",
    "google/gemini-2.5-flash": "Gemini 2.5 Flash (AtlasCloud)",
    "anthropic/claude-3-5-sonnet": "Claude 3.5 Sonnet (AtlasCloud)",
    "anthropic/claude-3-opus": "Claude 3 Opus (AtlasCloud)",
    "anthropic/claude-3-haiku": "Claude 3 Haiku (AtlasCloud)",
}
