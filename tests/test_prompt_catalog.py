import json

import pytest

from samwise.prompt_catalog import DEFAULT_PROMPTS, RAW_PROMPT_ID, PromptCatalog, UnknownPrompt


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "samwise" / "prompts.json"

    catalog = PromptCatalog(path)

    assert path.exists()
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert [p["id"] for p in saved["prompts"]] == [p.id for p in DEFAULT_PROMPTS]
    assert catalog.get("fix_grammar").name == "Fix Grammar"


def test_raw_prompt_has_empty_instruction(tmp_path):
    catalog = PromptCatalog(tmp_path / "prompts.json")
    assert catalog.get(RAW_PROMPT_ID).system_prompt == ""


def test_user_prompts_override_and_extend_defaults(tmp_path):
    path = tmp_path / "prompts.json"
    path.write_text(
        json.dumps(
            {
                "prompts": [
                    {"id": "summarize", "name": "TL;DR", "system_prompt": "One sentence."},
                    {"id": "pirate", "system_prompt": "Talk like a pirate."},
                    {"id": "broken"},
                ]
            }
        ),
        encoding="utf-8",
    )

    catalog = PromptCatalog(path)

    assert catalog.get("summarize").system_prompt == "One sentence."
    assert catalog.get("summarize").name == "TL;DR"
    assert catalog.get("pirate").name == "pirate"
    assert "broken" not in catalog
    assert "fix_grammar" in catalog


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "prompts.json"
    path.write_text("{not json", encoding="utf-8")

    catalog = PromptCatalog(path)

    assert len(catalog.all()) == len(DEFAULT_PROMPTS)


def test_reload_picks_up_changes(tmp_path):
    path = tmp_path / "prompts.json"
    catalog = PromptCatalog(path)
    path.write_text(
        json.dumps({"prompts": [{"id": "shout", "system_prompt": "Use capitals."}]}),
        encoding="utf-8",
    )

    catalog.reload()

    assert catalog.get("shout").system_prompt == "Use capitals."


def test_unknown_prompt(tmp_path):
    catalog = PromptCatalog(tmp_path / "prompts.json")
    with pytest.raises(UnknownPrompt):
        catalog.get("does_not_exist")
