"""Instruction templates for Samwise, with user overrides from prompts.json."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

RAW_PROMPT_ID = "raw"


@dataclass(frozen=True)
class Prompt:
    """One entry of the prompt catalog."""

    id: str
    name: str
    description: str
    system_prompt: str
    icon: str = ""


DEFAULT_PROMPTS: tuple[Prompt, ...] = (
    Prompt(
        id="fix_grammar",
        name="Fix Grammar",
        description="Correct grammar, spelling, and punctuation",
        system_prompt=(
            "Please correct the grammar, spelling, and punctuation in the text below. "
            "Keep the original meaning, tone, and intent exactly the same. Do not add new "
            "information or remove anything. Return only the corrected version."
        ),
        icon="✓",
    ),
    Prompt(
        id="improve_text",
        name="Improve Text",
        description="Make text clearer and smoother",
        system_prompt=(
            "Please rewrite the text below to make it clearer and smoother, but keep the "
            "same meaning. Use simple, everyday words (no fancy or technical vocabulary). "
            "Don't make it longer than necessary but you can make up to 50 percent longer, "
            "and keep the style sounding like the original. Return only the improved version."
        ),
        icon="✨",
    ),
    Prompt(
        id="summarize",
        name="Summarize",
        description="Create a concise summary",
        system_prompt=(
            "Please summarize the text below in a clear, concise way while keeping the main "
            "ideas and key details. Don't add new information or opinions. Keep the tone "
            "neutral and accurate."
        ),
        icon="📝",
    ),
    Prompt(
        id="expand",
        name="Expand",
        description="Add more detail and context",
        system_prompt=(
            "Please expand on the text below by adding relevant details. Keep the original "
            "meaning and tone without using complex words, but make it more comprehensive "
            "and informative. Return only the expanded version."
        ),
        icon="📖",
    ),
    Prompt(
        id="simplify",
        name="Simplify",
        description="Make text easier to understand",
        system_prompt=(
            "Please rewrite the text below using simpler language that anyone can "
            "understand. Keep the same meaning but use shorter sentences and common words. "
            "Make it clear and straightforward."
        ),
        icon="💡",
    ),
    Prompt(
        id="professional",
        name="Make Professional",
        description="Convert to formal business tone",
        system_prompt=(
            "Please rewrite the text below in a professional, business-appropriate tone. "
            "Use formal language while keeping it clear and concise. Maintain the original "
            "meaning and key points."
        ),
        icon="💼",
    ),
    Prompt(
        id=RAW_PROMPT_ID,
        name="Raw",
        description="Send the text as-is, without any instruction",
        system_prompt="",
        icon="⌨",
    ),
)


class UnknownPrompt(KeyError):
    """Raised when a prompt id is not in the catalog."""


class PromptCatalog:
    """Default prompts merged with the user's prompts.json."""

    def __init__(self, prompts_path: Path | str | None = None):
        """Initialize the catalog.

        Args:
            prompts_path: Path to the user prompts JSON file.
                          If None, uses the configured location
                          (~/.config/samwise/prompts.json by default)
        """
        if prompts_path is None:
            from .config import config

            self.prompts_path = config.PROMPTS_FILE
        else:
            self.prompts_path = Path(prompts_path)

        self._prompts: dict[str, Prompt] = {}
        self._load()

    def _load(self) -> None:
        self._prompts = {p.id: p for p in DEFAULT_PROMPTS}

        if not self.prompts_path.exists():
            self._create_default_file()
            return

        try:
            with open(self.prompts_path, encoding="utf-8") as f:
                data = json.load(f)
            entries = data.get("prompts", []) if isinstance(data, dict) else []
            for entry in entries:
                prompt = _prompt_from_dict(entry)
                if prompt is None:
                    logger.warning("Skipping invalid prompt entry in %s: %r", self.prompts_path, entry)
                    continue
                self._prompts[prompt.id] = prompt
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read %s (%s), using default prompts", self.prompts_path, e)
            self._prompts = {p.id: p for p in DEFAULT_PROMPTS}

    def _create_default_file(self) -> None:
        data = {"prompts": [asdict(p) for p in DEFAULT_PROMPTS]}
        try:
            self.prompts_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.prompts_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning("Could not create %s: %s", self.prompts_path, e)

    def reload(self) -> None:
        """Reload the prompts from disk."""
        self._load()

    def get(self, prompt_id: str) -> Prompt:
        try:
            return self._prompts[prompt_id]
        except KeyError:
            raise UnknownPrompt(prompt_id) from None

    def all(self) -> list[Prompt]:
        return list(self._prompts.values())

    def __contains__(self, prompt_id: str) -> bool:
        return prompt_id in self._prompts


def _prompt_from_dict(entry) -> Prompt | None:
    if not isinstance(entry, dict):
        return None
    prompt_id = entry.get("id")
    system_prompt = entry.get("system_prompt")
    if not isinstance(prompt_id, str) or not prompt_id or not isinstance(system_prompt, str):
        return None
    return Prompt(
        id=prompt_id,
        name=str(entry.get("name") or prompt_id),
        description=str(entry.get("description", "")),
        system_prompt=system_prompt,
        icon=str(entry.get("icon", "")),
    )
