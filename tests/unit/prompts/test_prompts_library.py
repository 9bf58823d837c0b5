from pathlib import Path

import pytest

from recipe_kit.prompts import RECIPE_REQUEST_PROMPT, RECIPE_SYSTEM_PROMPT
from recipe_kit.prompts.prompt import Prompt
from recipe_kit.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with two versions of a request prompt."""
    (tmp_path / "request.yaml").write_text(
        """name: request
version: "1.0"
description: Ask for a recipe
inputs:
  query: Dish to generate
template: Generate a recipe for {{ query }}.
"""
    )
    (tmp_path / "request_v2.yaml").write_text(
        """name: request
version: "2.0"
description: Ask for a recipe with a tier note
inputs:
  query: Dish to generate
  tier_note: Extra instruction
template: |
  Generate a recipe for {{query}}.
  {{ tier_note }}
"""
    )
    (tmp_path / "notes.txt").write_text("not a prompt")
    return tmp_path


class TestPromptsLibrary:
    def test_loads_only_yaml_files(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert library.list() == [("request", "1.0"), ("request", "2.0")]

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompt = library.get("request", "1.0")

        assert isinstance(prompt, Prompt)
        assert prompt.description == "Ask for a recipe"
        assert prompt.inputs == {"query": "Dish to generate"}

    def test_get_raises_keyerror_for_unknown_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'request' version '9.9' not found"):
            library.get("request", "9.9")

    def test_empty_directory_loads_no_prompts(self, tmp_path: Path) -> None:
        assert PromptsLibrary(str(tmp_path)).list() == []

    def test_default_library_ships_recipe_prompts(self) -> None:
        library = PromptsLibrary.default()

        assert RECIPE_SYSTEM_PROMPT in library.list()
        assert RECIPE_REQUEST_PROMPT in library.list()


class TestPromptRender:
    def test_fills_placeholders_with_or_without_spaces(
        self, prompts_dir: Path
    ) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("request", "2.0")

        rendered = prompt.render(query="ramen", tier_note="Keep it short.")

        assert rendered == "Generate a recipe for ramen.\nKeep it short.\n"

    def test_missing_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("request", "2.0")

        with pytest.raises(ValueError, match="Missing inputs"):
            prompt.render(query="ramen")

    def test_unknown_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("request", "1.0")

        with pytest.raises(ValueError, match="Unknown inputs"):
            prompt.render(query="ramen", servings="4")

    def test_extra_fields_are_rejected(self) -> None:
        with pytest.raises(ValueError):
            Prompt(
                name="x",
                version="1.0",
                description="",
                inputs={},
                template="",
                author="someone",  # type: ignore[call-arg]
            )

    def test_system_prompt_lists_every_section(self) -> None:
        system = PromptsLibrary.default().get(*RECIPE_SYSTEM_PROMPT).render()

        for heading in ("### Title", "### Ingredients", "### Wine Pairings"):
            assert heading in system
        assert "{{" not in system
