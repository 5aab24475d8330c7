"""Unit tests for the LLM service wrapper."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from skillpath.modules.llm.service import LLMService
from skillpath.shared.config import Settings
from skillpath.shared.exceptions import MissingCredentialError


@pytest.fixture
def unconfigured():
    return LLMService(Settings(anthropic_api_key=None))


class TestPromptTemplates:
    """Tests for prompt template loading."""

    def test_load_learning_path_template(self, unconfigured):
        template = unconfigured.load_prompt_template("recommendation/learning_path")
        assert "learning advisor" in template.system
        assert "{{goals}}" in template.user
        assert template.variables == [
            "goals", "skills", "current_level", "time_available", "catalog"
        ]

    def test_format_substitutes_variables(self, unconfigured):
        template = unconfigured.load_prompt_template("recommendation/project_idea")
        _, user = template.format(skills="Python", difficulty="advanced", category="data-science")
        assert "Skills: Python" in user
        assert '"difficulty": "advanced"' in user
        assert "{{" not in user

    def test_templates_are_cached(self, unconfigured):
        first = unconfigured.load_prompt_template("recommendation/project_idea")
        assert unconfigured.load_prompt_template("recommendation/project_idea") is first

    @pytest.mark.parametrize("name", ["../secrets", "/etc/passwd", "recommendation/x.txt"])
    def test_rejects_unsafe_names(self, unconfigured, name):
        with pytest.raises(ValueError):
            unconfigured.load_prompt_template(name)

    def test_missing_template(self, unconfigured):
        with pytest.raises(FileNotFoundError):
            unconfigured.load_prompt_template("recommendation/missing")


class TestComplete:
    """Tests for completions."""

    def test_not_configured_without_key(self, unconfigured):
        assert unconfigured.is_configured is False
        with pytest.raises(MissingCredentialError):
            unconfigured.client

    @pytest.mark.asyncio
    async def test_complete_joins_text_blocks(self):
        service = LLMService(Settings(anthropic_api_key="sk-test"))
        message = MagicMock(
            content=[
                MagicMock(type="text", text='{"a": '),
                MagicMock(type="text", text="1}"),
            ],
            model="claude-sonnet-4-20250514",
            usage=MagicMock(input_tokens=12, output_tokens=3),
            stop_reason="end_turn",
        )
        service._client = MagicMock()
        service._client.messages.create = AsyncMock(return_value=message)

        response = await service.complete("hello", system_prompt="be brief")

        assert response.content == '{"a": 1}'
        assert response.usage == {"input_tokens": 12, "output_tokens": 3}
        kwargs = service._client.messages.create.call_args.kwargs
        assert kwargs["system"] == "be brief"
        assert kwargs["messages"] == [{"role": "user", "content": "hello"}]
