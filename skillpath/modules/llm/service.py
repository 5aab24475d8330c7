"""LLM Service - Anthropic Claude API wrapper."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from anthropic import AsyncAnthropic

from skillpath.shared.config import Settings, get_settings
from skillpath.shared.exceptions import MissingCredentialError

PROMPTS_DIR = Path(__file__).parent.parent.parent / "prompts"


@dataclass
class LLMResponse:
    """Response from LLM completion."""

    content: str
    model: str
    usage: dict[str, int]
    stop_reason: str | None = None


@dataclass
class PromptTemplate:
    """Loaded prompt template."""

    name: str
    system: str
    user: str
    variables: list[str]

    def format(self, **kwargs: Any) -> tuple[str, str]:
        """Format template with variables. Returns (system, user) prompts."""
        system = self.system
        user = self.user
        for key, value in kwargs.items():
            system = system.replace(f"{{{{{key}}}}}", str(value))
            user = user.replace(f"{{{{{key}}}}}", str(value))
        return system, user


class LLMService:
    """Service for interacting with Anthropic Claude API.

    The client is created on first use so the application can start without
    a credential; calling complete() without one raises MissingCredentialError.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._client: AsyncAnthropic | None = None
        self.default_model = self._settings.default_model
        self.max_tokens = self._settings.max_tokens
        self._prompt_cache: dict[str, PromptTemplate] = {}

    @property
    def is_configured(self) -> bool:
        return self._settings.has_ai_credential

    @property
    def client(self) -> AsyncAnthropic:
        if self._client is None:
            if not self.is_configured:
                raise MissingCredentialError("ANTHROPIC_API_KEY")
            self._client = AsyncAnthropic(api_key=self._settings.anthropic_api_key)
        return self._client

    async def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Generate a completion from the LLM.

        Args:
            prompt: The user prompt
            system_prompt: Optional system prompt
            model: Model to use (defaults to the configured model)
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature

        Returns:
            LLMResponse with content and metadata
        """
        messages = [{"role": "user", "content": prompt}]

        response = await self.client.messages.create(
            model=model or self.default_model,
            max_tokens=max_tokens or self.max_tokens,
            temperature=temperature if temperature is not None else self._settings.temperature,
            system=system_prompt or "",
            messages=messages,
        )

        return LLMResponse(
            content="".join(
                block.text for block in response.content if getattr(block, "type", "") == "text"
            ),
            model=response.model,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            stop_reason=response.stop_reason,
        )

    def load_prompt_template(self, name: str) -> PromptTemplate:
        """Load a prompt template from the prompts directory.

        Args:
            name: Template name (e.g., "recommendation/learning_path")

        Returns:
            PromptTemplate instance
        """
        if name in self._prompt_cache:
            return self._prompt_cache[name]

        # Only alphanumerics, underscores, hyphens and subdirectory slashes
        if not re.match(r'^[a-zA-Z0-9_/\-]+$', name):
            raise ValueError(f"Invalid template name: {name}. Only alphanumeric, underscore, hyphen, and slash allowed.")

        if '..' in name or name.startswith('/') or name.startswith('\\'):
            raise ValueError(f"Invalid template name: {name}. Path traversal not allowed.")

        template_path = PROMPTS_DIR / f"{name}.txt"

        try:
            resolved_path = template_path.resolve()
            prompts_resolved = PROMPTS_DIR.resolve()
            if not str(resolved_path).startswith(str(prompts_resolved)):
                raise ValueError(f"Invalid template path: {name}. Must be within prompts directory.")
        except (OSError, ValueError) as e:
            raise ValueError(f"Invalid template name: {name}") from e

        if not template_path.exists():
            raise FileNotFoundError(f"Prompt template not found: {name}")

        content = template_path.read_text()

        # Template format:
        # ---SYSTEM---
        # system prompt here
        # ---USER---
        # user prompt here
        # ---VARIABLES---
        # var1, var2, var3

        parts = content.split("---")
        system = ""
        user = ""
        variables: list[str] = []

        current_section = None
        for part in parts:
            part = part.strip()
            if part == "SYSTEM":
                current_section = "system"
            elif part == "USER":
                current_section = "user"
            elif part == "VARIABLES":
                current_section = "variables"
            elif current_section == "system":
                system = part
            elif current_section == "user":
                user = part
            elif current_section == "variables":
                variables = [v.strip() for v in part.split(",") if v.strip()]

        template = PromptTemplate(name=name, system=system, user=user, variables=variables)
        self._prompt_cache[name] = template
        return template


# Singleton instance
_llm_service: LLMService | None = None


def get_llm_service() -> LLMService:
    """Get LLM service singleton."""
    global _llm_service
    if _llm_service is None:
        _llm_service = LLMService()
    return _llm_service
