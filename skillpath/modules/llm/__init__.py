"""LLM Module - generative-language client and prompt templates."""

from skillpath.modules.llm.service import (
    LLMResponse,
    LLMService,
    PromptTemplate,
    get_llm_service,
)

__all__ = ["LLMResponse", "LLMService", "PromptTemplate", "get_llm_service"]
