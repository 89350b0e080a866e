"""LLM backend configuration."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field
from schemez import Schema


LLMType = Literal["ollama", "openai"]


class BaseLLMConfig(Schema):
    """Base for LLM backend configurations."""

    type: str = Field(init=False)
    """Type discriminator for LLM configs."""

    model: str | None = None
    """Model id passed to the backend. Backend default if not set."""


class OllamaLLMConfig(BaseLLMConfig):
    """Chat model served by a local Ollama instance."""

    type: Literal["ollama"] = Field("ollama", init=False)

    model: str | None = "llama3.1"


class OpenAILLMConfig(BaseLLMConfig):
    """Chat model from the OpenAI API.

    Reads OPENAI_API_KEY from the environment.
    """

    type: Literal["openai"] = Field("openai", init=False)

    model: str | None = "gpt-4o-mini"


AnyLLMConfig = Annotated[
    OllamaLLMConfig | OpenAILLMConfig,
    Field(discriminator="type"),
]
