"""LLM factory."""

from __future__ import annotations

import typing
from typing import TYPE_CHECKING

from bee_mcp.exceptions import UnsupportedLLMError
from bee_mcp.log import get_logger
from bee_mcp_config.llms import BaseLLMConfig, LLMType, OllamaLLMConfig, OpenAILLMConfig


if TYPE_CHECKING:
    from beeai_framework.backend import ChatModel


logger = get_logger(__name__)

SUPPORTED_LLMS: tuple[LLMType, ...] = typing.get_args(LLMType)


def get_llm_config(llm: str | BaseLLMConfig) -> BaseLLMConfig:
    """Resolve an LLM selector into a config object.

    Args:
        llm: Backend identifier (e.g. "ollama") or a config object

    Raises:
        UnsupportedLLMError: If the identifier is not supported
    """
    match llm:
        case BaseLLMConfig():
            return llm
        case "ollama":
            return OllamaLLMConfig()
        case "openai":
            return OpenAILLMConfig()
        case _:
            raise UnsupportedLLMError(str(llm))


def create_llm(llm: str | BaseLLMConfig) -> ChatModel:
    """Create a chat model for the given backend.

    Args:
        llm: Backend identifier (e.g. "ollama") or a config object

    Returns:
        A BeeAI chat model instance

    Raises:
        UnsupportedLLMError: If the backend is not supported
    """
    config = get_llm_config(llm)
    logger.debug("Creating %s chat model (model=%s)", config.type, config.model)
    match config:
        case OllamaLLMConfig():
            from beeai_framework.adapters.ollama import OllamaChatModel

            return OllamaChatModel(config.model) if config.model else OllamaChatModel()
        case OpenAILLMConfig():
            from beeai_framework.adapters.openai import OpenAIChatModel

            return OpenAIChatModel(config.model) if config.model else OpenAIChatModel()
        case _:
            raise UnsupportedLLMError(config.type)
