"""Tests for the LLM factory."""

from __future__ import annotations

from beeai_framework.adapters.ollama import OllamaChatModel
from beeai_framework.adapters.openai import OpenAIChatModel
import pytest

from bee_mcp.exceptions import BeeMCPError, UnsupportedLLMError
from bee_mcp.llm import SUPPORTED_LLMS, create_llm, get_llm_config
from bee_mcp_config.llms import OllamaLLMConfig, OpenAILLMConfig


@pytest.fixture(autouse=True)
def openai_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


def test_supported_llms():
    assert set(SUPPORTED_LLMS) == {"ollama", "openai"}


def test_create_ollama_llm():
    llm = create_llm("ollama")
    assert isinstance(llm, OllamaChatModel)
    assert llm.model_id == "llama3.1"


def test_create_openai_llm():
    llm = create_llm("openai")
    assert isinstance(llm, OpenAIChatModel)
    assert llm.model_id == "gpt-4o-mini"


def test_create_llm_from_config():
    """Test that config objects pick backend and model."""
    llm = create_llm(OllamaLLMConfig(model="granite3.3:8b"))
    assert isinstance(llm, OllamaChatModel)
    assert llm.model_id == "granite3.3:8b"

    llm = create_llm(OpenAILLMConfig(model="gpt-4o"))
    assert isinstance(llm, OpenAIChatModel)
    assert llm.model_id == "gpt-4o"


@pytest.mark.parametrize("llm_type", ["watsonx", "", "Ollama"])
def test_unsupported_llm(llm_type: str):
    with pytest.raises(UnsupportedLLMError, match=f"Unsupported llm {llm_type}"):
        create_llm(llm_type)


def test_unsupported_llm_error_hierarchy():
    with pytest.raises(ValueError):  # noqa: PT011
        get_llm_config("groq")
    with pytest.raises(BeeMCPError) as exc_info:
        get_llm_config("groq")
    assert exc_info.value.llm_type == "groq"  # type: ignore[attr-defined]


def test_get_llm_config_passes_configs_through():
    config = OpenAILLMConfig(model="o3-mini")
    assert get_llm_config(config) is config
    assert get_llm_config("ollama") == OllamaLLMConfig()
