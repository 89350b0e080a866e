"""Configuration models for bee-mcp-agents."""

from bee_mcp_config.agents import (
    TOOL_NAMES,
    AgentConfig,
    AgentRequest,
    AgentResult,
    ToolName,
)
from bee_mcp_config.llms import (
    AnyLLMConfig,
    BaseLLMConfig,
    LLMType,
    OllamaLLMConfig,
    OpenAILLMConfig,
)
from bee_mcp_config.server import LogLevel, ServerConfig

__all__ = [
    "TOOL_NAMES",
    "AgentConfig",
    "AgentRequest",
    "AgentResult",
    "AnyLLMConfig",
    "BaseLLMConfig",
    "LLMType",
    "LogLevel",
    "OllamaLLMConfig",
    "OpenAILLMConfig",
    "ServerConfig",
    "ToolName",
]
