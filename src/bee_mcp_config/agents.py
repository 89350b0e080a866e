"""Per-call agent configuration."""

from __future__ import annotations

import typing
from typing import Literal

from pydantic import Field
from schemez import Schema

from bee_mcp_config.llms import AnyLLMConfig  # noqa: TC001


ToolName = Literal["weather", "search"]
TOOL_NAMES: tuple[ToolName, ...] = typing.get_args(ToolName)


class AgentConfig(Schema):
    """Configuration sent along with an agent invocation."""

    llm: AnyLLMConfig | None = None
    """LLM to run the agent with. Uses the server default if not set."""

    tools: list[ToolName] = Field(default_factory=lambda: list(TOOL_NAMES))
    """Tools the agent may use. Agents without tool support ignore this."""


class AgentRequest(Schema):
    """Arguments of an agent invocation."""

    prompt: str = Field(min_length=1)
    """Prompt to run the agent with."""

    config: AgentConfig = Field(default_factory=AgentConfig)
    """Agent configuration."""


class AgentResult(Schema):
    """Result of an agent invocation."""

    text: str | None = None
    """Final answer text."""

    code: str | None = None
    """Generated code, for code-generating agents."""
