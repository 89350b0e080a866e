"""Server configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Self

from pydantic import ConfigDict, Field
from schemez import Schema

from bee_mcp_config.llms import AnyLLMConfig, OllamaLLMConfig


if TYPE_CHECKING:
    from os import PathLike


LogLevel = Literal["debug", "info", "warning", "error"]


class ServerConfig(Schema):
    """Configuration for the agents MCP server."""

    name: str = "BeeAI Agents"
    """Server name reported during initialization."""

    version: str = "1.0.0"
    """Server version reported during initialization."""

    llm: AnyLLMConfig = Field(default_factory=OllamaLLMConfig)
    """Default LLM for agent calls that don't pick one."""

    serve_tools: bool = True
    """Whether to expose the built-in tools."""

    serve_agents: bool = True
    """Whether to expose the agents."""

    log_level: LogLevel = "info"
    """Initial log level."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Self:
        """Load server configuration from a YAML file.

        Args:
            path: Path to the configuration file

        Raises:
            ValueError: If loading or validation fails
        """
        import yamling

        try:
            data = yamling.load_yaml_file(path)
            return cls.model_validate(data or {})
        except Exception as exc:
            msg = f"Failed to load server config from {path}"
            raise ValueError(msg) from exc
