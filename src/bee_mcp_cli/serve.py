"""Command for running the agents MCP server."""

from __future__ import annotations

import asyncio

import typer as t

from bee_mcp.exceptions import UnsupportedLLMError
from bee_mcp.llm import SUPPORTED_LLMS, get_llm_config
from bee_mcp.log import configure_logging, get_logger
from bee_mcp_cli.cli_types import LogLevel
from bee_mcp_config.server import ServerConfig
from bee_mcp_server import run_server


logger = get_logger(__name__)


def build_config(
    config_path: str | None = None,
    llm: str | None = None,
    model: str | None = None,
    tools: bool | None = None,
    agents: bool | None = None,
    log_level: str | None = None,
) -> ServerConfig:
    """Merge command line options into the (file) configuration.

    Raises:
        ValueError: If the config file can't be loaded
        UnsupportedLLMError: If the LLM backend is not supported
    """
    config = ServerConfig.from_file(config_path) if config_path else ServerConfig()
    update: dict[str, object] = {}
    llm_config = get_llm_config(llm) if llm else config.llm
    if model:
        llm_config = llm_config.model_copy(update={"model": model})
    if llm or model:
        update["llm"] = llm_config
    if tools is not None:
        update["serve_tools"] = tools
    if agents is not None:
        update["serve_agents"] = agents
    if log_level:
        update["log_level"] = log_level
    return config.model_copy(update=update)


def serve_command(
    config_path: str = t.Option(None, "-c", "--config", help="Path to server config"),
    llm: str = t.Option(
        None, "--llm", help=f"LLM backend ({' | '.join(SUPPORTED_LLMS)})"
    ),
    model: str = t.Option(None, "--model", help="Model id for the LLM backend"),
    tools: bool = t.Option(None, "--tools/--no-tools", help="Serve the built-in tools"),
    agents: bool = t.Option(None, "--agents/--no-agents", help="Serve the agents"),
    log_level: LogLevel = t.Option(None, help="Logging level"),  # noqa: B008
):
    """Run the BeeAI agents and tools as an MCP server over stdio."""
    try:
        config = build_config(
            config_path,
            llm=llm,
            model=model,
            tools=tools,
            agents=agents,
            log_level=log_level.value if log_level else None,
        )
    except UnsupportedLLMError as e:
        raise t.BadParameter(str(e), param_hint="--llm") from e
    except ValueError as e:
        raise t.BadParameter(str(e), param_hint="--config") from e

    configure_logging(config.log_level)
    logger.debug("Server config: %s", config)
    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
