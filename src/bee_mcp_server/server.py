"""MCP server exposing BeeAI tools and agents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.stdio import stdio_server

from bee_mcp.exceptions import BeeMCPError
from bee_mcp.log import get_logger
from bee_mcp_config.server import ServerConfig
from bee_mcp_server import constants
from bee_mcp_server.handlers import register_logging_handlers, register_tool_handlers


if TYPE_CHECKING:
    from mcp import types
    from mcp.server.models import InitializationOptions

    from bee_mcp.agents import ServedAgent
    from bee_mcp.tools import ServedTool


logger = get_logger(__name__)


class AgentsServer:
    """MCP server for BeeAI tools and agents.

    Tool handlers are only installed once something gets registered, so a
    server without tools and agents doesn't advertise the tools capability.
    """

    def __init__(self, config: ServerConfig | None = None):
        """Initialize server.

        Args:
            config: Server configuration
        """
        self.config = config or ServerConfig()
        self.name = self.config.name
        self.server: Server[Any] = Server(self.config.name, version=self.config.version)
        self.tools: dict[str, ServedTool] = {}
        self.agents: dict[str, ServedAgent] = {}
        self._tool_handlers_registered = False
        register_logging_handlers(self)

    def __repr__(self) -> str:
        tools, agents = list(self.tools), list(self.agents)
        return f"AgentsServer(name={self.name!r}, tools={tools}, agents={agents})"

    def _ensure_tool_handlers(self):
        if not self._tool_handlers_registered:
            register_tool_handlers(self)
            self._tool_handlers_registered = True

    def _check_name(self, name: str):
        if name in self.tools or name in self.agents:
            msg = f"Name already registered: {name}"
            raise BeeMCPError(msg)

    def add_tool(self, tool: ServedTool):
        """Register a tool."""
        self._check_name(tool.name)
        self.tools[tool.name] = tool
        self._ensure_tool_handlers()

    def add_agent(self, agent: ServedAgent):
        """Register an agent."""
        self._check_name(agent.name)
        self.agents[agent.name] = agent
        self._ensure_tool_handlers()

    @property
    def experimental_capabilities(self) -> dict[str, dict[str, Any]]:
        """Non-standard capabilities, i.e. agent support."""
        return {constants.AGENTS_CAPABILITY: {}} if self.agents else {}

    @property
    def capabilities(self) -> types.ServerCapabilities:
        """Capabilities advertised to clients."""
        return self.server.get_capabilities(
            NotificationOptions(), self.experimental_capabilities
        )

    def create_initialization_options(self) -> InitializationOptions:
        return self.server.create_initialization_options(
            notification_options=NotificationOptions(),
            experimental_capabilities=self.experimental_capabilities,
        )

    async def start(self):
        """Serve over stdio until the input stream closes."""
        logger.info(
            "Starting %s (tools=%s, agents=%s)",
            self.name,
            list(self.tools),
            list(self.agents),
        )
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream, write_stream, self.create_initialization_options()
            )
        logger.info("Server %s stopped", self.name)


def create_server(
    config: ServerConfig | None = None,
    *,
    tools: bool = True,
    agents: bool = True,
) -> AgentsServer:
    """Create a server and register the built-in tools and agents.

    Args:
        config: Server configuration
        tools: Whether to register the built-in tools
        agents: Whether to register the agents
    """
    from bee_mcp.agents import register_agents
    from bee_mcp.tools import register_tools

    server = AgentsServer(config)
    if tools:
        register_tools(server)
    if agents:
        register_agents(server)
    return server


async def run_server(config: ServerConfig | None = None):
    """Create a server from the configuration and serve it over stdio."""
    config = config or ServerConfig()
    server = create_server(
        config, tools=config.serve_tools, agents=config.serve_agents
    )
    await server.start()
