"""Built-in tools and their registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from beeai_framework.tools.search.duckduckgo import DuckDuckGoSearchTool
from beeai_framework.tools.weather import OpenMeteoTool

from bee_mcp.log import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable

    from beeai_framework.tools import Tool, ToolOutput

    from bee_mcp_config.agents import ToolName
    from bee_mcp_server.server import AgentsServer


logger = get_logger(__name__)

BUILTIN_TOOLS: dict[ToolName, Callable[[], Tool[Any, Any, Any]]] = {
    "weather": OpenMeteoTool,
    "search": DuckDuckGoSearchTool,
}


@dataclass(frozen=True)
class ServedTool:
    """A BeeAI tool exposed over MCP under a fixed name."""

    name: str
    tool: Tool[Any, Any, Any]

    @property
    def description(self) -> str:
        return self.tool.description

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool's own input model."""
        return self.tool.input_schema.model_json_schema()

    async def call(self, arguments: dict[str, Any]) -> ToolOutput:
        """Run the tool with the arguments as given and return its output."""
        logger.debug("Running tool %s with %s", self.name, arguments)
        return await self.tool.run(arguments)


def register_tools(server: AgentsServer) -> list[ServedTool]:
    """Register all built-in tools with the server."""
    registered = []
    for name, factory in BUILTIN_TOOLS.items():
        served = ServedTool(name=name, tool=factory())
        server.add_tool(served)
        registered.append(served)
        logger.debug("Registered tool: %s", name)
    return registered
