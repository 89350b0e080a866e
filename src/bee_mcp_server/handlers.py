"""MCP protocol request handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import mcp
from mcp import types
from bee_mcp.exceptions import UnknownToolError
from bee_mcp.log import get_logger
from bee_mcp_server import constants, conversions


if TYPE_CHECKING:
    from bee_mcp_server.server import AgentsServer


logger = get_logger(__name__)


def register_tool_handlers(agents_server: AgentsServer):
    """Register tools/list and tools/call handlers.

    Agents are listed and called through the same endpoints as tools.

    Args:
        agents_server: Server instance
    """
    server = agents_server.server

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """Handle tools/list request."""
        tools = [conversions.to_mcp_tool(t) for t in agents_server.tools.values()]
        agents = [conversions.agent_to_mcp_tool(a) for a in agents_server.agents.values()]
        return tools + agents

    @server.call_tool()
    async def handle_call_tool(
        name: str,
        arguments: dict[str, Any] | None = None,
    ) -> list[types.TextContent]:
        """Handle tools/call request."""
        arguments = arguments or {}
        # Filter out _meta from arguments
        args = {k: v for k, v in arguments.items() if not k.startswith("_")}

        if tool := agents_server.tools.get(name):
            output = await tool.call(args)
            return conversions.tool_output_to_content(output)

        if agent := agents_server.agents.get(name):
            result = await agent.call(args)
            return conversions.agent_result_to_content(result)

        msg = f"Tool not found: {name}"
        raise UnknownToolError(msg)


def register_logging_handlers(agents_server: AgentsServer):
    """Register the logging/setLevel handler."""
    server = agents_server.server

    @server.set_logging_level()
    async def handle_set_level(level: mcp.LoggingLevel):
        """Handle logging level changes."""
        python_level = constants.MCP_TO_LOGGING[level]
        logging.getLogger("bee_mcp").setLevel(python_level)
        logger.info("Log level set to %s", level)
        session = server.request_context.session
        await session.send_log_message(
            level, f"Log level set to {level}", logger=agents_server.name
        )
