"""Conversions between served tools/agents and MCP types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp import types


if TYPE_CHECKING:
    from beeai_framework.tools import ToolOutput

    from bee_mcp.agents import ServedAgent
    from bee_mcp.tools import ServedTool
    from bee_mcp_config.agents import AgentResult


def to_mcp_tool(tool: ServedTool) -> types.Tool:
    """Convert a served tool to an MCP Tool."""
    return types.Tool(
        name=tool.name,
        description=tool.description,
        inputSchema=tool.input_schema,
    )


def agent_to_mcp_tool(agent: ServedAgent) -> types.Tool:
    """Convert a served agent to an MCP Tool."""
    return types.Tool(
        name=agent.name,
        description=agent.description,
        inputSchema=agent.input_schema,
        annotations=types.ToolAnnotations(title=f"{agent.name} agent"),
    )


def tool_output_to_content(output: ToolOutput) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=output.get_text_content())]


def agent_result_to_content(result: AgentResult) -> list[types.TextContent]:
    text = result.model_dump_json(exclude_none=True)
    return [types.TextContent(type="text", text=text)]
