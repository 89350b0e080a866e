"""Tests for the built-in tool registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from beeai_framework.tools.search.duckduckgo import DuckDuckGoSearchTool
from beeai_framework.tools.weather import OpenMeteoTool

from bee_mcp.tools import BUILTIN_TOOLS, ServedTool, register_tools
from bee_mcp_server import AgentsServer, create_server


if TYPE_CHECKING:
    from unittest.mock import MagicMock


def test_register_tools():
    server = AgentsServer()
    registered = register_tools(server)
    assert [tool.name for tool in registered] == list(BUILTIN_TOOLS)
    assert isinstance(server.tools["weather"].tool, OpenMeteoTool)
    assert isinstance(server.tools["search"].tool, DuckDuckGoSearchTool)
    assert not server.agents


def test_tool_schemas_match_underlying_tools():
    """Test that every served tool advertises its own tool's schema."""
    server = create_server(tools=True, agents=False)
    for served in server.tools.values():
        expected = served.tool.input_schema.model_json_schema()
        assert served.input_schema == expected
        assert served.description == served.tool.description

    search_schema = DuckDuckGoSearchTool().input_schema.model_json_schema()
    weather_schema = OpenMeteoTool().input_schema.model_json_schema()
    assert server.tools["search"].input_schema == search_schema
    assert server.tools["search"].input_schema != weather_schema


async def test_tool_call_returns_tool_output(echo_tool: ServedTool, fake_tool: MagicMock):
    """Test that calling a served tool returns exactly what the tool produced."""
    arguments = {"text": "hello"}
    result = await echo_tool.call(arguments)

    assert result is fake_tool.run.return_value
    fake_tool.run.assert_awaited_once_with(arguments)


def test_served_tool_schema(echo_tool: ServedTool, fake_tool: MagicMock):
    assert echo_tool.input_schema == fake_tool.input_schema.model_json_schema()
    assert echo_tool.description == "Echo the given text"
