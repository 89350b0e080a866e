"""Tests for the in-memory client/server pair."""

from __future__ import annotations

from beeai_framework.tools.mcp import MCPTool

from bee_mcp.loopback import open_loopback_session


async def test_loopback_lists_only_tools():
    async with open_loopback_session() as session:
        result = await session.list_tools()

    assert {tool.name for tool in result.tools} == {"weather", "search"}


async def test_loopback_tools_usable_by_beeai():
    async with open_loopback_session() as session:
        tools = await MCPTool.from_client(session)

    assert sorted(tool.name for tool in tools) == ["search", "weather"]
