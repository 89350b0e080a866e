"""MCP server for BeeAI tools and agents."""

from bee_mcp_server.server import AgentsServer, create_server, run_server

__all__ = ["AgentsServer", "create_server", "run_server"]
