"""In-memory MCP client/server pair."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from mcp.shared.memory import create_connected_server_and_client_session

from bee_mcp.log import get_logger


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from mcp import ClientSession

    from bee_mcp_config.server import ServerConfig


logger = get_logger(__name__)


@asynccontextmanager
async def open_loopback_session(
    config: ServerConfig | None = None,
) -> AsyncIterator[ClientSession]:
    """Connect a client to a fresh tools-only server without external I/O.

    Both ends are torn down when the context exits, also on errors.

    Args:
        config: Server configuration for the loopback server

    Yields:
        An initialized client session
    """
    from bee_mcp_server.server import create_server

    agents_server = create_server(config, tools=True, agents=False)
    logger.debug("Opening loopback session to %r", agents_server.name)
    try:
        async with create_connected_server_and_client_session(
            agents_server.server
        ) as session:
            yield session
    finally:
        logger.debug("Closed loopback session to %r", agents_server.name)
