"""Agent endpoints and their registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from beeai_framework.agents.react import ReActAgent
from beeai_framework.memory import UnconstrainedMemory
from beeai_framework.tools.mcp import MCPTool

from bee_mcp.llm import create_llm
from bee_mcp.log import get_logger
from bee_mcp.loopback import open_loopback_session
from bee_mcp.streamlit import StreamlitAgent
from bee_mcp_config.agents import AgentRequest, AgentResult


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from bee_mcp_config.server import ServerConfig
    from bee_mcp_server.server import AgentsServer

    AgentHandler = Callable[[AgentRequest, ServerConfig], Awaitable[AgentResult]]


logger = get_logger(__name__)


@dataclass(frozen=True)
class ServedAgent:
    """An agent exposed over MCP."""

    name: str
    description: str
    handler: AgentHandler
    config: ServerConfig

    @property
    def input_schema(self) -> dict[str, Any]:
        return AgentRequest.model_json_schema()

    async def call(self, arguments: dict[str, Any]) -> AgentResult:
        """Validate the arguments and run the agent.

        Raises:
            ValidationError: If the arguments don't form a valid request
        """
        request = AgentRequest.model_validate(arguments)
        logger.debug("Running agent %s with config %s", self.name, request.config)
        return await self.handler(request, self.config)


async def run_bee(request: AgentRequest, config: ServerConfig) -> AgentResult:
    """Run a general purpose tool-using agent.

    Tools are discovered through a loopback MCP session against a tools-only
    server, then narrowed down to the ones the request enables.
    """
    llm = create_llm(request.config.llm or config.llm)
    async with open_loopback_session(config) as session:
        available = await MCPTool.from_client(session)
        tools = [tool for tool in available if tool.name in request.config.tools]
        logger.debug("Bee agent tools: %s", [tool.name for tool in tools])
        agent = ReActAgent(llm=llm, tools=tools, memory=UnconstrainedMemory())
        output = await agent.run(request.prompt)
    return AgentResult(text=output.last_message.text)


async def run_streamlit(request: AgentRequest, config: ServerConfig) -> AgentResult:
    """Run the Streamlit app generator."""
    llm = create_llm(request.config.llm or config.llm)
    agent = StreamlitAgent(llm=llm, memory=UnconstrainedMemory())
    output = await agent.run(request.prompt)
    return AgentResult(text=output.raw, code=output.code)


AGENTS: dict[str, tuple[str, AgentHandler]] = {
    "Bee": ("General purpose agent", run_bee),
    "Streamlit": ("Streamlit agent", run_streamlit),
}


def register_agents(server: AgentsServer) -> list[ServedAgent]:
    """Register all agents with the server."""
    registered = []
    for name, (description, handler) in AGENTS.items():
        served = ServedAgent(name, description, handler, server.config)
        server.add_agent(served)
        registered.append(served)
        logger.debug("Registered agent: %s", name)
    return registered
