"""bee-mcp-agents: BeeAI agents and tools served over MCP."""

from __future__ import annotations

from importlib.metadata import version

from dotenv import load_dotenv

from bee_mcp.exceptions import BeeMCPError, UnknownToolError, UnsupportedLLMError
from bee_mcp.llm import SUPPORTED_LLMS, create_llm
from bee_mcp.tools import BUILTIN_TOOLS, ServedTool, register_tools
from bee_mcp.agents import AGENTS, ServedAgent, register_agents
from bee_mcp.loopback import open_loopback_session
from bee_mcp.streamlit import StreamlitAgent

__version__ = version("bee-mcp-agents")
__title__ = "bee-mcp-agents"
__license__ = "MIT"

load_dotenv()

__all__ = [
    "AGENTS",
    "BUILTIN_TOOLS",
    "SUPPORTED_LLMS",
    "BeeMCPError",
    "ServedAgent",
    "ServedTool",
    "StreamlitAgent",
    "UnknownToolError",
    "UnsupportedLLMError",
    "__version__",
    "create_llm",
    "open_loopback_session",
    "register_agents",
    "register_tools",
]
