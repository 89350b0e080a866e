"""Test configuration and shared fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from beeai_framework.backend import AssistantMessage, ChatModel, ChatModelOutput
from pydantic import BaseModel, Field
import pytest

from bee_mcp.tools import ServedTool


STREAMLIT_CODE = 'import streamlit as st\n\nst.title("Hello")'
STREAMLIT_ANSWER = f"""\
Here is a minimal app:

```python
{STREAMLIT_CODE}
```
"""


class EchoInput(BaseModel):
    """Input of the echo tool."""

    text: str = Field(description="Text to echo")


def make_fake_tool(output_text: str = "echoed") -> MagicMock:
    """Create a stand-in for a BeeAI tool."""
    tool = MagicMock()
    tool.name = "echo"
    tool.description = "Echo the given text"
    tool.input_schema = EchoInput
    output = MagicMock()
    output.get_text_content.return_value = output_text
    tool.run = AsyncMock(return_value=output)
    return tool


@pytest.fixture
def fake_tool() -> MagicMock:
    return make_fake_tool()


@pytest.fixture
def echo_tool(fake_tool: MagicMock) -> ServedTool:
    return ServedTool(name="echo", tool=fake_tool)


@pytest.fixture
def fake_llm() -> MagicMock:
    """Chat model answering every request with a Streamlit app.

    Restricted to the ChatModel interface and returning real outputs, so
    calls the library doesn't offer fail.
    """
    llm = MagicMock(spec=ChatModel)
    output = ChatModelOutput(output=[AssistantMessage(STREAMLIT_ANSWER)])
    llm.run = AsyncMock(return_value=output)
    return llm


@pytest.fixture
def streamlit_code() -> str:
    """Code block contained in the fake LLM's answer."""
    return STREAMLIT_CODE
