"""Code-generating agent for Streamlit apps."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TYPE_CHECKING

from beeai_framework.backend import AssistantMessage, SystemMessage, UserMessage

from bee_mcp.log import get_logger


if TYPE_CHECKING:
    from beeai_framework.backend import ChatModel
    from beeai_framework.memory import BaseMemory


logger = get_logger(__name__)

SYSTEM_PROMPT = """\
You are Streamlit-Agent, an assistant that builds Streamlit apps.
Answer requests for an app with a short explanation followed by exactly one
complete, runnable Python program in a ```python fenced block. The program
must import streamlit as st and must not rely on files or secrets that the
user did not mention.
If the request is not about building an app, answer it in plain text and
suggest an app idea the user could ask for."""

FENCED_BLOCK = re.compile(
    r"^```([\w+-]*)[ \t]*\r?\n(.*?)^```[ \t]*\r?$", re.DOTALL | re.MULTILINE
)
PYTHON_TAGS = {"python", "py"}


def extract_code(text: str) -> str | None:
    """Return the first fenced python block of the text.

    Untagged blocks are only used if no block is tagged as python.
    """
    blocks = [(m.group(1).lower(), m.group(2)) for m in FENCED_BLOCK.finditer(text)]
    python_blocks = [code for tag, code in blocks if tag in PYTHON_TAGS]
    untagged_blocks = [code for tag, code in blocks if not tag]
    candidates = python_blocks or untagged_blocks
    if not candidates:
        return None
    return candidates[0].strip() or None


@dataclass(frozen=True)
class StreamlitAgentOutput:
    """Result of a Streamlit agent run."""

    raw: str
    """Complete model answer."""

    code: str | None
    """Extracted app source code."""


class StreamlitAgent:
    """Agent generating Streamlit apps from a prompt.

    Keeps the conversation in the given memory, so follow-up prompts can
    refine an earlier app.
    """

    def __init__(
        self,
        llm: ChatModel,
        memory: BaseMemory,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        self.llm = llm
        self.memory = memory
        self.system_prompt = system_prompt

    async def run(self, prompt: str) -> StreamlitAgentOutput:
        """Run the agent with a prompt."""
        user_message = UserMessage(prompt)
        system_message = SystemMessage(self.system_prompt)
        messages = [system_message, *self.memory.messages, user_message]
        output = await self.llm.run(messages)
        raw = output.get_text_content()
        await self.memory.add(user_message)
        await self.memory.add(AssistantMessage(raw))
        code = extract_code(raw)
        logger.debug("Streamlit agent answered (%d chars, code=%s)", len(raw), bool(code))
        return StreamlitAgentOutput(raw=raw, code=code)
