"""Exceptions raised by bee_mcp."""

from __future__ import annotations


class BeeMCPError(Exception):
    """Base exception for bee_mcp."""


class UnsupportedLLMError(BeeMCPError, ValueError):
    """Raised when an LLM backend identifier is not supported."""

    def __init__(self, llm_type: str):
        self.llm_type = llm_type
        super().__init__(f"Unsupported llm {llm_type}")


class UnknownToolError(BeeMCPError, LookupError):
    """Raised when no tool or agent is registered under a name."""
