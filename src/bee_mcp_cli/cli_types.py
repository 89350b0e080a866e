"""Type definitions for CLI options."""

from __future__ import annotations

from enum import StrEnum
import typing

from bee_mcp_config.server import LogLevel as LogLevelName


# Choices for typer, built from the config literal
LogLevel = StrEnum(
    "LogLevel", {name.upper(): name for name in typing.get_args(LogLevelName)}
)
