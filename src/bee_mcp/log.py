"""Logging configuration for bee_mcp."""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: The name of the logger, will be prefixed with 'bee_mcp.'

    Returns:
        A logger instance
    """
    return logging.getLogger(f"bee_mcp.{name}")


def configure_logging(level: int | str = logging.INFO):
    """Configure root logging on stderr.

    Stdout carries the MCP stream when serving over stdio, so log output
    must never go there.

    Args:
        level: Log level, either a logging constant or its name
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
