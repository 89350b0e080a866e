"""CLI entry point for bee_mcp."""

from __future__ import annotations

from bee_mcp_cli import cli


if __name__ == "__main__":
    cli()
