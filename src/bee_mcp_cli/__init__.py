"""CLI for bee-mcp-agents."""

from __future__ import annotations

import typer as t

from bee_mcp_cli.serve import serve_command


MAIN_HELP = "🐝 BeeAI agents and tools over the Model Context Protocol"

cli = t.Typer(name="bee-mcp", help=MAIN_HELP, no_args_is_help=True)

cli.command(name="serve")(serve_command)


@cli.callback()
def main():
    """BeeAI agents and tools over the Model Context Protocol."""
