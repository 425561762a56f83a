"""Serve CLI command: run bareos-mcp as a stdio JSON-RPC server."""
import json
import sys

import click
from rich.console import Console

from bareos_mcp.commands._context import registry_for, resolve_settings


def generate_mcp_host_config(bconsole_path: str) -> dict:
    """MCP host configuration entry (``mcpServers`` block) for this server."""
    return {
        "mcpServers": {
            "bareos": {
                "command": sys.executable,
                "args": ["-m", "bareos_mcp.backend"],
                "env": {"BCONSOLE_PATH": bconsole_path},
            }
        }
    }


@click.command("serve")
@click.option("--install", is_flag=True, help="Print MCP host configuration JSON and exit")
@click.pass_context
def serve(ctx, install):
    """Start the JSON-RPC stdio server (MCP server for bconsole)."""
    settings = resolve_settings(ctx)

    if install:
        click.echo(json.dumps(generate_mcp_host_config(settings.bconsole_path), indent=2))
        return

    from bareos_mcp.backend.server import StdioServer
    Console(stderr=True).print(
        f"[bold cyan]Bareos MCP Server[/bold cyan] starting on stdio "
        f"[dim](bconsole: {settings.bconsole_path})[/dim]"
    )
    StdioServer(registry_for(settings)).run()
