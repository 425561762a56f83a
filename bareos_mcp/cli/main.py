"""
bareos-mcp command-line entry point.

Runs the JSON-RPC stdio server by default, and offers a couple of helpers
for poking at bconsole by hand.
"""

from dotenv import load_dotenv

from bareos_mcp.config.settings import get_env_path
load_dotenv(get_env_path())

import click
from rich.console import Console

from bareos_mcp import __version__

console = Console(stderr=True)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True, help='Log debug output to stderr')
@click.option('--bconsole', 'bconsole_path', default=None, metavar='PATH',
              help='bconsole binary to run (overrides BCONSOLE_PATH)')
def cli(ctx, version, verbose, bconsole_path):
    """Bareos console queries over line-delimited JSON-RPC.

    \b
      bareos-mcp                      Start the stdio server
      bareos-mcp serve --install      Print MCP host configuration
      bareos-mcp tools                List available tools
      bareos-mcp call list_jobs -a days=7
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["bconsole_path"] = bconsole_path

    if version:
        console.print(f"[bold cyan]bareos-mcp[/bold cyan] [dim]{__version__}[/dim]")
        ctx.exit()

    elif ctx.invoked_subcommand is None:
        ctx.invoke(serve_cmd)


from bareos_mcp.commands.serve import serve as serve_cmd
cli.add_command(serve_cmd, "serve")

from bareos_mcp.commands.tools import tools_cmd, call_cmd
cli.add_command(tools_cmd, "tools")
cli.add_command(call_cmd, "call")


if __name__ == "__main__":
    cli()
