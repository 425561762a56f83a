"""Tool CLI commands: inspect the tool table and run a tool by hand."""
import click
from rich.console import Console
from rich.table import Table

from bareos_mcp.bconsole import BconsoleError
from bareos_mcp.commands._context import registry_for, resolve_settings


def parse_argument(pair: str) -> tuple:
    """Parse ``key=value``; ``true``/``false`` become bools, digits become ints."""
    if "=" not in pair:
        raise click.BadParameter(f"expected key=value, got {pair!r}")
    key, value = pair.split("=", 1)
    if value.lower() in ("true", "false"):
        return key, value.lower() == "true"
    if value.isdigit():
        return key, int(value)
    return key, value


@click.command("tools")
@click.pass_context
def tools_cmd(ctx):
    """List the tools exposed through tools/call."""
    registry = registry_for(resolve_settings(ctx))

    table = Table(title="Bareos tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Arguments", style="dim")
    for tool in registry.list_tools():
        props = tool.input_schema.get("properties", {})
        required = set(tool.input_schema.get("required", []))
        args = ", ".join(f"{p}*" if p in required else p for p in props)
        table.add_row(tool.name, tool.description, args)
    Console(width=120).print(table)


@click.command("call")
@click.argument("tool_name")
@click.option("--arg", "-a", "args", multiple=True, metavar="KEY=VALUE",
              help="Tool argument (repeatable)")
@click.pass_context
def call_cmd(ctx, tool_name, args):
    """Run TOOL_NAME once and print the bconsole output."""
    registry = registry_for(resolve_settings(ctx))
    arguments = dict(parse_argument(a) for a in args)

    try:
        tool = registry.get(tool_name)
    except KeyError:
        raise click.ClickException(f"Unknown tool: {tool_name}")
    try:
        output = tool.func(**arguments)
    except BconsoleError as e:
        raise click.ClickException(str(e))
    click.echo(output, nl=not output.endswith("\n"))
