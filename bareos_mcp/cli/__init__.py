"""bareos-mcp CLI.

Re-exports the Click ``cli`` group so ``from bareos_mcp.cli import cli`` works.
"""

from bareos_mcp.cli.main import cli  # noqa: F401
