"""Shared helpers for CLI commands."""
import click

from bareos_mcp.bconsole import BconsoleClient
from bareos_mcp.config.settings import Settings, get_settings
from bareos_mcp.tools.bareos import build_registry
from bareos_mcp.tools.base import ToolRegistry


def resolve_settings(ctx: click.Context) -> Settings:
    """Cached settings, with the ``--bconsole`` override applied."""
    settings = get_settings()
    obj = ctx.find_root().obj or {}
    if obj.get("bconsole_path"):
        settings = settings.model_copy(update={"bconsole_path": obj["bconsole_path"]})
    level = "DEBUG" if obj.get("verbose") else None
    settings.setup_logging(level)
    return settings


def registry_for(settings: Settings) -> ToolRegistry:
    return build_registry(BconsoleClient.from_settings(settings))
