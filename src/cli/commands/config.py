"""Launcher settings CLI commands."""

import click

from cli.utils.context import Context, handle_launcher_errors, pass_context
from cli.utils.output import format_output, print_success
from services.launcher_service import LauncherService


@click.group()
def config():
    """Launcher settings - MCP server path and auto-start."""
    pass


@config.command("show")
@pass_context
@handle_launcher_errors
def show(ctx: Context):
    """Show the saved launcher configuration.

    \b
    Examples:
        banter-launcher config show
        banter-launcher --format json config show
    """
    service = LauncherService(ctx.get_settings())
    launcher_config = service.load()

    if ctx.format == "json":
        click.echo(format_output(launcher_config, "json"))
        return

    click.echo(format_output({
        "config_file": str(service.store.path),
        "mcp_server_path": launcher_config.mcp_server_path,
        "auto_start": launcher_config.auto_start,
        "active_channel_id": launcher_config.active_channel_id,
        "channels": len(launcher_config.channels),
    }, ctx.format))


@config.command("set-server-path")
@click.argument("mcp_server_path")
@pass_context
@handle_launcher_errors
def set_server_path(ctx: Context, mcp_server_path: str):
    """Set the path to the Banter MCP server entry script.

    \b
    Examples:
        banter-launcher config set-server-path C:/tools/banter-mcp/dist/index.js
    """
    LauncherService(ctx.get_settings()).set_server_path(mcp_server_path)
    print_success(f"MCP server path set to {mcp_server_path}")


@config.command("set-auto-start")
@click.argument("enabled", type=click.BOOL)
@pass_context
@handle_launcher_errors
def set_auto_start(ctx: Context, enabled: bool):
    """Apply channels to Claude Code automatically when selected.

    \b
    Examples:
        banter-launcher config set-auto-start on
        banter-launcher config set-auto-start false
    """
    LauncherService(ctx.get_settings()).set_auto_start(enabled)
    print_success(f"Auto-start {'enabled' if enabled else 'disabled'}")
