"""Claude Code registry CLI commands."""

import click

from cli.utils.context import Context, handle_launcher_errors, pass_context
from cli.utils.output import format_output, print_info, print_success
from services.launcher_service import LauncherService
from services.registry_editor import SERVER_NAME, SERVERS_KEY


@click.group()
def claude():
    """Claude Code integration - show, apply, and remove the banter MCP server."""
    pass


@claude.command("show")
@click.option("--all", "show_all", is_flag=True, help="Show the whole registry, not just MCP servers.")
@pass_context
@handle_launcher_errors
def show(ctx: Context, show_all: bool):
    """Show the MCP servers registered with Claude Code.

    \b
    Examples:
        banter-launcher claude show
        banter-launcher --format json claude show --all
    """
    service = LauncherService(ctx.get_settings())
    document = service.registry.read()

    if show_all:
        click.echo(format_output(document, "json" if ctx.format == "text" else ctx.format))
        return

    servers = document.get(SERVERS_KEY) if isinstance(document, dict) else None
    if not servers:
        print_info(f"No MCP servers registered in {service.registry.path}")
        return

    if ctx.format != "text":
        click.echo(format_output(servers, ctx.format))
        return

    for name, entry in servers.items():
        marker = "*" if name == SERVER_NAME else " "
        click.echo(f"{marker} {name}")
        if isinstance(entry, dict):
            command = " ".join([str(entry.get("command", ""))] + [str(a) for a in entry.get("args", [])])
            click.echo(f"    command: {command.strip()}")
            for key, value in (entry.get("env") or {}).items():
                click.echo(f"    {key}={value}")


@claude.command("apply")
@pass_context
@handle_launcher_errors
def apply(ctx: Context):
    """Register the active channel as the banter MCP server.

    \b
    Examples:
        banter-launcher claude apply
    """
    service = LauncherService(ctx.get_settings())
    channel = service.apply_active_channel()
    print_success(f"Applied '{channel.name}' to Claude Code ({service.registry.path})")


@claude.command("remove")
@pass_context
@handle_launcher_errors
def remove(ctx: Context):
    """Remove the banter MCP server from Claude Code.

    \b
    Examples:
        banter-launcher claude remove
    """
    service = LauncherService(ctx.get_settings())
    service.disconnect()
    print_success("Disconnected Banter MCP from Claude Code")
