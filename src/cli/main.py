"""Banter MCP Launcher Command Line Interface - Main Entry Point."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from cli import __version__
from cli.commands.channel import channel
from cli.commands.claude import claude
from cli.commands.config import config
from cli.commands.extension import extension
from cli.utils.context import Context, handle_launcher_errors, pass_context
from cli.utils.output import format_output, print_error, print_info
from core.config import LauncherSettings, set_settings
from core.errors import ConfigParseError, FileAccessError
from core.logging_setup import configure_logging
from services.commands import dispatch_command, list_command_names
from services.launcher_service import LauncherService
from services.registry_editor import SERVER_NAME, SERVERS_KEY
from utils.suggestions import did_you_mean


class SuggestingGroup(click.Group):
    """Group that answers unknown subcommands with close matches."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        try:
            return super().resolve_command(ctx, args)
        except click.exceptions.UsageError as e:
            if not args or args[0].startswith("-") or "No such command" not in str(e):
                raise
            hint = did_you_mean(args[0], self.list_commands(ctx))
            if hint:
                raise click.exceptions.UsageError(f"{e}\n{hint}", ctx=ctx)
            raise


@click.group(cls=SuggestingGroup)
@click.version_option(version=__version__, prog_name="banter-launcher")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="BANTER_MCP_CONFIG_DIR",
    help="Per-user configuration directory (launcher config lives in <dir>/banter-mcp/)."
)
@click.option(
    "--home-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="BANTER_MCP_HOME",
    help="Home directory holding the Claude Code registry (.claude.json)."
)
@click.option(
    "--mcp-root",
    default=None,
    envvar="BANTER_MCP_ROOT",
    help="Banter MCP install root."
)
@click.option(
    "--format", "-f",
    type=click.Choice(["text", "json", "table"]),
    default="text",
    envvar="BANTER_MCP_FORMAT",
    help="Output format."
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output."
)
@pass_context
def cli(
    ctx: Context,
    config_dir: Optional[Path],
    home_dir: Optional[Path],
    mcp_root: Optional[str],
    format: str,
    verbose: bool,
):
    """Banter MCP Launcher.

    Manage Unity scene channels and register the Banter MCP server with
    Claude Code.

    \b
    Examples:
        banter-launcher channel add Lobby ./World/Assets/Scenes/Lobby.unity
        banter-launcher channel select Lobby
        banter-launcher claude apply
        banter-launcher extension install

    \b
    Environment Variables:
        BANTER_MCP_CONFIG_DIR   Config directory (default: OS user config dir)
        BANTER_MCP_HOME         Home directory for .claude.json
        BANTER_MCP_ROOT         MCP install root (default: C:/tools/banter-mcp)
        BANTER_MCP_SERVER_PATH  Default MCP server script
        BANTER_MCP_LOG_LEVEL    Log level (default: INFO)
        BANTER_MCP_FORMAT       Output format (default: text)
    """
    settings = LauncherSettings.from_env()
    if config_dir is not None:
        settings.config_dir = config_dir
    if home_dir is not None:
        settings.home_dir = home_dir
    if mcp_root is not None:
        settings.mcp_root = mcp_root

    configure_logging(settings, verbose=verbose)

    set_settings(settings)
    ctx.settings = settings
    ctx.format = format
    ctx.verbose = verbose


@cli.command("status")
@pass_context
@handle_launcher_errors
def status(ctx: Context):
    """Show the active channel and whether Claude Code points at it."""
    service = LauncherService(ctx.get_settings())
    current = service.status()

    if current.state == "active":
        click.echo(f"Active channel: {current.text}")
        click.echo(f"  Project: {current.channel.unity_project_path}")
        if current.channel.scene_path:
            click.echo(f"  Scene:   {current.channel.scene_path}")
    else:
        click.echo(current.text)

    try:
        document = service.registry.read()
    except (ConfigParseError, FileAccessError) as e:
        print_error(f"Claude Code registry unreadable: {e}")
        return

    servers = document.get(SERVERS_KEY) if isinstance(document, dict) else None
    if isinstance(servers, dict) and SERVER_NAME in servers:
        click.echo("Claude Code: banter MCP server registered")
    else:
        print_info("Claude Code: banter MCP server not registered")


@cli.command("invoke")
@click.argument("command_name")
@click.argument("params", required=False, default="{}")
@pass_context
def invoke(ctx: Context, command_name: str, params: str):
    """Call a launcher backend command directly.

    PARAMS is a JSON object of keyword arguments. Prints the response
    envelope and exits with code 1 on failure.

    \b
    Examples:
        banter-launcher invoke load_config
        banter-launcher invoke validate_unity_scene '{"path": "./Assets/Main.unity"}'
        banter-launcher invoke add_channel '{"name": "Lobby", "scenePath": "..."}'
    """
    try:
        params_dict = json.loads(params)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON params: {e}")
        sys.exit(1)

    if not isinstance(params_dict, dict):
        print_error("PARAMS must be a JSON object")
        sys.exit(1)

    response = dispatch_command(command_name, params_dict)
    click.echo(format_output(response, "json" if ctx.format == "text" else ctx.format))
    if not response.success:
        sys.exit(1)


@cli.command("commands")
def commands():
    """List backend commands available to 'invoke'."""
    for name in list_command_names():
        click.echo(name)


cli.add_command(channel)
cli.add_command(claude)
cli.add_command(config)
cli.add_command(extension)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
