"""Channel CLI commands."""

import sys

import click

from cli.utils.channels import resolve_channel
from cli.utils.context import (
    Context,
    confirm_destructive_action,
    handle_launcher_errors,
    pass_context,
)
from cli.utils.output import format_output, print_error, print_info, print_success
from services import extension_installer
from services.channel_builder import validate_unity_scene
from services.launcher_service import LauncherService


@click.group()
def channel():
    """Scene channels - add, list, select, and remove Unity scenes."""
    pass


@channel.command("add")
@click.argument("name")
@click.argument("scene_path", type=click.Path())
@pass_context
@handle_launcher_errors
def add(ctx: Context, name: str, scene_path: str):
    """Add a channel for a Unity scene file.

    The first channel added becomes the active channel.

    \b
    Examples:
        banter-launcher channel add "Lobby" ~/Projects/World/Assets/Scenes/Lobby.unity
    """
    name = name.strip()
    if not name:
        raise click.BadParameter("Channel name must not be empty", param_hint="NAME")

    service = LauncherService(ctx.get_settings())
    created = service.register_channel(name, scene_path)
    click.echo(format_output(created, ctx.format))
    print_success(f"Channel added: {created.name}")


@channel.command("list")
@pass_context
@handle_launcher_errors
def list_channels(ctx: Context):
    """List configured channels.

    \b
    Examples:
        banter-launcher channel list
        banter-launcher --format table channel list
    """
    config = LauncherService(ctx.get_settings()).load()

    if ctx.format != "text":
        click.echo(format_output(config.channels, ctx.format))
        return

    if not config.channels:
        print_info("No channels configured. Use 'banter-launcher channel add' to add one.")
        return

    for item in config.channels:
        marker = "*" if item.id == config.active_channel_id else " "
        display_path = item.scene_path or item.unity_project_path
        badge = " [extension]" if extension_installer.check(item.unity_project_path) else ""
        click.echo(f"{marker} {item.name} [{item.id[:8]}]{badge}")
        click.echo(f"    {display_path}")


@channel.command("select")
@click.argument("channel_ref")
@pass_context
@handle_launcher_errors
def select(ctx: Context, channel_ref: str):
    """Make a channel active.

    CHANNEL_REF can be the channel name, id, or an id prefix. When auto-start
    is enabled the channel is also applied to Claude Code.

    \b
    Examples:
        banter-launcher channel select Lobby
    """
    service = LauncherService(ctx.get_settings())
    config = service.load()
    target = resolve_channel(config, channel_ref)
    selected = service.select_channel(target.id)
    print_success(f"Active channel: {selected.name}")
    if config.auto_start:
        print_success("Applied to Claude Code")


@channel.command("remove")
@click.argument("channel_ref")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation prompt.")
@pass_context
@handle_launcher_errors
def remove(ctx: Context, channel_ref: str, force: bool):
    """Remove a channel.

    \b
    Examples:
        banter-launcher channel remove Lobby
        banter-launcher channel remove 3f2a --force
    """
    service = LauncherService(ctx.get_settings())
    target = resolve_channel(service.load(), channel_ref)
    confirm_destructive_action("Remove", "channel", target.name, force)

    config = service.remove_channel(target.id)
    print_success("Channel removed")
    active = config.active_channel
    if active is not None:
        print_info(f"Active channel: {active.name}")


@channel.command("validate")
@click.argument("scene_path")
def validate(scene_path: str):
    """Check whether a path is a Unity scene inside an Assets folder.

    \b
    Examples:
        banter-launcher channel validate ./Assets/Scenes/Main.unity
    """
    if validate_unity_scene(scene_path):
        print_success("Valid Unity scene file")
    else:
        print_error("Not a valid Unity scene (.unity file inside Assets folder)")
        sys.exit(1)
