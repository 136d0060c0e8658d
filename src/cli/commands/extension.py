"""Unity extension CLI commands."""

import sys
from typing import Optional

import click

from cli.utils.channels import resolve_channel
from cli.utils.context import Context, handle_launcher_errors, pass_context
from cli.utils.output import print_info, print_success
from services import extension_installer
from services.launcher_service import LauncherService


@click.group()
def extension():
    """Unity bridge extension - check and install BanterMCPBridge.cs."""
    pass


@extension.command("check")
@click.option("--project", "-p", default=None, help="Unity project path (defaults to the active channel's project).")
@pass_context
@handle_launcher_errors
def check(ctx: Context, project: Optional[str]):
    """Check whether the bridge extension is installed.

    Exits with code 1 when it is missing.

    \b
    Examples:
        banter-launcher extension check
        banter-launcher extension check --project ~/Projects/World
    """
    if project is None:
        active = LauncherService(ctx.get_settings()).load().active_channel
        if active is None:
            print_info("No channel selected; pass --project to check a specific project.")
            sys.exit(1)
        project = active.unity_project_path

    if extension_installer.check(project):
        print_success(f"Extension installed in {project}")
    else:
        print_info(f"Extension not installed in {project}")
        sys.exit(1)


@extension.command("install")
@click.option("--channel", "channel_ref", default=None, help="Channel to install into (defaults to the active channel).")
@click.option("--mcp-root", default=None, help="Banter MCP install root containing unity-extension/.")
@pass_context
@handle_launcher_errors
def install(ctx: Context, channel_ref: Optional[str], mcp_root: Optional[str]):
    """Copy BanterMCPBridge.cs into a Unity project's Assets/Editor folder.

    An existing copy is overwritten.

    \b
    Examples:
        banter-launcher extension install
        banter-launcher extension install --channel Lobby --mcp-root ~/tools/banter-mcp
    """
    service = LauncherService(ctx.get_settings())

    if channel_ref is None:
        channel = service.install_extension_for_active(mcp_root)
    else:
        channel = resolve_channel(service.load(), channel_ref)
        extension_installer.install(
            channel.unity_project_path, mcp_root or service.settings.mcp_root)

    print_success(f"Unity extension installed into {channel.unity_project_path}")
