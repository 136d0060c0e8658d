"""Shared CLI context and error handling."""

import functools
import sys
from typing import Any, Callable, Optional, TypeVar

import click

from core.config import LauncherSettings, get_settings
from core.errors import LauncherError


# Context object to pass configuration between commands
class Context:
    def __init__(self):
        self.settings: Optional[LauncherSettings] = None
        self.format: str = "text"
        self.verbose: bool = False

    def get_settings(self) -> LauncherSettings:
        return self.settings or get_settings()


pass_context = click.make_pass_decorator(Context, ensure=True)


F = TypeVar("F", bound=Callable[..., Any])


def handle_launcher_errors(func: F) -> F:
    """Decorator that reports LauncherError consistently.

    Prints the error message and exits with code 1.

    Usage:
        @channel.command("add")
        @handle_launcher_errors
        def add(...):
            ...
    """
    from cli.utils.output import print_error

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except LauncherError as e:
            print_error(str(e))
            sys.exit(1)

    return wrapper  # type: ignore[return-value]


def confirm_destructive_action(action: str, item_type: str, item_name: str, force: bool) -> None:
    """Prompt before a destructive action unless ``--force`` was given.

    Raises:
        click.Abort: If the user declines.
    """
    if not force:
        click.confirm(f"{action} {item_type} '{item_name}'?", abort=True)
