"""Registry of commands exposed across the host UI boundary."""

from typing import Any, Callable

from pydantic import validate_call

# Global registry to collect decorated commands
_command_registry: list[dict[str, Any]] = []


def launcher_command(
    name: str | None = None,
    description: str | None = None,
) -> Callable:
    """Register a function as a launcher command.

    Arguments are validated (and coerced from JSON values) with pydantic.

    Args:
        name: Command name (defaults to the function name)
        description: Command description (defaults to the first docstring line)
    """
    def decorator(func: Callable) -> Callable:
        command_name = name if name is not None else func.__name__
        doc = (func.__doc__ or "").strip().splitlines()
        validated = validate_call(func)
        _command_registry.append({
            'func': validated,
            'name': command_name,
            'description': description or (doc[0] if doc else ""),
        })
        return validated

    return decorator


def get_registered_commands() -> list[dict[str, Any]]:
    """Get all registered commands."""
    return _command_registry.copy()


def get_command(name: str) -> dict[str, Any] | None:
    for command in _command_registry:
        if command['name'] == name:
            return command
    return None
