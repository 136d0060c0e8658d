"""Resolve channel references typed on the command line."""

from core.errors import ChannelValidationError
from models.models import LauncherConfig, ProjectChannel
from utils.suggestions import did_you_mean


def resolve_channel(config: LauncherConfig, ref: str) -> ProjectChannel:
    """Find a channel by exact id, exact name, or unique id prefix."""
    for channel in config.channels:
        if channel.id == ref:
            return channel

    by_name = [c for c in config.channels if c.name == ref]
    if len(by_name) == 1:
        return by_name[0]
    if len(by_name) > 1:
        raise ChannelValidationError(
            f"Channel name '{ref}' is ambiguous; use the channel id instead")

    by_prefix = [c for c in config.channels if c.id.startswith(ref)]
    if len(by_prefix) == 1:
        return by_prefix[0]
    if len(by_prefix) > 1:
        raise ChannelValidationError(f"Channel id prefix '{ref}' matches several channels")

    message = f"Unknown channel: {ref}"
    hint = did_you_mean(ref, [c.name for c in config.channels])
    if hint:
        message = f"{message}. {hint}"
    raise ChannelValidationError(message)
