"""Exception types raised by the launcher backend.

Every error carries a human-readable message; the command boundary and the
CLI surface ``str(error)`` and nothing else.
"""


class LauncherError(Exception):
    """Base class for all launcher failures."""
    pass


class FileAccessError(LauncherError):
    """A file could not be read, written, or copied."""
    pass


class SceneNotFoundError(FileAccessError):
    """The selected scene file does not exist on disk."""
    pass


class ConfigParseError(LauncherError):
    """A JSON document could not be parsed or serialized."""
    pass


class ChannelValidationError(LauncherError):
    """A scene path or channel reference violates a precondition."""
    pass
