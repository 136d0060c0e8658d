"""Logging configuration for the launcher."""

import logging
from logging.handlers import RotatingFileHandler

from core.config import LauncherSettings

LOGGER_NAME = "banter-mcp-launcher"

logger = logging.getLogger(LOGGER_NAME)


class WindowsSafeRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler that gracefully handles Windows file locking during rotation."""

    def doRollover(self):
        """Override to catch PermissionError on Windows when log file is locked."""
        try:
            super().doRollover()
        except PermissionError:
            # Another process holds the log file; retry on the next rollover.
            pass


def configure_logging(settings: LauncherSettings, verbose: bool = False) -> logging.Logger:
    """Configure stderr logging and, optionally, a rotating log file.

    stderr only shows warnings unless ``verbose``; the log file records at
    ``settings.log_level``. stdout is left to command output.
    """
    file_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    stderr_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=stderr_level,
        format=settings.log_format,
        stream=None,  # None -> sys.stderr
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.setLevel(stderr_level)

    logger.setLevel(min(file_level, stderr_level))

    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()

    if settings.log_to_file:
        try:
            settings.log_dir.mkdir(parents=True, exist_ok=True)
            fh = WindowsSafeRotatingFileHandler(
                settings.log_dir / "launcher.log",
                maxBytes=512 * 1024,
                backupCount=2,
                encoding="utf-8",
            )
            fh.setFormatter(logging.Formatter(settings.log_format))
            fh.setLevel(file_level)
            logger.addHandler(fh)
        except OSError as exc:
            # Never let logging setup break a command
            logger.debug("Failed to configure log file handler", exc_info=exc)

    return logger
