"""Banter MCP launcher command line interface."""

from core.version import get_package_version

__version__ = get_package_version()
