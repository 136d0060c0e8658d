"""Package version lookup."""

from importlib import metadata
from pathlib import Path

import tomli

PACKAGE_NAME = "banter-mcp-launcher"


def _version_from_local_pyproject() -> str:
    """Locate the nearest pyproject.toml that matches our package name."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        candidate = parent / "pyproject.toml"
        if not candidate.exists():
            continue
        try:
            with candidate.open("rb") as f:
                data = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError):
            continue

        project_table = data.get("project") or {}
        project_name = project_table.get("name")
        if project_name and project_name.lower() != PACKAGE_NAME.lower():
            continue

        version = project_table.get("version")
        if version:
            return version
    raise FileNotFoundError(f"pyproject.toml not found for {PACKAGE_NAME}")


def get_package_version() -> str:
    """
    Get package version in different ways:
    1. Installed distribution metadata
    2. The pyproject.toml of a source checkout
    Default is "unknown".
    """
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        try:
            return _version_from_local_pyproject()
        except FileNotFoundError:
            return "unknown"
