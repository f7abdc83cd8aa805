"""
Application version, shown in the startup log.

Read from the repository's pyproject.toml in a source checkout, otherwise from
the installed distribution's metadata.
"""

from importlib import metadata
from pathlib import Path

import tomli
from pydantic import validate_call

from ordergallery import BASE_PATH
from ordergallery.configs.logging_init import logger

DISTRIBUTION_NAME = "ordergallery"
UNKNOWN_VERSION = "0.0.0"


def _read_pyproject_version(pyproject_path: Path) -> str | None:
    if not pyproject_path.is_file():
        return None
    with open(pyproject_path, "rb") as f:
        pyproject_data = tomli.load(f)
    return pyproject_data.get("project", {}).get("version")


@validate_call(validate_return=True)
def get_version(pyproject_path: Path | None = None) -> str:
    """
    Retrieve the ordergallery version.

    Args:
        pyproject_path: pyproject.toml to read; defaults to the one at the repository root

    Returns:
        str: Project version, ``0.0.0`` if neither source knows it
    """
    if pyproject_path is None:
        pyproject_path = BASE_PATH / "pyproject.toml"

    version = _read_pyproject_version(pyproject_path)
    if version is None:
        try:
            version = metadata.version(DISTRIBUTION_NAME)
        except metadata.PackageNotFoundError:
            logger.warning(f"No version found in {pyproject_path} or installed metadata")
            version = UNKNOWN_VERSION

    logger.debug(f"Order gallery version: {version}")
    return version
