"""Runtime lookup of the installed cycle-safe-copy version."""

from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path

import tomllib

DISTRIBUTION_NAME = "cycle-safe-copy"
# src/cycle_safe_copy/version.py -> repository root
_SOURCE_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"

_LOGGER = logging.getLogger(__name__)


def read_pyproject_version(path: Path = _SOURCE_PYPROJECT) -> str:
    """Return ``project.version`` from the ``pyproject.toml`` at ``path``."""
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    return str(data["project"]["version"])


def get_version(path: Path = _SOURCE_PYPROJECT) -> str:
    """Return the installed version, falling back to a source checkout.

    Returns ``"unknown"`` when the distribution is not installed and no
    readable ``pyproject.toml`` sits at ``path``.
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        _LOGGER.debug("%s is not installed, reading %s", DISTRIBUTION_NAME, path)
    try:
        return read_pyproject_version(path)
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = get_version()
