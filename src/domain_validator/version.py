from __future__ import annotations

from importlib import metadata

DIST_NAME = "domain-validator"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Installed distribution version, or `UNKNOWN_VERSION` for an uninstalled checkout."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION
