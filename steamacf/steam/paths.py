"""
Locating the Steam installation directory.
"""

import os
from pathlib import Path
from typing import Optional, Union

from ..security.exceptions import AcfError

REGISTRY_FILE = "registry.vdf"


class SteamDirNotFound(AcfError):
    """No Steam directory was given and none could be derived."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot locate the Steam directory",
            suggestions=["Pass --steam-dir or set STEAM_DIR or HOME"],
        )


def steam_dir(explicit: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the Steam directory: explicit path, $STEAM_DIR, then ~/.steam."""
    if explicit:
        return Path(explicit)

    env_dir = os.environ.get("STEAM_DIR")
    if env_dir:
        return Path(env_dir)

    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".steam"

    raise SteamDirNotFound()


def registry_path(base: Union[str, Path]) -> Path:
    """Path of the registry file inside a Steam directory."""
    return Path(base) / REGISTRY_FILE
