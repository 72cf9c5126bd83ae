"""
Steam-specific consumers of the reader.
"""

from .paths import SteamDirNotFound, registry_path, steam_dir
from .registry import (
    APPS_PATH,
    AppNotFound,
    AppRegistry,
    InvalidPattern,
    load_registry,
    read_apps,
)

__all__ = [
    'APPS_PATH', 'AppNotFound', 'AppRegistry', 'InvalidPattern',
    'load_registry', 'read_apps',
    'SteamDirNotFound', 'registry_path', 'steam_dir',
]
