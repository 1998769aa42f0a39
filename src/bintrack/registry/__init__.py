"""Local binary registry — records persisted to ~/.bin/config.json.

Layout:
    ~/.bin/
    ├── config.json        # {"default_path": ..., "bins": {<path>: {...}}}
    └── bintrack.toml      # Optional settings for the entry point
"""

from bintrack.registry.errors import RegistryError, RegistryIOError, RegistryParseError
from bintrack.registry.models import Binary, RegistryConfig
from bintrack.registry.paths import resolve_default_path
from bintrack.registry.store import DEFAULT_CONFIG_PATH, ConfigStore

__all__ = [
    "Binary",
    "ConfigStore",
    "DEFAULT_CONFIG_PATH",
    "RegistryConfig",
    "RegistryError",
    "RegistryIOError",
    "RegistryParseError",
    "resolve_default_path",
]
