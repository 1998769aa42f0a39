"""Settings loading from environment variables and bintrack.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from bintrack.registry.store import DEFAULT_CONFIG_PATH

_SETTINGS_FILENAME = "bintrack.toml"


@dataclass
class Settings:
    """Top-level bintrack settings."""

    config_path: Path = DEFAULT_CONFIG_PATH
    log_level: str = "INFO"


def load_settings(settings_path: Path | None = None) -> Settings:
    """Load settings from environment variables and optional bintrack.toml.

    Priority: environment variables > bintrack.toml > defaults.
    """
    file_data: dict = {}
    if settings_path and settings_path.exists():
        file_data = tomllib.loads(settings_path.read_text())
    else:
        # Search current dir and ~/.bin/
        for candidate in [Path.cwd() / _SETTINGS_FILENAME, Path.home() / ".bin" / _SETTINGS_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    config_path = os.getenv("BINTRACK_CONFIG") or file_data.get("config_path")
    return Settings(
        config_path=Path(config_path).expanduser() if config_path else DEFAULT_CONFIG_PATH,
        log_level=os.getenv("BINTRACK_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
