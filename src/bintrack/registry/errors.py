"""Errors raised by the registry store."""

from __future__ import annotations

from pathlib import Path


class RegistryError(Exception):
    """Base class for registry failures."""


class RegistryIOError(RegistryError, OSError):
    """The config file could not be created, read or written."""


class RegistryParseError(RegistryError, ValueError):
    """The config file is non-empty but not a valid registry document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
