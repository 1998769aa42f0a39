"""JSON-backed registry of managed binaries.

One ``ConfigStore`` is built per process and handed to whatever needs the
registry. Mutations are applied in memory first (``put`` / ``discard``) and
written with ``flush``; ``upsert_binary`` and ``remove_binaries`` do both.
If a flush fails the in-memory state is kept, so memory and disk may
disagree until the next successful flush.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from bintrack.registry.errors import RegistryIOError, RegistryParseError
from bintrack.registry.models import Binary, RegistryConfig
from bintrack.registry.paths import resolve_default_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".bin" / "config.json"


class ConfigStore:
    """Load, mutate and persist the binary registry."""

    def __init__(self, path: Path | None = None, search_path: str | None = None) -> None:
        self.path = Path(path) if path else DEFAULT_CONFIG_PATH
        self._search_path = search_path
        self._config = RegistryConfig()

    # ── Loading ───────────────────────────────────────────────

    def load(self) -> RegistryConfig:
        """Read the config file, creating it on first run.

        Empty content means first run: the registry starts empty. A
        missing default path is back-filled from the search path.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise RegistryParseError(self.path, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise RegistryIOError(f"cannot open {self.path}: {e}") from e

        config = self._parse(raw) if raw.strip() else RegistryConfig()

        if not config.default_path:
            search_path = self._search_path
            if search_path is None:
                search_path = os.environ.get("PATH", "")
            config.default_path = resolve_default_path(search_path)
        logger.debug("Download path set to %s", config.default_path)

        self._config = config
        return config

    def _parse(self, raw: str) -> RegistryConfig:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise RegistryParseError(self.path, f"malformed JSON: {e}") from e
        if not isinstance(data, dict):
            raise RegistryParseError(self.path, "top-level value must be an object")
        try:
            return RegistryConfig.from_dict(data)
        except ValueError as e:
            raise RegistryParseError(self.path, str(e)) from e

    # ── Access ────────────────────────────────────────────────

    def get(self) -> RegistryConfig:
        """Return the live registry. Callers share it; nothing is copied."""
        return self._config

    def find(self, path: str) -> Binary | None:
        return self._config.bins.get(path)

    # ── In-memory mutation ────────────────────────────────────

    def put(self, binary: Binary) -> None:
        """Insert or replace the entry keyed by ``binary.path``."""
        if not binary.path:
            raise ValueError("binary path must not be empty")
        self._config.bins[binary.path] = binary

    def discard(self, paths: Iterable[str]) -> list[str]:
        """Remove the given paths, ignoring unknown ones. Returns what was removed."""
        removed = []
        for p in paths:
            if self._config.bins.pop(p, None) is not None:
                removed.append(p)
        return removed

    # ── Persisting mutators ───────────────────────────────────

    def upsert_binary(self, binary: Binary | None) -> None:
        """Add or update a binary and write the registry. ``None`` is a no-op."""
        if binary is None:
            return
        self.put(binary)
        self.flush()

    def remove_binaries(self, paths: Iterable[str]) -> None:
        """Remove the given paths (order irrelevant) and write the registry once."""
        removed = self.discard(paths)
        logger.debug("Removed %d binaries from registry", len(removed))
        self.flush()

    def prune(self) -> list[str]:
        """Drop records whose binary no longer exists on disk."""
        missing = [p for p, b in self._config.bins.items() if not Path(b.path).exists()]
        if missing:
            self.discard(missing)
            self.flush()
        return missing

    # ── Storage ───────────────────────────────────────────────

    def flush(self) -> None:
        """Write the whole registry, replacing the file atomically."""
        try:
            payload = json.dumps(self._config.to_dict(), indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise RegistryIOError(f"cannot serialize {self.path}: {e}") from e

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = self.path.stat().st_mode & 0o777 if self.path.exists() else 0o644
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name:
                Path(tmp_name).unlink(missing_ok=True)
            raise RegistryIOError(f"cannot write {self.path}: {e}") from e
        logger.debug("Wrote %d binaries to %s", len(self._config.bins), self.path)
