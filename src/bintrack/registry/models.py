"""Registry records and their JSON layout."""

from __future__ import annotations

from dataclasses import dataclass, field

_BINARY_FIELDS = ("path", "remote_name", "version", "hash", "url")


@dataclass
class Binary:
    """One managed binary. ``path`` is the registry key."""

    path: str
    remote_name: str = ""
    version: str = ""
    hash: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Binary:
        return cls(**{name: data.get(name) or "" for name in _BINARY_FIELDS})

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in _BINARY_FIELDS}


@dataclass
class RegistryConfig:
    """Persisted root: default install directory plus the binary map."""

    default_path: str = ""
    bins: dict[str, Binary] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> RegistryConfig:
        bins_data = data.get("bins") or {}
        if not isinstance(bins_data, dict):
            raise ValueError("'bins' must be an object")
        bins: dict[str, Binary] = {}
        for key, entry in bins_data.items():
            if not isinstance(entry, dict):
                raise ValueError(f"entry {key!r} must be an object")
            binary = Binary.from_dict(entry)
            # Older files may omit the path inside the entry
            if not binary.path:
                binary.path = key
            bins[key] = binary
        return cls(default_path=data.get("default_path") or "", bins=bins)

    def to_dict(self) -> dict:
        return {
            "default_path": self.default_path,
            "bins": {key: b.to_dict() for key, b in self.bins.items()},
        }
