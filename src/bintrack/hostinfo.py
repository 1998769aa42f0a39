"""Host OS / architecture identifiers used to match release assets."""

from __future__ import annotations

import platform

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
    "arm": "arm",
}


def normalize_arch(machine: str) -> str:
    m = machine.lower()
    return _ARCH_ALIASES.get(m, m)


def current_architectures(machine: str | None = None) -> list[str]:
    """Return the normalized arch, plus ``x86_64`` on amd64 hosts.

    Release assets name 64-bit x86 either way, so both are offered.
    """
    arch = normalize_arch(machine if machine is not None else platform.machine())
    archs = [arch]
    if arch == "amd64":
        archs.append("x86_64")
    return archs


def current_os(system: str | None = None) -> list[str]:
    """Return the normalized OS name (linux, darwin, windows, ...)."""
    name = system if system is not None else platform.system()
    return [name.lower()]
