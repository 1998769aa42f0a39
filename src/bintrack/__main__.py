"""Entry point: python -m bintrack [list|path|remove|prune]

- No args / "list": Show tracked binaries
- "path":           Print the default install directory
- "remove <path>":  Stop tracking one or more binaries
- "prune":          Drop records whose binary is gone from disk
"""

from __future__ import annotations

import logging
import sys

from bintrack.registry import ConfigStore, RegistryError
from bintrack.settings import load_settings

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _list(store: ConfigStore) -> None:
    bins = store.get().bins
    if not bins:
        print("No binaries tracked.")
        return
    for path in sorted(bins):
        b = bins[path]
        print(f"{b.path}\t{b.version}\t{b.url}")


def _usage() -> None:
    print("Usage: python -m bintrack [list|path|remove <path>...|prune]")
    print("  list    — Show tracked binaries (default)")
    print("  path    — Print the default install directory")
    print("  remove  — Stop tracking the given paths")
    print("  prune   — Drop records whose binary no longer exists")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "list"
    if cmd not in ("list", "path", "remove", "prune"):
        _usage()
        return 1

    settings = load_settings()
    _setup_logging(settings.log_level)

    store = ConfigStore(settings.config_path)
    try:
        store.load()
        if cmd == "list":
            _list(store)
        elif cmd == "path":
            print(store.get().default_path)
        elif cmd == "remove":
            if len(args) < 2:
                _usage()
                return 1
            store.remove_binaries(args[1:])
        else:
            for path in store.prune():
                print(f"Pruned {path}")
    except RegistryError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
