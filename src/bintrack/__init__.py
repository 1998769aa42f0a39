"""bintrack — registry of locally-managed binaries."""

__version__ = "0.1.0"
