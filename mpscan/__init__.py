"""Concurrent TCP port scanner with banner grabbing and JSON summaries."""

__version__ = "0.1.0"
__all__ = ["__version__"]