"""Parsers that turn curator-supplied release artifacts into typed records."""

from releasekit.__version__ import __version__

__all__ = ["__version__"]
