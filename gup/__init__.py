"""Ticket-linked commit helper CLI tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gup")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
