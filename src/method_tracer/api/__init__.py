"""HTTP read surface for recorded traces."""

from .server import create_app

__all__ = ["create_app"]
