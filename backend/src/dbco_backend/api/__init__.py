"""HTTP surface of the contact tracing backend."""

from .server import create_app

__all__ = ["create_app"]
