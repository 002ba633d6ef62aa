"""API v1 routers."""

from . import generate

__all__ = [
    "generate",
]
