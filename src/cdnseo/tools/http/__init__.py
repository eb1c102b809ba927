"""HTTP helpers for cdnseo."""

from .client import HTTPClient, HTTPResponse, RedirectLoopError

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RedirectLoopError",
]
