"""HTTP API for the twilight calculator."""

from .rest import TwilightRestAPI

__all__ = [
    "TwilightRestAPI",
]
