"""Collaborators that feed the twilight calculation."""

from .clock import Clock
from .location import (
    LocationFix,
    LocationSource,
    NoLocationSource,
    StaticLocationSource,
    location_source_from_config,
)
from .detector import DayNightDetector

__all__ = [
    "Clock",
    "LocationFix",
    "LocationSource",
    "NoLocationSource",
    "StaticLocationSource",
    "location_source_from_config",
    "DayNightDetector",
]
