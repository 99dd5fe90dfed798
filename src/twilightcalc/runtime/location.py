"""Position sources.

A position source answers a single asynchronous request for the
observer's location. It may fail to produce a fix, in which case no
twilight calculation is made.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

from pydantic import BaseModel, ConfigDict, Field

from ..config import TwilightConfig

logger = logging.getLogger(__name__)


class LocationFix(BaseModel):
    """A single geographic fix."""

    model_config = ConfigDict(frozen=True)

    latitude: float  # degrees
    longitude: float  # degrees
    accuracy: Optional[float] = Field(default=None, ge=0)  # metres
    provider: str = "static"


class LocationSource(ABC):
    """Base class for position sources."""

    @abstractmethod
    async def request_fix(self) -> Optional[LocationFix]:
        """Request one fix.

        Returns:
            The fix, or None if no fix could be obtained
        """
        pass


class StaticLocationSource(LocationSource):
    """Position source that always reports the same coordinate."""

    def __init__(
        self,
        latitude: float,
        longitude: float,
        provider: str = "static",
        accuracy: Optional[float] = None,
    ):
        self._fix = LocationFix(
            latitude=latitude,
            longitude=longitude,
            accuracy=accuracy,
            provider=provider,
        )

    async def request_fix(self) -> Optional[LocationFix]:
        logger.debug(f"Serving static fix {self._fix.latitude}, {self._fix.longitude}")
        return self._fix


class NoLocationSource(LocationSource):
    """Position source for when no coordinate is known."""

    async def request_fix(self) -> Optional[LocationFix]:
        return None


def location_source_from_config(config: TwilightConfig) -> LocationSource:
    """Build the position source for a configuration's default location."""
    if config.location is None:
        return NoLocationSource()
    return StaticLocationSource(
        config.location.latitude,
        config.location.longitude,
        provider="config",
        accuracy=config.location.accuracy,
    )
