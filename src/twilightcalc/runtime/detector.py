"""Day/night detection for the observer's current position.

Requests one fix from a position source, then runs the twilight
calculation for the clock's current instant on receipt of that fix.
"""
from typing import Optional
import asyncio
import logging

from ..core.twilight import Precision, calculate_twilight
from ..errors import LocationUnavailableError
from ..model.query import TwilightResult
from .clock import Clock
from .location import LocationFix, LocationSource

logger = logging.getLogger(__name__)


class DayNightDetector:
    """Determines whether it is day or night where the observer is."""

    def __init__(
        self,
        location_source: LocationSource,
        clock: Optional[Clock] = None,
        precision: Precision = Precision.DOUBLE,
        timeout: float = 10.0,
    ):
        """Initialize detector.

        Args:
            location_source: Where the single fix comes from
            clock: Clock source (default: wall clock)
            precision: Floating point profile of the calculation
            timeout: Seconds to wait for the fix
        """
        self.location_source = location_source
        self.clock = clock or Clock()
        self.precision = precision
        self.timeout = timeout
        self.last_fix: Optional[LocationFix] = None

    async def detect(self) -> TwilightResult:
        """Get one fix and calculate twilight for it.

        Returns:
            The twilight result for the fix and the clock's current instant

        Raises:
            LocationUnavailableError: If no fix arrives within the timeout
        """
        try:
            fix = await asyncio.wait_for(self.location_source.request_fix(), self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"No location fix within {self.timeout}s")
            raise LocationUnavailableError("failed to get location for some reason") from e

        if fix is None:
            logger.warning("Position source reported no fix")
            raise LocationUnavailableError("failed to get location for some reason")

        self.last_fix = fix
        accuracy = "unknown" if fix.accuracy is None else f"{fix.accuracy} m"
        logger.debug(
            f"Got location {fix.latitude}, {fix.longitude} from {fix.provider} (accuracy {accuracy})"
        )
        return calculate_twilight(
            self.clock.now_millis(),
            fix.latitude,
            fix.longitude,
            self.precision,
        )

    def detect_sync(self) -> TwilightResult:
        """Run detect() to completion from synchronous code."""
        return asyncio.run(self.detect())
