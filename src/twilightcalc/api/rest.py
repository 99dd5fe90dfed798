"""REST API exposing the twilight calculation."""

from typing import Optional
import logging

from fastapi import FastAPI, HTTPException

from .. import __version__
from ..config import TwilightConfig
from ..core.timebase import parse_instant
from ..core.twilight import Precision, calculate_twilight
from ..io.render import render_dict
from ..runtime.clock import Clock

logger = logging.getLogger(__name__)


class TwilightRestAPI:
    """HTTP API for civil twilight queries."""

    def __init__(
        self,
        config: Optional[TwilightConfig] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize REST API.

        Args:
            config: Configuration supplying the default location and precision
            clock: Clock source for queries without a time
        """
        self.config = config or TwilightConfig()
        self.clock = clock or Clock()
        self.app = FastAPI(
            title="Twilight Calculator API",
            description="Civil twilight sunrise, sunset and day/night state",
            version=__version__,
        )

        # Setup routes
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/api/twilight")
        async def get_twilight(
            latitude: Optional[float] = None,
            longitude: Optional[float] = None,
            time: Optional[str] = None,
            precision: Optional[Precision] = None,
        ):
            """Calculate twilight for a position and instant."""
            if latitude is None or longitude is None:
                if self.config.location is None:
                    raise HTTPException(
                        status_code=400,
                        detail="latitude and longitude are required",
                    )
                latitude = self.config.location.latitude if latitude is None else latitude
                longitude = self.config.location.longitude if longitude is None else longitude

            try:
                time_ms = self.clock.now_millis() if time is None else parse_instant(time)
                result = calculate_twilight(
                    time_ms,
                    latitude,
                    longitude,
                    precision or self.config.precision,
                )
            except ValueError as e:
                logger.warning(f"Rejected twilight query: {e}")
                raise HTTPException(status_code=400, detail=str(e))

            return render_dict(result)

        @self.app.get("/api/config")
        async def get_config():
            """Get effective configuration."""
            location = self.config.location
            return {
                "location": location.model_dump() if location else None,
                "precision": self.config.precision.value,
                "version": __version__,
            }

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "timestamp": self.clock.now().isoformat(),
            }

    def get_app(self) -> FastAPI:
        """Get the FastAPI app instance."""
        return self.app
