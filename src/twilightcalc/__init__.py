"""Civil twilight sunrise, sunset and day/night calculation."""

__version__ = "1.0.0"

from .core.twilight import Precision, calculate, calculate_twilight  # noqa: E402
from .errors import (  # noqa: E402
    ConfigError,
    InvalidQueryError,
    LocationUnavailableError,
    TwilightError,
)
from .model.query import SENTINEL, TwilightQuery, TwilightResult  # noqa: E402

__all__ = [
    "Precision",
    "calculate",
    "calculate_twilight",
    "ConfigError",
    "InvalidQueryError",
    "LocationUnavailableError",
    "TwilightError",
    "SENTINEL",
    "TwilightQuery",
    "TwilightResult",
]
