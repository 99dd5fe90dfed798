"""
Civil twilight calculation.

Maps an instant and a position on the earth to the nearest civil
twilight sunrise and sunset and to whether it is currently day. The
sun's position comes from a closed-form approximation (mean anomaly,
equation of center, ecliptic longitude, declination, hour angle) that
holds to within civil-twilight tolerance near the present era. It is
not an ephemeris.

All angles are in radians except the latitude and longitude arguments,
which are in degrees. All instants are UTC epoch milliseconds.
"""
from enum import Enum
import logging
import math

import numpy as np

from .timebase import MILLIS_PER_DAY
from ..errors import InvalidQueryError
from ..model.query import SENTINEL, TwilightQuery, TwilightResult

logger = logging.getLogger(__name__)


# Epoch milliseconds at 2000-01-01T12:00:00Z.
UTC_2000 = 946_728_000_000

DEGREES_TO_RADIANS = math.pi / 180.0

# Mean anomaly at UTC_2000 and its rate per day.
MEAN_ANOMALY_2000 = 6.240059968
MEAN_ANOMALY_RATE = 0.01720197

# Equation of center coefficients.
C1 = 0.0334196
C2 = 0.000349066
C3 = 0.000005236

# Argument of perihelion.
PERIHELION = 1.796593063

# Mean obliquity of the ecliptic.
OBLIQUITY = 0.40927971

# Solar transit terms, in days.
J0 = 0.0009
TRANSIT_ANOMALY_COEFF = 0.0053
TRANSIT_LONGITUDE_COEFF = -0.0069

# Sun's center 6 degrees below the horizon.
ALTITUDE_CORRECTION_CIVIL_TWILIGHT = -0.104719755

# float32 resolves the day fraction to a few minutes only this close to UTC_2000.
SINGLE_PRECISION_SPAN_MS = 2 ** 16 * MILLIS_PER_DAY


class Precision(str, Enum):
  """Floating point profile used for the whole calculation."""
  DOUBLE = "double"
  SINGLE = "single"

  @property
  def dtype(self):
    return np.float64 if self is Precision.DOUBLE else np.float32


def _round_half_up(x) -> int:
  return math.floor(float(x) + 0.5)


def is_daytime(time: int, sunrise: int, sunset: int) -> bool:
  # Both ends are night.
  return sunrise < time < sunset


def _perpetual(time: int, is_day: bool) -> TwilightResult:
  return TwilightResult(time=time, sunset=SENTINEL, sunrise=SENTINEL, is_day=is_day)


def calculate_twilight(
  time: int,
  latitude: float,
  longitude: float,
  precision: Precision = Precision.DOUBLE,
) -> TwilightResult:
  """Calculate civil twilight for an instant and a location.

  Args:
    time: UTC instant in epoch milliseconds
    latitude: latitude in degrees, in [-90, 90]
    longitude: longitude in degrees, in [-180, 180]
    precision: floating point profile of the calculation

  Returns:
    The TwilightResult for the query.

  Raises:
    InvalidQueryError: if the time or a coordinate is outside its domain,
      or the time is beyond the single precision range.
  """
  return calculate(TwilightQuery.of(time, latitude, longitude), precision)


def calculate(query: TwilightQuery, precision: Precision = Precision.DOUBLE) -> TwilightResult:
  precision = Precision(precision)
  f = precision.dtype
  time = query.time

  if precision is Precision.SINGLE and abs(time - UTC_2000) > SINGLE_PRECISION_SPAN_MS:
    raise InvalidQueryError(
      f"time {time} is more than {SINGLE_PRECISION_SPAN_MS // MILLIS_PER_DAY} days from 2000-01-01T12:00:00Z, "
      "outside the single precision range"
    )

  days_since_2000 = f(time - UTC_2000) / f(MILLIS_PER_DAY)

  mean_anomaly = f(MEAN_ANOMALY_2000) + days_since_2000 * f(MEAN_ANOMALY_RATE)
  true_anomaly = (
    mean_anomaly
    + f(C1) * np.sin(mean_anomaly)
    + f(C2) * np.sin(f(2.0) * mean_anomaly)
    + f(C3) * np.sin(f(3.0) * mean_anomaly)
  )
  solar_lng = true_anomaly + f(PERIHELION) + f(math.pi)

  # Solar transit in days since 2000.
  arc_longitude = -f(query.longitude) / f(360.0)
  n = f(_round_half_up(days_since_2000 - f(J0) - arc_longitude))
  solar_transit = (
    n + f(J0) + arc_longitude
    + f(TRANSIT_ANOMALY_COEFF) * np.sin(mean_anomaly)
    + f(TRANSIT_LONGITUDE_COEFF) * np.sin(f(2.0) * solar_lng)
  )

  solar_dec = np.arcsin(np.sin(solar_lng) * np.sin(f(OBLIQUITY)))
  lat_rad = f(query.latitude) * f(DEGREES_TO_RADIANS)

  numerator = np.sin(f(ALTITUDE_CORRECTION_CIVIL_TWILIGHT)) - np.sin(lat_rad) * np.sin(solar_dec)
  denominator = np.cos(lat_rad) * np.cos(solar_dec)

  # At a pole the sun's altitude does not change over the day.
  if abs(query.latitude) == 90.0 or denominator <= 0:
    is_day = bool(numerator < 0)
    logger.debug(f"Pole at {query.latitude}: perpetual {'day' if is_day else 'night'}")
    return _perpetual(time, is_day)

  cos_hour_angle = numerator / denominator

  # The day or night never ends for this date and location.
  if cos_hour_angle >= 1:
    logger.debug(f"cos(hour angle) = {cos_hour_angle}: perpetual night")
    return _perpetual(time, False)
  if cos_hour_angle <= -1:
    logger.debug(f"cos(hour angle) = {cos_hour_angle}: perpetual day")
    return _perpetual(time, True)

  hour_angle = np.arccos(cos_hour_angle) / f(2.0 * math.pi)
  sunset = _round_half_up((solar_transit + hour_angle) * f(MILLIS_PER_DAY)) + UTC_2000
  sunrise = _round_half_up((solar_transit - hour_angle) * f(MILLIS_PER_DAY)) + UTC_2000
  is_day = is_daytime(time, sunrise, sunset)

  return TwilightResult(time=time, sunset=sunset, sunrise=sunrise, is_day=is_day)
