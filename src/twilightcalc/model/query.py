from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidQueryError


# Instants datetime can represent: 0001-01-01T00:00:00Z to 9999-12-31T23:59:59.999Z.
# Results lie within about a day of the query, so they stay inside int64.
TIME_MIN = -62_135_596_800_000
TIME_MAX = 253_402_300_799_999

# Reported for both sunrise and sunset when the day or night never ends.
SENTINEL = -1


class TwilightQuery(BaseModel):
  """A (time, latitude, longitude) triple, validated at construction."""

  model_config = ConfigDict(frozen=True)

  time: int = Field(ge=TIME_MIN, le=TIME_MAX)  # epoch milliseconds, UTC
  latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)  # degrees
  longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)  # degrees

  @classmethod
  def of(cls, time, latitude, longitude) -> "TwilightQuery":
    try:
      return cls(time=time, latitude=latitude, longitude=longitude)
    except ValidationError as e:
      raise InvalidQueryError(str(e)) from e


class TwilightResult(BaseModel):
  """
  Civil twilight times around a query instant.

  `sunrise` and `sunset` are epoch milliseconds, or both SENTINEL when
  the sun never crosses the twilight altitude that day. In that case
  `is_day` says whether it is perpetual day or perpetual night.
  """

  model_config = ConfigDict(frozen=True)

  time: int
  sunset: int
  sunrise: int
  is_day: bool

  @property
  def is_polar(self) -> bool:
    return self.sunrise == SENTINEL and self.sunset == SENTINEL

  @property
  def day_length_ms(self) -> Optional[int]:
    if self.is_polar:
      return None
    return self.sunset - self.sunrise

  def to_dict(self) -> dict:
    return self.model_dump()
