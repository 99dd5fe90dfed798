from datetime import timezone, tzinfo
from typing import List, Optional

from ..core.timebase import from_epoch_millis
from ..model.query import SENTINEL, TwilightResult


NEVER_ENDS = "day/night never ends"


def _format_time(ms: int, tz: Optional[tzinfo], time_format: str) -> str:
  return from_epoch_millis(ms).astimezone(tz or timezone.utc).strftime(time_format)


def describe_sunrise(result: TwilightResult, tz: Optional[tzinfo] = None, time_format: str = "%H:%M") -> str:
  if result.sunrise == SENTINEL:
    return NEVER_ENDS
  return f"day starts at {_format_time(result.sunrise, tz, time_format)}"


def describe_sunset(result: TwilightResult, tz: Optional[tzinfo] = None, time_format: str = "%H:%M") -> str:
  if result.sunset == SENTINEL:
    return NEVER_ENDS
  return f"night starts at {_format_time(result.sunset, tz, time_format)}"


def render_lines(result: TwilightResult, tz: Optional[tzinfo] = None, time_format: str = "%H:%M") -> List[str]:
  return [
    describe_sunrise(result, tz, time_format),
    describe_sunset(result, tz, time_format),
    f"is it day? {result.is_day}",
  ]


def render_text(result: TwilightResult, tz: Optional[tzinfo] = None, time_format: str = "%H:%M") -> str:
  """Render a result the way it is shown to a person. Times of day are in
  `tz`, UTC when not given."""
  return "\n".join(render_lines(result, tz, time_format))


def _iso(ms: int) -> Optional[str]:
  try:
    return from_epoch_millis(ms).isoformat().replace("+00:00", "Z")
  except OverflowError:
    # outside the years datetime can represent
    return None


def render_dict(result: TwilightResult) -> dict:
  # JSON-ready; sentinel instants render as None.
  return {
    **result.to_dict(),
    "is_polar": result.is_polar,
    "day_length_ms": result.day_length_ms,
    "time_iso": _iso(result.time),
    "sunrise_iso": None if result.is_polar else _iso(result.sunrise),
    "sunset_iso": None if result.is_polar else _iso(result.sunset),
  }
