from datetime import datetime, timedelta, timezone
from typing import Union


MILLIS_PER_DAY = 86_400_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(dt: datetime) -> int:
  # Naive datetimes are taken to be UTC.
  if dt.tzinfo is None:
    dt = dt.replace(tzinfo=timezone.utc)
  return (dt - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(ms: int) -> datetime:
  return EPOCH + timedelta(milliseconds=ms)


def parse_instant(value: Union[str, int]) -> int:
  """
  Parse an instant given either as epoch milliseconds or as an ISO-8601
  string ("2021-03-20T12:00:00Z"). Returns epoch milliseconds.
  """
  if isinstance(value, int):
    return value
  text = value.strip()
  if text.lstrip("-").isdigit():
    return int(text)
  try:
    dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
  except ValueError as e:
    raise ValueError(f"Not an ISO-8601 instant or epoch milliseconds: {value!r}") from e
  return to_epoch_millis(dt)
