from datetime import datetime, timezone

import pytest

from twilightcalc.core.timebase import from_epoch_millis, parse_instant, to_epoch_millis
from twilightcalc.core.twilight import UTC_2000


def test_reference_epoch_millis():
  assert to_epoch_millis(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == UTC_2000
  assert from_epoch_millis(UTC_2000) == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def test_parse_instant():
  assert parse_instant("2000-01-01T12:00:00Z") == UTC_2000
  assert parse_instant("2000-01-01T13:00:00+01:00") == UTC_2000
  assert parse_instant(str(UTC_2000)) == UTC_2000
  assert parse_instant("-1000") == -1000
  assert parse_instant(42) == 42


def test_parse_instant_rejects_garbage():
  with pytest.raises(ValueError):
    parse_instant("yesterday")
