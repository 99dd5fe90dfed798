from datetime import datetime, timedelta, timezone

from twilightcalc import SENTINEL, TwilightResult
from twilightcalc.core.timebase import to_epoch_millis
from twilightcalc.io.render import NEVER_ENDS, render_dict, render_text


def _result():
  return TwilightResult(
    time=to_epoch_millis(datetime(2021, 3, 20, 12, tzinfo=timezone.utc)),
    sunrise=to_epoch_millis(datetime(2021, 3, 20, 5, 50, tzinfo=timezone.utc)),
    sunset=to_epoch_millis(datetime(2021, 3, 20, 18, 30, tzinfo=timezone.utc)),
    is_day=True,
  )


def test_render_text_in_utc():
  assert render_text(_result()) == "day starts at 05:50\nnight starts at 18:30\nis it day? True"


def test_render_text_in_other_timezone():
  text = render_text(_result(), tz=timezone(timedelta(hours=2)), time_format="%H:%M:%S")
  assert text.splitlines()[:2] == ["day starts at 07:50:00", "night starts at 20:30:00"]


def test_render_text_for_perpetual_night():
  r = TwilightResult(time=0, sunrise=SENTINEL, sunset=SENTINEL, is_day=False)
  assert render_text(r).splitlines() == [NEVER_ENDS, NEVER_ENDS, "is it day? False"]


def test_render_dict():
  d = render_dict(_result())
  assert d["sunrise_iso"] == "2021-03-20T05:50:00Z"
  assert d["sunset_iso"] == "2021-03-20T18:30:00Z"
  assert d["time_iso"] == "2021-03-20T12:00:00Z"
  assert d["day_length_ms"] == 12 * 3_600_000 + 40 * 60_000
  assert d["is_day"] is True and d["is_polar"] is False


def test_render_dict_for_perpetual_day():
  d = render_dict(TwilightResult(time=0, sunrise=SENTINEL, sunset=SENTINEL, is_day=True))
  assert d["sunrise"] == SENTINEL and d["sunrise_iso"] is None and d["sunset_iso"] is None
  assert d["time_iso"] == "1970-01-01T00:00:00Z"
  assert d["day_length_ms"] is None and d["is_polar"] is True
