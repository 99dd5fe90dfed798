from datetime import datetime, timezone
import json
import logging
import sys

import click

from ..config import load_config
from ..core.timebase import from_epoch_millis, parse_instant
from ..core.twilight import Precision
from ..errors import ConfigError, InvalidQueryError, LocationUnavailableError
from ..io.render import render_dict, render_text
from ..runtime.clock import Clock
from ..runtime.detector import DayNightDetector
from ..runtime.location import StaticLocationSource, location_source_from_config


@click.command()
@click.option("--latitude", type=float, help="Latitude in degrees (default: configured location)")
@click.option("--longitude", type=float, help="Longitude in degrees (default: configured location)")
@click.option("--time", "time_", help="Instant as ISO-8601 or epoch milliseconds (default: now)")
@click.option("--precision", type=click.Choice([p.value for p in Precision]), help="Floating point profile")
@click.option("--config", type=click.Path(exists=True), help="Configuration file path")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--utc", is_flag=True, help="Show times of day in UTC instead of local time")
@click.option("--timeout", type=float, help="Seconds to wait for a location fix")
def main(latitude, longitude, time_, precision, config, as_json, utc, timeout):
  """Tell whether it is day or night (civil twilight) at a location."""
  try:
    cfg = load_config(config)
  except ConfigError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(2)
  logging.basicConfig(
    level=cfg.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )

  if (latitude is None) != (longitude is None):
    click.echo("ERROR: --latitude and --longitude must be given together", err=True)
    sys.exit(2)
  if latitude is not None:
    source = StaticLocationSource(latitude, longitude, provider="command line")
  else:
    source = location_source_from_config(cfg)

  clock = Clock()
  if time_:
    try:
      clock.set_time(from_epoch_millis(parse_instant(time_)))
    except (ValueError, OverflowError) as e:
      click.echo(f"ERROR: {e}", err=True)
      sys.exit(2)

  detector = DayNightDetector(
    source,
    clock=clock,
    precision=Precision(precision or cfg.precision),
    timeout=timeout or cfg.location_timeout,
  )
  try:
    result = detector.detect_sync()
  except LocationUnavailableError as e:
    click.echo(str(e), err=True)
    sys.exit(1)
  except InvalidQueryError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(2)

  if as_json:
    click.echo(json.dumps(render_dict(result), indent=2))
    return
  tz = timezone.utc if utc else datetime.now().astimezone().tzinfo
  fix = detector.last_fix
  click.echo(f"got location: {fix.latitude}, {fix.longitude}")
  click.echo(render_text(result, tz, cfg.time_format))


if __name__ == "__main__":
  main()
