import json

from click.testing import CliRunner

from twilightcalc.cli.calculate import main


def test_json_output():
  result = CliRunner().invoke(main, ["--latitude", "0", "--longitude", "0", "--time", "2000-01-01T12:00:00Z", "--json"])
  assert result.exit_code == 0
  body = json.loads(result.stdout)
  assert body["time"] == 946728000000
  assert body["is_day"] is True
  assert body["sunrise"] < body["time"] < body["sunset"]


def test_text_output():
  result = CliRunner().invoke(main, ["--latitude", "0", "--longitude", "0", "--time", "946728000000", "--utc"])
  assert result.exit_code == 0
  assert "got location: 0.0, 0.0" in result.stdout
  assert "day starts at 05:" in result.stdout
  assert "night starts at 18:" in result.stdout
  assert "is it day? True" in result.stdout


def test_polar_text_output():
  result = CliRunner().invoke(main, ["--latitude", "85", "--longitude", "0", "--time", "2021-06-21T12:00:00Z"])
  assert result.exit_code == 0
  assert result.stdout.count("day/night never ends") == 2


def test_configured_location(tmp_path):
  path = tmp_path / "twilight.yaml"
  path.write_text("location:\n  latitude: -85\n  longitude: 0\nprecision: single\n", encoding="utf-8")
  result = CliRunner().invoke(main, ["--config", str(path), "--time", "2021-06-21T12:00:00Z", "--json"])
  assert result.exit_code == 0
  body = json.loads(result.stdout)
  assert body["is_polar"] is True and body["is_day"] is False


def test_no_location():
  result = CliRunner().invoke(main, ["--time", "2021-06-21T12:00:00Z"])
  assert result.exit_code == 1
  assert "failed to get location" in result.output


def test_invalid_input():
  runner = CliRunner()
  assert runner.invoke(main, ["--latitude", "95", "--longitude", "0"]).exit_code == 2
  assert runner.invoke(main, ["--latitude", "10"]).exit_code == 2
  assert runner.invoke(main, ["--latitude", "10", "--longitude", "0", "--time", "whenever"]).exit_code == 2
