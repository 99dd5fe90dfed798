import pytest

from twilightcalc import ConfigError, Precision
from twilightcalc.config import load_config


def test_defaults():
  cfg = load_config()
  assert cfg.precision is Precision.DOUBLE
  assert cfg.location is None
  assert cfg.server.host == "127.0.0.1" and cfg.server.port == 8080


def test_user_file_is_merged_over_defaults(tmp_path):
  path = tmp_path / "twilight.yaml"
  path.write_text(
    "precision: single\nlocation:\n  latitude: 59.91\n  longitude: 10.75\nserver:\n  port: 9000\n",
    encoding="utf-8",
  )
  cfg = load_config(path)
  assert cfg.precision is Precision.SINGLE
  assert cfg.location.latitude == pytest.approx(59.91)
  assert cfg.server.port == 9000
  assert cfg.server.host == "127.0.0.1"


def test_empty_file_gives_defaults(tmp_path):
  path = tmp_path / "empty.yaml"
  path.write_text("", encoding="utf-8")
  assert load_config(path) == load_config()


@pytest.mark.parametrize("text", [
  "location:\n  latitude: 100\n  longitude: 0\n",
  "precision: quadruple\n",
  "- just\n- a list\n",
  "server: [unclosed\n",
])
def test_invalid_files_are_rejected(tmp_path, text):
  path = tmp_path / "bad.yaml"
  path.write_text(text, encoding="utf-8")
  with pytest.raises(ConfigError):
    load_config(path)
