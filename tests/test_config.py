from __future__ import annotations

from pathlib import Path

import pytest

from caesarlab.config import CaesarConfig, ConfigError, config_from_dict, load_config


def test_defaults_without_path():
    cfg = load_config(None)
    assert cfg == CaesarConfig()
    assert cfg.log_file == Path("cipher_log.txt")
    assert cfg.default_shift == 13


def test_load_from_toml(tmp_path):
    p = tmp_path / "caesarlab.toml"
    p.write_text(
        '[caesarlab]\nlog_file = "audit/log.txt"\ndefault_shift = 7\nlog_level = "debug"\nbar_width = 20\n',
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.log_file == Path("audit/log.txt")
    assert cfg.default_shift == 7
    assert cfg.log_level == "DEBUG"
    assert cfg.bar_width == 20
    assert cfg.date_format == CaesarConfig().date_format
    assert cfg.to_dict()["log_file"] == "audit/log.txt"


def test_missing_section_gives_defaults(tmp_path):
    p = tmp_path / "other.toml"
    p.write_text('[something_else]\nx = 1\n', encoding="utf-8")
    assert load_config(p) == CaesarConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path):
    p = tmp_path / "bad.toml"
    p.write_text("[caesarlab\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(p)


@pytest.mark.parametrize(
    "data",
    [
        {"shift": 3},
        {"default_shift": "3"},
        {"default_shift": True},
        {"bar_width": -1},
        {"log_level": "LOUD"},
        {"log_file": ""},
        {"date_format": 5},
    ],
)
def test_bad_values(data):
    with pytest.raises(ConfigError):
        config_from_dict(data)
