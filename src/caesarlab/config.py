"""
caesarlab configuration.

Settings live in a ``[caesarlab]`` table of a TOML file::

    [caesarlab]
    log_file = "cipher_log.txt"
    date_format = "%Y-%m-%d %H:%M:%S"
    default_shift = 13
    log_level = "WARNING"
    bar_width = 50

Every key is optional. The loaded :class:`CaesarConfig` is passed
explicitly to whatever needs it.
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass(frozen=True)
class CaesarConfig:
    log_file: Path = Path("cipher_log.txt")
    date_format: str = "%Y-%m-%d %H:%M:%S"
    default_shift: int = 13
    log_level: str = "WARNING"
    bar_width: int = 50  # bar length drawn for a letter at 100%

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["log_file"] = str(self.log_file)
        return d


def _coerce(name: str, value: Any) -> Any:
    if name == "log_file":
        if not isinstance(value, str) or not value:
            raise ConfigError("log_file must be a non-empty string.")
        return Path(value)
    if name in ("default_shift", "bar_width"):
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{name} must be an integer.")
        if name == "bar_width" and value < 0:
            raise ConfigError("bar_width must be >= 0.")
        return value
    if name == "log_level":
        if not isinstance(value, str) or value.upper() not in _VALID_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(sorted(_VALID_LEVELS))}.")
        return value.upper()
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string.")
    return value


def config_from_dict(data: dict[str, Any]) -> CaesarConfig:
    known = {f.name for f in fields(CaesarConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
    return CaesarConfig(**{k: _coerce(k, v) for k, v in data.items()})


def load_config(path: str | Path | None = None) -> CaesarConfig:
    """Load configuration from ``path``; no path means defaults."""
    if path is None:
        return CaesarConfig()

    p = Path(path)
    try:
        with p.open("rb") as fh:
            raw = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {p}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {p}: {e}") from e

    section = raw.get("caesarlab", {})
    if not isinstance(section, dict):
        raise ConfigError("[caesarlab] must be a table.")
    return config_from_dict(section)
