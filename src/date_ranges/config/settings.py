"""YAML config loading with defaults and environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

OUTPUT_FORMATS = ("table", "plain", "json")


class ConfigError(Exception):
    """Raised for invalid configuration."""

    pass


@dataclass
class OutputConfig:
    format: str = "table"
    date_format: str | None = None
    show_weekday: bool = True


@dataclass
class RangesConfig:
    max_days: int = 36600


@dataclass
class Settings:
    output: OutputConfig = field(default_factory=OutputConfig)
    ranges: RangesConfig = field(default_factory=RangesConfig)


def _safe_int(value, name: str) -> int:
    """Convert value to a positive int with helpful error."""
    if isinstance(value, bool):
        raise ConfigError(
            f"Config '{name}' must be an integer, "
            f"got: {value!r}"
        )
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ConfigError(
            f"Config '{name}' must be an integer, "
            f"got: {value!r}"
        )
    if result < 1:
        raise ConfigError(
            f"Config '{name}' must be >= 1, got: {result}"
        )
    return result


def _safe_format(value, name: str) -> str:
    result = str(value).strip().lower()
    if result not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        raise ConfigError(
            f"Config '{name}' must be one of: {choices}, "
            f"got: {value!r}"
        )
    return result


def _read_yaml(path: Path, label: str) -> dict:
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {label}: {e}")
    if not isinstance(raw, dict):
        raise ConfigError(
            "Config file must contain a YAML mapping"
        )
    return raw


def load_settings(
    config_path: str | Path | None = None,
) -> Settings:
    """Load settings from YAML config with env var overrides.

    Raises ConfigError for invalid config values.
    """
    raw: dict = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(
                f"Config file not found: {config_path}"
            )
        raw = _read_yaml(path, str(config_path))
    elif Path("config.yaml").exists():
        raw = _read_yaml(Path("config.yaml"), "config.yaml")

    out_raw = raw.get("output") or {}
    if not isinstance(out_raw, dict):
        raise ConfigError("Config 'output' must be a mapping")

    date_format = out_raw.get("date_format")
    if date_format is not None and (
        not isinstance(date_format, str) or not date_format.strip()
    ):
        raise ConfigError(
            "Config 'output.date_format' must be a non-empty "
            f"strftime pattern, got: {date_format!r}"
        )

    show_weekday = out_raw.get("show_weekday", True)
    if not isinstance(show_weekday, bool):
        raise ConfigError(
            "Config 'output.show_weekday' must be true or false, "
            f"got: {show_weekday!r}"
        )

    output = OutputConfig(
        format=_safe_format(
            os.environ.get(
                "DATE_RANGES_FORMAT",
                out_raw.get("format", "table"),
            ),
            "output.format",
        ),
        date_format=date_format,
        show_weekday=show_weekday,
    )

    ranges_raw = raw.get("ranges") or {}
    if not isinstance(ranges_raw, dict):
        raise ConfigError("Config 'ranges' must be a mapping")
    ranges = RangesConfig(
        max_days=_safe_int(
            os.environ.get(
                "DATE_RANGES_MAX_DAYS",
                ranges_raw.get("max_days", 36600),
            ),
            "ranges.max_days",
        ),
    )

    return Settings(output=output, ranges=ranges)
