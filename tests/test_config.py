"""Tests for config loading and validation."""

from __future__ import annotations

import pytest

from date_ranges.config.settings import (
    ConfigError,
    Settings,
    load_settings,
)


def test_load_nonexistent_config_raises():
    """Explicit config path that doesn't exist raises."""
    with pytest.raises(ConfigError, match="not found"):
        load_settings("/nonexistent/path/config.yaml")


def test_load_valid_yaml(write_config):
    path = write_config(
        "output:\n"
        "  format: json\n"
        "  date_format: '%d/%m/%Y'\n"
        "  show_weekday: false\n"
        "ranges:\n"
        "  max_days: 400\n"
    )
    settings = load_settings(path)

    assert settings.output.format == "json"
    assert settings.output.date_format == "%d/%m/%Y"
    assert settings.output.show_weekday is False
    assert settings.ranges.max_days == 400


def test_empty_file_uses_defaults(write_config):
    settings = load_settings(write_config(""))
    assert settings == Settings()


def test_load_invalid_yaml(write_config):
    path = write_config("- just\n- a\n- list\n")
    with pytest.raises(ConfigError, match="YAML mapping"):
        load_settings(path)


def test_malformed_yaml(write_config):
    path = write_config("output: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(path)


def test_section_must_be_mapping(write_config):
    path = write_config("output: table\n")
    with pytest.raises(ConfigError, match="'output' must be a mapping"):
        load_settings(path)


def test_bad_int_value(write_config):
    path = write_config("ranges:\n  max_days: abc\n")
    with pytest.raises(ConfigError, match="integer"):
        load_settings(path)


def test_negative_max_days(write_config):
    path = write_config("ranges:\n  max_days: -5\n")
    with pytest.raises(ConfigError, match=">= 1"):
        load_settings(path)


def test_bool_max_days_rejected(write_config):
    path = write_config("ranges:\n  max_days: true\n")
    with pytest.raises(ConfigError, match="integer"):
        load_settings(path)


def test_unknown_format(write_config):
    path = write_config("output:\n  format: xml\n")
    with pytest.raises(ConfigError, match="one of"):
        load_settings(path)


def test_format_is_normalized(write_config):
    path = write_config("output:\n  format: ' Plain '\n")
    assert load_settings(path).output.format == "plain"


def test_bad_show_weekday(write_config):
    path = write_config("output:\n  show_weekday: sometimes\n")
    with pytest.raises(ConfigError, match="true or false"):
        load_settings(path)


def test_empty_date_format(write_config):
    path = write_config("output:\n  date_format: ''\n")
    with pytest.raises(ConfigError, match="strftime"):
        load_settings(path)


def test_cwd_config_yaml_is_picked_up(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("output:\n  format: plain\n")
    monkeypatch.chdir(tmp_path)
    assert load_settings(None).output.format == "plain"


def test_env_var_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATE_RANGES_FORMAT", "json")
    monkeypatch.setenv("DATE_RANGES_MAX_DAYS", "10")
    settings = load_settings(None)
    assert settings.output.format == "json"
    assert settings.ranges.max_days == 10


def test_env_var_overrides_file(write_config, monkeypatch):
    path = write_config("output:\n  format: plain\n")
    monkeypatch.setenv("DATE_RANGES_FORMAT", "table")
    assert load_settings(path).output.format == "table"


def test_bad_env_var(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATE_RANGES_MAX_DAYS", "lots")
    with pytest.raises(ConfigError, match="integer"):
        load_settings(None)


def test_default_settings():
    settings = Settings()
    assert settings.output.format == "table"
    assert settings.output.date_format is None
    assert settings.output.show_weekday is True
    assert settings.ranges.max_days == 36600
