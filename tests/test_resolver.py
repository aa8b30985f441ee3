"""Tests for per-family fetch setting resolution."""

from __future__ import annotations

from custom_components.http_co2.models import FamilyConfig, FieldFamily, SensorConfig
from custom_components.http_co2.resolver import resolve_field


def _config(**kwargs) -> SensorConfig:
    return SensorConfig(name="Office", url="http://sensor.local/data", **kwargs)


def test_primary_defaults():
    effective = resolve_field(_config(), FieldFamily.PRIMARY)
    assert effective.url == "http://sensor.local/data"
    assert effective.json_path == "co2"
    assert effective.http_method == "GET"
    assert effective.headers == {}
    assert effective.body is None
    assert effective.timeout == 5000


def test_primary_configured_values():
    primary = FamilyConfig(
        url="http://sensor.local/data",
        json_path="sensor.co2",
        http_method="post",
        headers={"X-Key": "abc"},
        body='{"q": 1}',
        timeout=2000,
    )
    effective = resolve_field(_config(primary=primary), FieldFamily.PRIMARY)
    assert effective.json_path == "sensor.co2"
    assert effective.http_method == "POST"
    assert effective.headers == {"X-Key": "abc"}
    assert effective.body == '{"q": 1}'
    assert effective.timeout == 2000


def test_temperature_falls_back_to_primary_url():
    effective = resolve_field(_config(), FieldFamily.TEMPERATURE)
    assert effective.url == "http://sensor.local/data"


def test_temperature_url_override_wins():
    config = _config(temperature=FamilyConfig(url="http://sensor.local/temp"))
    assert resolve_field(config, FieldFamily.TEMPERATURE).url == "http://sensor.local/temp"
    assert resolve_field(config, FieldFamily.PRIMARY).url == "http://sensor.local/data"


def test_override_is_per_field():
    primary = FamilyConfig(http_method="POST", headers={"X-Key": "abc"}, body="{}", timeout=3000)
    config = _config(primary=primary, humidity=FamilyConfig(url="http://other/rh", timeout=9000))
    effective = resolve_field(config, FieldFamily.HUMIDITY)
    assert effective.url == "http://other/rh"
    assert effective.timeout == 9000
    assert effective.http_method == "POST"
    assert effective.headers == {"X-Key": "abc"}
    assert effective.body == "{}"


def test_family_default_paths():
    config = _config()
    assert resolve_field(config, FieldFamily.TEMPERATURE).json_path == "temp"
    assert resolve_field(config, FieldFamily.HUMIDITY).json_path == "humidity"


def test_family_path_falls_back_to_configured_primary_path():
    config = _config(primary=FamilyConfig(json_path="value"))
    assert resolve_field(config, FieldFamily.TEMPERATURE).json_path == "value"


def test_family_path_override():
    config = _config(primary=FamilyConfig(json_path="value"), temperature=FamilyConfig(json_path="t"))
    assert resolve_field(config, FieldFamily.TEMPERATURE).json_path == "t"
    assert resolve_field(config, FieldFamily.HUMIDITY).json_path == "value"


def test_empty_headers_override_is_kept():
    config = _config(primary=FamilyConfig(headers={"X-Key": "abc"}), temperature=FamilyConfig(headers={}))
    assert resolve_field(config, FieldFamily.TEMPERATURE).headers == {}


def test_resolved_headers_are_copies():
    headers = {"X-Key": "abc"}
    config = _config(primary=FamilyConfig(headers=headers))
    resolve_field(config, FieldFamily.PRIMARY).headers["X-Other"] = "1"
    assert headers == {"X-Key": "abc"}


def test_empty_family_overrides_fall_back():
    primary = FamilyConfig(json_path="value", body='{"q": 1}')
    config = _config(primary=primary, temperature=FamilyConfig(url="", json_path="", body=""))
    effective = resolve_field(config, FieldFamily.TEMPERATURE)
    assert effective.url == "http://sensor.local/data"
    assert effective.json_path == "value"
    assert effective.body == '{"q": 1}'


def test_empty_family_path_uses_family_default():
    config = _config(humidity=FamilyConfig(json_path=""))
    assert resolve_field(config, FieldFamily.HUMIDITY).json_path == "humidity"
