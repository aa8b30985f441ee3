"""Resolve the effective fetch settings of a field family."""
from __future__ import annotations

from typing import Optional

from .const import (
    DEFAULT_CO2_PATH,
    DEFAULT_HTTP_METHOD,
    DEFAULT_HUMIDITY_PATH,
    DEFAULT_TEMPERATURE_PATH,
    DEFAULT_TIMEOUT,
)
from .models import EffectiveFieldConfig, FieldFamily, SensorConfig

DEFAULT_PATHS = {
    FieldFamily.PRIMARY: DEFAULT_CO2_PATH,
    FieldFamily.TEMPERATURE: DEFAULT_TEMPERATURE_PATH,
    FieldFamily.HUMIDITY: DEFAULT_HUMIDITY_PATH,
}


def _pick(override, fallback):
    return override if override is not None else fallback


def _override(value, fallback):
    """Family override; an empty string counts as unset."""
    return fallback if value is None or value == "" else value


def _resolve_primary(config: SensorConfig) -> EffectiveFieldConfig:
    primary = config.primary
    return EffectiveFieldConfig(
        url=_pick(primary.url, config.url),
        json_path=_pick(primary.json_path, DEFAULT_CO2_PATH),
        http_method=(primary.http_method or DEFAULT_HTTP_METHOD).upper(),
        headers=dict(primary.headers or {}),
        body=primary.body,
        timeout=_pick(primary.timeout, DEFAULT_TIMEOUT),
    )


def resolve_field(config: SensorConfig, family: FieldFamily) -> EffectiveFieldConfig:
    """Return the settings used to fetch ``family``.

    Each field of a temperature/humidity family falls back to the primary
    value on its own; an empty override string falls back too. The json
    path falls back to the configured primary path and then to the family
    default (``temp`` / ``humidity``). An empty primary path means the
    whole body is the value.
    """
    base = _resolve_primary(config)
    if family is FieldFamily.PRIMARY:
        return base

    own = config.family(family)
    json_path: Optional[str] = _override(own.json_path, _pick(config.primary.json_path, DEFAULT_PATHS[family]))
    headers = own.headers if own.headers is not None else base.headers
    return EffectiveFieldConfig(
        url=_override(own.url, base.url),
        json_path=json_path,
        http_method=own.http_method.upper() if own.http_method else base.http_method,
        headers=dict(headers),
        body=_override(own.body, base.body),
        timeout=own.timeout or base.timeout,
    )
