"""Validation of sensor configuration."""
from __future__ import annotations

from typing import Any, Dict, Mapping

import voluptuous as vol
from yarl import URL

from homeassistant.helpers import config_validation as cv

from .const import (
    CONF_ABNORMAL_THRESHOLD,
    CONF_BODY,
    CONF_ENABLE_HUMIDITY,
    CONF_ENABLE_TEMPERATURE,
    CONF_FIRMWARE_REVISION,
    CONF_HEADERS,
    CONF_HTTP_METHOD,
    CONF_JSON_PATH,
    CONF_MANUFACTURER,
    CONF_MAX_CO2,
    CONF_MAX_TEMPERATURE,
    CONF_MIN_CO2,
    CONF_MIN_TEMPERATURE,
    CONF_MODEL,
    CONF_NAME,
    CONF_PASSWORD,
    CONF_SENSORS,
    CONF_SERIAL_NUMBER,
    CONF_TIMEOUT,
    CONF_UPDATE_INTERVAL,
    CONF_URL,
    CONF_USERNAME,
    DEFAULT_MAX_CO2,
    DEFAULT_MAX_TEMPERATURE,
    DEFAULT_MIN_CO2,
    DEFAULT_MIN_TEMPERATURE,
    DOMAIN,
    FAMILY_HUMIDITY,
    FAMILY_TEMPERATURE,
    HTTP_METHODS,
)
from .exceptions import InvalidSensorConfig
from .models import SensorConfig


def absolute_url(value: Any) -> str:
    """Accept only absolute http(s) URLs with a host."""
    text = cv.string(value).strip()
    try:
        url = URL(text)
    except ValueError as err:
        raise vol.Invalid(f"invalid url: {text}") from err
    if url.scheme not in ("http", "https") or not url.host:
        raise vol.Invalid(f"invalid url: {text}")
    return text


def _family_fields(prefix: str = "") -> Dict[Any, Any]:
    return {
        vol.Optional(f"{prefix}{CONF_JSON_PATH}"): cv.string,
        vol.Optional(f"{prefix}{CONF_HTTP_METHOD}"): vol.All(cv.string, vol.Upper, vol.In(HTTP_METHODS)),
        vol.Optional(f"{prefix}{CONF_HEADERS}"): vol.Schema({cv.string: cv.string}),
        vol.Optional(f"{prefix}{CONF_BODY}"): cv.string,
        vol.Optional(f"{prefix}{CONF_TIMEOUT}"): cv.positive_int,
    }


def _check_bounds(data: Dict[str, Any]) -> Dict[str, Any]:
    for lo_key, hi_key, lo_default, hi_default in (
        (CONF_MIN_CO2, CONF_MAX_CO2, DEFAULT_MIN_CO2, DEFAULT_MAX_CO2),
        (CONF_MIN_TEMPERATURE, CONF_MAX_TEMPERATURE, DEFAULT_MIN_TEMPERATURE, DEFAULT_MAX_TEMPERATURE),
    ):
        if data.get(lo_key, lo_default) > data.get(hi_key, hi_default):
            raise vol.Invalid(f"{lo_key} must not exceed {hi_key}")
    return data


SENSOR_SCHEMA = vol.All(
    vol.Schema(
        {
            vol.Required(CONF_NAME): vol.All(cv.string, vol.Strip, vol.Length(min=1)),
            vol.Required(CONF_URL): absolute_url,
            **_family_fields(),
            vol.Optional(f"{FAMILY_TEMPERATURE}_{CONF_URL}"): absolute_url,
            **_family_fields(f"{FAMILY_TEMPERATURE}_"),
            vol.Optional(f"{FAMILY_HUMIDITY}_{CONF_URL}"): absolute_url,
            **_family_fields(f"{FAMILY_HUMIDITY}_"),
            vol.Optional(CONF_ENABLE_TEMPERATURE, default=False): cv.boolean,
            vol.Optional(CONF_ENABLE_HUMIDITY, default=False): cv.boolean,
            vol.Optional(CONF_MIN_CO2): vol.Coerce(float),
            vol.Optional(CONF_MAX_CO2): vol.Coerce(float),
            vol.Optional(CONF_ABNORMAL_THRESHOLD): vol.Coerce(float),
            vol.Optional(CONF_MIN_TEMPERATURE): vol.Coerce(float),
            vol.Optional(CONF_MAX_TEMPERATURE): vol.Coerce(float),
            vol.Optional(CONF_UPDATE_INTERVAL): vol.All(vol.Coerce(float), vol.Range(min=1)),
            vol.Inclusive(CONF_USERNAME, "auth"): cv.string,
            vol.Inclusive(CONF_PASSWORD, "auth"): cv.string,
            vol.Optional(CONF_MANUFACTURER): cv.string,
            vol.Optional(CONF_MODEL): cv.string,
            vol.Optional(CONF_SERIAL_NUMBER): cv.string,
            vol.Optional(CONF_FIRMWARE_REVISION): cv.string,
        }
    ),
    _check_bounds,
)

# Sensors are validated one by one at setup so a bad one does not block the rest
CONFIG_SCHEMA = vol.Schema(
    {DOMAIN: vol.Schema({vol.Optional(CONF_SENSORS, default=[]): vol.All(cv.ensure_list, [dict])})},
    extra=vol.ALLOW_EXTRA,
)


def validate_sensor_data(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate one raw sensor mapping, returning it normalized."""
    try:
        return SENSOR_SCHEMA(dict(data))
    except vol.Invalid as err:
        raise InvalidSensorConfig(str(err)) from err


def validate_sensor_config(data: Mapping[str, Any]) -> SensorConfig:
    return SensorConfig.from_dict(validate_sensor_data(data))
