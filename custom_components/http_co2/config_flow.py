"""Config flow for the HTTP CO2 sensor integration."""
from __future__ import annotations

import logging
from typing import Any, Dict

import voluptuous as vol

from homeassistant import config_entries

from .config import absolute_url, validate_sensor_data
from .const import (
    CONF_ABNORMAL_THRESHOLD,
    CONF_ENABLE_HUMIDITY,
    CONF_ENABLE_TEMPERATURE,
    CONF_HTTP_METHOD,
    CONF_JSON_PATH,
    CONF_NAME,
    CONF_PASSWORD,
    CONF_UPDATE_INTERVAL,
    CONF_URL,
    CONF_USERNAME,
    DEFAULT_ABNORMAL_THRESHOLD,
    DEFAULT_CO2_PATH,
    DEFAULT_HTTP_METHOD,
    DEFAULT_UPDATE_INTERVAL,
    DOMAIN,
    FAMILY_HUMIDITY,
    FAMILY_TEMPERATURE,
    HTTP_METHODS,
)
from .exceptions import InvalidSensorConfig
from .helpers import build_sensor_unique_id

_LOGGER = logging.getLogger(__name__)

CONF_TEMPERATURE_URL = f"{FAMILY_TEMPERATURE}_{CONF_URL}"
CONF_TEMPERATURE_JSON_PATH = f"{FAMILY_TEMPERATURE}_{CONF_JSON_PATH}"
CONF_HUMIDITY_URL = f"{FAMILY_HUMIDITY}_{CONF_URL}"
CONF_HUMIDITY_JSON_PATH = f"{FAMILY_HUMIDITY}_{CONF_JSON_PATH}"

USER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME): str,
        vol.Required(CONF_URL): str,
        vol.Optional(CONF_JSON_PATH, default=DEFAULT_CO2_PATH): str,
        vol.Optional(CONF_HTTP_METHOD, default=DEFAULT_HTTP_METHOD): vol.In(HTTP_METHODS),
        vol.Optional(CONF_UPDATE_INTERVAL, default=DEFAULT_UPDATE_INTERVAL): int,
        vol.Optional(CONF_ABNORMAL_THRESHOLD, default=DEFAULT_ABNORMAL_THRESHOLD): int,
        vol.Optional(CONF_ENABLE_TEMPERATURE, default=False): bool,
        vol.Optional(CONF_TEMPERATURE_URL): str,
        vol.Optional(CONF_TEMPERATURE_JSON_PATH): str,
        vol.Optional(CONF_ENABLE_HUMIDITY, default=False): bool,
        vol.Optional(CONF_HUMIDITY_URL): str,
        vol.Optional(CONF_HUMIDITY_JSON_PATH): str,
        vol.Optional(CONF_USERNAME): str,
        vol.Optional(CONF_PASSWORD): str,
    }
)


def _input_errors(user_input: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not str(user_input.get(CONF_NAME) or "").strip():
        errors[CONF_NAME] = "invalid_name"
    for key in (CONF_URL, CONF_TEMPERATURE_URL, CONF_HUMIDITY_URL):
        if key not in user_input:
            continue
        try:
            absolute_url(user_input[key])
        except vol.Invalid:
            errors[key] = "invalid_url"
    return errors


class HttpCo2ConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """One config entry per sensor."""

    VERSION = 1

    async def async_step_user(self, user_input: Dict[str, Any] | None = None):
        errors: Dict[str, str] = {}
        if user_input is not None:
            errors = _input_errors(user_input)
            if not errors:
                try:
                    data = validate_sensor_data(user_input)
                except InvalidSensorConfig as err:
                    _LOGGER.debug("Rejected sensor input: %s", err)
                    errors["base"] = "invalid_config"
                else:
                    await self.async_set_unique_id(build_sensor_unique_id(data[CONF_URL], data[CONF_NAME]))
                    self._abort_if_unique_id_configured()
                    return self.async_create_entry(title=data[CONF_NAME], data=data)
        return self.async_show_form(step_id="user", data_schema=USER_SCHEMA, errors=errors)

    async def async_step_import(self, import_data: Dict[str, Any]):
        """Create an entry for a sensor listed in configuration.yaml (already validated)."""
        await self.async_set_unique_id(build_sensor_unique_id(import_data[CONF_URL], import_data[CONF_NAME]))
        self._abort_if_unique_id_configured()
        return self.async_create_entry(title=import_data[CONF_NAME], data=import_data)
