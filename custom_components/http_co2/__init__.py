"""Setup for the HTTP CO2 sensor integration."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from homeassistant.config_entries import SOURCE_IMPORT, ConfigEntry
from homeassistant.const import EVENT_HOMEASSISTANT_STOP
from homeassistant.core import Event, HomeAssistant, callback
from homeassistant.helpers import entity_registry as er
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.dispatcher import async_dispatcher_send

from .api import SensorHttpClient
from .config import CONFIG_SCHEMA, validate_sensor_data  # noqa: F401
from .const import CONF_NAME, CONF_SENSORS, CONF_SOURCE_YAML, CONF_URL, DOMAIN, PLATFORMS, SIGNAL_UPDATE_FORMAT
from .exceptions import InvalidSensorConfig
from .helpers import build_entity_unique_id, build_sensor_unique_id
from .models import SensorConfig, SensorField
from .poller import SensorPoller

_LOGGER = logging.getLogger(__name__)


async def async_setup(hass: HomeAssistant, config: Dict[str, Any]) -> bool:
    hass.data.setdefault(DOMAIN, {})
    if DOMAIN in config:
        await _async_sync_yaml_sensors(hass, config[DOMAIN].get(CONF_SENSORS, []))
    return True


async def _async_sync_yaml_sensors(hass: HomeAssistant, sensors: List[Dict[str, Any]]) -> None:
    """Import YAML sensors as entries and drop entries no longer listed."""
    configured: Dict[str, Dict[str, Any]] = {}
    for raw in sensors:
        try:
            data = validate_sensor_data(raw)
        except InvalidSensorConfig as err:
            _LOGGER.warning("Invalid sensor config %s: %s", raw.get(CONF_NAME, "unknown"), err)
            continue
        unique_id = build_sensor_unique_id(data[CONF_URL], data[CONF_NAME])
        configured[unique_id] = {**data, CONF_SOURCE_YAML: True}

    existing = {entry.unique_id: entry for entry in hass.config_entries.async_entries(DOMAIN)}
    for unique_id, data in configured.items():
        entry = existing.get(unique_id)
        if entry is None:
            _LOGGER.info("Adding new sensor: %s", data[CONF_NAME])
            hass.async_create_task(
                hass.config_entries.flow.async_init(DOMAIN, context={"source": SOURCE_IMPORT}, data=data)
            )
        elif not entry.data.get(CONF_SOURCE_YAML):
            _LOGGER.warning("Sensor %s is already configured from the UI, ignoring YAML entry", entry.title)
        elif dict(entry.data) != data:
            # Entries are set up after async_setup, so the new data is picked up there
            _LOGGER.info("Updating sensor from configuration: %s", entry.title)
            hass.config_entries.async_update_entry(entry, data=data)

    stale = [
        entry
        for unique_id, entry in existing.items()
        if entry.data.get(CONF_SOURCE_YAML) and unique_id not in configured
    ]
    if stale:
        _LOGGER.info("Removing %d sensors that are no longer configured", len(stale))
    for entry in stale:
        await hass.config_entries.async_remove(entry.entry_id)


@callback
def _async_remove_disabled_entities(hass: HomeAssistant, config: SensorConfig) -> None:
    """Drop registry entries of families turned off since the last setup."""
    ent_reg = er.async_get(hass)
    base_unique = build_sensor_unique_id(config.url, config.name)
    for sensor_field, enabled in (
        (SensorField.TEMPERATURE, config.enable_temperature),
        (SensorField.HUMIDITY, config.enable_humidity),
    ):
        if enabled:
            continue
        entity_id = ent_reg.async_get_entity_id("sensor", DOMAIN, build_entity_unique_id(base_unique, sensor_field.value))
        if entity_id:
            _LOGGER.info("Removing disabled %s entity %s", sensor_field.value, entity_id)
            ent_reg.async_remove(entity_id)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    config = SensorConfig.from_dict(entry.data)
    client = SensorHttpClient(async_get_clientsession(hass))
    signal = SIGNAL_UPDATE_FORMAT.format(entry_id=entry.entry_id)

    @callback
    def _push(sensor_field: SensorField, value: Any) -> None:
        async_dispatcher_send(hass, signal, sensor_field, value)

    poller = SensorPoller(hass, client, config, _push)
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        "client": client,
        "poller": poller,
    }

    _async_remove_disabled_entities(hass, config)
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    poller.start()

    @callback
    def _stop_poller(event: Event) -> None:
        poller.stop()

    entry.async_on_unload(hass.bus.async_listen_once(EVENT_HOMEASSISTANT_STOP, _stop_poller))
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unloaded:
        data = hass.data[DOMAIN].pop(entry.entry_id, None)
        if data:
            data["poller"].stop()
    return unloaded
