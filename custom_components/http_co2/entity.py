"""Base entity for the HTTP CO2 sensor integration."""
from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import callback
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity import Entity

from .const import DOMAIN, SIGNAL_UPDATE_FORMAT
from .helpers import build_entity_unique_id, build_sensor_unique_id
from .models import SensorField
from .poller import SensorPoller


class HttpCo2Entity(Entity):
    """Reads its state from the poller cache and refreshes on push."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(self, entry: ConfigEntry, poller: SensorPoller, sensor_field: SensorField) -> None:
        config = poller.config
        base_unique = build_sensor_unique_id(config.url, config.name)
        self._entry_id = entry.entry_id
        self._poller = poller
        self._field = sensor_field
        self._attr_unique_id = build_entity_unique_id(base_unique, sensor_field.value)
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, base_unique)},
            name=config.name,
            manufacturer=config.manufacturer,
            model=config.model,
            serial_number=config.serial_number,
            sw_version=config.firmware_revision,
        )

    @property
    def current_value(self) -> Any:
        return self._poller.get_current_value(self._field)

    @callback
    def _handle_push(self, sensor_field: SensorField, value: Any) -> None:
        if sensor_field is self._field:
            self.async_write_ha_state()

    async def async_added_to_hass(self) -> None:
        signal = SIGNAL_UPDATE_FORMAT.format(entry_id=self._entry_id)
        self.async_on_remove(async_dispatcher_connect(self.hass, signal, self._handle_push))
